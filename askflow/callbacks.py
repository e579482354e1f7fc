"""Ready-made visibility conditions over the answers given so far."""

from typing import Callable, Iterable, Mapping

from askflow.evaluate import as_boolean

Answers = Mapping[str, str]
When = Callable[[Answers], bool]


def is_true(name: str) -> When:
    """Visible when answer ``name`` is ``"true"``; absent counts as false."""

    def condition(answers: Answers) -> bool:
        return name in answers and as_boolean(answers[name])

    return condition


def is_false(name: str) -> When:
    """Visible when answer ``name`` is ``"false"`` or absent."""

    def condition(answers: Answers) -> bool:
        return name not in answers or not as_boolean(answers[name])

    return condition


def is_empty(name: str) -> When:
    """Visible when answer ``name`` is empty or absent."""

    def condition(answers: Answers) -> bool:
        return not answers.get(name, "")

    return condition


def is_not_empty(name: str) -> When:
    """Visible when answer ``name`` is present and non-empty."""

    def condition(answers: Answers) -> bool:
        return bool(answers.get(name, ""))

    return condition


def is_equal(name: str, value: str) -> When:
    """Visible when answer ``name`` is present and equals ``value``."""

    def condition(answers: Answers) -> bool:
        return name in answers and answers[name] == value

    return condition


def is_not_equal(name: str, value: str) -> When:
    """Visible when answer ``name`` is absent or differs from ``value``."""

    def condition(answers: Answers) -> bool:
        return name not in answers or answers[name] != value

    return condition


def is_one_of(name: str, values: Iterable[str]) -> When:
    """Visible when answer ``name`` is present and among ``values``."""
    choices = tuple(values)

    def condition(answers: Answers) -> bool:
        return name in answers and answers[name] in choices

    return condition


def is_none_of(name: str, values: Iterable[str]) -> When:
    """Visible when answer ``name`` is absent or not among ``values``."""
    choices = tuple(values)

    def condition(answers: Answers) -> bool:
        return name not in answers or answers[name] not in choices

    return condition