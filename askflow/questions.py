"""Question kinds, their construction and their interactive prompts."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterable, Mapping, Optional, Sequence, Tuple

from askflow import validators as _validators
from askflow.color import Color
from askflow.terminal import Key, Terminal
from askflow.validators import Validator

Answers = Mapping[str, str]
When = Callable[[Answers], bool]
Option = Tuple[str, str]


class QuestionType(Enum):
    """The kinds of question that can be asked."""

    TEXT = "text"
    SELECT = "select"
    BOOLEAN = "boolean"


def _terminal(terminal: Optional[Terminal]) -> Terminal:
    return terminal if terminal is not None else Terminal()


class Question(ABC):
    """A named question with a label, an optional visibility condition,
    validators for free text and options for a selection."""

    type: QuestionType = QuestionType.TEXT

    def __init__(
        self,
        name: str,
        label: str,
        *,
        options: Iterable[Option] = (),
        validators: Iterable[Validator] = (),
        when: Optional[When] = None,
    ):
        self.name = name
        self.label = label
        self.options: Tuple[Option, ...] = tuple((key, text) for key, text in options)
        self.validators: Tuple[Validator, ...] = tuple(validators)
        self.when = when

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, label={self.label!r})"

    def is_visible(self, answers: Answers) -> bool:
        """Whether the question should be asked given earlier answers."""
        return self.when(answers) if self.when is not None else True

    def find_failure(self, text: str) -> Optional[Validator]:
        """Return the validator that ``text`` fails, or None."""
        return _validators.find_failure(self.validators, text)

    @abstractmethod
    def prompt(self, terminal: Optional[Terminal] = None) -> str:
        """Ask the question and return the answer."""

    @staticmethod
    def builder() -> "QuestionBuilder":
        """Start building a question step by step."""
        return QuestionBuilder()


class TextQuestion(Question):
    """A free-text question, asked again until the validators pass."""

    type = QuestionType.TEXT

    def __init__(
        self,
        name: str,
        label: str,
        validators: Iterable[Validator] = (),
        when: Optional[When] = None,
    ):
        super().__init__(name, label, validators=validators, when=when)

    def prompt(self, terminal: Optional[Terminal] = None) -> str:
        term = _terminal(terminal)
        while True:
            term.print_label(self.label)
            term.write(Color.BLUE.value)
            text = term.read_line()
            term.write(Color.RESET.value)
            failure = self.find_failure(text)
            if failure is None:
                return text
            term.write(f"{Color.RED}>> {Color.WHITE}{failure.message}\n{Color.RESET}")


class BooleanQuestion(Question):
    """A yes/no question answered with ``"true"`` or ``"false"``."""

    type = QuestionType.BOOLEAN

    def __init__(self, name: str, label: str, when: Optional[When] = None):
        super().__init__(name, label, when=when)

    def prompt(self, terminal: Optional[Terminal] = None) -> str:
        term = _terminal(terminal)
        while True:
            term.print_label(self.label + " (y/n)")
            term.write(Color.BLUE.value)
            text = term.read_line()
            term.write(Color.RESET.value)
            if text in ("y", "Y"):
                return "true"
            if text in ("n", "N"):
                return "false"


class SelectQuestion(Question):
    """A choice among ``(key, text)`` options made with the arrow keys.

    The answer is the key of the chosen option.
    """

    type = QuestionType.SELECT

    def __init__(
        self,
        name: str,
        label: str,
        options: Iterable[Option],
        when: Optional[When] = None,
    ):
        super().__init__(name, label, options=options, when=when)
        if not self.options:
            raise ValueError("select question must have at least one option")

    def prompt(self, terminal: Optional[Terminal] = None) -> str:
        term = _terminal(terminal)
        count = len(self.options)
        current = 0
        while True:
            term.print_label(self.label)
            term.write("\n")
            for index, (_, text) in enumerate(self.options):
                if index == current:
                    term.write(f"{Color.B_GREEN}> {Color.BLUE}{text}{Color.RESET}\n")
                else:
                    term.write(f"  {text}\n")
            key = term.read_key()
            term.clear_lines(count + 1)
            if key is Key.UP:
                current = (current - 1) % count
            elif key is Key.DOWN:
                current = (current + 1) % count
            elif key is Key.ENTER:
                return self.options[current][0]


class QuestionBuilder:
    """Collects the parts of a question and checks them on ``build``."""

    def __init__(self) -> None:
        self._name = ""
        self._label = ""
        self._type = QuestionType.TEXT
        self._options: Tuple[Option, ...] = ()
        self._validators: Tuple[Validator, ...] = ()
        self._when: Optional[When] = None

    def name(self, name: str) -> "QuestionBuilder":
        self._name = name
        return self

    def label(self, label: str) -> "QuestionBuilder":
        self._label = label
        return self

    def type(self, type: QuestionType) -> "QuestionBuilder":
        self._type = type
        return self

    def when(self, condition: Optional[When]) -> "QuestionBuilder":
        self._when = condition
        return self

    def options(self, options: Iterable[Option]) -> "QuestionBuilder":
        self._options = tuple(options)
        return self

    def validators(self, validators: Iterable[Validator]) -> "QuestionBuilder":
        self._validators = tuple(validators)
        return self

    def build(self) -> Question:
        """Create the question; a missing name, label or option is an error."""
        if not self._name:
            raise ValueError("question must have a name")
        if not self._label:
            raise ValueError("question must have a label")
        if self._type is QuestionType.SELECT and not self._options:
            raise ValueError("select question must have at least one option")
        return make_question(
            self._name, self._label, self._type, self._options, self._validators, self._when
        )


def make_question(
    name: str,
    label: str,
    type: QuestionType,
    options: Iterable[Option] = (),
    validators: Iterable[Validator] = (),
    when: Optional[When] = None,
) -> Question:
    """Create a question of the given type."""
    if type is QuestionType.TEXT:
        return TextQuestion(name, label, validators, when)
    if type is QuestionType.BOOLEAN:
        return BooleanQuestion(name, label, when)
    if type is QuestionType.SELECT:
        return SelectQuestion(name, label, options, when)
    raise ValueError("Not supported type")


def ask_text(
    label: str,
    validators: Sequence[Validator] = (),
    terminal: Optional[Terminal] = None,
) -> str:
    """Ask a single free-text question."""
    return TextQuestion("QUESTION", label, validators).prompt(terminal)


def ask_boolean(label: str, terminal: Optional[Terminal] = None) -> str:
    """Ask a single yes/no question."""
    return BooleanQuestion("QUESTION", label).prompt(terminal)


def ask_select(
    label: str,
    options: Iterable[Option],
    terminal: Optional[Terminal] = None,
) -> str:
    """Ask a single selection question."""
    return SelectQuestion("QUESTION", label, options).prompt(terminal)