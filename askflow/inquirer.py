"""Asking a sequence of questions and collecting the answers."""

from typing import Dict, Iterable, List, Optional

from askflow.questions import Question
from askflow.terminal import Terminal

VERSION = "0.0.1"


class Inquirer:
    """An ordered list of questions asked one after another.

    A question is skipped when its condition rejects the answers given so far.
    """

    def __init__(self, questions: Optional[Iterable[Question]] = None):
        self.questions: List[Question] = list(questions or ())

    def add(self, question: Question) -> "Inquirer":
        """Append a question; returns the inquirer for chaining."""
        self.questions.append(question)
        return self

    def prompt(self, terminal: Optional[Terminal] = None) -> Dict[str, str]:
        """Ask every visible question and return the answers by name."""
        term = terminal if terminal is not None else Terminal()
        answers: Dict[str, str] = {}
        for question in self.questions:
            if question.is_visible(answers):
                answers[question.name] = question.prompt(term)
        return answers