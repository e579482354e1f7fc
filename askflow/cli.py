"""A small interactive demo of the question flow."""

from typing import List, Optional

from askflow.callbacks import is_one_of
from askflow.inquirer import Inquirer
from askflow.questions import Question, QuestionType
from askflow.terminal import Terminal


def build_demo() -> Inquirer:
    """Build the demo questions: a project name, a licence and a confirmation."""
    return (
        Inquirer()
        .add(
            Question.builder()
            .name("project_name")
            .label("What is the name of your project")
            .type(QuestionType.TEXT)
            .build()
        )
        .add(
            Question.builder()
            .name("license")
            .label("Choose a license")
            .type(QuestionType.SELECT)
            .options([("mit", "MIT"), ("gpl", "GPL"), ("unlicense", "UNLICENSE")])
            .build()
        )
        .add(
            Question.builder()
            .name("confirm_gpl")
            .label("Are u sure to use gpl")
            .type(QuestionType.BOOLEAN)
            .when(is_one_of("license", ["gpl", "unlicense"]))
            .build()
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demo and print the answers sorted by name."""
    terminal = Terminal()
    answers = build_demo().prompt(terminal)
    for name in sorted(answers):
        terminal.write(f"{name} -> {answers[name]}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())