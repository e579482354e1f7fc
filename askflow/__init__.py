"""Interactive terminal questionnaires: text, yes/no and select questions with validators and conditional visibility."""

__version__ = "0.0.1"
__all__ = ["__version__"]