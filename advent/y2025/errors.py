"""Errors shared by the puzzle parsers."""


class ParseError(ValueError):
    """Raised when puzzle input cannot be read."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message