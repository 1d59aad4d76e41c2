"""Errors raised while parsing ingredient lines."""


class ParseError(Exception):
    """Base exception for ingredient parsing errors."""

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class MalformedNumberError(ParseError):
    """Raised when a numeric literal matched but has no valid value (e.g. 1/0)."""


class UnrecognizedInputError(ParseError):
    """Raised when the grammar cannot consume the whole input line."""

    def __init__(self, message: str, text: str | None = None, position: int | None = None):
        super().__init__(message, text=text)
        self.position = position
