"""Reader errors. All carry the zero-based line/column where they were detected."""

from typing import Any, Optional


class ReaderError(SyntaxError):
    """Base class for everything the tokenizer and parser raise."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}, column {self.column}"


class LexicalError(ReaderError):
    pass


class UnterminatedString(ReaderError):
    pass


class UnterminatedList(ReaderError):
    pass


class UnexpectedEOF(ReaderError):
    pass


class InvalidNumber(ReaderError):
    pass


class DepthExceeded(ReaderError):
    pass


class UnexpectedToken(ReaderError):
    def __init__(self, message: str, token: Any = None):
        line = token.line if token is not None else None
        column = token.column if token is not None else None
        super().__init__(message, line, column)
        self.token = token
