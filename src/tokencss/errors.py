"""Error types shared by the token and AST layers."""

from __future__ import annotations


class TokenCssError(Exception):
    """Base class for all tokencss errors."""


class ShapeError(TokenCssError):
    """Raised when a token or AST node does not have the expected structure."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class ParseError(TokenCssError):
    """Raised when CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
