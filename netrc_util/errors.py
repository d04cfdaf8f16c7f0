"""Exceptions raised while parsing netrc files."""


class NetrcError(Exception):
    """Base class for all netrc_util errors."""


class InvalidHost(NetrcError, ValueError):
    """Raised when a hostname is empty or malformed."""

    def __init__(self, host: str, reason: str = "malformed hostname"):
        self.host = host
        self.reason = reason
        super().__init__(f"Invalid host {host!r}: {reason}")


class ParseError(NetrcError):
    """A netrc file could not be parsed.

    Carries the offending token (if any) and its 1-based position so
    callers can report "malformed netrc at line L" style diagnostics.
    """

    def __init__(
        self,
        message: str,
        token: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.message = message
        self.token = token
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}, column {self.column}"


class UnexpectedEndOfInput(ParseError):
    """A keyword expecting an argument reached the end of the file."""


class UnexpectedToken(ParseError):
    """An unrecognized keyword was found in strict mode."""


class TokenOutsideEntry(UnexpectedToken):
    """A field keyword appeared before any machine or default entry."""


class DuplicateDefault(ParseError):
    """More than one default entry was found."""
