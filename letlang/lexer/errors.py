"""
Error handling for the letlang lexer.

The scanner itself never raises: an unrecognized character becomes an
ILLEGAL token and scanning continues. This module provides the diagnostic
record kept for each such character, and the exception raised by the
strict convenience path when a caller decides illegal input is fatal.

Author: letlang maintainers
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A lexer diagnostic (error, warning, info)."""
    message: str
    offset: int  # Character offset from start of input
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> offset {self.offset}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when a caller treats illegal input as fatal.

    Contains the diagnostic describing the offending character.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            offset=offset,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def offset(self) -> int:
        return self.diagnostic.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}


def create_invalid_character_error(char: str, offset: int) -> LexerError:
    """Create an error for an invalid character."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in letlang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: {char!r}",
        offset=offset,
        code="L001",
        help_text=help_text
    )
