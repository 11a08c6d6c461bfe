"""
Token definitions for the letlang lexer.

This module defines every token type the scanner can produce:
- Special tokens (end of input, illegal characters)
- Literals and identifiers (the only tokens carrying text)
- Operators, including the `->` function-type arrow
- Delimiters
- Reserved words

Author: letlang maintainers
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """
    Enumeration of all token types in letlang.

    Organized by category, matching the lookup tables at the bottom
    of this module.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    EOF = auto()                    # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # five, add, I32, _tmp
    INT = auto()                    # 5, 10, 007 (kept as raw text)

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    IN = auto()                     # : (type annotation)
    TO = auto()                     # -> (function type)

    # ========================================================================
    # Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    LET = auto()                    # let


# Token types that carry the scanned text
PAYLOAD_TYPES = frozenset({TokenType.IDENT, TokenType.INT})


@dataclass(frozen=True)
class Token:
    """
    A single lexical token.

    Only IDENT and INT carry a literal; every other type is fully
    described by its tag. Equality compares both the tag and the literal,
    so ``Token.ident("x") == Token.ident("x")`` while
    ``Token.ident("x") != Token.ident("y")``.
    """
    type: TokenType
    literal: Optional[str] = None   # Raw source text for IDENT / INT

    def __post_init__(self):
        if self.type in PAYLOAD_TYPES:
            if self.literal is None:
                raise ValueError(f"{self.type.name} token requires a literal")
        elif self.literal is not None:
            raise ValueError(f"{self.type.name} token does not carry a literal")

    @classmethod
    def ident(cls, text: str) -> "Token":
        return cls(TokenType.IDENT, text)

    @classmethod
    def integer(cls, text: str) -> "Token":
        return cls(TokenType.INT, text)

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.type.name}({self.literal!r})"
        return self.type.name

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.literal!r})"
        return f"Token({self.type.name})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.INT

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_delimiter(self) -> bool:
        return self.type in DELIMITER_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENT


# Lookup tables used by the lexer for keyword/operator recognition

# Reserved words; checked once an identifier has been fully captured
KEYWORDS = {
    "let": TokenType.LET,
}

OPERATORS = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    ":": TokenType.IN,
    "->": TokenType.TO,
}

DELIMITERS = {
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# One character, one token. '-' is excluded: it needs lookahead for '->'.
SINGLE_CHAR_TOKENS = {
    text: token_type
    for text, token_type in {**OPERATORS, **DELIMITERS}.items()
    if len(text) == 1 and text != "-"
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())
OPERATOR_TYPES = frozenset(OPERATORS.values())
DELIMITER_TYPES = frozenset(DELIMITERS.values())
