"""
letlang Lexer Package

Implements the lexical analyzer (tokenizer) for letlang, a small typed
expression language built from `let` bindings, parenthesized parameter
lists, brace bodies, `:` type annotations and `->` function types.

Key Features:
- Pull-based scanning with one character of lookahead
- Reserved-word lookup through a single static table
- Illegal characters reported as tokens, never as exceptions
- Optional strict mode for callers that treat illegal input as fatal
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, Scanner, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Scanner",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
]
