"""
letlang Package

Front end for letlang, a small statically-typed expression and
function-definition language:

    let add(x, y) = { x + y }: (I32, I32) -> I32;

Architecture:
    letlang/
    ├── lexer/           # Tokenization and lexical analysis
    ├── config.py        # Context-local lexer configuration
    └── utils/           # Logging helpers

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import LexerConfig, lexer_config_context
from .lexer import Lexer, Scanner, Token, TokenType, LexerError, tokenize_string

__all__ = [
    # Core classes
    "Lexer",
    "Scanner",
    "Token",
    "TokenType",
    "LexerError",
    "LexerConfig",

    # Helpers
    "tokenize_string",
    "lexer_config_context",

    # Version info
    "__version__",
    "__license__",
]
