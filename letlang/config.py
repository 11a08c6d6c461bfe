"""
ContextVar-based lexer configuration for letlang.

A configuration is an immutable LexerConfig. A Lexer created without an
explicit config reads the one active in the current context, so threads
and asyncio tasks each see their own setting without locking.

Usage:
    from letlang.config import LexerConfig, lexer_config_context
    from letlang.lexer import tokenize_string

    with lexer_config_context(LexerConfig(strict=True)):
        tokens = tokenize_string("let x = 1;")

Author: letlang maintainers
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator, Optional


@dataclass(frozen=True)
class LexerConfig:
    """
    Immutable lexer configuration.

    Attributes:
        strict: tokenize_string raises LexerError on the first illegal character
        collect_diagnostics: record a Diagnostic for every ILLEGAL token
    """
    strict: bool = False
    collect_diagnostics: bool = True

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "LexerConfig":
        """
        Create a LexerConfig from a dictionary.

        Unknown keys are ignored, so a larger application config can be
        passed through unchanged.
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get the lexer configuration active in the current context."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> Token:
    """
    Set the lexer configuration for the current context.

    Returns:
        A token that restores the previous configuration when passed
        to reset_lexer_config().
    """
    return _lexer_config.set(config)


def reset_lexer_config(token: Optional[Token] = None) -> None:
    """Restore the previous configuration, or the default one if no token is given."""
    if token is not None:
        _lexer_config.reset(token)
    else:
        _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[LexerConfig]:
    """Activate a configuration for the duration of a with-block."""
    token = set_lexer_config(config)
    try:
        yield config
    finally:
        reset_lexer_config(token)
