"""
letlang Lexer - turns source text into tokens

Pull-based: a parser calls next_token() until it sees EOF. There is one
character of lookahead, used only to tell '-' from '->'. Illegal characters
come back as ILLEGAL tokens; the scanning loop never raises.
"""

from dataclasses import replace
from typing import Iterator, List, Optional

from ..config import LexerConfig, get_lexer_config
from ..utils.logger import get_logger
from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS
from .errors import Diagnostic, LexerError, create_invalid_character_error

logger = get_logger(__name__)

# Sentinel held in `ch` once the cursor is past the last character
NUL = "\0"

WHITESPACE = frozenset(" \t\n\r\f")


def _is_ident_start(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_ident_continue(char: str) -> bool:
    return _is_ident_start(char) or _is_digit(char)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Lexer:
    """
    letlang lexical analyzer.

    Owns the source text and a cursor over it:
    - pos: index of the character under the cursor
    - read_pos: index of the next character to load (always pos + 1)
    - ch: the character at pos, or NUL once the input is exhausted

    Text is indexed by code point both when advancing and when slicing
    identifiers and numbers, so multi-byte characters cannot split.
    """

    def __init__(self, source: str, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            config: Lexer configuration; defaults to the one active in the
                current context
        """
        self.source = source
        self.config = config if config is not None else get_lexer_config()
        self.pos = 0
        self.read_pos = 0
        self.ch = NUL
        self.diagnostics: List[Diagnostic] = []

        self._read_char()

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once EOF has been returned every further call returns EOF again
        without moving the cursor.
        """
        self._skip_whitespace()

        # EOF is decided by position; a NUL inside the input is just illegal
        if self.pos >= len(self.source):
            return Token(TokenType.EOF)

        char = self.ch

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            token = Token(token_type)
        elif char == "-":
            if self._peek() == ">":
                self._read_char()
                token = Token(TokenType.TO)
            else:
                token = Token(TokenType.MINUS)
        elif _is_ident_start(char):
            # The read loop leaves the cursor on the first non-identifier char
            ident = self._read_identifier()
            keyword = KEYWORDS.get(ident)
            if keyword is not None:
                return Token(keyword)
            return Token.ident(ident)
        elif _is_digit(char):
            return Token.integer(self._read_number())
        else:
            token = self._illegal(char)

        self._read_char()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens from the current cursor up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the input.

        Returns:
            List of tokens ending with a single EOF token
        """
        return list(self)

    def has_errors(self) -> bool:
        """Check if the lexer has seen any illegal characters."""
        return len(self.diagnostics) > 0

    def _illegal(self, char: str) -> Token:
        logger.debug("Illegal character %r at offset %d", char, self.pos)
        if self.config.collect_diagnostics:
            error = create_invalid_character_error(char, self.pos)
            self.diagnostics.append(error.diagnostic)
        return Token(TokenType.ILLEGAL)

    def _read_char(self):
        """Move the cursor to read_pos and load the character there."""
        if self.read_pos >= len(self.source):
            self.ch = NUL
        else:
            self.ch = self.source[self.read_pos]
        self.pos = self.read_pos
        self.read_pos += 1

    def _peek(self) -> str:
        """Character after the current one, without advancing."""
        if self.read_pos >= len(self.source):
            return NUL
        return self.source[self.read_pos]

    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.pos
        while _is_ident_continue(self.ch):
            self._read_char()
        return self.source[start:self.pos]

    def _read_number(self) -> str:
        start = self.pos
        while _is_digit(self.ch):
            self._read_char()
        return self.source[start:self.pos]


# Name used by callers that think of the lexer as a pull scanner
Scanner = Lexer


def tokenize_string(source: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        config: Lexer configuration; defaults to the active one

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: In strict mode, for the first illegal character
    """
    config = config if config is not None else get_lexer_config()
    if config.strict and not config.collect_diagnostics:
        # Strict mode reports the offending character
        config = replace(config, collect_diagnostics=True)

    lexer = Lexer(source, config)
    tokens = lexer.tokenize()

    if config.strict and lexer.has_errors():
        first = lexer.diagnostics[0]
        logger.warning("Rejecting input: %s", first.message)
        raise LexerError(first.message, first.offset, first.code, first.help_text)

    return tokens
