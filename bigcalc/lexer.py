"""Tokenizer for calculator input lines.

Numbers and identifiers are lexically the same word run at this stage; a run
made only of digits becomes a NUMBER token, anything else an IDENT. Operator
characters are grouped into maximal runs ("--", "+++", "**") so that the sign
normalizer can later collapse them by parity.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Union

from .errors import LexError

logger = logging.getLogger(__name__)


# --------------------------
# Tokens
# --------------------------

class TokenType:
    """Enumeration of token types."""
    NUMBER = 'NUMBER'
    IDENT = 'IDENT'
    OP = 'OP'
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'
    ASSIGN = 'ASSIGN'


OPERAND_TYPES = (TokenType.NUMBER, TokenType.IDENT)
SINGLE_OPERATORS = ('+', '-', '*', '/')


@dataclass
class Token:
    """A lexical unit. Numbers carry an int value, everything else its text."""
    type: str
    value: Union[int, str]

    @property
    def text(self) -> str:
        """The token rendered back to source form."""
        return str(self.value)

    @property
    def is_operand(self) -> bool:
        return self.type in OPERAND_TYPES

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r})"


def number(value: int) -> Token:
    return Token(TokenType.NUMBER, value)


def join_tokens(tokens: List[Token], sep: str = '') -> str:
    """Join token texts, the form the acceptance patterns are matched against."""
    return sep.join(tok.text for tok in tokens)


# --------------------------
# Tokenizer
# --------------------------

class Tokenizer:
    """Splits a line into tokens and applies the unary minus fixups.

    The input has all whitespace removed before matching. Any character that
    none of the patterns accepts raises LexError.
    """
    token_specification = [
        ('WORD',     r'[A-Za-z0-9_]+'),
        ('STARS',    r'\*+'),
        ('SLASHES',  r'/+'),
        ('MINUSES',  r'-+'),
        ('PLUSES',   r'\++'),
        ('LPAREN',   r'\('),
        ('RPAREN',   r'\)'),
        ('ASSIGN',   r'='),
        ('MISMATCH', r'.'),
    ]
    tok_regex = '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
    get_token = re.compile(tok_regex, re.DOTALL).match

    def __init__(self, text: str):
        self.text = ''.join(text.split())

    def tokenize(self) -> List[Token]:
        raw = self._scan()
        tokens = self._fix_signs(raw)
        logger.debug("Tokenized %r -> %s", self.text, tokens)
        return tokens

    def _scan(self) -> List[Token]:
        tokens: List[Token] = []
        pos = 0
        while pos < len(self.text):
            mo = self.get_token(self.text, pos)
            if mo is None or mo.lastgroup == 'MISMATCH':
                raise LexError(f"Unexpected character {self.text[pos]!r} at position {pos}")
            kind = mo.lastgroup
            value = mo.group()
            if kind == 'WORD':
                if value.isdigit():
                    tokens.append(Token(TokenType.NUMBER, int(value)))
                else:
                    tokens.append(Token(TokenType.IDENT, value))
            elif kind == 'LPAREN':
                tokens.append(Token(TokenType.LPAREN, value))
            elif kind == 'RPAREN':
                tokens.append(Token(TokenType.RPAREN, value))
            elif kind == 'ASSIGN':
                tokens.append(Token(TokenType.ASSIGN, value))
            else:
                tokens.append(Token(TokenType.OP, value))
            pos = mo.end()
        return tokens

    @staticmethod
    def _fix_signs(tokens: List[Token]) -> List[Token]:
        """Fold unary minus signs into the number that follows them.

        A leading '-' before a number negates it, and before '(' becomes
        ``-1 *``. A '-' directly after a one-character operator and before a
        number is folded into that number. Other minus signs are binary and
        stay as they are.
        """
        result: List[Token] = []
        i = 0
        n = len(tokens)
        while i < n:
            tok = tokens[i]
            nxt = tokens[i + 1] if i + 1 < n else None
            if _is_single_minus(tok) and nxt is not None:
                if i == 0 and nxt.type == TokenType.LPAREN:
                    result.extend([number(-1), Token(TokenType.OP, '*')])
                    i += 1
                    continue
                unary = i == 0 or _is_single_operator(tokens[i - 1])
                if unary and nxt.type == TokenType.NUMBER:
                    result.append(number(-nxt.value))
                    i += 2
                    continue
            result.append(tok)
            i += 1
        return result


def _is_single_minus(tok: Token) -> bool:
    return tok.type == TokenType.OP and tok.value == '-'


def _is_single_operator(tok: Token) -> bool:
    return tok.type == TokenType.OP and tok.value in SINGLE_OPERATORS


def tokenize(text: str) -> List[Token]:
    """Tokenize a raw input line."""
    return Tokenizer(text).tokenize()
