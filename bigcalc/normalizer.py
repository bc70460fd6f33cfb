"""Acceptance patterns and operator-run normalization.

An expression is accepted when its joined text alternates operands and
operator runs, with optional parentheses hugging the operands, e.g.
``((2-----4))`` or ``9*-3+12*(4-2)``. The pattern is built for the number of
operands in the line, so it needs at least two of them.
"""

from __future__ import annotations

import logging
import re
from typing import List, Pattern

from .lexer import Token, TokenType, join_tokens

logger = logging.getLogger(__name__)

OPERAND_PATTERN = r'\(*-?\d+\)*'
OPERATOR_PATTERN = r'\s*([-+/*]+)\s*'
MIN_OPERANDS = 2


def count_operands(tokens: List[Token]) -> int:
    return sum(1 for tok in tokens if tok.is_operand)


def build_pattern(tokens: List[Token]) -> Pattern[str]:
    """Build the regex an expression with this many operands must fully match."""
    operands = max(count_operands(tokens), MIN_OPERANDS)
    parts = [OPERAND_PATTERN]
    for _ in range(operands - 1):
        parts.append(OPERATOR_PATTERN)
        parts.append(OPERAND_PATTERN)
    return re.compile(''.join(parts))


def conforms(tokens: List[Token], pattern: Pattern[str]) -> bool:
    return pattern.fullmatch(join_tokens(tokens)) is not None


def collapse_operator(run: str) -> str:
    """Reduce an operator run to a single character.

    An even number of minuses is a plus, an odd number a minus. Runs of any
    other operator keep their first character.
    """
    if run.startswith('-'):
        return '+' if len(run) % 2 == 0 else '-'
    return run[0]


def normalize_signs(tokens: List[Token], pattern: Pattern[str]) -> List[Token]:
    """Collapse every operator run to one character.

    Sequences that do not conform to ``pattern`` are returned unchanged; the
    classifier rejects them afterwards.
    """
    if not conforms(tokens, pattern):
        return tokens
    normalized = [
        Token(TokenType.OP, collapse_operator(tok.value)) if tok.type == TokenType.OP else tok
        for tok in tokens
    ]
    logger.debug("Normalized operators -> %s", normalized)
    return normalized
