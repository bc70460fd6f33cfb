"""Shunting-yard conversion to postfix and stack-based postfix evaluation.

Both stages work on token lists whose operators have already been collapsed
to single characters. Arithmetic is on Python ints, so results are exact at
any size; division truncates toward zero rather than flooring.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from .errors import DivisionByZeroError, MalformedPostfixError, UnbalancedParenthesesError
from .lexer import Token, TokenType

logger = logging.getLogger(__name__)

# Higher number = higher precedence. All operators are left-associative.
PRECEDENCE: Dict[str, int] = {
    '*': 2,
    '/': 2,
    '+': 1,
    '-': 1,
}


# --------------------------
# Arithmetic
# --------------------------

def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero: -7 / 2 == -3."""
    if right == 0:
        raise DivisionByZeroError("Division by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


OPERATIONS: Dict[str, Callable[[int, int], int]] = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
    '/': truncating_div,
}


# --------------------------
# Shunting-yard
# --------------------------

def _precedence(tok: Token) -> int:
    if tok.value not in PRECEDENCE:
        raise MalformedPostfixError(f"Unsupported operator {tok.value!r}")
    return PRECEDENCE[tok.value]


def to_postfix(tokens: List[Token]) -> List[Token]:
    """Convert an infix token list to postfix order."""
    output: List[Token] = []
    stack: List[Token] = []
    for tok in tokens:
        if tok.type == TokenType.NUMBER:
            output.append(tok)
        elif tok.type == TokenType.OP:
            prec = _precedence(tok)
            while stack and stack[-1].type == TokenType.OP and _precedence(stack[-1]) >= prec:
                output.append(stack.pop())
            stack.append(tok)
        elif tok.type == TokenType.LPAREN:
            stack.append(tok)
        elif tok.type == TokenType.RPAREN:
            while stack and stack[-1].type != TokenType.LPAREN:
                output.append(stack.pop())
            if not stack:
                raise UnbalancedParenthesesError("')' without matching '('")
            stack.pop()
        else:
            raise MalformedPostfixError(f"Unexpected token {tok!r} in expression")
    while stack:
        tok = stack.pop()
        if tok.type == TokenType.LPAREN:
            raise UnbalancedParenthesesError("'(' is never closed")
        output.append(tok)
    logger.debug("Postfix: %s", ' '.join(t.text for t in output))
    return output


# --------------------------
# Evaluation
# --------------------------

def evaluate_postfix(tokens: List[Token]) -> int:
    """Reduce a postfix token list to a single integer."""
    stack: List[int] = []
    for tok in tokens:
        if tok.type == TokenType.NUMBER:
            stack.append(tok.value)
            continue
        if tok.type != TokenType.OP or tok.value not in OPERATIONS:
            raise MalformedPostfixError(f"Unexpected token {tok!r} in postfix sequence")
        if len(stack) < 2:
            raise MalformedPostfixError(f"Insufficient operands for {tok.value!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(OPERATIONS[tok.value](left, right))
    if len(stack) != 1:
        raise MalformedPostfixError(f"Expected one value after evaluation, got {len(stack)}")
    return stack[0]


def evaluate(tokens: List[Token]) -> int:
    """Evaluate a normalized infix token list."""
    return evaluate_postfix(to_postfix(tokens))
