"""Statement classification: the single entry point of the calculator core.

``Session.evaluate_line`` decides what a line is (expression, integer
literal, identifier lookup or assignment), runs it through the pipeline

    tokenize -> substitute identifiers -> normalize signs
             -> shunting-yard -> postfix evaluation

and returns an ``Outcome``. Failures inside the pipeline are raised as
``CalculatorError`` subclasses and converted to ``Error`` outcomes here, so
callers never see an exception for bad input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from .bindings import BindingStore
from .errors import (
    CalculatorError,
    ErrorKind,
    InvalidExpressionError,
    InvalidIdentifierError,
    UnknownVariableError,
)
from .lexer import Token, TokenType, join_tokens, number, tokenize
from .normalizer import build_pattern, conforms, normalize_signs
from .postfix import evaluate

logger = logging.getLogger(__name__)

NUMBER_LINE_RE = re.compile(r'[+-]?\d+', re.ASCII)
LETTERS_RE = re.compile(r'[a-zA-Z]+')
ASSIGNMENT_LINE_RE = re.compile(r'[a-zA-Z]+\w*\s*=.*', re.ASCII | re.DOTALL)
DIGIT_SUFFIXED_IDENTIFIER_RE = re.compile(r'[a-zA-Z]+\d+', re.ASCII)


# --------------------------
# Outcomes
# --------------------------

@dataclass(frozen=True)
class IntegerResult:
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Silent:
    """A successful assignment; nothing to display."""

    def render(self) -> str:
        return ""


@dataclass(frozen=True)
class Error:
    kind: ErrorKind

    def render(self) -> str:
        return self.kind.value


Outcome = Union[IntegerResult, Silent, Error]


# --------------------------
# Session
# --------------------------

class Session:
    """Evaluates lines against a binding store it owns for its lifetime."""

    def __init__(self, store: Optional[BindingStore] = None):
        self.store = store if store is not None else BindingStore()

    def evaluate_line(self, line: str) -> Outcome:
        """Classify and evaluate one input line."""
        try:
            return self._classify(line)
        except CalculatorError as e:
            logger.debug("%s for %r: %s", type(e).__name__, line, e)
            return Error(e.error_kind)

    def _classify(self, line: str) -> Outcome:
        trimmed = line.strip()
        is_assignment = ASSIGNMENT_LINE_RE.fullmatch(trimmed) is not None

        tokens = tokenize(line)
        if not is_assignment:
            tokens = self._substitute(tokens)
        pattern = build_pattern(tokens)
        tokens = normalize_signs(tokens, pattern)

        if conforms(tokens, pattern) and _brackets_balance(tokens):
            return self._evaluate_expression(tokens)
        if NUMBER_LINE_RE.fullmatch(trimmed):
            return IntegerResult(int(trimmed))
        if trimmed in self.store:
            return IntegerResult(self.store.lookup(trimmed))
        if LETTERS_RE.fullmatch(trimmed):
            raise UnknownVariableError(f"Unknown variable {trimmed!r}")
        if is_assignment:
            self.store.execute(join_tokens(tokens, ' '))
            return Silent()
        if DIGIT_SUFFIXED_IDENTIFIER_RE.fullmatch(trimmed):
            raise InvalidIdentifierError(f"Invalid identifier {trimmed!r}")
        raise InvalidExpressionError(f"Cannot interpret {trimmed!r}")

    def _substitute(self, tokens: List[Token]) -> List[Token]:
        return [
            number(self.store.lookup(tok.value))
            if tok.type == TokenType.IDENT and tok.value in self.store else tok
            for tok in tokens
        ]

    @staticmethod
    def _evaluate_expression(tokens: List[Token]) -> Outcome:
        try:
            return IntegerResult(evaluate(tokens))
        except CalculatorError as e:
            logger.debug("Evaluation failed (%s): %s", type(e).__name__, e)
            return Error(ErrorKind.INVALID_EXPRESSION)


def _brackets_balance(tokens: List[Token]) -> bool:
    opened = sum(1 for tok in tokens if tok.type == TokenType.LPAREN)
    closed = sum(1 for tok in tokens if tok.type == TokenType.RPAREN)
    return opened == closed


def evaluate_line(line: str, session: Optional[Session] = None) -> Outcome:
    """Evaluate a line against ``session``, or against a fresh one."""
    if session is None:
        session = Session()
    return session.evaluate_line(line)
