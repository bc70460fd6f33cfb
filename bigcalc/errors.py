"""Exception hierarchy shared by the calculator stages.

Every stage raises one of these; the statement classifier catches
``CalculatorError`` at its boundary and turns it into an ``Error`` outcome.
Each class records the user-facing ``ErrorKind`` it maps to, so evaluation
failures (parentheses, postfix structure, division by zero, lexing) all
surface as "Invalid expression" while assignment failures keep their own
message.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """User-facing error categories, valued by their console message."""
    INVALID_IDENTIFIER = "Invalid identifier"
    UNKNOWN_VARIABLE = "Unknown variable"
    INVALID_ASSIGNMENT = "Invalid assignment"
    INVALID_EXPRESSION = "Invalid expression"


# --------------------------
# Base
# --------------------------

class CalculatorError(Exception):
    """Base class for calculator errors."""
    error_kind = ErrorKind.INVALID_EXPRESSION


# --------------------------
# Evaluation path
# --------------------------

class LexError(CalculatorError):
    """Raised when no token pattern matches at the current position."""
    pass


class EvaluationError(CalculatorError):
    """Base for failures while converting or evaluating an expression."""
    pass


class UnbalancedParenthesesError(EvaluationError):
    """Raised when a ')' has no matching '(' or a '(' is never closed."""
    pass


class MalformedPostfixError(EvaluationError):
    """Raised when the postfix sequence does not reduce to exactly one value."""
    pass


class DivisionByZeroError(EvaluationError):
    """Raised when the right operand of '/' is zero."""
    pass


class InvalidExpressionError(CalculatorError):
    """Raised when a line is neither an expression, a literal, a lookup nor an assignment."""
    pass


# --------------------------
# Assignment path
# --------------------------

class AssignmentError(CalculatorError):
    """Base for failures while parsing an assignment statement."""
    error_kind = ErrorKind.INVALID_ASSIGNMENT


class InvalidIdentifierError(AssignmentError):
    """Raised when an identifier is not made of letters only."""
    error_kind = ErrorKind.INVALID_IDENTIFIER


class UnknownVariableError(AssignmentError):
    """Raised when a referenced identifier has no binding."""
    error_kind = ErrorKind.UNKNOWN_VARIABLE


class InvalidAssignmentError(AssignmentError):
    """Raised when the right-hand side is not an integer literal or identifier."""
    error_kind = ErrorKind.INVALID_ASSIGNMENT
