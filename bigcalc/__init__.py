"""Arbitrary-precision integer calculator with identifier bindings."""

import sys

# Integers of any length must convert to and from decimal text.
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

from .bindings import BindingStore  # noqa: E402
from .classifier import Error, IntegerResult, Outcome, Session, Silent, evaluate_line  # noqa: E402
from .errors import CalculatorError, ErrorKind  # noqa: E402

__all__ = [
    'BindingStore',
    'CalculatorError',
    'Error',
    'ErrorKind',
    'IntegerResult',
    'Outcome',
    'Session',
    'Silent',
    'evaluate_line',
]

__version__ = "0.1.0"
