"""Identifier bindings and assignment statements."""

from __future__ import annotations

import logging
import re
from typing import Dict, ItemsView, Optional, Tuple

from .errors import InvalidAssignmentError, InvalidIdentifierError, UnknownVariableError

logger = logging.getLogger(__name__)

IDENTIFIER_RE = re.compile(r'[a-zA-Z]+')
ASSIGNMENT_SHAPE_RE = re.compile(r'\s*\w+\s*=\s*-?\s*\w+\s*', re.ASCII)
INTEGER_LITERAL_RE = re.compile(r'[+-]?\d+', re.ASCII)
EQUALS_SPLIT_RE = re.compile(r'\s*=\s*')


class BindingStore:
    """Mapping from identifier to integer, owned by one session.

    Entries are only created or overwritten by successful assignments and
    are never removed.
    """

    def __init__(self):
        self._values: Dict[str, int] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def lookup(self, name: str) -> Optional[int]:
        return self._values.get(name)

    def assign(self, name: str, value: int) -> None:
        self._values[name] = value

    def items(self) -> ItemsView[str, int]:
        return self._values.items()

    def resolve_assignment(self, statement: str) -> Tuple[str, int]:
        """Parse ``name = rhs`` and return the binding it would create.

        The right-hand side is either a bound identifier, whose value is
        copied, or an optionally signed integer literal. Nothing is stored.
        """
        statement = statement.strip()
        parts = EQUALS_SPLIT_RE.split(statement)
        if len(parts) < 2:
            raise InvalidAssignmentError(f"Missing '=' in {statement!r}")
        name, rhs = parts[0], parts[1]
        if not IDENTIFIER_RE.fullmatch(name):
            raise InvalidIdentifierError(f"Invalid identifier {name!r}")
        if not ASSIGNMENT_SHAPE_RE.fullmatch(statement):
            raise InvalidAssignmentError(f"Malformed assignment {statement!r}")
        if rhs in self._values:
            return name, self._values[rhs]
        if IDENTIFIER_RE.fullmatch(rhs):
            raise UnknownVariableError(f"Unknown variable {rhs!r}")
        literal = ''.join(rhs.split())
        if not INTEGER_LITERAL_RE.fullmatch(literal):
            raise InvalidAssignmentError(f"Not an integer: {rhs!r}")
        return name, int(literal)

    def execute(self, statement: str) -> None:
        """Resolve an assignment statement and commit it."""
        name, value = self.resolve_assignment(statement)
        self.assign(name, value)
        logger.debug("Assigned %s = %d", name, value)
