"""Error taxonomy for kinematic calculations."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class InputErrorKind(str, Enum):
    """Reasons an input value is rejected."""

    NON_NUMERIC = "non-numeric"
    NON_FINITE = "non-finite"


class KinematicsError(Exception):
    """Base class for all calculation errors."""


class InvalidInputError(KinematicsError, ValueError):
    """An argument to a calculation function is not a finite number."""

    def __init__(
        self,
        kind: InputErrorKind,
        position: int,
        value: Any,
        name: Optional[str] = None,
    ):
        self.kind = kind
        self.position = position
        self.value = value
        self.name = name

        label = f"'{name}' (argument {position})" if name else f"argument {position}"
        super().__init__(f"Invalid input: {label} is {kind.value}, got {value!r}")


class UnitConsistencyError(KinematicsError, TypeError):
    """A quantity reached a calculation in the wrong unit."""

    def __init__(self, expected: str, actual: str, name: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.name = name

        label = f"'{name}' " if name else ""
        super().__init__(f"Unit mismatch: {label}expected {expected}, got {actual}")
