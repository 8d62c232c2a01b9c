"""Precondition checks shared by every calculation function."""

from __future__ import annotations

import logging
import numbers
from typing import Any, Optional, Sequence

import numpy as np

from kinematics.core.errors import InputErrorKind, InvalidInputError
from kinematics.core.units import Quantity


logger = logging.getLogger(__name__)


def validate_inputs(*inputs: Any, names: Optional[Sequence[str]] = None) -> None:
    """
    Ensure every input is a finite real number.

    Tagged quantities are checked on their magnitude. Booleans are rejected
    even though Python treats them as integers.

    Args:
        *inputs: Values to check, in argument order
        names: Optional parameter names, parallel to ``inputs``

    Raises:
        InvalidInputError: On the first non-numeric or non-finite value
    """
    for position, value in enumerate(inputs):
        name = names[position] if names is not None and position < len(names) else None
        magnitude = value.value if isinstance(value, Quantity) else value

        if isinstance(magnitude, bool) or not isinstance(magnitude, numbers.Real):
            raise InvalidInputError(InputErrorKind.NON_NUMERIC, position, value, name)

        try:
            finite = bool(np.isfinite(float(magnitude)))
        except OverflowError:
            # int too large for a double
            finite = False

        if not finite:
            raise InvalidInputError(InputErrorKind.NON_FINITE, position, value, name)

    logger.debug(f"Validated {len(inputs)} inputs")
