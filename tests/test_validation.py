"""Tests for input validation."""

import math

import numpy as np
import pytest

from kinematics.core.errors import InputErrorKind, InvalidInputError, KinematicsError
from kinematics.core.units import Quantity, Unit
from kinematics.core.validation import validate_inputs


class TestValidateInputs:
    """Test the shared precondition gate."""

    def test_accepts_finite_numbers(self):
        """Ints, floats and numpy scalars pass."""
        assert validate_inputs(1, 2.5, -3.0, 0, np.float64(4.0), np.int32(7)) is None

    def test_accepts_no_inputs(self):
        """An empty argument list is trivially valid."""
        validate_inputs()

    def test_accepts_tagged_quantity(self):
        """Quantities are checked on their magnitude."""
        validate_inputs(Quantity(10.0, Unit.MS), Quantity(0.0, Unit.S))

    @pytest.mark.parametrize("value", ["10", None, [1.0], {"v": 1}, True, False, np.bool_(True)])
    def test_rejects_non_numeric(self, value):
        """Non-numeric values raise with the non-numeric kind."""
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(value)

        assert exc_info.value.kind == InputErrorKind.NON_NUMERIC
        assert exc_info.value.position == 0

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, np.float64("nan"), 10**400])
    def test_rejects_non_finite(self, value):
        """NaN and infinities raise with the non-finite kind."""
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(value)

        assert exc_info.value.kind == InputErrorKind.NON_FINITE

    def test_rejects_non_finite_quantity(self):
        """A tagged NaN is still NaN."""
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(Quantity(math.nan, Unit.MS))

        assert exc_info.value.kind == InputErrorKind.NON_FINITE

    def test_reports_first_failure_position(self):
        """Validation stops at the first bad value."""
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(1.0, 2.0, "x", math.nan)

        assert exc_info.value.position == 2
        assert exc_info.value.kind == InputErrorKind.NON_NUMERIC
        assert exc_info.value.value == "x"

    def test_reports_parameter_name(self):
        """Names are attached to the error and its message."""
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(1.0, math.inf, names=("velocity", "time"))

        assert exc_info.value.name == "time"
        assert "'time'" in str(exc_info.value)
        assert "non-finite" in str(exc_info.value)

    def test_error_hierarchy(self):
        """InvalidInputError can be caught as a ValueError or a KinematicsError."""
        with pytest.raises(ValueError):
            validate_inputs(None)
        with pytest.raises(KinematicsError):
            validate_inputs(None)
