"""Small parameter validation helpers.

Filters validate their scalar arguments up front so that a bad value never
reaches the pixel loops. Every failure is an ``InvalidArgumentError``.
"""

from __future__ import annotations

from numbers import Integral, Number

from pyimfilt.errors import InvalidArgumentError


def check_parameter(
    param: Number,
    low: Number | None = None,
    high: Number | None = None,
    *,
    param_name: str = "parameter",
    include_left: bool = True,
    include_right: bool = True,
    integral: bool = False,
) -> None:
    """Validate a numeric parameter is within a given range.

    Parameters
    ----------
    param:
        The numeric value to validate.
    low / high:
        Optional bounds. When `None`, the bound is not checked.
    include_left / include_right:
        Whether the comparison is inclusive.
    param_name:
        Used in error messages.
    integral:
        Require an integer (Python or numpy) rather than any real number.
    """

    expected = Integral if integral else Number
    if not isinstance(param, expected) or isinstance(param, bool):
        kind = "an integer" if integral else "a number"
        raise InvalidArgumentError(f"{param_name} must be {kind}, got {type(param).__name__}")

    if low is not None and high is not None and low > high:
        raise InvalidArgumentError(f"Invalid bounds for {param_name}: low={low} > high={high}")

    if low is not None:
        if include_left:
            if param < low:
                raise InvalidArgumentError(f"{param_name} must be >= {low}, got {param}")
        else:
            if param <= low:
                raise InvalidArgumentError(f"{param_name} must be > {low}, got {param}")

    if high is not None:
        if include_right:
            if param > high:
                raise InvalidArgumentError(f"{param_name} must be <= {high}, got {param}")
        else:
            if param >= high:
                raise InvalidArgumentError(f"{param_name} must be < {high}, got {param}")


def check_byte(param: int, *, param_name: str) -> int:
    """Validate an 8-bit sample value and return it as a plain int."""

    check_parameter(param, 0, 255, param_name=param_name, integral=True)
    return int(param)


def check_dimension(param: int, *, param_name: str) -> int:
    """Validate an image dimension (non-negative integer)."""

    check_parameter(param, 0, None, param_name=param_name, integral=True)
    return int(param)
