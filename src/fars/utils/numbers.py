"""Numeric coercion helpers shared by the data and analysis layers."""

from typing import Any


def coerce_int(value: Any) -> int:
    """Coerce a numeric-like value to ``int``, truncating any fraction.

    Accepts ints, floats and numeric strings (``"2013"``, ``"2013.9"``).

    Args:
        value: Year, state code, or similar identifier.

    Returns:
        The truncated integer.

    Raises:
        ValueError: If *value* is not numeric (or is NaN).
        OverflowError: If *value* is infinite.
    """
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(float(value))
