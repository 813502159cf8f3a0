"""
Input correction helpers.

Combat math never raises on malformed numbers: values coming from outside
the engine are clamped into their valid range and a warning is logged.
Missing collaborators are the only programming errors reported by raising.
"""

import math
from typing import Any, Optional

from catchery import log_error, log_warning


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def ensure_non_negative_int(
    value: Any, param_name: str, default: int = 0, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Ensures a value is a non-negative integer, correcting if needed.
    Logs a warning for invalid values but continues execution.

    Args:
        value: The value to ensure is a non-negative integer
        param_name: Human-readable parameter name for error messages
        default: Value used when the input cannot be converted at all
        context: Additional context for logging

    Returns:
        int: The corrected integer value
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        corrected = max(0, int(value)) if _is_finite_number(value) else default
        log_warning(
            f"{param_name} must be non-negative integer, got: {value}, correcting to {corrected}",
            {
                **(context or {}),
                "param_name": param_name,
                "value": value,
                "corrected_to": corrected,
            },
        )
        return corrected
    return value


def ensure_int_in_range(
    value: Any,
    param_name: str,
    min_val: int,
    max_val: Optional[int] = None,
    default: Optional[int] = None,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """
    Ensures a value is an integer within the specified range, correcting if needed.
    Logs a warning for out-of-range values but continues execution.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive), None for no maximum
        default: Value used when the input cannot be converted, min_val if None
        context: Additional context for logging

    Returns:
        int: The corrected integer value
    """
    if default is None:
        default = min_val

    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and value >= min_val
        and (max_val is None or value <= max_val)
    ):
        return value

    if _is_finite_number(value):
        corrected = int(value)
        if corrected < min_val:
            corrected = min_val
        elif max_val is not None and corrected > max_val:
            corrected = max_val
    else:
        corrected = default

    range_desc = f">= {min_val}" if max_val is None else f"between {min_val} and {max_val}"
    log_warning(
        f"{param_name} must be integer {range_desc}, got: {value}, correcting to {corrected}",
        {
            **(context or {}),
            "param_name": param_name,
            "value": value,
            "min_val": min_val,
            "max_val": max_val,
            "corrected_to": corrected,
        },
    )
    return corrected


def require_combatant(obj: Any, param_name: str) -> Any:
    """
    Validates that a combatant handle was supplied.

    Args:
        obj: The combatant to validate
        param_name: Human-readable parameter name for error messages

    Returns:
        Any: The validated combatant

    Raises:
        ValueError: If the combatant is missing
    """
    if obj is None:
        log_error(
            f"{param_name} cannot be None",
            {"param_name": param_name},
        )
        raise ValueError(f"{param_name} is required but was None")
    return obj
