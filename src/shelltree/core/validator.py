from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary holds usable query settings
before any transcript is processed. Coerces values where possible and
falls back to defaults with a warning otherwise.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from shelltree.core.parsing.tree_builder import max_supported_depth
from shelltree.domain.config import get_default_config

logger = logging.getLogger(__name__)

# Minimum accepted value per integer field
_INT_FIELDS: Dict[str, int] = {
    "ceiling": 0,
    "capacity": 0,
    "headroom": 0,
    "max_depth": 1,
}

# Maximum accepted value, resolved at validation time
_INT_MAXIMUMS = {
    "max_depth": max_supported_depth,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.

    Raises:
        TypeError: In strict mode, when a value has the wrong type.
        ValueError: In strict mode, when a value is out of range.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field, minimum in _INT_FIELDS.items():
        maximum = _INT_MAXIMUMS[field]() if field in _INT_MAXIMUMS else None
        merged[field] = _as_int(
            merged.get(field), defaults[field], minimum, maximum, field, warnings, strict
        )

    if merged["headroom"] > merged["capacity"]:
        msg = (
            f"Invalid field 'headroom': {merged['headroom']} exceeds "
            f"capacity {merged['capacity']}."
        )
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using default capacity and headroom.")
        merged["capacity"] = defaults["capacity"]
        merged["headroom"] = defaults["headroom"]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_int(
        value: Any,
        fallback: int,
        minimum: int,
        maximum: Optional[int],
        field: str,
        warnings: List[str],
        strict: bool,
) -> int:
    """Validate integer inputs, accepting numeric strings."""
    if value is None:
        return fallback

    parsed = None
    if isinstance(value, int) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())

    if parsed is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if parsed < minimum:
        msg = f"Invalid field '{field}': {parsed} is below the minimum of {minimum}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if maximum is not None and parsed > maximum:
        msg = f"Invalid field '{field}': {parsed} exceeds the maximum of {maximum}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using {maximum}.")
        return maximum

    return parsed
