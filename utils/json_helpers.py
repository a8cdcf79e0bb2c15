"""
JSON serialization and display helpers for friction-loss-mcp.

Tool output must be valid JSON per RFC 7159, so inf and nan are replaced with null.
Display formatting follows the calculator's result panel: Reynolds number as an
integer with thousands separators, friction factor to 5 decimals, head loss to 4.
"""

import math
import json
from typing import Any, Dict

import numpy as np

from .constants import (
    REGIME_DISPLAY, DISPLAY_DIGITS_REYNOLDS, DISPLAY_DIGITS_FRICTION, DISPLAY_DIGITS_HEAD_LOSS
)


def sanitize_for_json(obj: Any) -> Any:
    """
    Recursively sanitize an object for JSON serialization.

    Replaces inf and nan float values with None and unwraps numpy scalars,
    arrays and pydantic models.

    Examples:
        >>> sanitize_for_json({'value': float('inf')})
        {'value': None}
        >>> sanitize_for_json([1.0, float('nan'), 3.0])
        [1.0, None, 3.0]
    """
    if obj is None or isinstance(obj, (bool, int, str)):
        return obj

    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj

    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, (np.integer, np.floating)):
        return sanitize_for_json(obj.item())
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())

    if hasattr(obj, "model_dump"):
        return sanitize_for_json(obj.model_dump())

    if isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]

    return str(obj)


def safe_json_dumps(obj: Any, **kwargs) -> str:
    """Serialize an object to a JSON string after sanitize_for_json."""
    return json.dumps(sanitize_for_json(obj), **kwargs)


def format_display(result) -> Dict[str, str]:
    """
    Format a CalculationResult the way the result panel shows it.

    Args:
        result: CalculationResult from the friction engine

    Returns:
        Dictionary of display strings
    """
    return {
        "reynolds_number": f"{result.reynolds_number:,.{DISPLAY_DIGITS_REYNOLDS}f}",
        "flow_regime": REGIME_DISPLAY[result.flow_regime],
        "friction_factor": f"{result.friction_factor:.{DISPLAY_DIGITS_FRICTION}f}",
        "head_loss": f"{result.head_loss_m:.{DISPLAY_DIGITS_HEAD_LOSS}f} m",
    }
