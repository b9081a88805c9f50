"""Conversions between centimeters and feet/inches.

Persistence is always in centimeters; these helpers only translate values
entered or displayed in imperial units.
"""

from __future__ import annotations

import math
from typing import Tuple

CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


def _round_half_up(value: float) -> int:
    # Halves round up; round() would round them to even.
    return int(math.floor(value + 0.5))


def cm_to_feet_inches(cm: float) -> Tuple[int, int]:
    """Split a length in centimeters into whole feet and rounded inches.

    Inches are not carried into feet when they round up to 12, so values just
    below a foot boundary come back as ``(n, 12)``.
    """

    total_inches = cm / CM_PER_INCH
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = _round_half_up(math.fmod(total_inches, INCHES_PER_FOOT))
    return feet, inches


def feet_inches_to_cm(feet: float, inches: float) -> float:
    """Return the exact centimeter length of ``feet`` and ``inches``."""

    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def format_length(cm: float, metric: bool = False) -> str:
    """Render a stored length for display, e.g. ``178 cm`` or ``5' 10"``."""

    if metric:
        return f"{_round_half_up(cm)} cm"
    feet, inches = cm_to_feet_inches(cm)
    return f"{feet}' {inches}\""
