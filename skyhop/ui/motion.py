"""Time-based motion for the night sky: star twinkle and satellite drift."""

import math
from typing import Optional

TWINKLE_S = 3.0
TWINKLE_MIN = 0.3

# Satellites enter just off the left edge and leave just off the right edge.
DRIFT_START = -0.1
DRIFT_END = 1.1


def twinkle(phase: float, elapsed_s: float, period_s: float = TWINKLE_S) -> float:
    """Brightness factor in [TWINKLE_MIN, 1] for a star with the given phase."""
    wave = 0.5 + 0.5 * math.cos(2 * math.pi * (elapsed_s / period_s + phase))
    return TWINKLE_MIN + (1.0 - TWINKLE_MIN) * wave


def satellite_x(elapsed_s: float, duration_s: float, delay_s: float = 0.0) -> Optional[float]:
    """Horizontal position as a fraction of the width, or None before the first pass."""
    if elapsed_s < delay_s:
        return None
    progress = ((elapsed_s - delay_s) % duration_s) / duration_s
    return DRIFT_START + (DRIFT_END - DRIFT_START) * progress
