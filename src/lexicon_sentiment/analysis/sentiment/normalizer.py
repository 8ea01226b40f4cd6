"""
normalizer.py

Does: Squash a raw compound score into [-1, 1] with x / sqrt(x² + alpha).
"""

from __future__ import annotations

import math

__all__ = ["normalize"]


def normalize(raw_score: float, alpha: float) -> float:
    """
    Does: Smooth, odd, strictly increasing map of the raw score into [-1, 1].
          Larger `alpha` needs a larger raw score to approach ±1; 0 maps to 0.
    Returns: Normalized score; ±inf map to ±1.0.
    """
    if not alpha > 0:
        raise ValueError(f"alpha must be > 0, got {alpha!r}")
    if math.isnan(raw_score):
        raise ValueError("raw_score is NaN")
    if math.isinf(raw_score):
        return math.copysign(1.0, raw_score)
    if raw_score == 0:
        return 0.0
    # hypot avoids overflowing raw_score**2 for huge inputs
    value = raw_score / math.hypot(raw_score, math.sqrt(alpha))
    return max(-1.0, min(1.0, value))
