"""
Distance between a catalog point and a requested (span, load) point.

Span and load have different units, so the raw Euclidean distance is only
meaningful as a ranking key. scaled_distance divides each axis by a scale
first for callers that want both axes weighted comparably.
"""

import math


def euclidean(span: float, load: float, target_span: float, target_load: float) -> float:
    """Straight-line distance between (span, load) and (target_span, target_load)."""
    return math.hypot(span - target_span, load - target_load)


def scaled_distance(
    span: float,
    load: float,
    target_span: float,
    target_load: float,
    span_scale: float = 1.0,
    load_scale: float = 1.0,
) -> float:
    """
    Euclidean distance after dividing each axis by a positive scale.

    Args:
        span_scale: Divisor for the span axis, typically the span range
        load_scale: Divisor for the load axis, typically the capacity range

    Raises:
        ValueError: If a scale is not positive
    """
    if span_scale <= 0 or load_scale <= 0:
        raise ValueError("Distance scales must be positive")
    return math.hypot((span - target_span) / span_scale, (load - target_load) / load_scale)
