"""Locale-free display formatting for durations, distances, weights and deltas.

All rounding is decimal half-up on the shortest repr of the float, so
``67.25`` renders as ``67.3`` regardless of binary representation or
platform locale.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

SECONDS_PER_MINUTE = 60
METERS_PER_KILOMETER = 1000


def round_half_up(value: float, places: int = 0) -> Decimal:
    """Round *value* half away from zero to *places* decimal places.

    Raises:
        ValueError: *value* is infinite or NaN.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    exact = Decimal(repr(value))
    # Precision must cover every integer digit plus the requested places
    context = Context(prec=max(28, exact.adjusted() + places + 2))
    return exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=context)


def format_fixed(value: float, places: int) -> str:
    """Fixed-point string with exactly *places* decimals, e.g. ``2.50``.

    Infinite and NaN values render as ``inf``, ``-inf`` and ``nan``.
    """
    if not math.isfinite(value):
        return repr(float(value))
    rounded = round_half_up(value, places)
    if rounded == 0:
        # Drop the sign of a negative zero
        rounded = abs(rounded)
    return str(rounded)


def format_number(value: float) -> str:
    """Integer when whole, otherwise one decimal; a trailing ``.0`` is dropped.

    ``100.0 -> "100"``, ``67.25 -> "67.3"``, ``2.96 -> "3"``.
    """
    text = format_fixed(value, 1)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_signed_delta(delta: float) -> str:
    """Explicit ``+`` for gains, bare ``0`` for no change, ``-`` for losses."""
    text = format_number(delta)
    if text == "0":
        return text
    if delta > 0:
        return "+" + text
    return text


def format_duration(seconds: float) -> str:
    """``1800 -> "30m 0s"``, ``45 -> "45s"``. Hours are not split out."""
    if not math.isfinite(seconds):
        return f"{seconds}s"
    total = int(seconds)
    if total >= SECONDS_PER_MINUTE:
        minutes, secs = divmod(total, SECONDS_PER_MINUTE)
        return f"{minutes}m {secs}s"
    return f"{total}s"


def format_distance(meters: float) -> str:
    """Kilometers with two decimals from 1000m up, whole meters below."""
    if meters >= METERS_PER_KILOMETER:
        return f"{format_fixed(meters / METERS_PER_KILOMETER, 2)}km"
    return f"{format_fixed(meters, 0)}m"


def format_weight(kilograms: float) -> str:
    """``100.0 -> "100kg"``, ``67.25 -> "67.3kg"``."""
    return f"{format_number(kilograms)}kg"


def format_rest(seconds: int) -> str:
    return f"rest: {seconds}s"
