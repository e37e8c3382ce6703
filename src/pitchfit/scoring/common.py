"""Shared arithmetic for percentage scores."""

from __future__ import annotations


def percentage(part: int, whole: int) -> int:
    """Return ``round(100 * part / whole)`` with half-up rounding, 0 when ``whole`` is 0."""

    if whole <= 0:
        return 0
    # Integer form of floor(100 * part / whole + 0.5).
    return (200 * part + whole) // (2 * whole)
