"""Segment search shared by the A-law and mu-law encoders.

Both laws bucket a magnitude into one of eight power-of-two segments with the
same three threshold tests. The accumulated segment bits sit in 0x70 and the
remaining magnitude is the interval number (its 0x10 bit, when present, is the
implicit leading bit of segments >= 1).
"""

from __future__ import annotations

import numpy as np

# (threshold, shift, segment bits), applied in order.
LADDER: tuple[tuple[int, int, int], ...] = (
    (0x100, 4, 0x40),
    (0x40, 2, 0x20),
    (0x20, 1, 0x10),
)


def segment(magnitude: int) -> tuple[int, int]:
    """Return ``(segment_bits, interval)`` for a non-negative magnitude."""

    seg = 0
    for threshold, shift, bits in LADDER:
        if magnitude >= threshold:
            magnitude >>= shift
            seg += bits
    return seg, magnitude


def segment_array(magnitude: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Vectorized :func:`segment` over an int32 array."""

    seg = np.zeros_like(magnitude)
    for threshold, shift, bits in LADDER:
        hit = magnitude >= threshold
        magnitude = np.where(hit, magnitude >> shift, magnitude)
        seg = seg + np.where(hit, bits, 0)
    return seg, magnitude
