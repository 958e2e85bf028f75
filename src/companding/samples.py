"""Domain of the two sample representations."""

from __future__ import annotations

from typing import Final

import numpy as np

PCM16_MIN: Final[int] = -0x8000
PCM16_MAX: Final[int] = 0x7FFF
PCM16_WIDTH: Final[int] = 2


def check_sample(sample: int) -> int:
    """Validate a linear PCM sample.

    Raises:
        ValueError: if ``sample`` is outside the signed 16-bit range.
    """

    value = int(sample)
    if not PCM16_MIN <= value <= PCM16_MAX:
        raise ValueError(f"PCM16 sample out of range: {sample}")
    return value


def check_code(code: int) -> int:
    """Validate a companded byte.

    Raises:
        ValueError: if ``code`` is not in 0..255.
    """

    value = int(code)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Companded code out of range: {code}")
    return value


def as_pcm16(pcm16: np.ndarray) -> np.ndarray:
    """Widen PCM16 samples to int32 working precision.

    Raises:
        ValueError: if the array is not integer or a sample does not fit in int16.
    """

    arr = np.asarray(pcm16)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"PCM16 samples must be integers, got {arr.dtype}")
    if arr.dtype != np.int16 and arr.size:
        if int(arr.min()) < PCM16_MIN or int(arr.max()) > PCM16_MAX:
            raise ValueError("PCM16 samples out of range")
    return arr.astype(np.int32).ravel()


def as_codes(data: bytes | bytearray | memoryview | np.ndarray) -> np.ndarray:
    """Widen companded bytes to int32 working precision.

    Raises:
        ValueError: if an array is not integer or holds values outside 0..255.
    """

    if isinstance(data, np.ndarray):
        if not np.issubdtype(data.dtype, np.integer):
            raise ValueError(f"Companded codes must be integers, got {data.dtype}")
        if data.dtype != np.uint8 and data.size:
            if int(data.min()) < 0 or int(data.max()) > 0xFF:
                raise ValueError("Companded codes out of range")
        return data.astype(np.int32).ravel()
    return np.frombuffer(data, dtype=np.uint8).astype(np.int32)
