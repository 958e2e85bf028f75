"""Direct A-law <-> mu-law conversion.

The band tables approximate decoding in one law and re-encoding in the other
without going through linear PCM. They are not exact: a converted code can sit
one quantization step away from the decode/re-encode result.
"""

from __future__ import annotations

import numpy as np

from companding.alaw import ALAW_XOR
from companding.samples import as_codes, check_code

# Bit 7 survives the transmission masks, so only the magnitude bits are flipped.
_ULAW_MAGNITUDE_XOR = 0x7F


def alaw_to_ulaw_sample(code: int) -> int:
    """Convert one A-law code to mu-law."""

    alaw = check_code(code)
    sign = alaw & 0x80
    a = (alaw ^ sign) ^ ALAW_XOR

    if a < 45:
        if a < 24:
            u = (a << 1) + 1 if a < 8 else a + 8
        else:
            u = (a >> 1) + 20 if a < 32 else a + 4
    else:
        if a < 63:
            u = a + 3 if a < 47 else a + 2
        else:
            u = a + 1 if a < 79 else a

    return (u ^ sign) ^ _ULAW_MAGNITUDE_XOR


def ulaw_to_alaw_sample(code: int) -> int:
    """Convert one mu-law code to A-law."""

    ulaw = check_code(code)
    sign = ulaw & 0x80
    u = (ulaw ^ sign) ^ _ULAW_MAGNITUDE_XOR

    if u < 48:
        if u <= 32:
            a = u >> 1 if u <= 15 else u - 8
        else:
            a = (u << 1) - 40 if u <= 35 else u - 4
    else:
        if u <= 63:
            a = u - 3 if u == 48 else u - 2
        else:
            a = u - 1 if u <= 79 else u

    return (a ^ sign) ^ ALAW_XOR


def _table(convert) -> np.ndarray:
    table = np.array([convert(code) for code in range(256)], dtype=np.uint8)
    table.setflags(write=False)
    return table


ALAW_TO_ULAW_TABLE = _table(alaw_to_ulaw_sample)
ULAW_TO_ALAW_TABLE = _table(ulaw_to_alaw_sample)


def alaw_to_ulaw(alaw_bytes: bytes) -> bytes:
    """Convert A-law bytes to mu-law bytes."""

    return ALAW_TO_ULAW_TABLE[as_codes(alaw_bytes)].tobytes()


def ulaw_to_alaw(ulaw_bytes: bytes) -> bytes:
    """Convert mu-law bytes to A-law bytes."""

    return ULAW_TO_ALAW_TABLE[as_codes(ulaw_bytes)].tobytes()
