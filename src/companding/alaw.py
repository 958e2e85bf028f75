"""G.711 A-law encoding and decoding."""

from __future__ import annotations

import numpy as np

from companding.samples import as_codes, as_pcm16, check_code, check_sample
from companding.segments import segment, segment_array

# A-law inverts alternate bits for transmission.
ALAW_XOR = 0x55
ALAW_SILENCE = 0xD5


def alaw_encode_sample(sample: int) -> int:
    """Encode one PCM16 sample into an A-law code."""

    p = check_sample(sample)
    if p < 0:
        # Ones' complement keeps the quantizer symmetric around zero.
        p = ~p
        a = 0x00
    else:
        a = 0x80

    seg, interval = segment(p >> 4)
    return (a + seg + interval) ^ ALAW_XOR


def alaw_decode_sample(code: int) -> int:
    """Decode one A-law code into the centre of its PCM16 bucket."""

    a = check_code(code) ^ ALAW_XOR
    sign = a & 0x80
    linear = ((a & 0x1F) << 4) + 8  # +8 is the half step

    a &= 0x7F
    if a >= 0x20:
        linear |= 0x100
        linear <<= (a >> 4) - 1

    return linear if sign else -linear


def alaw_encode(pcm16: np.ndarray) -> bytes:
    """Encode a PCM16 array to A-law bytes."""

    x = as_pcm16(pcm16)
    if x.size == 0:
        return b""

    negative = x < 0
    magnitude = np.where(negative, ~x, x) >> 4
    seg, interval = segment_array(magnitude)

    alaw = np.where(negative, 0x00, 0x80) + seg + interval
    return (alaw ^ ALAW_XOR).astype(np.uint8).tobytes()


def alaw_decode(alaw_bytes: bytes) -> np.ndarray:
    """Decode A-law bytes to a PCM16 int16 array."""

    a = as_codes(alaw_bytes) ^ ALAW_XOR
    if a.size == 0:
        return np.zeros(0, dtype=np.int16)

    linear = ((a & 0x1F) << 4) + 8
    shift = ((a & 0x7F) >> 4) - 1
    linear = np.where(shift >= 1, (linear | 0x100) << np.maximum(shift, 0), linear)

    pcm = np.where(a & 0x80, linear, -linear)
    return pcm.astype(np.int16)
