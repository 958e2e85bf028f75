"""G.711 mu-law encoding and decoding.

Negative samples are folded with ones' complement before biasing, so the
code for ``-x - 1`` differs from the code for ``x`` only in the sign bit.
Magnitudes that exceed 15 bits after the bias saturate silently.
"""

from __future__ import annotations

import numpy as np

from companding.samples import as_codes, as_pcm16, check_code, check_sample
from companding.segments import segment, segment_array

ULAW_BIAS = 0x84
ULAW_CLIP = 0x7F00
# mu-law inverts every bit for transmission.
ULAW_XOR = 0xFF
ULAW_SILENCE = 0xFF


def ulaw_encode_sample(sample: int) -> int:
    """Encode one PCM16 sample into a mu-law code."""

    p = check_sample(sample)
    if p < 0:
        p = ~p
        sign = 0x80
    else:
        sign = 0x00

    p = min(p + ULAW_BIAS, ULAW_CLIP)
    seg, interval = segment(p >> 3)

    # interval always carries the leading 0x10 bit here, so drop it.
    return (sign | seg | (interval & 0x0F)) ^ ULAW_XOR


def ulaw_decode_sample(code: int) -> int:
    """Decode one mu-law code into the centre of its PCM16 bucket."""

    u = check_code(code) ^ ULAW_XOR

    linear = ((u & 0x0F) << 3) | ULAW_BIAS
    linear <<= (u >> 4) & 0x07
    linear -= ULAW_BIAS

    return -linear if u & 0x80 else linear


def ulaw_encode(pcm16: np.ndarray) -> bytes:
    """Encode PCM16 int16 array to G.711 mu-law bytes.

    This is a vectorized mu-law encoder suitable for realtime packetization.
    """

    x = as_pcm16(pcm16)
    if x.size == 0:
        return b""

    negative = x < 0
    magnitude = np.minimum(np.where(negative, ~x, x) + ULAW_BIAS, ULAW_CLIP)
    seg, interval = segment_array(magnitude >> 3)

    ulaw = np.where(negative, 0x80, 0x00) | seg | (interval & 0x0F)
    return (ulaw ^ ULAW_XOR).astype(np.uint8).tobytes()


def ulaw_decode(ulaw_bytes: bytes) -> np.ndarray:
    """Decode G.711 mu-law bytes to PCM16 int16 array."""

    u = as_codes(ulaw_bytes) ^ ULAW_XOR
    if u.size == 0:
        return np.zeros(0, dtype=np.int16)

    linear = ((u & 0x0F) << 3) | ULAW_BIAS
    linear = (linear << ((u >> 4) & 0x07)) - ULAW_BIAS

    pcm = np.where(u & 0x80, -linear, linear)
    return pcm.astype(np.int16)
