"""Buffer-level transforms over caller-owned memory.

Each wrapper has the shape ``(dst, src, src_size=None) -> int``. ``src`` and
``dst`` may be any C-contiguous object exposing the buffer protocol and
``src_size`` is a byte count. Linear PCM is 16-bit signed in native byte
order; companded buffers hold one byte per sample.

All bounds are checked before the first write, so a failed call leaves
``dst`` untouched. Encoders and converters return the number of samples
written; decoders return the number of bytes written (two per sample).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from companding.alaw import alaw_decode, alaw_encode
from companding.errors import BufferTooSmallError
from companding.samples import PCM16_WIDTH
from companding.transcode import alaw_to_ulaw, ulaw_to_alaw
from companding.ulaw import ulaw_decode, ulaw_encode

LOGGER = logging.getLogger(__name__)

_Transform = Callable[[memoryview], np.ndarray]


def _source_view(src, src_size: int | None) -> memoryview:
    view = memoryview(src).cast("B")
    if src_size is None:
        return view
    if src_size < 0:
        raise ValueError(f"src_size must be non-negative, got {src_size}")
    if src_size > view.nbytes:
        LOGGER.debug("Rejecting source of %s bytes for src_size=%s", view.nbytes, src_size)
        raise BufferTooSmallError("source", src_size, view.nbytes)
    return view[:src_size]


def _target_view(dst, required: int) -> memoryview:
    view = memoryview(dst).cast("B")
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    if view.nbytes < required:
        LOGGER.debug("Rejecting destination of %s bytes, need %s", view.nbytes, required)
        raise BufferTooSmallError("destination", required, view.nbytes)
    return view


def _run(dst, src, src_size: int | None, *, in_width: int, out_width: int, transform: _Transform) -> int:
    source = _source_view(src, src_size)
    count = source.nbytes // in_width
    required = count * out_width
    target = _target_view(dst, required)

    if count:
        out = np.frombuffer(target, dtype=np.uint8, count=required)
        out[:] = transform(source[: count * in_width])
    return count


def _encoder(encode: Callable[[np.ndarray], bytes]) -> _Transform:
    def transform(source: memoryview) -> np.ndarray:
        return np.frombuffer(encode(np.frombuffer(source, dtype=np.int16)), dtype=np.uint8)

    return transform


def _decoder(decode: Callable[[bytes], np.ndarray]) -> _Transform:
    def transform(source: memoryview) -> np.ndarray:
        return decode(source).view(np.uint8)

    return transform


def _converter(convert: Callable[[bytes], bytes]) -> _Transform:
    def transform(source: memoryview) -> np.ndarray:
        return np.frombuffer(convert(source), dtype=np.uint8)

    return transform


def alaw_encode_into(dst, src, src_size: int | None = None) -> int:
    """Encode native PCM16 from ``src`` into A-law codes in ``dst``."""

    return _run(dst, src, src_size, in_width=PCM16_WIDTH, out_width=1, transform=_encoder(alaw_encode))


def alaw_decode_into(dst, src, src_size: int | None = None) -> int:
    """Decode A-law codes from ``src`` into native PCM16 in ``dst``.

    Returns:
        Bytes written to ``dst``.
    """

    count = _run(dst, src, src_size, in_width=1, out_width=PCM16_WIDTH, transform=_decoder(alaw_decode))
    return count * PCM16_WIDTH


def ulaw_encode_into(dst, src, src_size: int | None = None) -> int:
    """Encode native PCM16 from ``src`` into mu-law codes in ``dst``."""

    return _run(dst, src, src_size, in_width=PCM16_WIDTH, out_width=1, transform=_encoder(ulaw_encode))


def ulaw_decode_into(dst, src, src_size: int | None = None) -> int:
    """Decode mu-law codes from ``src`` into native PCM16 in ``dst``.

    Returns:
        Bytes written to ``dst``.
    """

    count = _run(dst, src, src_size, in_width=1, out_width=PCM16_WIDTH, transform=_decoder(ulaw_decode))
    return count * PCM16_WIDTH


def alaw_to_ulaw_into(dst, src, src_size: int | None = None) -> int:
    return _run(dst, src, src_size, in_width=1, out_width=1, transform=_converter(alaw_to_ulaw))


def ulaw_to_alaw_into(dst, src, src_size: int | None = None) -> int:
    return _run(dst, src, src_size, in_width=1, out_width=1, transform=_converter(ulaw_to_alaw))
