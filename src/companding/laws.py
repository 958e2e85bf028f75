"""Lookup of the buffer transforms by law name."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, get_args

from companding import buffers
from companding.errors import UnknownLawError

LawName = Literal["alaw", "ulaw"]
LAW_NAMES: tuple[str, ...] = get_args(LawName)

BufferTransform = Callable[..., int]


@dataclass(frozen=True, slots=True)
class Codec:
    name: LawName
    encode_into: BufferTransform
    decode_into: BufferTransform


_CODECS: dict[str, Codec] = {
    "alaw": Codec(name="alaw", encode_into=buffers.alaw_encode_into, decode_into=buffers.alaw_decode_into),
    "ulaw": Codec(name="ulaw", encode_into=buffers.ulaw_encode_into, decode_into=buffers.ulaw_decode_into),
}

_CONVERSIONS: dict[tuple[str, str], BufferTransform] = {
    ("alaw", "ulaw"): buffers.alaw_to_ulaw_into,
    ("ulaw", "alaw"): buffers.ulaw_to_alaw_into,
}


def get_codec(name: str) -> Codec:
    """Return the codec registered under ``name`` (case-insensitive).

    Raises:
        UnknownLawError: if ``name`` is not a known law.
    """

    codec = _CODECS.get(name.lower())
    if codec is None:
        raise UnknownLawError(f"Unknown companding law: {name!r} (expected one of {', '.join(LAW_NAMES)})")
    return codec


def conversion_for(source: str, target: str) -> BufferTransform | None:
    """Return the direct conversion wrapper, or ``None`` when the laws match."""

    src = get_codec(source).name
    dst = get_codec(target).name
    if src == dst:
        return None
    return _CONVERSIONS[(src, dst)]
