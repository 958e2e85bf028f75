"""Codec exceptions.

The scalar and array transforms are total over their domains; these are only
raised for caller contract violations at the buffer and registry layers.
"""

from __future__ import annotations


class CodecError(Exception):
    default_detail: str = "Codec error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class BufferTooSmallError(CodecError):
    default_detail = "Buffer too small."

    def __init__(self, buffer: str, required: int, available: int) -> None:
        super().__init__(f"{buffer} buffer too small: need {required} bytes, have {available}")
        self.buffer = buffer
        self.required = required
        self.available = available


class UnknownLawError(CodecError, ValueError):
    default_detail = "Unknown companding law."
