from __future__ import annotations

from typing import Any

import numpy as np

from bktreex.errors import EncodingError, UnsupportedTypeError

TEXT_TYPES = (str, bytes, bytearray, memoryview)

U32 = np.uint32


def is_text(value: Any) -> bool:
    return isinstance(value, TEXT_TYPES)


def as_text(value: Any) -> str:
    """Decode ``value`` into a ``str``; byte strings must be valid UTF-8."""

    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(
                f"Operand is not valid UTF-8 (byte {exc.start}: {exc.reason})."
            ) from exc
    raise UnsupportedTypeError(
        f"Expected text or UTF-8 bytes, got {type(value).__name__}."
    )


def as_codepoints(value: Any) -> np.ndarray:
    """Return the Unicode codepoints of ``value`` as a ``uint32`` array."""

    # Lone surrogates in a str are kept as codepoints, as str iteration does.
    encoded = as_text(value).encode("utf-32-le", "surrogatepass")
    return np.frombuffer(encoded, dtype=U32)


__all__ = ["TEXT_TYPES", "as_codepoints", "as_text", "is_text"]
