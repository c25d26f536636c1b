"""UTF-8 decoding and encoding plus helpers for codepoint sequences."""

import re
import sys
from collections.abc import Iterable, Sequence

_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)
_ULLONG_MAX = 2**64 - 1

# (mask, signature, sequence length, payload mask of the lead byte)
_LEAD_BYTES = (
    (0x80, 0x00, 1, 0x7F),
    (0xE0, 0xC0, 2, 0x1F),
    (0xF0, 0xE0, 3, 0x0F),
    (0xF8, 0xF0, 4, 0x07),
)

_C_WHITESPACE = " \t\n\v\f\r"

_INT_RE = re.compile(r"([+-]?)(\d+)")
_FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r")",
    re.IGNORECASE,
)


def _sequence_length(lead: int, offset: int) -> tuple[int, int]:
    for mask, signature, length, payload in _LEAD_BYTES:
        if lead & mask == signature:
            return length, lead & payload
    raise ValueError(f"invalid UTF-8 lead byte 0x{lead:02X} at offset {offset}")


def _decode(data: bytes) -> Iterable[int]:
    """Yield codepoints; stop silently at a truncated trailing sequence."""
    pos = 0
    end = len(data)
    while pos < end:
        length, value = _sequence_length(data[pos], pos)
        if pos + length > end:
            return
        for byte in data[pos + 1 : pos + length]:
            value = value << 6 | (byte & 0x3F)
        yield value
        pos += length


def utf8_len(data: bytes) -> int:
    """Count the complete UTF-8 characters in ``data``.

    A truncated sequence at the end is not counted; an invalid lead byte
    raises ValueError.
    """
    return sum(1 for _ in _decode(bytes(data)))


def utf8_codepoints(data: bytes, max_count: int | None = None) -> list[int]:
    """Decode ``data`` into codepoints, at most ``max_count`` of them."""
    result: list[int] = []
    if max_count is not None and max_count <= 0:
        return result
    for codepoint in _decode(bytes(data)):
        result.append(codepoint)
        if max_count is not None and len(result) >= max_count:
            break
    return result


def _narrow(codepoints: Iterable[int]) -> str:
    """Truncate every codepoint to 8 bits and stop at the first NUL."""
    text = "".join(chr(cp & 0xFF) for cp in codepoints)
    return text.split("\x00", 1)[0]


def codepoints_to_str(codepoints: Iterable[int]) -> str:
    """Build a string keeping only the low 8 bits of each codepoint."""
    return "".join(chr(cp & 0xFF) for cp in codepoints)


def str_to_codepoints(text: str) -> list[int]:
    """Return the codepoints of ``text``."""
    return [ord(ch) for ch in text]


def codepoints_equal(codepoints1: Sequence[int], codepoints2: Sequence[int]) -> bool:
    """Tell whether two codepoint sequences are identical."""
    return list(codepoints1) == list(codepoints2)


def codepoints_equal_str(codepoints: Sequence[int], text: str) -> bool:
    """Tell whether ``codepoints`` spells exactly ``text``."""
    return list(codepoints) == str_to_codepoints(text)


def codepoints_to_int(codepoints: Iterable[int]) -> int:
    """Parse a leading signed decimal integer, clamped to the 64-bit range.

    Leading whitespace is skipped, trailing text is ignored, and 0 is
    returned when no digits are found.
    """
    match = _INT_RE.match(_narrow(codepoints).lstrip(_C_WHITESPACE))
    if not match:
        return 0
    value = int(match.group(2))
    if match.group(1) == "-":
        value = -value
    return max(_LLONG_MIN, min(_LLONG_MAX, value))


def codepoints_to_uint(codepoints: Iterable[int]) -> int:
    """Parse a leading decimal integer as an unsigned 64-bit value.

    A leading minus sign negates modulo 2**64; magnitudes beyond the range
    saturate to 2**64 - 1.
    """
    match = _INT_RE.match(_narrow(codepoints).lstrip(_C_WHITESPACE))
    if not match:
        return 0
    magnitude = int(match.group(2))
    if magnitude > _ULLONG_MAX:
        return _ULLONG_MAX
    if match.group(1) == "-":
        return (-magnitude) % 2**64
    return magnitude


def codepoints_to_float(codepoints: Iterable[int]) -> float:
    """Parse a leading floating-point number; 0.0 when there is none."""
    match = _FLOAT_RE.match(_narrow(codepoints).lstrip(_C_WHITESPACE))
    if not match:
        return 0.0
    token = match.group(0)
    unsigned = token.lstrip("+-")
    if unsigned[:2].lower() == "0x":
        if "p" not in unsigned.lower() and unsigned.endswith("."):
            unsigned = unsigned[:-1]
        value = float.fromhex(unsigned)
        return -value if token.startswith("-") else value
    return float(token)


def utf8_encode(codepoint: int) -> bytes:
    """Encode one codepoint as UTF-8 without range checks."""
    if codepoint < 0x80:
        raw = (codepoint,)
    elif codepoint < 0x800:
        raw = (0xC0 | codepoint >> 6, 0x80 | codepoint & 0x3F)
    elif codepoint < 0x10000:
        raw = (
            0xE0 | codepoint >> 12,
            0x80 | codepoint >> 6 & 0x3F,
            0x80 | codepoint & 0x3F,
        )
    else:
        raw = (
            0xF0 | codepoint >> 18,
            0x80 | codepoint >> 12 & 0x3F,
            0x80 | codepoint >> 6 & 0x3F,
            0x80 | codepoint & 0x3F,
        )
    return bytes(b & 0xFF for b in raw)


def print_utf8_codepoints(codepoints: Iterable[int], end: str = "\n") -> None:
    """Write the codepoints as text to standard output followed by ``end``."""
    encoded = b"".join(utf8_encode(cp) for cp in codepoints)
    text = encoded.decode("utf-8", errors="replace")
    print(text, end=end, file=sys.stdout)