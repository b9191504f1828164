# this_file: python/autofit/segment.py
"""
UTF-8 segmentation into codepoint units and normalized lines.

Segmentation never rejects input. Malformed byte sequences are grouped by the
same lead-byte rule as valid ones, so a stray continuation byte simply ends up
attached to the preceding unit (or forms a unit of its own at the start).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

AnyText = TypeVar("AnyText", str, bytes)


def is_lead_byte(byte: int) -> bool:
    """Return True unless ``byte`` is a UTF-8 continuation byte (``0b10xxxxxx``)."""
    return (byte & 0xC0) != 0x80


def _check_text(data: object) -> None:
    if not isinstance(data, (str, bytes)):
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")


def codepoint_count(data: str | bytes) -> int:
    """Count codepoints by counting lead bytes."""
    _check_text(data)
    if isinstance(data, str):
        return len(data)
    return sum(1 for byte in data if is_lead_byte(byte))


def _iter_byte_units(data: bytes) -> Iterator[bytes]:
    unit = bytearray()
    for byte in data:
        if is_lead_byte(byte) and unit:
            yield bytes(unit)
            unit.clear()
        unit.append(byte)
    if unit:
        yield bytes(unit)


def iter_codepoints(data: AnyText) -> Iterator[AnyText]:
    """
    Lazily yield one unit per codepoint, in source order.

    ``bytes`` input yields ``bytes`` units; ``str`` input is split on its
    UTF-8 encoding and each unit decoded back, yielding one ``str`` per
    codepoint. Each call starts a fresh scan.
    """
    _check_text(data)
    if isinstance(data, bytes):
        yield from _iter_byte_units(data)
        return
    # Lone surrogates cannot round-trip through strict UTF-8.
    for unit in _iter_byte_units(data.encode("utf-8", "surrogatepass")):
        yield unit.decode("utf-8", "surrogatepass")


def split_by_codepoint(data: AnyText) -> list[AnyText]:
    """Materialized :func:`iter_codepoints`."""
    return list(iter_codepoints(data))


def normalize_newlines(text: AnyText) -> AnyText:
    """Collapse ``\\r\\n`` then lone ``\\r`` into ``\\n``. Idempotent."""
    _check_text(text)
    if isinstance(text, bytes):
        return text.replace(b"\r\n", b"\n").replace(b"\r", b"\n")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_by_line(text: AnyText) -> list[AnyText]:
    """
    Split on line breaks after normalization, keeping empty lines.

    ``"a\\n\\nb"`` gives ``["a", "", "b"]``; a trailing newline gives a
    trailing empty line.
    """
    normalized = normalize_newlines(text)
    if isinstance(normalized, bytes):
        return normalized.split(b"\n")
    return normalized.split("\n")
