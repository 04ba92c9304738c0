"""Line reading and small text parsing helpers for scene files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .errors import MapError

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield each newline-terminated line without its newline.

    A final fragment that has no terminating newline is not yielded.
    """
    for line in stream:
        if not line.endswith("\n"):
            return
        yield line[:-1]


def is_all_whitespace(text: str) -> bool:
    """True if every character is a space or one of tab to carriage return."""
    return all(ch in _WHITESPACE for ch in text)


def parse_channel(text: str) -> int:
    """Parse one colour channel: one to three ASCII digits, at most 255."""
    if not text or len(text) > 3 or not all(ch in _DIGITS for ch in text):
        raise ValueError(f"invalid colour channel {text!r}")
    value = int(text)
    if value > 255:
        raise ValueError(f"colour channel out of range {text!r}")
    return value


def parse_rgb(parts: Sequence[str]) -> int:
    """Parse three channel strings into an opaque 0xRRGGBBAA colour."""
    if len(parts) != 3:
        raise MapError("Invalid color format.")
    try:
        red, green, blue = (parse_channel(part) for part in parts)
    except ValueError as exc:
        raise MapError("Invalid color format.") from exc
    return (red << 24) + (green << 16) + (blue << 8) + 255


def count_commas(text: str | None) -> int:
    """Count the commas in text; None counts as none."""
    return text.count(",") if text else 0