"""Terminal text helpers: grapheme segmentation and display width.

Currency strings mix ASCII digits with symbols such as ``€``, ``₹`` or
``￥`` and no-break spaces, so widths are measured per grapheme cluster.
"""

from __future__ import annotations

import re

import grapheme
import wcwidth as _wcwidth

_ANSI_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"  # CSI
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)


def graphemes(text: str) -> list[str]:
    """Split *text* into user-perceived characters."""
    return list(grapheme.graphemes(text))


def last_grapheme_length(text: str) -> int:
    """Code-unit length of the grapheme that ends *text* (0 when empty)."""
    clusters = graphemes(text)
    return len(clusters[-1]) if clusters else 0


def first_grapheme_length(text: str) -> int:
    """Code-unit length of the grapheme that starts *text* (0 when empty)."""
    clusters = graphemes(text)
    return len(clusters[0]) if clusters else 0


def _grapheme_width(g: str) -> int:
    cp = ord(g[0])
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    return max(_wcwidth.wcswidth(g), 0) if len(g) > 1 else max(_wcwidth.wcwidth(g), 0)


def visible_width(text: str) -> int:
    """Terminal columns needed to show *text*, ignoring ANSI styling."""
    stripped = _ANSI_RE.sub("", text)
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)
    return sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))


def is_control_input(data: str) -> bool:
    """``True`` when *data* contains C0/C1 control characters."""
    return any(ord(ch) < 32 or ord(ch) == 0x7F or 0x80 <= ord(ch) <= 0x9F for ch in data)
