"""ANSI-aware text measurement and cell shaping utilities.

Provides clipping, ellipsis truncation, and padding that preserve escape
sequences. These helpers keep the two panes aligned when color codes and wide
glyphs (emoji icons, CJK names) are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
ELLIPSIS = "..."


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible column width of ``text``, ignoring ANSI sequences."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    return "".join(out)


def truncate_with_ellipsis(text: str, max_cols: int) -> str:
    """Shorten ``text`` to ``max_cols`` columns with a trailing ellipsis.

    Text that already fits is returned unchanged. Styled text gets a reset
    before the ellipsis so the marker never inherits a half-open style.
    """
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    keep = max(0, max_cols - len(ELLIPSIS))
    clipped = clip_ansi_line(text, keep)
    if "\x1b" in clipped:
        clipped += "\033[0m"
    return clipped + ELLIPSIS[: max_cols - keep]


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces to exactly ``width`` display columns."""
    used = display_width(text)
    if used >= width:
        return text
    return text + " " * (width - used)


__all__ = [
    "ANSI_ESCAPE_RE",
    "ELLIPSIS",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "pad_to_width",
    "truncate_with_ellipsis",
]
