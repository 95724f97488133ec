"""Preview text loading, sanitization, and syntax highlighting.

File excerpts are decoded as text unconditionally (binary files render as
garbage, never crash). Terminal control bytes are neutralized before display
so an excerpt cannot drive the terminal.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_LINE_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")

_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1, which accepts any byte
    sequence. ``OSError`` from the read itself propagates to the caller.
    """
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_text(encoding="latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def sanitize_single_line(text: str) -> str:
    """Escape every control byte, line breaks and tabs included.

    Used for file names and paths, which must occupy exactly one screen row.
    """
    if _LINE_CONTROL_RE.search(text) is None:
        return text
    return _LINE_CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def normalize_style(style: str | None) -> str:
    """Validate/canonicalize requested style name with cache-backed checks."""
    if not style:
        return DEFAULT_STYLE
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    """Return cached Pygments terminal formatter for style name."""
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Colorize ``source`` for ``path`` with Pygments.

    Lexers keep leading/trailing newlines so the colored text has the same
    line structure as ``source``. Falls back to ``source`` when Pygments
    produces no escape sequences.
    """
    if not source:
        return source
    formatter = _formatter_for_style(normalize_style(style))
    try:
        lexer = get_lexer_for_filename(path.name, source, stripnl=False, ensurenl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False, ensurenl=False)

    rendered = pygments_highlight(source, lexer, formatter)
    if "\x1b[" not in rendered:
        return source
    if rendered.endswith("\n") and not source.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


__all__ = [
    "DEFAULT_STYLE",
    "colorize_source",
    "normalize_style",
    "read_text",
    "sanitize_single_line",
    "sanitize_terminal_text",
]
