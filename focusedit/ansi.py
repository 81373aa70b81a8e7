"""ANSI-aware text measurement and line shaping utilities.

Provides clipping and horizontal slicing that preserve escape sequences,
so highlighted editor lines stay aligned with the cursor column.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


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
    """Return the display width of plain (unstyled) ``text``."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def pad_to_width(text: str, width: int) -> str:
    """Clip a styled line to ``width`` columns and pad it with spaces."""
    clipped = slice_ansi_line(text, 0, width)
    return clipped + " " * max(0, width - display_width(strip_ansi(clipped)))


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return a horizontal viewport of a styled line.

    The slice starts at ``start_cols`` display columns and includes up to
    ``max_cols`` columns. If the viewport begins after a color/style sequence,
    the latest pending SGR sequence is injected so visible text keeps the
    original styling. Tabs are expanded into spaces.
    """
    if max_cols <= 0 or not text:
        return ""
    if start_cols < 0:
        start_cols = 0

    out: list[str] = []
    col = 0
    shown = 0
    i = 0
    n = len(text)
    pending_sgr = ""
    injected_style = False
    while i < n and shown < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                is_sgr = seq.endswith("m")
                if is_sgr:
                    pending_sgr = seq
                if col >= start_cols:
                    out.append(seq)
                    if is_sgr:
                        injected_style = True
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w <= start_cols:
            col += w
            i += 1
            continue
        if not injected_style and pending_sgr:
            out.append(pending_sgr)
            injected_style = True
        if ch == "\t":
            # A tab straddling the viewport edge shows only its visible columns.
            for _ in range(w - max(0, start_cols - col)):
                if shown >= max_cols:
                    break
                out.append(" ")
                shown += 1
            col += w
            i += 1
            continue
        if shown + w > max_cols:
            break
        out.append(ch)
        shown += w
        col += w
        i += 1

    return "".join(out)
