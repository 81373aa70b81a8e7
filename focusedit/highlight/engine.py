"""Single-pass regex highlighting with markup and terminal renderers.

Text is tokenized once into non-overlapping spans and rendered at the end,
so later rules never re-match markup inserted for earlier ones. The markup
renderer does not escape text; feeding its output back in re-matches the
inserted ``style="..."`` attributes and tags, so highlighting is not
idempotent.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import NamedTuple

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalTrueColorFormatter
from pygments.style import Style

from .rules import DEFAULT_COLORS, LEXERS, RULE_SETS, HighlightClass, class_for_token

SPAN_TEMPLATE = '<span style="color: {color}">{text}</span>'

_FORMATTERS: dict[tuple[object, ...], TerminalTrueColorFormatter] = {}


class Span(NamedTuple):
    start: int
    end: int
    cls: HighlightClass | None
    text: str


def normalize_extension(extension: str) -> str:
    """Accept ``".go"``, ``"go"`` or a file path and return ``".go"`` form.

    Case is kept: ``main.GO`` has extension ``".GO"``, which has no rule set.
    """
    if not extension:
        return ""
    if extension.startswith(".") and "." not in extension[1:] and os.sep not in extension:
        return extension
    if "." in os.path.basename(extension):
        return os.path.splitext(extension)[1]
    return f".{extension}"


def tokenize(text: str, extension: str) -> list[Span]:
    """Split ``text`` into classified spans for the rule set of ``extension``.

    Concatenating the span texts yields ``text`` exactly. Unknown extensions
    produce a single unclassified span.
    """
    extension = normalize_extension(extension)
    lexer_cls = LEXERS.get(extension)
    if lexer_cls is None or not text:
        return [Span(0, len(text), None, text)] if text else []

    spans: list[Span] = []
    for index, token, value in lexer_cls().get_tokens_unprocessed(text):
        cls = class_for_token(token, extension)
        if cls is None and spans and spans[-1].cls is None:
            previous = spans[-1]
            spans[-1] = Span(previous.start, index + len(value), None, previous.text + value)
            continue
        spans.append(Span(index, index + len(value), cls, value))
    return spans


def render_markup(spans: list[Span], colors: Mapping[HighlightClass, str] | None = None) -> str:
    palette = DEFAULT_COLORS if colors is None else colors
    out: list[str] = []
    for span in spans:
        if span.cls is None:
            out.append(span.text)
        else:
            out.append(SPAN_TEMPLATE.format(color=palette[span.cls], text=span.text))
    return "".join(out)


def highlight(text: str, extension: str, colors: Mapping[HighlightClass, str] | None = None) -> str:
    """Wrap rule matches of ``text`` in color spans; unknown extensions pass through."""
    if normalize_extension(extension) not in RULE_SETS:
        return text
    return render_markup(tokenize(text, extension), colors)


def _style_for(colors: Mapping[HighlightClass, str], extension: str) -> type[Style]:
    styles = {rule.token: colors[rule.cls] for rule in RULE_SETS[extension]}
    return type("RuleSetStyle", (Style,), {"styles": styles})


def _formatter_for(colors: Mapping[HighlightClass, str], extension: str) -> TerminalTrueColorFormatter:
    key = (extension, *sorted((cls.value, color) for cls, color in colors.items()))
    formatter = _FORMATTERS.get(key)
    if formatter is not None:
        return formatter
    formatter = TerminalTrueColorFormatter(style=_style_for(colors, extension))
    _FORMATTERS[key] = formatter
    return formatter


def highlight_ansi(
    text: str,
    extension: str,
    no_color: bool = False,
    colors: Mapping[HighlightClass, str] | None = None,
) -> str:
    """Render the same spans as 24-bit ANSI color for terminal panes.

    Colors are closed at every newline, so each output line can be clipped on
    its own.
    """
    extension = normalize_extension(extension)
    lexer_cls = LEXERS.get(extension)
    if no_color or lexer_cls is None or not text:
        return text
    palette = DEFAULT_COLORS if colors is None else colors
    lexer = lexer_cls(stripnl=False, ensurenl=False)
    return pygments_highlight(text, lexer, _formatter_for(palette, extension))
