"""Cosmetic regex highlighting for a fixed set of file extensions."""

from __future__ import annotations

from .engine import Span, highlight, highlight_ansi, normalize_extension, render_markup, tokenize
from .rules import DEFAULT_COLORS, RULE_SETS, HighlightClass, Rule, supported_extensions

__all__ = [
    "DEFAULT_COLORS",
    "RULE_SETS",
    "HighlightClass",
    "Rule",
    "Span",
    "highlight",
    "highlight_ansi",
    "normalize_extension",
    "render_markup",
    "supported_extensions",
    "tokenize",
]
