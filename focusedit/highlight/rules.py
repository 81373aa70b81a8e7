"""Per-extension highlight rule sets and the lexers compiled from them.

Each rule set is an ordered sequence of ``(class, token, pattern)`` rules.
At any text position the first rule that matches wins, so order decides
overlaps (a ``//`` inside a Go string stays part of the string, a keyword
inside a comment stays part of the comment).
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from pygments.lexer import RegexLexer
from pygments.token import Comment, Keyword, Name, Punctuation, String, Text, _TokenType


class HighlightClass(enum.Enum):
    INFO = "info"
    WARNING = "warning"
    ACCENT = "accent"


DEFAULT_COLORS: dict[HighlightClass, str] = {
    HighlightClass.INFO: "#00ADD8",
    HighlightClass.WARNING: "#FFA500",
    HighlightClass.ACCENT: "#98C379",
}


class Rule(NamedTuple):
    cls: HighlightClass
    token: _TokenType
    pattern: str


DOUBLE_QUOTED_STRING = r'"[^"]*"'

GO_KEYWORDS = (
    r"\b(func|package|import|return|if|else|for|range|var|type|struct|interface"
    r"|map|chan|go|defer|select|case|default|break|continue|switch)\b"
)

GO_RULES: tuple[Rule, ...] = (
    Rule(HighlightClass.ACCENT, Comment.Single, r"//.*$"),
    Rule(HighlightClass.WARNING, String.Double, DOUBLE_QUOTED_STRING),
    Rule(HighlightClass.INFO, Keyword, GO_KEYWORDS),
)

JSON_RULES: tuple[Rule, ...] = (
    Rule(HighlightClass.WARNING, String.Double, DOUBLE_QUOTED_STRING),
    Rule(HighlightClass.INFO, Keyword.Constant, r"\b(true|false|null)\b"),
    Rule(HighlightClass.ACCENT, Punctuation, r"[{}\[\],]"),
)

XML_RULES: tuple[Rule, ...] = (
    Rule(HighlightClass.ACCENT, Comment.Multiline, r"<!--.*?-->"),
    Rule(HighlightClass.INFO, Name.Tag, r"<[^>]+>"),
    Rule(HighlightClass.WARNING, String.Double, DOUBLE_QUOTED_STRING),
)

RULE_SETS: dict[str, tuple[Rule, ...]] = {
    ".go": GO_RULES,
    ".json": JSON_RULES,
    ".xml": XML_RULES,
}


def _root_state(rules: tuple[Rule, ...]) -> list[tuple[str, _TokenType]]:
    # Unmatched text is consumed a word, a whitespace run, or a char at a time
    # so ``\b``-anchored rules never fire in the middle of an identifier.
    return [(rule.pattern, rule.token) for rule in rules] + [
        (r"\w+", Text),
        (r"\s+", Text),
        (r".", Text),
    ]


class GoRuleLexer(RegexLexer):
    name = "Go (rule set)"
    tokens = {"root": _root_state(GO_RULES)}


class JsonRuleLexer(RegexLexer):
    name = "JSON (rule set)"
    tokens = {"root": _root_state(JSON_RULES)}


class XmlRuleLexer(RegexLexer):
    name = "XML (rule set)"
    tokens = {"root": _root_state(XML_RULES)}


LEXERS: dict[str, type[RegexLexer]] = {
    ".go": GoRuleLexer,
    ".json": JsonRuleLexer,
    ".xml": XmlRuleLexer,
}


def class_for_token(token: _TokenType, extension: str) -> HighlightClass | None:
    """Map a lexer token back to the highlight class of the rule that produced it."""
    for rule in RULE_SETS.get(extension, ()):
        if token is rule.token:
            return rule.cls
    return None


def supported_extensions() -> tuple[str, ...]:
    return tuple(RULE_SETS)


__all__ = [
    "DEFAULT_COLORS",
    "GO_RULES",
    "JSON_RULES",
    "LEXERS",
    "RULE_SETS",
    "XML_RULES",
    "HighlightClass",
    "Rule",
    "class_for_token",
    "supported_extensions",
]
