"""Reduce a heading's inline events to text.

flatten() produces the plain text used for both the anchor and the default
entry text. to_markup() keeps emphasis, strong, strikethrough and code
markup for callers that want formatted entries.

Example:
    >>> from marktoc.events import Code, Text
    >>> flatten([Text("Subheading with "), Code("code")])
    'Subheading with code'
    >>> to_markup([Text("Subheading with "), Code("code")])
    'Subheading with `code`'
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from marktoc.events import Code, End, Event, HardBreak, Html, SoftBreak, Start, Tag, Text

_LINK_TEXT_SPECIAL_RE = re.compile(r"([\\\[\]])")
_BACKTICK_RUN_RE = re.compile(r"`+")

_MARKUP_DELIMITERS = {
    Tag.EMPHASIS: "*",
    Tag.STRONG: "**",
    Tag.STRIKETHROUGH: "~~",
}


def flatten(events: Iterable[Event]) -> str:
    """Concatenate the textual content of inline events.

    Text and code span contents are kept, markup and link destinations are
    dropped, line breaks become a single space. Raw HTML contributes nothing.

    Args:
        events: Inline events between a heading's Start and End

    Returns:
        Plain text
    """
    parts: list[str] = []
    for event in events:
        match event:
            case Text(content=content) | Code(content=content):
                parts.append(content)
            case SoftBreak() | HardBreak():
                parts.append(" ")
            case _:
                pass
    return "".join(parts)


def _code_span(code: str) -> str:
    """Wrap code in a backtick fence that cannot be closed from inside."""
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(code)), default=0)
    fence = "`" * (longest + 1)
    if code.startswith("`") or code.endswith("`"):
        code = f" {code} "
    return f"{fence}{code}{fence}"


def to_markup(events: Iterable[Event]) -> str:
    """Render inline events back to Markdown suitable for link text.

    Emphasis, strong, strikethrough and code spans keep their markup. Links
    and images are reduced to their text since link text cannot contain a
    link. Literal brackets and backslashes in text are escaped.

    Args:
        events: Inline events between a heading's Start and End

    Returns:
        Markdown source for the heading content
    """
    parts: list[str] = []
    for event in events:
        match event:
            case Text(content=content):
                parts.append(escape_link_text(content))
            case Code(content=content):
                parts.append(_code_span(content))
            case Html(content=content):
                parts.append(content)
            case SoftBreak() | HardBreak():
                parts.append(" ")
            case Start(tag=tag) | End(tag=tag) if tag in _MARKUP_DELIMITERS:
                parts.append(_MARKUP_DELIMITERS[tag])
            case _:
                pass
    return "".join(parts)


def escape_link_text(text: str) -> str:
    r"""Backslash-escape characters that would end or nest link text.

    Example:
        >>> escape_link_text("[WIP] a\\b")
        '\\[WIP\\] a\\\\b'
    """
    return _LINK_TEXT_SPECIAL_RE.sub(r"\\\1", text)


__all__ = [
    "escape_link_text",
    "flatten",
    "to_markup",
]
