"""Parser-neutral event model.

A Markdown parser is reduced to a flat stream of events: paired ``Start`` /
``End`` events for container structures and leaf events for inline content.
The heading extractor depends only on this shape, never on a particular
parser's token types.

Event Stream:
    # Hello *World*

    Start(tag=Tag.HEADING, level=1)
    Text(content="Hello ")
    Start(tag=Tag.EMPHASIS)
    Text(content="World")
    End(tag=Tag.EMPHASIS)
    End(tag=Tag.HEADING)

Thread Safety:
All events are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias


class Tag(Enum):
    """Container kinds that open with ``Start`` and close with ``End``."""

    # Block containers
    HEADING = auto()
    PARAGRAPH = auto()
    BLOCK_QUOTE = auto()
    LIST = auto()
    ITEM = auto()
    CODE_BLOCK = auto()
    TABLE = auto()
    TABLE_ROW = auto()
    TABLE_CELL = auto()

    # Inline containers
    EMPHASIS = auto()
    STRONG = auto()
    STRIKETHROUGH = auto()
    LINK = auto()
    IMAGE = auto()


@dataclass(frozen=True, slots=True)
class Start:
    """Opening of a container.

    ``level`` is set for headings (1-6); ``url`` for links and images.
    """

    tag: Tag
    level: int = 0
    url: str = ""


@dataclass(frozen=True, slots=True)
class End:
    """Closing of the most recently opened container."""

    tag: Tag


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text, with entities and backslash escapes already resolved."""

    content: str


@dataclass(frozen=True, slots=True)
class Code:
    """Code span contents without the backtick delimiters."""

    content: str


@dataclass(frozen=True, slots=True)
class Html:
    """Raw HTML, inline or block."""

    content: str


@dataclass(frozen=True, slots=True)
class SoftBreak:
    """Line ending inside a paragraph or heading."""


@dataclass(frozen=True, slots=True)
class HardBreak:
    """Explicit line break (trailing backslash or two spaces)."""


@dataclass(frozen=True, slots=True)
class Rule:
    """Thematic break."""


Event: TypeAlias = Start | End | Text | Code | Html | SoftBreak | HardBreak | Rule


__all__ = [
    "Code",
    "End",
    "Event",
    "HardBreak",
    "Html",
    "Rule",
    "SoftBreak",
    "Start",
    "Tag",
    "Text",
]
