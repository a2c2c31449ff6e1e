"""Heading extraction and the TableOfContents container.

A single pass over the event stream collects every heading in document
order, flattens its inline content and assigns a unique anchor.

Example:
    >>> toc = TableOfContents("# Heading\\n\\n## Subheading\\n")
    >>> [(h.level, h.text, h.anchor) for h in toc.headings()]
    [(1, 'Heading', 'heading'), (2, 'Subheading', 'subheading')]
    >>> print(toc.to_list_markup(), end="")
    - [Heading](#heading)
      - [Subheading](#subheading)

Thread Safety:
Heading and TableOfContents are immutable after construction. Anchor state
is local to each extract_headings() call.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from marktoc.config import get_render_options
from marktoc.errors import EventStreamError
from marktoc.events import End, Event, Start, Tag
from marktoc.flatten import escape_link_text, flatten, to_markup
from marktoc.slug import AnchorRegistry
from marktoc.slug import slugify as default_slugify
from marktoc.utils.logger import get_logger

if TYPE_CHECKING:
    from marktoc.config import RenderOptions
    from marktoc.protocols import EventSource, Slugifier

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Heading:
    """A heading in the source document.

    Attributes:
        level: Nesting depth as written in the source (1 = top level)
        text: Heading content with all markup removed
        anchor: Link target, unique within its table of contents
        events: Raw inline events between the heading's Start and End

    """

    level: int
    text: str
    anchor: str
    events: tuple[Event, ...] = field(default=(), compare=False, repr=False)

    @property
    def markup(self) -> str:
        """Heading content rendered back to Markdown, escaped for link text."""
        if not self.events:
            return escape_link_text(self.text)
        return to_markup(self.events)


def extract_headings(
    events: Iterable[Event],
    *,
    slugify: Slugifier | None = None,
) -> tuple[Heading, ...]:
    """Collect headings from an event stream.

    Args:
        events: Parser events in document order
        slugify: Anchor algorithm (GitHub-compatible by default)

    Returns:
        Headings in document order with unique anchors

    Raises:
        EventStreamError: A heading end arrives without a start, or the
            stream ends inside a heading
    """
    slugify = slugify or default_slugify
    registry = AnchorRegistry()
    headings: list[Heading] = []

    level: int | None = None
    inline: list[Event] = []

    for index, event in enumerate(events):
        match event:
            case Start(tag=Tag.HEADING):
                level = event.level
                inline = []
            case End(tag=Tag.HEADING):
                if level is None:
                    raise EventStreamError("heading end without matching start", index)
                text = flatten(inline)
                anchor = registry.register(slugify(text))
                headings.append(Heading(level, text, anchor, tuple(inline)))
                level = None
            case _ if level is not None:
                inline.append(event)
            case _:
                pass

    if level is not None:
        raise EventStreamError("event stream ended inside a heading")

    logger.debug("Extracted %d headings", len(headings))
    return tuple(headings)


class TableOfContents:
    """Headings of one Markdown document and their nested-list rendering.

    Usage:
        >>> toc = TableOfContents("# Foo\\n\\n# Foo\\n")
        >>> [h.anchor for h in toc]
        ['foo', 'foo-1']

        >>> # Already-parsed documents
        >>> toc = TableOfContents.from_events(MarkdownItSource().events("# Hi"))

    """

    __slots__ = ("_headings",)

    def __init__(
        self,
        text: str,
        *,
        source: EventSource | None = None,
        slugify: Slugifier | None = None,
    ) -> None:
        """Parse text and extract its headings.

        Args:
            text: Markdown document
            source: Parser to use (markdown-it-py with GFM tables and
                strikethrough by default)
            slugify: Anchor algorithm (GitHub-compatible by default)
        """
        if source is None:
            from marktoc.parsing import MarkdownItSource

            source = MarkdownItSource()
        self._headings = extract_headings(source.events(text), slugify=slugify)

    @classmethod
    def from_events(
        cls,
        events: Iterable[Event],
        *,
        slugify: Slugifier | None = None,
    ) -> TableOfContents:
        """Build a table of contents from an existing event stream."""
        toc = cls.__new__(cls)
        toc._headings = extract_headings(events, slugify=slugify)
        return toc

    def headings(self) -> tuple[Heading, ...]:
        """Headings in document order."""
        return self._headings

    def to_list_markup(self, options: RenderOptions | None = None) -> str:
        """Render as a nested Markdown list.

        Args:
            options: Layout options (defaults to the context's options)

        Returns:
            One ``- [text](#anchor)`` line per heading, each ending in a
            newline; empty string when there are no headings
        """
        from marktoc.render import render_list

        return render_list(self._headings, options or get_render_options())

    def __iter__(self) -> Iterator[Heading]:
        return iter(self._headings)

    def __len__(self) -> int:
        return len(self._headings)

    def __repr__(self) -> str:
        return f"TableOfContents(headings={len(self._headings)})"
