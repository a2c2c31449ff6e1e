"""marktoc: Markdown table of contents with GitHub-compatible anchors.

Extracts the headings of a Markdown document and renders them as a nested
list of links whose anchors match the ones GitHub generates.

Quick Start:
    >>> from marktoc import TableOfContents
    >>> toc = TableOfContents("# Heading\\n\\n## Subheading\\n\\n## Subheading with `code`\\n")
    >>> print(toc.to_list_markup(), end="")
    - [Heading](#heading)
      - [Subheading](#subheading)
      - [Subheading with code](#subheading-with-code)

    >>> # Restrict levels and change the layout
    >>> from marktoc import ItemSymbol, RenderOptions
    >>> toc.to_list_markup(RenderOptions(item_symbol=ItemSymbol.ASTERISK, min_level=2))
    '* [Subheading](#subheading)\\n* [Subheading with code](#subheading-with-code)\\n'

Custom Parsers:
    Any object with an ``events(text)`` method yielding marktoc events can
    replace the bundled markdown-it-py adapter:

    >>> toc = TableOfContents(text, source=MyEventSource())

Installation:
    pip install marktoc
"""

from marktoc.config import (
    ItemSymbol,
    ParseConfig,
    RenderOptions,
    get_render_options,
    render_options_context,
    reset_render_options,
    set_render_options,
)
from marktoc.errors import ConfigError, EventStreamError, MarktocError
from marktoc.events import Code, End, Event, HardBreak, Html, Rule, SoftBreak, Start, Tag, Text
from marktoc.flatten import escape_link_text, flatten, to_markup
from marktoc.parsing import MarkdownItSource
from marktoc.protocols import EventSource, Slugifier
from marktoc.render import render_list
from marktoc.slug import AnchorRegistry, slugify
from marktoc.toc import Heading, TableOfContents, extract_headings

__version__ = "0.1.0"


def construct(
    text: str,
    *,
    source: EventSource | None = None,
    slugify: Slugifier | None = None,
) -> TableOfContents:
    """Parse text and extract its headings in one pass.

    Args:
        text: Markdown document
        source: Parser to use (markdown-it-py by default)
        slugify: Anchor algorithm (GitHub-compatible by default)

    Returns:
        TableOfContents, empty if the document has no headings

    Example:
        >>> [h.anchor for h in construct("# Hello, World!").headings()]
        ['hello-world']
    """
    return TableOfContents(text, source=source, slugify=slugify)


def to_list_markup(text: str, options: RenderOptions | None = None) -> str:
    """Render the table of contents for text as a nested Markdown list.

    Example:
        >>> to_list_markup("# Foo\\n\\n# Foo\\n")
        '- [Foo](#foo)\\n- [Foo](#foo-1)\\n'
    """
    return TableOfContents(text).to_list_markup(options)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "construct",
    "to_list_markup",
    "TableOfContents",
    "Heading",
    "extract_headings",
    "render_list",
    # Anchors
    "slugify",
    "AnchorRegistry",
    # Text flattening
    "flatten",
    "to_markup",
    "escape_link_text",
    # Events
    "Event",
    "Tag",
    "Start",
    "End",
    "Text",
    "Code",
    "Html",
    "SoftBreak",
    "HardBreak",
    "Rule",
    # Collaborators
    "EventSource",
    "Slugifier",
    "MarkdownItSource",
    # Configuration
    "ItemSymbol",
    "ParseConfig",
    "RenderOptions",
    "get_render_options",
    "set_render_options",
    "reset_render_options",
    "render_options_context",
    # Errors
    "MarktocError",
    "EventStreamError",
    "ConfigError",
]
