"""markdown-it-py as an event source.

Walks the flat token list produced by ``MarkdownIt.parse`` and translates it
into marktoc events. Block tokens with ``_open``/``_close`` suffixes become
``Start``/``End`` pairs; each ``inline`` token is expanded into its children.

The adapter never validates: markdown-it-py guarantees open/close pairing,
and anything it raises propagates unchanged to the caller.

Example:
    >>> source = MarkdownItSource()
    >>> list(source.events("# Hi"))
    [Start(tag=<Tag.HEADING: 1>, level=1, url=''), Text(content='Hi'), End(tag=<Tag.HEADING: 1>)]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

from marktoc.config import ParseConfig
from marktoc.events import Code, End, Event, HardBreak, Html, Rule, SoftBreak, Start, Tag, Text
from marktoc.utils.logger import get_logger

logger = get_logger(__name__)

# Token type without its _open/_close suffix -> container tag
_CONTAINER_TAGS: dict[str, Tag] = {
    "paragraph": Tag.PARAGRAPH,
    "blockquote": Tag.BLOCK_QUOTE,
    "bullet_list": Tag.LIST,
    "ordered_list": Tag.LIST,
    "list_item": Tag.ITEM,
    "table": Tag.TABLE,
    "tr": Tag.TABLE_ROW,
    "th": Tag.TABLE_CELL,
    "td": Tag.TABLE_CELL,
    "em": Tag.EMPHASIS,
    "strong": Tag.STRONG,
    "s": Tag.STRIKETHROUGH,
    "link": Tag.LINK,
}

# Paired tokens that carry no information for a table of contents
_IGNORED_CONTAINERS = frozenset({"thead", "tbody"})


def create_markdown_it(config: ParseConfig | None = None) -> MarkdownIt:
    """Build a CommonMark parser with the GFM rules the config enables."""
    config = config or ParseConfig()
    md = MarkdownIt("commonmark", {"html": config.html_enabled})
    if config.tables_enabled:
        md.enable("table")
    if config.strikethrough_enabled:
        md.enable("strikethrough")
    return md


class MarkdownItSource:
    """EventSource backed by markdown-it-py.

    Usage:
        >>> source = MarkdownItSource(ParseConfig(tables_enabled=False))
        >>> toc = TableOfContents("# Title", source=source)

    Thread Safety:
        The MarkdownIt instance is only read after construction; per-call
        state lives in the generator. Safe to share across threads.

    """

    __slots__ = ("_config", "_md")

    def __init__(self, config: ParseConfig | None = None) -> None:
        self._config = config or ParseConfig()
        self._md = create_markdown_it(self._config)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def events(self, text: str) -> Iterator[Event]:
        """Parse text and yield events in document order."""
        yield from _convert(self._md.parse(text))


def _split_nesting(token_type: str) -> tuple[str, bool]:
    """Split 'heading_open' into ('heading', True)."""
    if token_type.endswith("_open"):
        return token_type[: -len("_open")], True
    return token_type[: -len("_close")], False


def _convert(tokens: Iterable[Token]) -> Iterator[Event]:
    for token in tokens:
        match token.type:
            case "heading_open":
                yield Start(Tag.HEADING, level=int(token.tag[1:]))
            case "heading_close":
                yield End(Tag.HEADING)
            case "inline":
                yield from _convert(token.children or ())
            case "text" | "text_special":
                yield Text(token.content)
            case "code_inline":
                yield Code(token.content)
            case "softbreak":
                yield SoftBreak()
            case "hardbreak":
                yield HardBreak()
            case "html_inline" | "html_block":
                yield Html(token.content)
            case "image":
                # Alt text lives in the children, not in a separate close token
                yield Start(Tag.IMAGE, url=str(token.attrGet("src") or ""))
                yield from _convert(token.children or ())
                yield End(Tag.IMAGE)
            case "fence" | "code_block":
                yield Start(Tag.CODE_BLOCK)
                yield Text(token.content)
                yield End(Tag.CODE_BLOCK)
            case "hr":
                yield Rule()
            case _ if token.nesting != 0:
                name, opening = _split_nesting(token.type)
                tag = _CONTAINER_TAGS.get(name)
                if tag is None:
                    if name not in _IGNORED_CONTAINERS:
                        logger.debug("Skipping unknown token %r", token.type)
                elif opening:
                    url = str(token.attrGet("href") or "") if tag is Tag.LINK else ""
                    yield Start(tag, url=url)
                else:
                    yield End(tag)
            case _:
                logger.debug("Skipping unknown token %r", token.type)


__all__ = [
    "MarkdownItSource",
    "create_markdown_it",
]
