"""Configuration for parsing and rendering.

Two frozen dataclasses:
- ParseConfig: which optional Markdown syntax the parser recognizes
- RenderOptions: how the table of contents list is laid out

Render options can be passed explicitly or installed for the current context
through a ContextVar, so an application can set house style once.

Usage:
    toc = TableOfContents(text)
    toc.to_list_markup(RenderOptions(indent=4))

    # Or for a block of code
    with render_options_context(RenderOptions(item_symbol=ItemSymbol.ASTERISK)):
        toc.to_list_markup()

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from marktoc.errors import ConfigError

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


class ItemSymbol(Enum):
    """Bullet used for table of contents list items."""

    HYPHEN = "-"
    ASTERISK = "*"

    def __str__(self) -> str:
        return self.value


def _filter_fields(cls: type, config_dict: dict[str, Any]) -> dict[str, Any]:
    valid_fields = {f.name for f in fields(cls)}
    return {k: v for k, v in config_dict.items() if k in valid_fields}


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Parser feature flags.

    Attributes:
        tables_enabled: Recognize GFM tables (headings never live in tables,
            but table cells must not be mistaken for paragraphs)
        strikethrough_enabled: Recognize ~~strikethrough~~
        html_enabled: Recognize raw HTML blocks and inline tags

    """

    tables_enabled: bool = True
    strikethrough_enabled: bool = True
    html_enabled: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary, ignoring unknown keys."""
        return cls(**_filter_fields(cls, config_dict))


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable rendering options for the nested list.

    Attributes:
        item_symbol: Bullet character for every list item
        min_level: Lowest heading level included (inclusive)
        max_level: Highest heading level included (inclusive)
        indent: Spaces per level of nesting
        keep_markup: Show emphasis, strong and code markup in entry text
            instead of plain text

    """

    item_symbol: ItemSymbol = ItemSymbol.HYPHEN
    min_level: int = MIN_HEADING_LEVEL
    max_level: int = MAX_HEADING_LEVEL
    indent: int = 2
    keep_markup: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ConfigError("indent", f"must be non-negative, got {self.indent}")
        for name in ("min_level", "max_level"):
            value = getattr(self, name)
            if not MIN_HEADING_LEVEL <= value <= MAX_HEADING_LEVEL:
                raise ConfigError(
                    name,
                    f"must be between {MIN_HEADING_LEVEL} and {MAX_HEADING_LEVEL}, got {value}",
                )
        if self.min_level > self.max_level:
            raise ConfigError(
                "min_level",
                f"{self.min_level} is greater than max_level {self.max_level}",
            )

    def includes(self, level: int) -> bool:
        """Whether a heading of this level passes the level filter."""
        return self.min_level <= level <= self.max_level

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderOptions":
        """Create RenderOptions from dictionary.

        Useful when options come from a YAML or TOML file. Unknown keys are
        silently ignored; ``item_symbol`` may be given as ``"-"`` or ``"*"``.

        Example:
            >>> RenderOptions.from_dict({"indent": 4, "item_symbol": "*"}).indent
            4

        """
        filtered = _filter_fields(cls, config_dict)
        symbol = filtered.get("item_symbol")
        if symbol is not None and not isinstance(symbol, ItemSymbol):
            try:
                filtered["item_symbol"] = ItemSymbol(symbol)
            except ValueError:
                raise ConfigError("item_symbol", f"unknown symbol {symbol!r}") from None
        return cls(**filtered)


# Module-level default (reused, never recreated)
_DEFAULT_OPTIONS: RenderOptions = RenderOptions()

_render_options: ContextVar[RenderOptions] = ContextVar(
    "render_options",
    default=_DEFAULT_OPTIONS,
)


def get_render_options() -> RenderOptions:
    """Get the render options active in the current context."""
    return _render_options.get()


def set_render_options(options: RenderOptions) -> None:
    """Set render options for the current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_options.set(options)


def reset_render_options() -> None:
    """Reset to the default options."""
    _render_options.set(_DEFAULT_OPTIONS)


@contextmanager
def render_options_context(options: RenderOptions) -> Iterator[None]:
    """Context manager for temporary option changes.

    Restores the previous options even if an exception is raised.

    Example:
        >>> with render_options_context(RenderOptions(indent=4)):
        ...     get_render_options().indent
        4

    """
    previous = _render_options.get()
    _render_options.set(options)
    try:
        yield
    finally:
        _render_options.set(previous)


__all__ = [
    "MAX_HEADING_LEVEL",
    "MIN_HEADING_LEVEL",
    "ItemSymbol",
    "ParseConfig",
    "RenderOptions",
    "get_render_options",
    "render_options_context",
    "reset_render_options",
    "set_render_options",
]
