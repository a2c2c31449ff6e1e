"""Render headings as a nested Markdown list.

Indentation is proportional to the heading level, measured from the first
rendered heading, so a jump from level 1 to level 3 nests two steps deep.
The renderer does not check that levels form a proper tree.

Example:
    >>> headings = [Heading(1, "A", "a"), Heading(3, "B", "b")]
    >>> print(render_list(headings), end="")
    - [A](#a)
        - [B](#b)
"""

from __future__ import annotations

from collections.abc import Iterable

from marktoc.config import RenderOptions
from marktoc.flatten import escape_link_text
from marktoc.toc import Heading

_DEFAULT_OPTIONS = RenderOptions()


def render_list(headings: Iterable[Heading], options: RenderOptions | None = None) -> str:
    """Render headings as Markdown list lines.

    Headings outside the options' level range are skipped. A heading above
    the base level (the first rendered heading's level) gets no indent.

    Args:
        headings: Headings in document order
        options: Layout options

    Returns:
        Newline-terminated list, or empty string if nothing is rendered
    """
    options = options or _DEFAULT_OPTIONS
    lines: list[str] = []
    base_level: int | None = None

    for heading in headings:
        if not options.includes(heading.level):
            continue
        if base_level is None:
            base_level = heading.level
        depth = max(heading.level - base_level, 0)
        title = heading.markup if options.keep_markup else escape_link_text(heading.text)
        lines.append(
            f"{' ' * (options.indent * depth)}{options.item_symbol} [{title}](#{heading.anchor})\n"
        )

    return "".join(lines)


__all__ = [
    "render_list",
]
