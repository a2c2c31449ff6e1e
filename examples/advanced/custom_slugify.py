"""Swap in a different anchor algorithm and a different layout."""

from marktoc import ItemSymbol, RenderOptions, TableOfContents


def underscore_slug(text: str) -> str:
    """Lowercase words joined by underscores."""
    return "_".join(text.lower().split())


source = """# Top Level

## Install Guide

### From Source

## Install Guide
"""

toc = TableOfContents(source, slugify=underscore_slug)
options = RenderOptions(item_symbol=ItemSymbol.ASTERISK, indent=4, min_level=2)
print(toc.to_list_markup(options), end="")
