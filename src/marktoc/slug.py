"""Heading anchors the way GitHub computes them.

Two pieces with separate responsibilities:
- slugify(): pure mapping from heading text to a candidate anchor
- AnchorRegistry: per-document state that disambiguates repeated candidates

Example:
    >>> slugify("Hello, World!")
    'hello-world'
    >>> registry = AnchorRegistry()
    >>> [registry.register(slugify(t)) for t in ("Foo", "Foo", "Foo")]
    ['foo', 'foo-1', 'foo-2']

GitHub does not document its algorithm. The rules here are lowercase, drop
everything that is not a letter, digit, space or hyphen, then turn each run
of spaces into one hyphen. Leading and trailing hyphens survive.
"""

from __future__ import annotations

import re

from marktoc.utils.logger import get_logger

logger = get_logger(__name__)

# \w is Unicode-aware (letters, digits, underscore); underscore is dropped
# separately so only letters and digits remain
_STRIP_RE = re.compile(r"[^\w\- ]|_")
_SPACES_RE = re.compile(r" +")


def slugify(text: str) -> str:
    """Convert heading text to a candidate anchor.

    Args:
        text: Plain heading text (markup already removed)

    Returns:
        Candidate anchor, possibly empty

    Examples:
        >>> slugify("Subheading with code")
        'subheading-with-code'
        >>> slugify("Привет")
        'привет'
        >>> slugify("a -- b")
        'a----b'
        >>> slugify("!!!")
        ''
    """
    if not text:
        return ""
    text = _STRIP_RE.sub("", text.lower())
    return _SPACES_RE.sub("-", text)


class AnchorRegistry:
    """Issue unique anchors for one document.

    The first time a candidate is seen it is returned unchanged. Each repeat
    gets ``-1``, ``-2`` and so on. A suffixed anchor that happens to equal an
    anchor already issued (a heading literally titled "foo-1") is skipped, so
    every anchor handed out is unique.

    Calls must be made in document order: numbering depends on call history.

    Thread Safety:
        Not thread-safe. Create one registry per extraction.

    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        # anchor -> number of times it has been requested after the first
        self._counts: dict[str, int] = {}

    def register(self, candidate: str) -> str:
        """Return a unique anchor for candidate and record it."""
        anchor = candidate
        if candidate in self._counts:
            count = self._counts[candidate]
            while anchor in self._counts:
                count += 1
                anchor = f"{candidate}-{count}"
            self._counts[candidate] = count
            logger.debug("Anchor %r taken, using %r", candidate, anchor)
        self._counts[anchor] = 0
        return anchor

    def __contains__(self, anchor: object) -> bool:
        return anchor in self._counts

    def __len__(self) -> int:
        return len(self._counts)


__all__ = [
    "AnchorRegistry",
    "slugify",
]
