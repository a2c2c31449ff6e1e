"""Protocols for marktoc.

Defines the contracts for the two collaborators the core can swap out:
the Markdown parser (as an event source) and the slug algorithm.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from marktoc.events import Event


class EventSource(Protocol):
    """Protocol for Markdown parsers that produce an event stream.

    Implementations turn raw text into a lazy, pull-based sequence of
    events. Start/End events must be properly paired; the heading extractor
    performs no validation beyond what it needs to interpret headings.

    Thread Safety:
        Implementations should keep per-call state local to ``events()`` so a
        single instance can serve independent documents concurrently.

    """

    def events(self, text: str) -> Iterator[Event]:
        """Parse text into events.

        Args:
            text: Complete Markdown document

        Yields:
            Events in document order

        Complexity: O(len(text))
        """
        ...


class Slugifier(Protocol):
    """Protocol for anchor algorithms.

    A slugifier maps plain heading text to a candidate anchor. It must be
    pure: duplicate handling belongs to ``AnchorRegistry``, not here.

    """

    def __call__(self, text: str) -> str: ...
