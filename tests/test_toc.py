"""Tests for extract_headings() and TableOfContents."""

from marktoc.events import Code, End, Start, Tag, Text
from marktoc.parsing import MarkdownItSource
from marktoc.toc import Heading, TableOfContents, extract_headings


class TestExtractHeadings:
    """Heading extraction from event streams."""

    def test_collects_headings_in_order(self) -> None:
        events = [
            Start(Tag.HEADING, level=1),
            Text("Heading"),
            End(Tag.HEADING),
            Start(Tag.PARAGRAPH),
            Text("ignored"),
            End(Tag.PARAGRAPH),
            Start(Tag.HEADING, level=2),
            Code("Another"),
            Text(" heading"),
            End(Tag.HEADING),
        ]
        assert extract_headings(events) == (
            Heading(1, "Heading", "heading"),
            Heading(2, "Another heading", "another-heading"),
        )

    def test_keeps_raw_inline_events(self) -> None:
        events = [Start(Tag.HEADING, level=1), Code("Another"), Text(" heading"), End(Tag.HEADING)]
        (heading,) = extract_headings(events)
        assert heading.events == (Code("Another"), Text(" heading"))
        assert heading.markup == "`Another` heading"

    def test_accepts_generator(self) -> None:
        headings = extract_headings(MarkdownItSource().events("# a\n# b\n"))
        assert [h.anchor for h in headings] == ["a", "b"]

    def test_custom_slugify(self) -> None:
        events = [Start(Tag.HEADING, level=1), Text("Hello World"), End(Tag.HEADING)] * 2
        headings = extract_headings(events, slugify=lambda t: t.upper().replace(" ", "_"))
        assert [h.anchor for h in headings] == ["HELLO_WORLD", "HELLO_WORLD-1"]

    def test_each_call_uses_fresh_registry(self) -> None:
        events = [Start(Tag.HEADING, level=1), Text("Foo"), End(Tag.HEADING)]
        assert extract_headings(events)[0].anchor == "foo"
        assert extract_headings(events)[0].anchor == "foo"

    def test_empty_stream(self) -> None:
        assert extract_headings([]) == ()


class TestHeading:
    def test_frozen(self) -> None:
        import dataclasses

        import pytest

        heading = Heading(1, "A", "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            heading.level = 2  # type: ignore[misc]

    def test_equality_ignores_events(self) -> None:
        assert Heading(1, "A", "a", (Text("A"),)) == Heading(1, "A", "a")

    def test_markup_without_events_falls_back_to_text(self) -> None:
        assert Heading(1, "[x]", "x").markup == "\\[x\\]"


class TestTableOfContents:
    """TableOfContents built from text."""

    def test_links_in_headings(self) -> None:
        (heading,) = TableOfContents("# Here [TOML](https://toml.io)").headings()
        assert heading.text == "Here TOML"
        assert heading.anchor == "here-toml"

    def test_code_in_headings(self) -> None:
        toc = TableOfContents("# Heading\n\n## `Another` heading\n")
        assert [(h.level, h.text) for h in toc] == [(1, "Heading"), (2, "Another heading")]

    def test_unique_anchors_with_code(self) -> None:
        toc = TableOfContents("# Heading\n\n# Heading\n\n# `Heading`")
        assert [h.anchor for h in toc] == ["heading", "heading-1", "heading-2"]

    def test_empty_headings(self) -> None:
        toc = TableOfContents("#\n\n#\n")
        assert [(h.text, h.anchor) for h in toc] == [("", ""), ("", "-1")]
        assert toc.to_list_markup() == "- [](#)\n- [](#-1)\n"

    def test_nested_block_headings_in_document_order(self) -> None:
        toc = TableOfContents("# One\n\n> ## Quoted\n\n- ### In list\n\n# Two\n")
        assert [h.text for h in toc] == ["One", "Quoted", "In list", "Two"]

    def test_code_block_contents_ignored(self) -> None:
        toc = TableOfContents("```\n# nope\n```\n\n    # indented nope\n")
        assert len(toc) == 0

    def test_image_alt_text(self) -> None:
        (heading,) = TableOfContents("# ![logo](x.png) Project").headings()
        assert heading.text == "logo Project"
        assert heading.anchor == "logo-project"

    def test_custom_source(self) -> None:
        class FixedSource:
            def events(self, text: str):
                yield Start(Tag.HEADING, level=2)
                yield Text(text)
                yield End(Tag.HEADING)

        toc = TableOfContents("Anything At All", source=FixedSource())
        assert toc.headings() == (Heading(2, "Anything At All", "anything-at-all"),)

    def test_from_events(self) -> None:
        events = MarkdownItSource().events("# Foo\n\n## Bar\n")
        toc = TableOfContents.from_events(events)
        assert toc.to_list_markup() == "- [Foo](#foo)\n  - [Bar](#bar)\n"

    def test_repr(self) -> None:
        assert repr(TableOfContents("# a\n# b\n")) == "TableOfContents(headings=2)"
