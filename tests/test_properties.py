"""Property-based tests using Hypothesis.

These tests verify invariants that hold for any input document:
1. Construction never crashes and anchors are unique
2. Every heading block is extracted, in source order
3. Construction and rendering are deterministic
4. Slugification is idempotent on its own output alphabet
"""

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from marktoc import RenderOptions, TableOfContents, slugify
from marktoc.parsing import create_markdown_it

heading_text = st.text(
    alphabet=string.ascii_letters + string.digits + " -_,.!?`*[]()&" + "éÜßПривет你好",
    max_size=30,
)
headings = st.tuples(st.integers(min_value=1, max_value=6), heading_text)


@st.composite
def documents(draw: st.DrawFn) -> str:
    blocks = draw(st.lists(st.one_of(headings, heading_text), max_size=12))
    parts = []
    for block in blocks:
        if isinstance(block, tuple):
            level, text = block
            parts.append(f"{'#' * level} {text}")
        else:
            parts.append(block.strip() or "para")
    return "\n\n".join(parts) + "\n"


class TestTableOfContentsProperties:
    @given(text=st.text(max_size=200))
    @settings(max_examples=100)
    def test_arbitrary_text_never_crashes(self, text: str) -> None:
        toc = TableOfContents(text)
        anchors = [h.anchor for h in toc.headings()]
        assert len(set(anchors)) == len(anchors)

    @given(text=documents())
    @settings(max_examples=100)
    def test_anchors_unique(self, text: str) -> None:
        anchors = [h.anchor for h in TableOfContents(text).headings()]
        assert len(set(anchors)) == len(anchors)

    @given(text=documents())
    @settings(max_examples=100)
    def test_heading_count_matches_parser(self, text: str) -> None:
        tokens = create_markdown_it().parse(text)
        expected = [int(t.tag[1:]) for t in tokens if t.type == "heading_open"]
        assert [h.level for h in TableOfContents(text).headings()] == expected

    @given(text=documents())
    @settings(max_examples=50)
    def test_deterministic(self, text: str) -> None:
        first = TableOfContents(text)
        second = TableOfContents(text)
        assert first.headings() == second.headings()
        assert first.to_list_markup() == second.to_list_markup()

    @given(text=documents(), min_level=st.integers(1, 6))
    @settings(max_examples=50)
    def test_one_line_per_rendered_heading(self, text: str, min_level: int) -> None:
        toc = TableOfContents(text)
        markup = toc.to_list_markup(RenderOptions(min_level=min_level))
        expected = sum(1 for h in toc.headings() if h.level >= min_level)
        assert markup.count("\n") == expected
        assert markup == "" or markup.endswith("\n")


class TestSlugifyProperties:
    @given(text=st.text(alphabet=string.ascii_letters + string.digits + " -" + "éÜßПривет你好"))
    def test_idempotent(self, text: str) -> None:
        assert slugify(slugify(text)) == slugify(text)

    @given(text=st.text())
    def test_output_alphabet(self, text: str) -> None:
        result = slugify(text)
        assert " " not in result
        assert all(ch == "-" or ch.isalnum() for ch in result)
