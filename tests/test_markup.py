"""Tests for the markup builder."""

from __future__ import annotations

import pytest

from memberdoc.errors import RenderError
from memberdoc.markup import (
    Comment,
    ContentBuilder,
    Entity,
    HtmlStyle,
    HtmlTree,
    RawHtml,
    StringBuilder,
    Table,
    TableHeader,
    TextContent,
)


class TestStringBuilder:
    """Tests for StringBuilder."""

    def test_append_escaped(self) -> None:
        sb = StringBuilder()
        sb.append("<code>").append_escaped("Map<K, V> & co").append("</code>")
        assert sb.build() == "<code>Map&lt;K, V&gt; &amp; co</code>"

    def test_append_attr_escapes_quotes(self) -> None:
        sb = StringBuilder()
        sb.append_attr("title", 'say "hi"')
        assert sb.build() == ' title="say &quot;hi&quot;"'

    def test_empty_strings_skipped(self) -> None:
        sb = StringBuilder()
        sb.append("").append_escaped("")
        assert not sb
        assert len(sb) == 0


class TestContent:
    """Tests for leaf content nodes."""

    def test_text_is_escaped(self) -> None:
        assert TextContent("a < b").to_html() == "a &lt; b"

    def test_raw_html_is_verbatim(self) -> None:
        assert RawHtml("<b>x</b>").to_html() == "<b>x</b>"

    def test_entity(self) -> None:
        assert Entity.NO_BREAK_SPACE.to_html() == "&nbsp;"
        assert not Entity.NO_BREAK_SPACE.is_empty()

    def test_comment_on_own_line(self) -> None:
        assert Comment("marker").to_html() == "<!-- marker -->\n"

    def test_leaf_rejects_children(self) -> None:
        with pytest.raises(RenderError):
            TextContent("x").add("y")

    def test_builder_wraps_strings(self) -> None:
        builder = ContentBuilder("a", TextContent("<b>"))
        assert builder.to_html() == "a&lt;b&gt;"
        assert len(builder) == 2

    def test_empty_builder(self) -> None:
        assert ContentBuilder().is_empty()
        assert ContentBuilder(TextContent("")).is_empty()

    def test_structural_equality(self) -> None:
        assert HtmlTree.code("x") == HtmlTree.code("x")
        assert HtmlTree.code("x") != HtmlTree.code("y")
        assert TextContent("x") != RawHtml("x")


class TestHtmlTree:
    """Tests for HtmlTree."""

    def test_span_with_style(self) -> None:
        tree = HtmlTree.span(HtmlStyle.member_name_link, "color")
        assert tree.to_html() == '<span class="member-name-link">color</span>'

    def test_id_and_style(self) -> None:
        tree = HtmlTree.section(HtmlStyle.detail, "x").set_id("getColor")
        assert tree.to_html() == '<section class="detail" id="getColor">x</section>\n'
        assert tree.id == "getColor"
        assert tree.styles == ("detail",)

    def test_block_child_starts_new_line(self) -> None:
        tree = HtmlTree.li(None, HtmlTree.div(HtmlStyle.block, "x"))
        assert tree.to_html() == '<li>\n<div class="block">x</div>\n</li>\n'

    def test_link(self) -> None:
        assert HtmlTree.link("Shape.html#getColor", "color").to_html() == (
            '<a href="Shape.html#getColor">color</a>'
        )

    def test_void_element(self) -> None:
        tree = HtmlTree("br")
        assert tree.to_html() == "<br>"
        assert not tree.is_empty()

    def test_empty_tree(self) -> None:
        assert HtmlTree.code().is_empty()
        assert HtmlTree.code(HtmlTree.span(None)).is_empty()


class TestTable:
    """Tests for summary tables."""

    def _table(self) -> Table:
        return (
            Table(HtmlStyle.member_summary)
            .set_caption("Properties")
            .set_header(TableHeader("Type", "Property", "Description"))
            .set_column_styles(HtmlStyle.col_first, HtmlStyle.col_second, HtmlStyle.col_last)
            .set_row_scope_column(1)
        )

    def test_row_scope_column(self) -> None:
        table = self._table().add_row("double", "radius", "The radius.")
        html = table.to_html()

        assert '<table class="member-summary">' in html
        assert "<caption><span>Properties</span></caption>" in html
        assert '<th class="col-first" scope="col">Type</th>' in html
        assert '<td class="col-first">double</td>' in html
        assert '<th class="col-second" scope="row">radius</th>' in html
        assert '<td class="col-last">The radius.</td>' in html

    def test_rows_alternate_colors(self) -> None:
        table = self._table().add_row("a", "b", "c").add_row("d", "e", "f")
        html = table.to_html()
        assert html.index('<tr class="alt-color">') < html.index('<tr class="row-color">')

    def test_cell_count_must_match_header(self) -> None:
        with pytest.raises(RenderError, match="2 cells"):
            self._table().add_row("a", "b")

    def test_empty_until_rows_added(self) -> None:
        table = self._table()
        assert table.is_empty()
        table.add_row("a", "b", "c")
        assert not table.is_empty()
        assert len(table.rows) == 1
