"""Summary tables.

A Table is configured once per owner type (caption, header, column styles,
row-scope column) and then receives one row per member. The row-scope
column is written as ``<th scope="row">`` so assistive technology reads it
as the row label.

Example:
    >>> table = (
    ...     Table(HtmlStyle.member_summary)
    ...     .set_caption(TextContent("Properties"))
    ...     .set_header(TableHeader("Type", "Property", "Description"))
    ...     .set_column_styles(HtmlStyle.col_first, HtmlStyle.col_second, HtmlStyle.col_last)
    ...     .set_row_scope_column(1)
    ... )
    >>> table.add_row("int", "size", "The size.")

"""

from __future__ import annotations

from memberdoc.errors import RenderError
from memberdoc.markup.content import Content, as_content
from memberdoc.markup.stringbuilder import StringBuilder
from memberdoc.markup.styles import HtmlStyle
from memberdoc.markup.tree import HtmlTree


class TableHeader(Content):
    """The column labels of a table."""

    __slots__ = ("_cells",)

    def __init__(self, *cells: Content | str) -> None:
        self._cells: tuple[Content, ...] = tuple(as_content(c) for c in cells)

    @property
    def cells(self) -> tuple[Content, ...]:
        return self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def to_tree(self, column_styles: tuple[HtmlStyle, ...]) -> HtmlTree:
        row = HtmlTree("tr")
        for i, cell in enumerate(self._cells):
            th = HtmlTree("th", cell).put("scope", "col")
            if i < len(column_styles):
                th.set_style(column_styles[i])
            row.add(th)
        return HtmlTree("thead", row)

    def write(self, sb: StringBuilder) -> None:
        self.to_tree(()).write(sb)

    def is_empty(self) -> bool:
        return not self._cells


class Table(Content):
    """A member summary table."""

    __slots__ = ("style", "caption", "header", "column_styles", "row_scope_column", "_rows")

    def __init__(self, style: HtmlStyle) -> None:
        self.style = style
        self.caption: Content | None = None
        self.header: TableHeader | None = None
        self.column_styles: tuple[HtmlStyle, ...] = ()
        self.row_scope_column: int | None = None
        self._rows: list[tuple[Content, ...]] = []

    def set_caption(self, caption: Content | str) -> Table:
        self.caption = as_content(caption)
        return self

    def set_header(self, header: TableHeader) -> Table:
        self.header = header
        return self

    def set_column_styles(self, *styles: HtmlStyle) -> Table:
        self.column_styles = styles
        return self

    def set_row_scope_column(self, index: int) -> Table:
        self.row_scope_column = index
        return self

    def add_row(self, *cells: Content | str) -> Table:
        """Append a row. The cell count must match the header."""
        if self.header is not None and len(cells) != len(self.header):
            raise RenderError(
                f"row has {len(cells)} cells, header has {len(self.header)}"
            )
        self._rows.append(tuple(as_content(c) for c in cells))
        return self

    @property
    def rows(self) -> tuple[tuple[Content, ...], ...]:
        return tuple(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def write(self, sb: StringBuilder) -> None:
        table = HtmlTree("table").set_style(self.style)
        if self.caption is not None:
            table.add(HtmlTree("caption", HtmlTree.span(None, self.caption)))
        if self.header is not None:
            table.add(self.header.to_tree(self.column_styles))
        body = HtmlTree("tbody")
        for index, cells in enumerate(self._rows):
            row = HtmlTree("tr").set_style(
                HtmlStyle.alt_color if index % 2 == 0 else HtmlStyle.row_color
            )
            for column, cell in enumerate(cells):
                if column == self.row_scope_column:
                    td = HtmlTree("th", cell).put("scope", "row")
                else:
                    td = HtmlTree("td", cell)
                if column < len(self.column_styles):
                    td.set_style(self.column_styles[column])
                row.add(td)
            body.add(row)
        table.add(body)
        table.write(sb)
