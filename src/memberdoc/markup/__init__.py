"""Markup builder for memberdoc.

Writers compose these nodes; only the nodes know HTML syntax.

Available nodes:
- ContentBuilder, TextContent, RawHtml, Entity, Comment: basic content
- HtmlTree: elements with attributes and children
- Table, TableHeader: member summary tables

"""

from memberdoc.markup.content import (
    Comment,
    Content,
    ContentBuilder,
    Entity,
    MarkerComments,
    RawHtml,
    TextContent,
)
from memberdoc.markup.stringbuilder import StringBuilder
from memberdoc.markup.styles import Headings, HtmlStyle, SectionName
from memberdoc.markup.table import Table, TableHeader
from memberdoc.markup.tree import HtmlTree

__all__ = [
    "Comment",
    "Content",
    "ContentBuilder",
    "Entity",
    "Headings",
    "HtmlStyle",
    "HtmlTree",
    "MarkerComments",
    "RawHtml",
    "SectionName",
    "StringBuilder",
    "Table",
    "TableHeader",
    "TextContent",
]
