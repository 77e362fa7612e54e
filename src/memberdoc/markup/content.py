"""Content nodes: the render targets writers append to.

A Content node is an append-only accumulator that writes itself into a
StringBuilder. Writers compose nodes and hand them back to the caller;
nothing in this module knows about documentation semantics.

Node Hierarchy:
Content (base)
├── ContentBuilder  (fragment: children, no tag of its own)
├── TextContent     (escaped text)
├── RawHtml         (pre-rendered markup, written verbatim)
├── Entity          (character entity such as &nbsp;)
├── Comment         (HTML comment)
├── HtmlTree        (element; see memberdoc.markup.tree)
└── Table           (summary table; see memberdoc.markup.table)

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberdoc.errors import RenderError
from memberdoc.markup.stringbuilder import StringBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable


class Content:
    """Base class for markup nodes.

    Equality is structural: two nodes are equal when they render to the
    same HTML.
    """

    __slots__ = ()

    def add(self, content: Content | str) -> Content:
        """Append a child. Leaf nodes do not accept children."""
        raise RenderError(f"{type(self).__name__} does not accept content")

    def write(self, sb: StringBuilder) -> None:
        raise NotImplementedError

    def is_empty(self) -> bool:
        raise NotImplementedError

    def to_html(self) -> str:
        sb = StringBuilder()
        self.write(sb)
        return sb.build()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return type(self) is type(other) and self.to_html() == other.to_html()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_html()


def as_content(content: Content | str) -> Content:
    """Wrap plain strings as escaped text."""
    if isinstance(content, str):
        return TextContent(content)
    return content


class ContentBuilder(Content):
    """An ordered fragment of content with no enclosing tag."""

    __slots__ = ("_children",)

    def __init__(self, *contents: Content | str) -> None:
        self._children: list[Content] = []
        for content in contents:
            self.add(content)

    def add(self, content: Content | str) -> ContentBuilder:
        self._children.append(as_content(content))
        return self

    def extend(self, contents: Iterable[Content | str]) -> ContentBuilder:
        for content in contents:
            self.add(content)
        return self

    @property
    def children(self) -> tuple[Content, ...]:
        return tuple(self._children)

    def write(self, sb: StringBuilder) -> None:
        for child in self._children:
            child.write(sb)

    def is_empty(self) -> bool:
        return all(child.is_empty() for child in self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"ContentBuilder({self._children!r})"


class TextContent(Content):
    """Plain text, escaped on output."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def write(self, sb: StringBuilder) -> None:
        sb.append_escaped(self._text)

    def is_empty(self) -> bool:
        return not self._text

    def __repr__(self) -> str:
        return f"TextContent({self._text!r})"


class RawHtml(Content):
    """Markup written verbatim (documentation bodies are already HTML)."""

    __slots__ = ("_html",)

    def __init__(self, html: str) -> None:
        self._html = html

    def write(self, sb: StringBuilder) -> None:
        sb.append(self._html)

    def is_empty(self) -> bool:
        return not self._html

    def __repr__(self) -> str:
        return f"RawHtml({self._html!r})"


class Entity(Content):
    """A character entity reference."""

    __slots__ = ("_name",)

    NO_BREAK_SPACE: Entity

    def __init__(self, name: str) -> None:
        self._name = name

    def write(self, sb: StringBuilder) -> None:
        sb.append(f"&{self._name};")

    def is_empty(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Entity({self._name!r})"


Entity.NO_BREAK_SPACE = Entity("nbsp")


class Comment(Content):
    """An HTML comment, written on its own line."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    def write(self, sb: StringBuilder) -> None:
        sb.append_line(f"<!-- {self._text.replace('--', '- -')} -->")

    def is_empty(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Comment({self._text!r})"


class MarkerComments:
    """Comments that delimit page regions for downstream tools."""

    START_OF_PROPERTY_SUMMARY = Comment("=========== PROPERTY SUMMARY ===========")
    START_OF_PROPERTY_DETAILS = Comment("============ PROPERTY DETAIL ===========")
