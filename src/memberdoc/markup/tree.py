"""HtmlTree: an element node with attributes and children.

Factory class methods mirror the elements the member writers need
(``HtmlTree.section(HtmlStyle.detail, ...)``). Attribute values and text
children are escaped on output; RawHtml children are not.

Example:
    >>> tree = HtmlTree.span(HtmlStyle.member_name_link, "color")
    >>> tree.to_html()
    '<span class="member-name-link">color</span>'

"""

from __future__ import annotations

from memberdoc.markup.content import Comment, Content, ContentBuilder, as_content
from memberdoc.markup.stringbuilder import StringBuilder
from memberdoc.markup.styles import HtmlStyle

# Elements written without a closing tag.
VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta", "wbr"})

# Elements followed by a newline, to keep generated pages diffable.
BLOCK_ELEMENTS = frozenset(
    {"div", "dl", "dd", "dt", "h1", "h2", "h3", "h4", "li", "section", "table", "tr", "ul"}
)


class HtmlTree(Content):
    """An HTML element."""

    __slots__ = ("tag", "_attrs", "_styles", "_children")

    def __init__(self, tag: str, *contents: Content | str) -> None:
        self.tag = tag
        self._attrs: dict[str, str] = {}
        self._styles: list[str] = []
        self._children: list[Content] = []
        for content in contents:
            self.add(content)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(self, content: Content | str) -> HtmlTree:
        self._children.append(as_content(content))
        return self

    def put(self, name: str, value: str) -> HtmlTree:
        """Set an attribute, replacing any previous value."""
        self._attrs[name] = value
        return self

    def set_id(self, element_id: str) -> HtmlTree:
        return self.put("id", element_id)

    def set_style(self, style: HtmlStyle | None) -> HtmlTree:
        """Add a CSS class. ``None`` is ignored."""
        if style is not None and style.value not in self._styles:
            self._styles.append(style.value)
        return self

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def id(self) -> str | None:
        return self._attrs.get("id")

    @property
    def styles(self) -> tuple[str, ...]:
        return tuple(self._styles)

    @property
    def children(self) -> tuple[Content, ...]:
        return tuple(self._children)

    def get(self, name: str) -> str | None:
        return self._attrs.get(name)

    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    def is_empty(self) -> bool:
        if self.is_void():
            return False
        return all(child.is_empty() for child in self._children)

    # =========================================================================
    # Output
    # =========================================================================

    def write(self, sb: StringBuilder) -> None:
        sb.append("<").append(self.tag)
        if self._styles:
            sb.append_attr("class", " ".join(self._styles))
        for name, value in self._attrs.items():
            sb.append_attr(name, value)
        sb.append(">")
        if self.is_void():
            return
        if self.tag in BLOCK_ELEMENTS and self._children and _is_block(self._children[0]):
            sb.append("\n")
        for child in self._children:
            child.write(sb)
        sb.append(f"</{self.tag}>")
        if self.tag in BLOCK_ELEMENTS:
            sb.append("\n")

    def __repr__(self) -> str:
        return f"HtmlTree({self.tag!r}, id={self.id!r}, styles={self._styles!r})"

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def heading(cls, tag: str, *contents: Content | str) -> HtmlTree:
        """A heading element; ``tag`` comes from Headings."""
        return cls(tag, *contents)

    @classmethod
    def section(cls, style: HtmlStyle, *contents: Content | str) -> HtmlTree:
        return cls("section", *contents).set_style(style)

    @classmethod
    def div(cls, style: HtmlStyle | None, *contents: Content | str) -> HtmlTree:
        return cls("div", *contents).set_style(style)

    @classmethod
    def span(cls, style: HtmlStyle | None, *contents: Content | str) -> HtmlTree:
        return cls("span", *contents).set_style(style)

    @classmethod
    def code(cls, *contents: Content | str) -> HtmlTree:
        return cls("code", *contents)

    @classmethod
    def link(cls, href: str, *contents: Content | str) -> HtmlTree:
        return cls("a", *contents).put("href", href)

    @classmethod
    def ul(cls, style: HtmlStyle | None = None, *contents: Content | str) -> HtmlTree:
        return cls("ul", *contents).set_style(style)

    @classmethod
    def li(cls, style: HtmlStyle | None = None, *contents: Content | str) -> HtmlTree:
        return cls("li", *contents).set_style(style)

    @classmethod
    def dl(cls, style: HtmlStyle | None = None, *contents: Content | str) -> HtmlTree:
        return cls("dl", *contents).set_style(style)

    @classmethod
    def dt(cls, *contents: Content | str) -> HtmlTree:
        return cls("dt", *contents)

    @classmethod
    def dd(cls, *contents: Content | str) -> HtmlTree:
        return cls("dd", *contents)


def _is_block(content: Content) -> bool:
    if isinstance(content, Comment):
        return True
    if isinstance(content, ContentBuilder):
        return bool(content.children) and _is_block(content.children[0])
    return isinstance(content, HtmlTree) and content.tag in BLOCK_ELEMENTS
