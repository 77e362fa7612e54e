"""Cross-reference links between documentation pages.

LinkFactory builds links relative to the page of the type being rendered.
Targets without a page in the output (see ElementClassifier.is_linkable)
are rendered as their label only, so no dangling hrefs are generated.

Page paths follow the package structure:
    com.example.Shape  ->  com/example/Shape.html

Example:
    >>> links = LinkFactory(circle, ElementClassifier())
    >>> links.get_doc_link(LinkKind.MEMBER, shape, get_color, "color").to_html()
    '<a href="Shape.html#getColor">color</a>'

"""

from __future__ import annotations

import posixpath
import re
from enum import Enum

from memberdoc.config import DocletOptions
from memberdoc.elements import ElementClassifier
from memberdoc.markup.content import Content, ContentBuilder, TextContent, as_content
from memberdoc.markup.tree import HtmlTree
from memberdoc.model import ExecutableElement, TypeElement, TypeRef
from memberdoc.utils.logger import get_logger

logger = get_logger(__name__)

_UNSAFE_ID_CHARS = re.compile(r"[^\w.:$-]+")


class LinkKind(Enum):
    """Where a link appears; decides whether it targets a member anchor."""

    MEMBER = "member"
    MEMBER_SUMMARY = "member_summary"
    PROPERTY_COPY = "property_copy"
    CLASS = "class"
    DEPRECATED = "deprecated"


class DocPaths:
    """Output paths of generated pages."""

    @staticmethod
    def for_package(package: str) -> str:
        return package.replace(".", "/")

    @staticmethod
    def for_type(element: TypeElement) -> str:
        filename = f"{element.name}.html"
        if not element.package:
            return filename
        return f"{DocPaths.for_package(element.package)}/{filename}"


class LinkFactory:
    """Builds links from the page of ``type_element``.

    Thread Safety:
        Stateless after construction. Safe to share.

    """

    __slots__ = ("type_element", "classifier", "options")

    def __init__(
        self,
        type_element: TypeElement,
        classifier: ElementClassifier,
        options: DocletOptions | None = None,
    ) -> None:
        self.type_element = type_element
        self.classifier = classifier
        self.options = options or classifier.options

    # =========================================================================
    # Paths
    # =========================================================================

    def get_name(self, name: str) -> str:
        """Normalize ``name`` for use as an element id or fragment."""
        return _UNSAFE_ID_CHARS.sub("-", name.strip())

    def path_to(self, element: TypeElement) -> str:
        """Href of ``element``'s page from the current page."""
        target = DocPaths.for_type(element)
        if self.options.doc_root:
            return f"{self.options.doc_root.rstrip('/')}/{target}"
        current_dir = posixpath.dirname(DocPaths.for_type(self.type_element))
        return posixpath.relpath(target, current_dir or ".")

    def href(self, kind: LinkKind, element: TypeElement, member: ExecutableElement | None) -> str:
        anchor = None
        if member is not None and kind is not LinkKind.CLASS:
            anchor = self.get_name(member.name)
        if element == self.type_element and anchor and not self.options.doc_root:
            return f"#{anchor}"
        path = self.path_to(element)
        return f"{path}#{anchor}" if anchor else path

    # =========================================================================
    # Links
    # =========================================================================

    def get_doc_link(
        self,
        kind: LinkKind,
        element: TypeElement,
        member: ExecutableElement | None,
        label: Content | str,
    ) -> Content:
        """Link to ``member`` on ``element``'s page, or the label alone.

        The label alone is returned when ``element`` will have no page.
        """
        label = as_content(label)
        if not self.classifier.is_linkable(element):
            logger.debug("No page for %s; rendering link label only", element.qualified_name)
            return label
        return HtmlTree.link(self.href(kind, element, member), label)

    def get_member_link(self, kind: LinkKind, member: ExecutableElement, label: str) -> Content:
        """Link to ``member`` on its declaring type's page."""
        return self.get_doc_link(kind, self.classifier.enclosing_type(member), member, label)

    def get_class_link(self, kind: LinkKind, element: TypeElement) -> Content:
        return self.get_doc_link(kind, element, None, element.name)

    def get_pre_qualified_class_link(self, kind: LinkKind, element: TypeElement) -> Content:
        """The package prefix as text, followed by a link on the simple name."""
        content = ContentBuilder()
        if element.package:
            content.add(f"{element.package}.")
        content.add(self.get_class_link(kind, element))
        return content

    def get_type_link(self, type_ref: TypeRef) -> Content:
        """A type use, with each type argument linked in turn."""
        content = ContentBuilder()
        if type_ref.element is not None and not type_ref.is_variable:
            content.add(self.get_class_link(LinkKind.CLASS, type_ref.element))
        else:
            content.add(TextContent(type_ref.name))
        if type_ref.arguments:
            content.add("<")
            for i, argument in enumerate(type_ref.arguments):
                if i:
                    content.add(", ")
                content.add(self.get_type_link(argument))
            content.add(">")
        return content
