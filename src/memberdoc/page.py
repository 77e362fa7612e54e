"""Property sections of a type page.

PropertySectionBuilder drives a PropertyWriter in the order a type page
needs: summary table, inherited property lists, then one detail block per
property. It is the only place that decides call order; the writer itself
just appends what it is asked for.

Example:
    >>> builder = PropertySectionBuilder(PropertyWriter(circle))
    >>> html = builder.build(
    ...     properties=[radius_property],
    ...     inherited={shape: [get_color]},
    ... )

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from memberdoc.markup.content import Content, ContentBuilder
from memberdoc.markup.styles import HtmlStyle
from memberdoc.markup.tree import HtmlTree
from memberdoc.model import ExecutableElement, TypeElement
from memberdoc.utils.logger import get_logger
from memberdoc.writers.property import PropertyWriter

logger = get_logger(__name__)


class PropertySectionBuilder:
    """Assembles the property summary and details of one type page."""

    __slots__ = ("writer",)

    def __init__(self, writer: PropertyWriter) -> None:
        self.writer = writer

    @property
    def type_element(self) -> TypeElement:
        return self.writer.type_element

    def build_summary(
        self,
        properties: Sequence[ExecutableElement],
        inherited: Mapping[TypeElement, Sequence[ExecutableElement]] | None = None,
    ) -> Content:
        """Summary table of ``properties`` followed by the inherited lists.

        ``inherited`` is rendered in its iteration order, one list per
        supertype. Returns an empty fragment when there is nothing to list.
        """
        inherited = inherited or {}
        if not properties and not any(inherited.values()):
            return ContentBuilder()

        writer = self.writer
        summary_tree = writer.get_member_tree_header()
        member_tree = writer.get_member_summary_header(self.type_element, summary_tree)
        if properties:
            member_tree.add(writer.helpers.build_summary_table(writer, properties))
        for supertype, members in inherited.items():
            if not members:
                continue
            logger.debug(
                "Listing %d properties inherited from %s", len(members), supertype.qualified_name
            )
            writer.helpers.add_inherited_summary(writer, supertype, members, member_tree)
        writer.add_member_tree(summary_tree, member_tree)
        return summary_tree

    def build_details(self, properties: Sequence[ExecutableElement]) -> Content:
        """Detail block of every property; empty when there are none."""
        if not properties:
            return ContentBuilder()

        writer = self.writer
        details_tree = writer.get_member_tree_header()
        header = writer.get_property_details_tree_header(details_tree)
        body = writer.get_member_tree_header()
        for member in properties:
            doc_tree = writer.get_property_doc_tree_header(member)
            doc_tree.add(writer.get_signature(member))
            writer.add_deprecated(member, doc_tree)
            writer.add_comments(member, doc_tree)
            writer.add_tags(member, doc_tree)
            body.add(writer.get_property_doc(doc_tree))
        details_tree.add(writer.get_property_details(header, body))
        return details_tree

    def build_deprecated_index(self, members: Iterable[ExecutableElement]) -> Content:
        """List of links to the deprecated members among ``members``."""
        index = HtmlTree.ul(HtmlStyle.summary)
        for member in members:
            if member.deprecated:
                index.add(HtmlTree.li(None, self.writer.get_deprecated_link(member)))
        return index

    def build(
        self,
        properties: Sequence[ExecutableElement],
        inherited: Mapping[TypeElement, Sequence[ExecutableElement]] | None = None,
    ) -> str:
        """HTML of the summary and details sections.

        A section with nothing to show is left out; "" when both are empty.
        """
        page = ContentBuilder()
        summary = self.build_summary(properties, inherited)
        if not summary.is_empty():
            page.add(HtmlTree.section(HtmlStyle.summary, summary))
        details = self.build_details(properties)
        if not details.is_empty():
            page.add(HtmlTree.section(HtmlStyle.details, details))
        return page.to_html()
