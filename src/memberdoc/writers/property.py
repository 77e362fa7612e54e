"""Writes property documentation in HTML format.

A property is an accessor method (``getColor``, ``isEnabled``,
``colorProperty``) documented under the name of the property it exposes.
PropertyWriter renders the property summary table, the inherited property
lists and the property details of one type page.

Example:
    >>> writer = PropertyWriter(circle)
    >>> summary = ContentBuilder()
    >>> member_tree = writer.get_member_summary_header(circle, summary)
    >>> member_tree.add(writer.helpers.build_summary_table(writer, properties))
    >>> writer.add_member_tree(summary, member_tree)
    >>> summary.to_html()

"""

from __future__ import annotations

from memberdoc.config import DocletOptions, get_doclet_options
from memberdoc.elements import ElementClassifier
from memberdoc.links import LinkFactory, LinkKind
from memberdoc.markup.content import Content, ContentBuilder, Entity, MarkerComments, TextContent
from memberdoc.markup.styles import Headings, HtmlStyle, SectionName
from memberdoc.markup.table import Table, TableHeader
from memberdoc.markup.tree import HtmlTree
from memberdoc.model import Element, ExecutableElement, TypeElement
from memberdoc.resources import Contents, Resources
from memberdoc.utils.logger import get_logger
from memberdoc.writers.common import MemberWriterHelpers

logger = get_logger(__name__)


class PropertyWriter:
    """Property summary and detail writer for the page of ``type_element``.

    Collaborators default from ``options`` (or the context default options)
    so tests can substitute any one of them.

    Thread Safety:
        Holds only immutable collaborators. Targets passed to ``add_*``
        methods are not retained.

    """

    __slots__ = ("type_element", "options", "classifier", "links", "resources", "contents", "helpers")

    def __init__(
        self,
        type_element: TypeElement,
        *,
        options: DocletOptions | None = None,
        classifier: ElementClassifier | None = None,
        links: LinkFactory | None = None,
        resources: Resources | None = None,
        contents: Contents | None = None,
        helpers: MemberWriterHelpers | None = None,
    ) -> None:
        self.type_element = type_element
        self.options = options or get_doclet_options()
        self.classifier = classifier or ElementClassifier(self.options)
        self.links = links or LinkFactory(type_element, self.classifier, self.options)
        self.resources = resources or Resources()
        self.contents = contents or Contents(self.resources)
        self.helpers = helpers or MemberWriterHelpers(
            type_element, self.classifier, self.links, self.contents, self.options
        )

    # =========================================================================
    # Summary
    # =========================================================================

    def get_member_summary_header(self, type_element: TypeElement, summary_tree: Content) -> Content:
        """Mark the summary start; return a tree seeded with the summary heading."""
        summary_tree.add(MarkerComments.START_OF_PROPERTY_SUMMARY)
        member_tree = ContentBuilder()
        self.helpers.add_summary_header(self, member_tree)
        return member_tree

    def add_member_tree(self, summary_tree: Content, member_tree: Content) -> None:
        """Append the property summary section to the page-level member list."""
        self.helpers.add_member_tree(
            HtmlStyle.property_summary, SectionName.PROPERTY_SUMMARY, summary_tree, member_tree
        )

    def add_summary_label(self, member_tree: Content) -> None:
        """Append the "Property Summary" heading."""
        label = HtmlTree.heading(Headings.SUMMARY_HEADING, self.contents.property_summary_label)
        member_tree.add(label)

    def get_summary_table_header(self, member: Element) -> TableHeader:
        """Type, Property and Description column headings."""
        return TableHeader(
            self.contents.type_label, self.contents.property_label, self.contents.description_label
        )

    def create_summary_table(self) -> Table:
        """The empty summary table: caption, header, column styles, row scope column."""
        return (
            Table(HtmlStyle.member_summary)
            .set_caption(self.contents.properties)
            .set_header(self.get_summary_table_header(self.type_element))
            .set_column_styles(HtmlStyle.col_first, HtmlStyle.col_second, HtmlStyle.col_last)
            .set_row_scope_column(1)
        )

    def add_inherited_summary_label(self, type_element: TypeElement, inherited_tree: Content) -> None:
        """Append the heading of the list inherited from ``type_element``."""
        class_link = self.links.get_pre_qualified_class_link(LinkKind.MEMBER, type_element)
        is_class = self.classifier.is_class(type_element)
        if self.options.summarize_overridden_methods:
            key = (
                "doclet.Properties_Declared_In_Class"
                if is_class
                else "doclet.Properties_Declared_In_Interface"
            )
        else:
            key = (
                "doclet.Properties_Inherited_From_Class"
                if is_class
                else "doclet.Properties_Inherited_From_Interface"
            )
        label_heading = HtmlTree.heading(
            Headings.INHERITED_SUMMARY_HEADING, TextContent(self.resources.get_text(key))
        )
        label_heading.set_id(
            SectionName.PROPERTIES_INHERITANCE.get_name()
            + self.links.get_name(type_element.qualified_name)
        )
        label_heading.add(Entity.NO_BREAK_SPACE)
        label_heading.add(class_link)
        inherited_tree.add(label_heading)

    def add_summary_link(
        self,
        kind: LinkKind,
        type_element: TypeElement,
        member: ExecutableElement,
        target: Content,
    ) -> None:
        """Append the summary-table link of ``member``, labeled with its property name."""
        member_link = HtmlTree.span(
            HtmlStyle.member_name_link,
            self.links.get_doc_link(
                kind, type_element, member, self.classifier.property_label(member.name)
            ),
        )
        target.add(HtmlTree.code(member_link))

    def add_inherited_summary_link(
        self,
        type_element: TypeElement,
        member: ExecutableElement,
        links_tree: Content,
    ) -> None:
        """Append a link to an inherited property.

        The label is the property name for conventional accessors and the raw
        member name otherwise.
        """
        name = member.name
        label = self.classifier.property_name(name) if self.classifier.is_property(name) else name
        links_tree.add(self.links.get_doc_link(LinkKind.MEMBER, type_element, member, label))

    def add_summary_type(self, member: ExecutableElement, target: Content) -> None:
        """Append the modifiers and the return type as seen from the rendered type."""
        return_type = self.classifier.get_return_type(self.type_element, member)
        self.helpers.add_modifier_and_type(member, return_type, target)

    def get_deprecated_link(self, member: ExecutableElement) -> Content:
        """Link to ``member`` labeled with its fully qualified name."""
        return self.links.get_member_link(
            LinkKind.DEPRECATED, member, self.classifier.get_fully_qualified_name(member)
        )

    def get_member_tree_header(self) -> Content:
        """A fresh member list."""
        return self.helpers.get_member_tree_header()

    # =========================================================================
    # Details
    # =========================================================================

    def get_property_details_tree_header(self, details_tree: Content) -> Content:
        """Mark the details start; return a tree seeded with the details heading."""
        details_tree.add(MarkerComments.START_OF_PROPERTY_DETAILS)
        property_details_tree = ContentBuilder()
        heading = HtmlTree.heading(Headings.DETAILS_HEADING, self.contents.property_details_label)
        property_details_tree.add(heading)
        return property_details_tree

    def get_property_doc_tree_header(self, member: ExecutableElement) -> Content:
        """Open the detail block of ``member``.

        The heading shows the property label, but the section id is the raw
        member name so that summary and inherited links resolve to it.
        """
        property_doc_tree = ContentBuilder()
        heading = HtmlTree.heading(
            Headings.MEMBER_HEADING, TextContent(self.classifier.property_label(member.name))
        )
        property_doc_tree.add(heading)
        return HtmlTree.section(HtmlStyle.detail, property_doc_tree).set_id(member.name)

    def get_signature(self, member: ExecutableElement) -> Content:
        """The signature block of ``member``."""
        return (
            self.helpers.get_signature(member)
            .add_type(self.classifier.get_return_type(self.type_element, member))
            .to_content()
        )

    def add_deprecated(self, member: ExecutableElement, doc_tree: Content) -> None:
        """Nothing to add; deprecation is shown on the accessor methods."""

    def add_comments(self, member: ExecutableElement, doc_tree: Content) -> None:
        """Append the documentation body of ``member``.

        An inherited body whose declaring type is public but has no page of
        its own is prefixed with a "Description copied from" banner naming
        that type, since a link to the original would dangle.
        """
        holder = self.classifier.enclosing_type(member)
        if not self.classifier.get_full_body(member):
            return
        if (
            holder == self.type_element
            or not self.classifier.is_public(holder)
            or self.classifier.is_linkable(holder)
        ):
            self.helpers.add_inline_comment(member, doc_tree)
            return

        logger.debug(
            "Copying description of %s from %s", member.name, holder.qualified_name
        )
        link = self.links.get_doc_link(
            LinkKind.PROPERTY_COPY,
            holder,
            member,
            holder.name if self.classifier.is_included(holder) else holder.qualified_name,
        )
        code_link = HtmlTree.code(link)
        descfrm_label = HtmlTree.span(
            HtmlStyle.descfrm_type_label,
            self.contents.descfrm_class_label
            if self.classifier.is_class(holder)
            else self.contents.descfrm_interface_label,
        )
        descfrm_label.add(Entity.NO_BREAK_SPACE)
        descfrm_label.add(code_link)
        doc_tree.add(HtmlTree.div(HtmlStyle.block, descfrm_label))
        self.helpers.add_inline_comment(member, doc_tree)

    def add_tags(self, member: ExecutableElement, doc_tree: Content) -> None:
        """Append the block tags of ``member`` (since, see, default value)."""
        self.helpers.add_tags_info(member, doc_tree)

    def get_property_details(self, details_header: Content, details_tree: Content) -> Content:
        """Wrap the details heading and the property blocks in the details section."""
        property_details = ContentBuilder(details_header, details_tree)
        return self.helpers.get_member_tree(
            HtmlTree.section(HtmlStyle.property_details, property_details).set_id(
                SectionName.PROPERTY_DETAIL.get_name()
            )
        )

    def get_property_doc(self, doc_tree: Content) -> Content:
        """Wrap the detail block of one property in a list item."""
        return self.helpers.get_member_tree(doc_tree)
