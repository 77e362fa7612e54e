"""Writer protocols for member sections.

A type page lists each kind of member (properties, fields, methods, ...)
in a summary table and a details section. Every member kind has one writer
implementing both protocols; the page builder picks the writer for the kind
it is rendering. Shared behavior lives in MemberWriterHelpers, which the
writers receive by composition.

Every ``add_*`` method appends to the target it is given and returns
nothing; ``get_*`` methods return new content owned by the caller.

Thread Safety:
Writers hold references to immutable collaborators and the type being
rendered. Targets are owned by the caller and never retained.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from memberdoc.links import LinkKind
    from memberdoc.markup.content import Content
    from memberdoc.markup.table import Table, TableHeader
    from memberdoc.model import ExecutableElement, TypeElement


@runtime_checkable
class MemberSummaryWriter(Protocol):
    """Renders the summary part of a type page for one member kind."""

    type_element: TypeElement

    def get_member_summary_header(self, type_element: TypeElement, summary_tree: Content) -> Content:
        """Mark the start of the summary in ``summary_tree``; return a tree for its rows."""
        ...

    def add_member_tree(self, summary_tree: Content, member_tree: Content) -> None:
        """Append the filled member tree to the page summary region."""
        ...

    def add_summary_label(self, member_tree: Content) -> None: ...

    def get_summary_table_header(self, member: ExecutableElement | TypeElement) -> TableHeader: ...

    def create_summary_table(self) -> Table: ...

    def add_inherited_summary_label(self, type_element: TypeElement, inherited_tree: Content) -> None: ...

    def add_summary_link(
        self,
        kind: LinkKind,
        type_element: TypeElement,
        member: ExecutableElement,
        target: Content,
    ) -> None: ...

    def add_inherited_summary_link(
        self,
        type_element: TypeElement,
        member: ExecutableElement,
        links_tree: Content,
    ) -> None: ...

    def add_summary_type(self, member: ExecutableElement, target: Content) -> None: ...

    def get_deprecated_link(self, member: ExecutableElement) -> Content: ...

    def get_member_tree_header(self) -> Content: ...


@runtime_checkable
class PropertyDetailWriter(Protocol):
    """Renders the property details part of a type page."""

    def get_property_details_tree_header(self, details_tree: Content) -> Content: ...

    def get_property_doc_tree_header(self, member: ExecutableElement) -> Content: ...

    def get_signature(self, member: ExecutableElement) -> Content: ...

    def add_deprecated(self, member: ExecutableElement, doc_tree: Content) -> None: ...

    def add_comments(self, member: ExecutableElement, doc_tree: Content) -> None: ...

    def add_tags(self, member: ExecutableElement, doc_tree: Content) -> None: ...

    def get_property_details(self, details_header: Content, details_tree: Content) -> Content: ...

    def get_property_doc(self, doc_tree: Content) -> Content: ...
