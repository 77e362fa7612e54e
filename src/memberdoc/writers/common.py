"""Member-rendering helpers shared by the per-kind writers.

MemberWriterHelpers is handed to each member writer at construction. It
owns the parts of a type page that look the same for every member kind:
member lists, inline comments, block tags, summary rows and inherited
member lists. Kind-specific decisions are called back on the writer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from memberdoc.config import DocletOptions
from memberdoc.elements import ElementClassifier
from memberdoc.links import LinkFactory, LinkKind
from memberdoc.markup.content import Content, ContentBuilder, Entity, RawHtml
from memberdoc.markup.styles import HtmlStyle, SectionName
from memberdoc.markup.table import Table
from memberdoc.markup.tree import HtmlTree
from memberdoc.model import ExecutableElement, TypeElement, TypeRef
from memberdoc.resources import Contents
from memberdoc.utils.logger import get_logger

if TYPE_CHECKING:
    from memberdoc.writers.protocol import MemberSummaryWriter

logger = get_logger(__name__)

# Modifiers implied by the page a member is listed on.
_SUMMARY_HIDDEN_MODIFIERS = frozenset({"public", "abstract"})


class MemberSignature:
    """Builds the ``div.member-signature`` of a member detail."""

    __slots__ = ("_member", "_links", "_type")

    def __init__(self, member: ExecutableElement, links: LinkFactory) -> None:
        self._member = member
        self._links = links
        self._type: TypeRef | None = None

    def add_type(self, type_ref: TypeRef) -> MemberSignature:
        self._type = type_ref
        return self

    def to_content(self) -> Content:
        signature = HtmlTree.div(HtmlStyle.member_signature)
        if self._member.modifiers:
            signature.add(HtmlTree.span(HtmlStyle.modifiers, " ".join(self._member.modifiers)))
            signature.add(Entity.NO_BREAK_SPACE)
        if self._type is not None:
            signature.add(HtmlTree.span(HtmlStyle.return_type, self._links.get_type_link(self._type)))
            signature.add(Entity.NO_BREAK_SPACE)
        signature.add(HtmlTree.span(HtmlStyle.element_name, self._member.name))
        return signature


class MemberWriterHelpers:
    """Common helpers for the page of ``type_element``."""

    __slots__ = ("type_element", "classifier", "links", "contents", "options")

    def __init__(
        self,
        type_element: TypeElement,
        classifier: ElementClassifier,
        links: LinkFactory,
        contents: Contents,
        options: DocletOptions,
    ) -> None:
        self.type_element = type_element
        self.classifier = classifier
        self.links = links
        self.contents = contents
        self.options = options

    # =========================================================================
    # Member lists
    # =========================================================================

    def get_member_tree_header(self) -> HtmlTree:
        return HtmlTree.ul(HtmlStyle.member_list)

    def get_member_tree(self, content: Content) -> HtmlTree:
        return HtmlTree.li(None, content)

    def add_summary_header(self, writer: MemberSummaryWriter, member_tree: Content) -> None:
        writer.add_summary_label(member_tree)

    def add_member_tree(
        self,
        style: HtmlStyle,
        section_name: SectionName,
        member_summary_tree: Content,
        member_tree: Content,
    ) -> None:
        section = HtmlTree.section(style, member_tree).set_id(section_name.get_name())
        member_summary_tree.add(self.get_member_tree(section))

    # =========================================================================
    # Documentation
    # =========================================================================

    def add_inline_comment(self, member: ExecutableElement, target: Content) -> None:
        body = self.classifier.get_full_body(member)
        if body:
            target.add(HtmlTree.div(HtmlStyle.block, RawHtml(body)))

    def add_tags_info(self, member: ExecutableElement, target: Content) -> None:
        """Append the block tags of ``member`` as a ``dl.notes`` list."""
        labels = {
            "since": self.contents.since_label,
            "see": self.contents.see_also_label,
            "defaultValue": self.contents.default_value_label,
        }
        notes = HtmlTree.dl(HtmlStyle.notes)
        for name, label in labels.items():
            texts = [tag.text for tag in member.tags if tag.name == name]
            if not texts:
                continue
            notes.add(HtmlTree.dt(label))
            notes.add(HtmlTree.dd(RawHtml(", ".join(texts))))
        unknown = {tag.name for tag in member.tags} - labels.keys()
        if unknown:
            logger.debug("Ignoring unknown tags on %s: %s", member.name, sorted(unknown))
        if notes.children:
            target.add(notes)

    def add_modifier_and_type(
        self, member: ExecutableElement, type_ref: TypeRef, target: Content
    ) -> None:
        code = HtmlTree.code()
        modifiers = [m for m in member.modifiers if m not in _SUMMARY_HIDDEN_MODIFIERS]
        if modifiers:
            code.add(" ".join(modifiers))
            code.add(Entity.NO_BREAK_SPACE)
        code.add(self.links.get_type_link(type_ref))
        target.add(code)

    def get_signature(self, member: ExecutableElement) -> MemberSignature:
        return MemberSignature(member, self.links)

    # =========================================================================
    # Summary tables
    # =========================================================================

    def add_member_summary(
        self, writer: MemberSummaryWriter, member: ExecutableElement, table: Table
    ) -> None:
        """Add one summary row for ``member`` to ``table``."""
        type_cell = ContentBuilder()
        writer.add_summary_type(member, type_cell)
        link_cell = ContentBuilder()
        writer.add_summary_link(LinkKind.MEMBER_SUMMARY, self.type_element, member, link_cell)
        description = ContentBuilder()
        if member.deprecated:
            description.add(
                HtmlTree.div(HtmlStyle.block, HtmlTree("strong", self.contents.deprecated_label))
            )
        sentence = self.classifier.get_first_sentence(member)
        if sentence:
            description.add(HtmlTree.div(HtmlStyle.block, RawHtml(sentence)))
        table.add_row(type_cell, link_cell, description)

    def build_summary_table(
        self, writer: MemberSummaryWriter, members: Iterable[ExecutableElement]
    ) -> Table:
        table = writer.create_summary_table()
        for member in members:
            self.add_member_summary(writer, member, table)
        return table

    def add_inherited_summary(
        self,
        writer: MemberSummaryWriter,
        from_type: TypeElement,
        members: Iterable[ExecutableElement],
        target: Content,
    ) -> None:
        """Append the "inherited from" label and comma-separated member links."""
        inherited_tree = ContentBuilder()
        writer.add_inherited_summary_label(from_type, inherited_tree)
        links_tree = HtmlTree.code()
        for i, member in enumerate(members):
            if i:
                links_tree.add(", ")
            writer.add_inherited_summary_link(from_type, member, links_tree)
        inherited_tree.add(links_tree)
        target.add(HtmlTree.div(HtmlStyle.inherited_list, inherited_tree))
