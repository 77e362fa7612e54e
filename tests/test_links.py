"""Tests for LinkFactory and DocPaths."""

from __future__ import annotations

from memberdoc.config import DocletOptions
from memberdoc.elements import ElementClassifier
from memberdoc.links import DocPaths, LinkFactory, LinkKind
from memberdoc.model import ExecutableElement, TypeElement, TypeRef


def make_links(current: TypeElement, **options: object) -> LinkFactory:
    return LinkFactory(current, ElementClassifier(DocletOptions(**options)))


class TestDocPaths:
    def test_type_path(self, shape: TypeElement) -> None:
        assert DocPaths.for_type(shape) == "com/example/Shape.html"

    def test_unnamed_package(self) -> None:
        assert DocPaths.for_type(TypeElement("Main")) == "Main.html"


class TestDocLinks:
    """Member links between pages."""

    def test_same_package(
        self, circle: TypeElement, shape: TypeElement, get_color: ExecutableElement
    ) -> None:
        link = make_links(circle).get_doc_link(LinkKind.MEMBER, shape, get_color, "color")
        assert link.to_html() == '<a href="Shape.html#getColor">color</a>'

    def test_same_page_uses_fragment(self, shape: TypeElement, get_color: ExecutableElement) -> None:
        link = make_links(shape).get_doc_link(LinkKind.MEMBER_SUMMARY, shape, get_color, "color")
        assert link.to_html() == '<a href="#getColor">color</a>'

    def test_other_package(self, circle: TypeElement) -> None:
        base = TypeElement("Base", package="org.other")
        member = ExecutableElement("getName", enclosing=base)
        link = make_links(circle).get_doc_link(LinkKind.MEMBER, base, member, "name")
        assert link.to_html() == '<a href="../../org/other/Base.html#getName">name</a>'

    def test_doc_root(self, circle: TypeElement, shape: TypeElement, get_color: ExecutableElement) -> None:
        links = make_links(circle, doc_root="https://docs.example.com/api/")
        link = links.get_doc_link(LinkKind.MEMBER, shape, get_color, "color")
        assert link.to_html() == (
            '<a href="https://docs.example.com/api/com/example/Shape.html#getColor">color</a>'
        )

    def test_unlinkable_target_is_label_only(self, circle: TypeElement) -> None:
        hidden = TypeElement("Shape", package="com.example", hidden=True)
        member = ExecutableElement("getColor", enclosing=hidden)
        link = make_links(circle).get_doc_link(LinkKind.MEMBER, hidden, member, "color")
        assert link.to_html() == "color"

    def test_class_kind_has_no_anchor(
        self, circle: TypeElement, shape: TypeElement, get_color: ExecutableElement
    ) -> None:
        link = make_links(circle).get_doc_link(LinkKind.CLASS, shape, get_color, "Shape")
        assert link.to_html() == '<a href="Shape.html">Shape</a>'

    def test_deprecated_kind_targets_member(
        self, circle: TypeElement, get_color: ExecutableElement
    ) -> None:
        link = make_links(circle).get_member_link(
            LinkKind.DEPRECATED, get_color, "com.example.Shape.getColor"
        )
        assert link.to_html() == '<a href="Shape.html#getColor">com.example.Shape.getColor</a>'

    def test_member_link_uses_enclosing_type(self, circle: TypeElement, get_color: ExecutableElement) -> None:
        link = make_links(circle).get_member_link(LinkKind.MEMBER, get_color, "x")
        assert link.to_html() == '<a href="Shape.html#getColor">x</a>'


class TestClassLinks:
    def test_pre_qualified(self, circle: TypeElement, shape: TypeElement) -> None:
        link = make_links(circle).get_pre_qualified_class_link(LinkKind.MEMBER, shape)
        assert link.to_html() == 'com.example.<a href="Shape.html">Shape</a>'

    def test_pre_qualified_external(self, circle: TypeElement) -> None:
        node = TypeElement("Node", package="javafx.scene", included=False)
        link = make_links(circle).get_pre_qualified_class_link(LinkKind.MEMBER, node)
        assert link.to_html() == "javafx.scene.Node"

    def test_type_link_with_arguments(self, circle: TypeElement, shape: TypeElement) -> None:
        list_of_shapes = TypeRef("List", arguments=(shape.as_type(),))
        link = make_links(circle).get_type_link(list_of_shapes)
        assert link.to_html() == 'List&lt;<a href="Shape.html">Shape</a>&gt;'

    def test_type_variable_is_plain(self, circle: TypeElement) -> None:
        link = make_links(circle).get_type_link(TypeRef("T", is_variable=True))
        assert link.to_html() == "T"


class TestNames:
    def test_get_name_is_stable(self, circle: TypeElement) -> None:
        links = make_links(circle)
        assert links.get_name("com.example.Shape") == "com.example.Shape"
        assert links.get_name("Map Entry") == "Map-Entry"
        assert links.get_name("Outer<T>") == links.get_name("Outer<T>")
