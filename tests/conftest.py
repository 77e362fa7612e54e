"""Shared symbol model fixtures.

The model is a small hierarchy in package com.example:

    Shape (class)            getColor, isFilled
    Paintable (interface)    isVisible
    Circle extends Shape implements Paintable
                             getRadius
"""

from __future__ import annotations

import pytest

from memberdoc.model import DocTag, ElementKind, ExecutableElement, TypeElement, TypeRef

COLOR = TypeRef("Color")


@pytest.fixture
def shape() -> TypeElement:
    return TypeElement("Shape", package="com.example")


@pytest.fixture
def paintable() -> TypeElement:
    return TypeElement("Paintable", package="com.example", kind=ElementKind.INTERFACE)


@pytest.fixture
def circle(shape: TypeElement, paintable: TypeElement) -> TypeElement:
    return TypeElement(
        "Circle",
        package="com.example",
        supertypes=(shape.as_type(), paintable.as_type()),
    )


@pytest.fixture
def get_color(shape: TypeElement) -> ExecutableElement:
    return ExecutableElement(
        "getColor",
        enclosing=shape,
        return_type=COLOR,
        modifiers=("public",),
        body="The fill color. Defaults to black.",
        tags=(DocTag("since", "1.2"), DocTag("defaultValue", "<code>BLACK</code>")),
    )


@pytest.fixture
def is_visible(paintable: TypeElement) -> ExecutableElement:
    return ExecutableElement(
        "isVisible",
        enclosing=paintable,
        return_type=TypeRef("boolean"),
        modifiers=("public", "abstract"),
        body="Whether the shape is drawn.",
    )


@pytest.fixture
def get_radius(circle: TypeElement) -> ExecutableElement:
    return ExecutableElement(
        "getRadius",
        enclosing=circle,
        return_type=TypeRef("double"),
        modifiers=("public",),
        body="The radius in pixels.",
    )
