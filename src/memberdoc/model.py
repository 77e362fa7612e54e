"""Symbol model consumed by the member writers.

The model is produced upstream (by whatever reads compiled symbol
information) and is treated as already validated. All elements are frozen
dataclasses with slots, safe to share across page builds.

Element Hierarchy:
Element (base)
├── TypeElement     (class, interface, enum, record, annotation type)
└── ExecutableElement (method; properties are accessor methods)

TypeRef describes a use of a type (a return type, a supertype clause) and
may point back at its declaring TypeElement.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ElementKind(Enum):
    """Kinds of type declarations."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ANNOTATION_TYPE = "annotation_type"


@dataclass(frozen=True, slots=True)
class TypeRef:
    """A reference to a type, with type arguments.

    ``List<T>`` is ``TypeRef("List", arguments=(TypeRef("T", is_variable=True),))``.

    """

    name: str
    arguments: tuple[TypeRef, ...] = ()
    element: TypeElement | None = field(default=None, compare=False, repr=False)
    is_variable: bool = False

    def substitute(self, bindings: dict[str, TypeRef]) -> TypeRef:
        """Replace type variables using ``bindings``.

        Unbound variables are left untouched.
        """
        if self.is_variable:
            return bindings.get(self.name, self)
        if not self.arguments:
            return self
        return TypeRef(
            name=self.name,
            arguments=tuple(arg.substitute(bindings) for arg in self.arguments),
            element=self.element,
        )

    def __str__(self) -> str:
        if not self.arguments:
            return self.name
        return f"{self.name}<{', '.join(str(a) for a in self.arguments)}>"


@dataclass(frozen=True, slots=True)
class DocTag:
    """A block tag from a documentation comment (``@since 1.2``)."""

    name: str
    text: str


@dataclass(frozen=True, slots=True)
class Element:
    """Base class for documented elements."""

    name: str


@dataclass(frozen=True, slots=True)
class TypeElement(Element):
    """A class or interface declaration.

    Attributes:
        package: Dotted package name ("" for the unnamed package)
        kind: Declaration kind
        public: Whether the type is publicly accessible
        included: Whether the type is part of the documented set
        hidden: Whether the type is excluded from output pages (@hidden)
        type_parameters: Declared type variable names, in order
        supertypes: Superclass and superinterfaces as written

    """

    package: str = ""
    kind: ElementKind = ElementKind.CLASS
    public: bool = True
    included: bool = True
    hidden: bool = False
    type_parameters: tuple[str, ...] = ()
    supertypes: tuple[TypeRef, ...] = field(default=(), compare=False, repr=False)

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    def as_type(self) -> TypeRef:
        """A raw reference to this type."""
        return TypeRef(self.name, element=self)


@dataclass(frozen=True, slots=True)
class ExecutableElement(Element):
    """A method. Property accessors are methods named by convention.

    Attributes:
        enclosing: The type declaring this member
        return_type: Declared return type, possibly using type variables
        modifiers: Source modifiers ("public", "static", ...)
        body: Documentation body as HTML ("" when undocumented)
        tags: Block tags from the documentation comment
        deprecated: Whether the member is deprecated

    """

    enclosing: TypeElement | None = None
    return_type: TypeRef = field(default_factory=lambda: TypeRef("void"))
    modifiers: tuple[str, ...] = ()
    body: str = ""
    tags: tuple[DocTag, ...] = ()
    deprecated: bool = False


__all__ = [
    "DocTag",
    "Element",
    "ElementKind",
    "ExecutableElement",
    "TypeElement",
    "TypeRef",
]
