"""Element classification for the member writers.

ElementClassifier answers the questions a writer asks about the symbol
model: what kind of type is this, will it have a page, what is the display
name of this accessor, what does this return type look like from a given
subtype. It holds only the doclet options and is safe to share.

Property naming conventions:
- Bean accessors: ``getColor``, ``setColor``, ``isEnabled`` name the
  properties ``color`` and ``enabled``.
- JavaFX accessors (``options.javafx``): ``colorProperty`` names ``color``.

Example:
    >>> classifier = ElementClassifier()
    >>> classifier.is_property("isEnabled")
    True
    >>> classifier.property_name("isEnabled")
    'enabled'
    >>> classifier.property_name("toString")
    ''

"""

from __future__ import annotations

import re

from memberdoc.config import DocletOptions, get_doclet_options
from memberdoc.errors import MalformedElementError
from memberdoc.model import Element, ElementKind, ExecutableElement, TypeElement, TypeRef
from memberdoc.utils.text import decapitalize, first_sentence

_ACCESSOR = re.compile(r"^(?:get|set|is)(?=[A-Z0-9_$])")
_FX_SUFFIX = "Property"


class ElementClassifier:
    """Predicates and derived names for model elements."""

    __slots__ = ("options",)

    def __init__(self, options: DocletOptions | None = None) -> None:
        self.options = options or get_doclet_options()

    # =========================================================================
    # Type predicates
    # =========================================================================

    def is_class(self, element: TypeElement) -> bool:
        """Classes, enums and records; everything that is not an interface."""
        return element.kind in (ElementKind.CLASS, ElementKind.ENUM, ElementKind.RECORD)

    def is_interface(self, element: TypeElement) -> bool:
        return element.kind in (ElementKind.INTERFACE, ElementKind.ANNOTATION_TYPE)

    def is_public(self, element: TypeElement) -> bool:
        return element.public

    def is_included(self, element: TypeElement) -> bool:
        return element.included

    def is_linkable(self, element: TypeElement) -> bool:
        """Whether the output will hold a page for ``element``.

        Included types get a page unless hidden. Other public types are
        linkable only when an external documentation set is linked.
        """
        if element.included:
            return not element.hidden
        return element.public and self.options.link_external_public

    # =========================================================================
    # Property naming
    # =========================================================================

    def is_property(self, name: str) -> bool:
        """Whether ``name`` follows an accessor naming convention."""
        if _ACCESSOR.match(name):
            return True
        return self.options.javafx and name.endswith(_FX_SUFFIX) and len(name) > len(_FX_SUFFIX)

    def property_name(self, name: str) -> str:
        """The property named by accessor ``name``, or "" if none."""
        match = _ACCESSOR.match(name)
        if match is not None:
            return decapitalize(name[match.end() :])
        if self.options.javafx and name.endswith(_FX_SUFFIX):
            return name[: -len(_FX_SUFFIX)]
        return ""

    def property_label(self, name: str) -> str:
        """Display label for a property member; the raw name if unconventional."""
        return self.property_name(name) or name

    # =========================================================================
    # Members
    # =========================================================================

    def enclosing_type(self, member: ExecutableElement) -> TypeElement:
        if member.enclosing is None:
            raise MalformedElementError(member.name, "member has no enclosing type")
        return member.enclosing

    def get_full_body(self, member: ExecutableElement) -> str:
        return member.body.strip()

    def get_first_sentence(self, member: ExecutableElement) -> str:
        return first_sentence(member.body)

    def get_fully_qualified_name(self, element: Element) -> str:
        """Dotted name; members are qualified by their enclosing type."""
        if isinstance(element, TypeElement):
            return element.qualified_name
        if isinstance(element, ExecutableElement):
            return f"{self.enclosing_type(element).qualified_name}.{element.name}"
        return element.name

    def get_return_type(self, type_element: TypeElement, member: ExecutableElement) -> TypeRef:
        """The member's return type as seen from ``type_element``.

        Type variables of the declaring type are replaced by the arguments
        ``type_element`` binds them to through its supertype chain, so an
        inherited ``T getValue()`` shows ``String`` on a subtype of
        ``Box<String>``.
        """
        holder = self.enclosing_type(member)
        if holder == type_element:
            return member.return_type
        bindings = self._bindings_for(type_element, holder, {}, set())
        if bindings is None:
            return member.return_type
        return member.return_type.substitute(bindings)

    def _bindings_for(
        self,
        current: TypeElement,
        target: TypeElement,
        bindings: dict[str, TypeRef],
        seen: set[str],
    ) -> dict[str, TypeRef] | None:
        # Depth-first walk of the supertype graph; returns the bindings of
        # target's type parameters, or None when target is not a supertype.
        if current.qualified_name in seen:
            return None
        seen.add(current.qualified_name)
        for supertype in current.supertypes:
            element = supertype.element
            if element is None:
                continue
            arguments = tuple(arg.substitute(bindings) for arg in supertype.arguments)
            next_bindings = dict(zip(element.type_parameters, arguments, strict=False))
            if element == target:
                return next_bindings
            found = self._bindings_for(element, target, next_bindings, seen)
            if found is not None:
                return found
        return None
