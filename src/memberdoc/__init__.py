"""memberdoc: HTML member sections for API documentation pages.

Renders the property summary table, inherited property lists and property
details of a type page from an in-memory symbol model. Zero runtime
dependencies.

Quick Start:
    >>> from memberdoc import ExecutableElement, TypeElement, TypeRef, render_properties
    >>> shape = TypeElement("Shape", package="com.example")
    >>> get_color = ExecutableElement(
    ...     "getColor",
    ...     enclosing=shape,
    ...     return_type=TypeRef("Color"),
    ...     modifiers=("public",),
    ...     body="The fill color.",
    ... )
    >>> html = render_properties(shape, [get_color])

Custom collaborators:
    >>> from memberdoc import DocletOptions, PropertyWriter, Resources
    >>> writer = PropertyWriter(
    ...     shape,
    ...     options=DocletOptions(summarize_overridden_methods=True),
    ...     resources=Resources.from_toml("messages_de.toml"),
    ... )

"""

from collections.abc import Mapping, Sequence

from memberdoc.config import (
    DocletOptions,
    doclet_options_context,
    get_doclet_options,
    reset_doclet_options,
    set_doclet_options,
)
from memberdoc.elements import ElementClassifier
from memberdoc.errors import MalformedElementError, MemberdocError, MissingResourceError, RenderError
from memberdoc.links import DocPaths, LinkFactory, LinkKind
from memberdoc.markup import Content, ContentBuilder, HtmlStyle, HtmlTree, Table, TableHeader
from memberdoc.model import DocTag, ElementKind, ExecutableElement, TypeElement, TypeRef
from memberdoc.page import PropertySectionBuilder
from memberdoc.resources import Contents, Resources
from memberdoc.writers import (
    MemberSummaryWriter,
    MemberWriterHelpers,
    PropertyDetailWriter,
    PropertyWriter,
)

__version__ = "0.1.0"


def render_properties(
    type_element: TypeElement,
    properties: Sequence[ExecutableElement],
    inherited: Mapping[TypeElement, Sequence[ExecutableElement]] | None = None,
    *,
    options: DocletOptions | None = None,
    resources: Resources | None = None,
) -> str:
    """Render the property sections of ``type_element``'s page to HTML.

    Args:
        type_element: Type whose page is being built
        properties: Properties declared on the type, in page order
        inherited: Properties inherited per supertype, in page order
        options: Doclet options (context default if None)
        resources: Message table (built-in English if None)

    Returns:
        HTML string
    """
    writer = PropertyWriter(type_element, options=options, resources=resources)
    return PropertySectionBuilder(writer).build(properties, inherited)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render_properties",
    "PropertySectionBuilder",
    "PropertyWriter",
    # Writer contracts
    "MemberSummaryWriter",
    "MemberWriterHelpers",
    "PropertyDetailWriter",
    # Symbol model
    "DocTag",
    "ElementKind",
    "ExecutableElement",
    "TypeElement",
    "TypeRef",
    # Collaborators
    "Contents",
    "DocPaths",
    "ElementClassifier",
    "LinkFactory",
    "LinkKind",
    "Resources",
    # Markup
    "Content",
    "ContentBuilder",
    "HtmlStyle",
    "HtmlTree",
    "Table",
    "TableHeader",
    # Configuration (ContextVar-based)
    "DocletOptions",
    "doclet_options_context",
    "get_doclet_options",
    "reset_doclet_options",
    "set_doclet_options",
    # Errors
    "MalformedElementError",
    "MemberdocError",
    "MissingResourceError",
    "RenderError",
]
