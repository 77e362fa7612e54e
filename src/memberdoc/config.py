"""Doclet options for memberdoc writers.

Options are a frozen dataclass passed explicitly to writers and
collaborators. A ContextVar holds the default used when a caller does not
pass options, so a page-generation pass can scope options without threading
them through every call.

Usage:
    # Explicit (preferred)
    options = DocletOptions(summarize_overridden_methods=True)
    writer = PropertyWriter(type_element, options=options)

    # Scoped default
    with doclet_options_context(DocletOptions(javafx=True)):
        writer = PropertyWriter(type_element)

Thread Safety:
    ContextVars are thread-local by design. DocletOptions is immutable.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocletOptions:
    """Immutable doclet options.

    Attributes:
        summarize_overridden_methods: Label inherited member lists as
            "declared in" instead of "inherited from"
        link_external_public: Treat public types outside the documented set
            as linkable (an external documentation set is linked)
        javafx: Recognize ``fooProperty()`` accessors as properties
        doc_root: Prefix applied to every generated href (empty for
            page-relative links)

    """

    summarize_overridden_methods: bool = False
    link_external_public: bool = False
    javafx: bool = True
    doc_root: str = ""

    @classmethod
    def from_dict(cls, config_dict: dict) -> "DocletOptions":
        """Create DocletOptions from a dictionary.

        Unknown keys are ignored, so a host tool can pass its whole option
        table.

        Example:
            >>> options = DocletOptions.from_dict({
            ...     "summarize_overridden_methods": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> options.summarize_overridden_methods
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: DocletOptions = DocletOptions()

_doclet_options: ContextVar[DocletOptions] = ContextVar(
    "doclet_options",
    default=_DEFAULT_OPTIONS,
)


def get_doclet_options() -> DocletOptions:
    """Get the current default options (thread-local)."""
    return _doclet_options.get()


def set_doclet_options(options: DocletOptions) -> None:
    """Set the default options for the current context."""
    _doclet_options.set(options)


def reset_doclet_options() -> None:
    """Reset to the module-level default options."""
    _doclet_options.set(_DEFAULT_OPTIONS)


@contextmanager
def doclet_options_context(options: DocletOptions) -> Iterator[None]:
    """Context manager for temporary option changes.

    Restores the previous options even if an exception is raised.

    Example:
        >>> with doclet_options_context(DocletOptions(javafx=False)):
        ...     get_doclet_options().javafx
        False

    """
    previous = _doclet_options.get()
    _doclet_options.set(options)
    try:
        yield
    finally:
        _doclet_options.set(previous)


__all__ = [
    "DocletOptions",
    "doclet_options_context",
    "get_doclet_options",
    "reset_doclet_options",
    "set_doclet_options",
]
