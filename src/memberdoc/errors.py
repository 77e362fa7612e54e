"""Exception classes for memberdoc.

Writers perform no validation of their input: the symbol model is assumed
to be checked upstream. The exceptions here mark programmer errors and
missing configuration, and are never caught inside the library.
"""

from __future__ import annotations


class MemberdocError(Exception):
    """Base exception for all memberdoc errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MemberdocError):
    """Error during HTML rendering.

    Raised when a writer is handed content it cannot place in the output.
    """

    pass


class MalformedElementError(RenderError):
    """A symbol model element violates a writer precondition.

    Raised when, for example, a member has no enclosing type.
    """

    def __init__(self, element_name: str, message: str) -> None:
        """Initialize malformed element error.

        Args:
            element_name: Name of the offending element
            message: Description of the violated precondition
        """
        self.element_name = element_name
        super().__init__(f"Element '{element_name}': {message}")


class MissingResourceError(MemberdocError, KeyError):
    """A message key is absent from the resource table."""

    def __init__(self, key: str) -> None:
        """Initialize missing resource error.

        Args:
            key: The message key that was looked up
        """
        self.key = key
        super().__init__(f"No resource for key '{key}'")

    def __str__(self) -> str:
        return self.args[0]
