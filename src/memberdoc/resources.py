"""Localized text for generated pages.

Resources maps fixed message keys to strings. The built-in table is
English; a host tool can layer overrides on top from a mapping or a TOML
file. Contents pre-builds the labels the writers use on every page.

Example:
    >>> resources = Resources()
    >>> resources.get_text("doclet.Properties_Inherited_From_Class")
    'Properties inherited from class'
    >>> german = resources.with_overrides({"doclet.Properties": "Eigenschaften"})
    >>> german.get_text("doclet.Properties")
    'Eigenschaften'

TOML overrides:
    [messages]
    "doclet.Properties" = "Eigenschaften"

"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from memberdoc.errors import MissingResourceError
from memberdoc.markup.content import TextContent
from memberdoc.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "doclet.Properties": "Properties",
        "doclet.Property": "Property",
        "doclet.Property_Summary": "Property Summary",
        "doclet.Property_Details": "Property Details",
        "doclet.Properties_Inherited_From_Class": "Properties inherited from class",
        "doclet.Properties_Inherited_From_Interface": "Properties inherited from interface",
        "doclet.Properties_Declared_In_Class": "Properties declared in class",
        "doclet.Properties_Declared_In_Interface": "Properties declared in interface",
        "doclet.Type": "Type",
        "doclet.Description": "Description",
        "doclet.Description_From_Class": "Description copied from class:",
        "doclet.Description_From_Interface": "Description copied from interface:",
        "doclet.Since": "Since:",
        "doclet.See_Also": "See Also:",
        "doclet.DefaultValue": "Default value:",
        "doclet.Deprecated": "Deprecated.",
    }
)


class Resources:
    """Immutable message table.

    Thread Safety:
        Immutable after creation. Safe to share across page builds.

    """

    __slots__ = ("_messages",)

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        messages = dict(DEFAULT_MESSAGES)
        if overrides:
            messages.update(overrides)
        self._messages: Mapping[str, str] = MappingProxyType(messages)

    @classmethod
    def from_toml(cls, path: str | Path) -> Resources:
        """Load overrides from the ``[messages]`` table of a TOML file."""
        with Path(path).open("rb") as f:
            data = tomllib.load(f)
        messages = data.get("messages", {})
        logger.debug("Loaded %d message overrides from %s", len(messages), path)
        return cls({str(k): str(v) for k, v in messages.items()})

    def with_overrides(self, overrides: Mapping[str, str]) -> Resources:
        """Return a new table with ``overrides`` layered on this one."""
        merged = dict(self._messages)
        merged.update(overrides)
        return Resources(merged)

    def get_text(self, key: str, *args: object) -> str:
        """Look up ``key`` and format positional ``args`` into it.

        Raises:
            MissingResourceError: If the key is not in the table
        """
        try:
            text = self._messages[key]
        except KeyError:
            raise MissingResourceError(key) from None
        return text.format(*args) if args else text

    def __contains__(self, key: str) -> bool:
        return key in self._messages


class Contents:
    """Labels shared by all member writers, built once per page pass."""

    __slots__ = (
        "properties",
        "property_label",
        "property_summary_label",
        "property_details_label",
        "type_label",
        "description_label",
        "descfrm_class_label",
        "descfrm_interface_label",
        "since_label",
        "see_also_label",
        "default_value_label",
        "deprecated_label",
    )

    def __init__(self, resources: Resources) -> None:
        def text(key: str) -> TextContent:
            return TextContent(resources.get_text(key))

        self.properties = text("doclet.Properties")
        self.property_label = text("doclet.Property")
        self.property_summary_label = text("doclet.Property_Summary")
        self.property_details_label = text("doclet.Property_Details")
        self.type_label = text("doclet.Type")
        self.description_label = text("doclet.Description")
        self.descfrm_class_label = text("doclet.Description_From_Class")
        self.descfrm_interface_label = text("doclet.Description_From_Interface")
        self.since_label = text("doclet.Since")
        self.see_also_label = text("doclet.See_Also")
        self.default_value_label = text("doclet.DefaultValue")
        self.deprecated_label = text("doclet.Deprecated")
