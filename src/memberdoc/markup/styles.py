"""Style classes, heading levels, section ids and marker comments.

Values are the CSS class names and fragment identifiers that appear in the
generated HTML; stylesheets and in-page navigation depend on them, so they
must stay stable across releases.
"""

from __future__ import annotations

from enum import Enum


class HtmlStyle(Enum):
    """CSS classes used by the member writers."""

    block = "block"
    col_first = "col-first"
    col_second = "col-second"
    col_last = "col-last"
    descfrm_type_label = "descfrm-type-label"
    detail = "detail"
    details = "details"
    element_name = "element-name"
    inherited_list = "inherited-list"
    member_list = "member-list"
    member_name_link = "member-name-link"
    member_signature = "member-signature"
    member_summary = "member-summary"
    modifiers = "modifiers"
    notes = "notes"
    property_details = "property-details"
    property_summary = "property-summary"
    return_type = "return-type"
    row_color = "row-color"
    alt_color = "alt-color"
    summary = "summary"

    def __str__(self) -> str:
        return self.value


class Headings:
    """Heading tags for the parts of a type declaration page."""

    SUMMARY_HEADING = "h2"
    DETAILS_HEADING = "h2"
    MEMBER_HEADING = "h3"
    INHERITED_SUMMARY_HEADING = "h3"


class SectionName(Enum):
    """Fragment identifiers of page sections."""

    PROPERTY_SUMMARY = "property-summary"
    PROPERTY_DETAIL = "property-detail"
    PROPERTIES_INHERITANCE = "properties-inherited-from-class-"

    def get_name(self) -> str:
        return self.value
