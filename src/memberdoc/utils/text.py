"""Text helpers shared by the markup builder and the writers.

Example:
    >>> from memberdoc.utils.text import html_escape, first_sentence
    >>> html_escape("List<String>")
    'List&lt;String&gt;'
    >>> first_sentence("Sets the color. Fires a change event.")
    'Sets the color.'
"""

from __future__ import annotations

import html as html_module
import re

# A sentence ends at a period followed by whitespace, or at a block-level tag.
_SENTENCE_END = re.compile(r"\.(?=\s)|<(?:p|pre|dl|ul|ol|table|h[1-6]|hr)\b", re.IGNORECASE)


def html_escape(text: str) -> str:
    """Escape text content for HTML.

    Escapes <, >, & and double quotes. Single quotes are left alone since
    attribute values are always double-quoted.
    """
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def escape_attr(text: str) -> str:
    """Escape an attribute value.

    Examples:
        >>> escape_attr('a "b" <c>')
        'a &quot;b&quot; &lt;c&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True).replace("&#x27;", "'")


def first_sentence(body: str) -> str:
    """Return the first sentence of an HTML documentation body.

    The sentence includes its terminating period. Bodies with no sentence
    break are returned whole, stripped of surrounding whitespace.
    """
    body = body.strip()
    if not body:
        return ""
    match = _SENTENCE_END.search(body, 1)
    if match is None:
        return body
    if match.group(0) == ".":
        return body[: match.end()]
    return body[: match.start()].rstrip()


def decapitalize(name: str) -> str:
    """Lower-case the first character, following the bean naming rule.

    Names starting with two upper-case letters (``URL``) are returned as-is.

    Examples:
        >>> decapitalize("Color")
        'color'
        >>> decapitalize("URL")
        'URL'
    """
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]
