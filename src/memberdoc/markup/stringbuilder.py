"""StringBuilder for O(n) HTML accumulation.

Markup nodes write themselves into a StringBuilder; the whole page is
joined once at the end instead of concatenating per node.

Thread Safety:
StringBuilder instances are local to each to_html() call.

"""

from __future__ import annotations

from memberdoc.utils.text import escape_attr, html_escape


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<code>").append_escaped("List<T>").append("</code>")
            >>> sb.build()
            '<code>List&lt;T&gt;</code>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append raw markup (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_escaped(self, s: str) -> StringBuilder:
        """Append text, escaping HTML special characters."""
        if s:
            self._parts.append(html_escape(s))
        return self

    def append_attr(self, name: str, value: str) -> StringBuilder:
        """Append ``name="value"`` preceded by a space."""
        self._parts.append(f' {name}="{escape_attr(value)}"')
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append raw markup followed by newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
