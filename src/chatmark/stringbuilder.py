"""StringBuilder for O(n) string accumulation in renderers.

Appends fragments to a list and joins once at the end, instead of
repeatedly concatenating immutable strings.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<strong>").append("hi").append("</strong>").build()
            '<strong>hi</strong>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped). Returns self for chaining."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of fragments appended so far."""
        return len(self._parts)
