"""LineToken and LineKind definitions for the chatmark lexer.

The lexer produces one LineToken per input line; the parser turns each
token into a Line node by running the inline formatter over its value.

Thread Safety:
LineToken is frozen (immutable) and safe to share across threads.
LineKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    """Block kinds a line can be classified as.

    Declaration order is the classification order.

    """

    QUOTE = auto()  # > text
    BULLET_ITEM = auto()  # * item, - item
    NUMBERED_ITEM = auto()  # 1. item
    PLAIN = auto()


@dataclass(frozen=True, slots=True)
class LineToken:
    """A classified line.

    Attributes:
        kind: Block kind of the line
        value: Line text with its block prefix removed
        lineno: Line number in the source (1-indexed)
        number: Verbatim item number for NUMBERED_ITEM lines, else None

    """

    kind: LineKind
    value: str
    lineno: int = 1
    number: str | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        value_preview = self.value[:20] + "..." if len(self.value) > 20 else self.value
        return f"LineToken({self.kind.name}, {value_preview!r}, line {self.lineno})"


__all__ = ["LineKind", "LineToken"]
