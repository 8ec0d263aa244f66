"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from chatmark.parsing.charsets import INLINE_SPECIAL

    if char in INLINE_SPECIAL:  # O(1) lookup
        ...
"""

# Block prefixes
QUOTE_PREFIX: str = "> "
BULLET_MARKERS: frozenset[str] = frozenset("*-")

# Inline delimiters
CODE_BLOCK_FENCE: str = "```"
CODE_DELIMITER: str = "`"
BOLD_DELIMITER: str = "*"
ITALIC_DELIMITER: str = "_"
STRIKETHROUGH_DELIMITER: str = "~"

# Single-character emphasis delimiters (content may not contain newlines)
EMPHASIS_DELIMITERS: frozenset[str] = frozenset("*_~")

# Characters that can start an inline span
INLINE_SPECIAL: frozenset[str] = frozenset("`*_~")
