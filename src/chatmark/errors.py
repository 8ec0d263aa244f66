"""Exception classes for chatmark.

Parsing never raises: every string is valid chat markup. Errors only
exist at the edges, when a renderer or the deserializer is handed
something that is not a chatmark document.
"""

from __future__ import annotations


class ChatmarkError(Exception):
    """Base exception for all chatmark errors."""

    pass


class RenderError(ChatmarkError):
    """Error during rendering.

    Raised when a renderer meets a node type it does not know.
    """

    def __init__(self, node: object, renderer: str) -> None:
        """Initialize render error.

        Args:
            node: The offending node
            renderer: Name of the renderer class
        """
        self.node = node
        self.renderer = renderer
        super().__init__(f"{renderer} cannot render {type(node).__name__!s} node")


class SerializationError(ChatmarkError, ValueError):
    """Serialized data does not describe a chatmark node.

    Subclasses ValueError so callers treating bad input generically keep
    working.
    """

    pass
