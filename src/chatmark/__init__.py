"""
chatmark — WhatsApp-style chat markup parser

Turns a message typed with chat markup into a typed, immutable document:
one classified line per input line (quote, bullet item, numbered item or
plain), each holding inline spans (code block, inline code, bold, italic,
strikethrough, text). Parsing is total: malformed markup stays literal
text and no input raises.

Quick Start:
    >>> from chatmark import parse, render
    >>> doc = parse("> hello *world*")
    >>> doc.children[0]
    Quote(children=(Text(content='hello '), Bold(content='world')))
    >>> render(doc)
    '<span class="chat-quote">hello <strong>world</strong></span>'

    >>> # Or use the high-level ChatMarkup class
    >>> from chatmark import ChatMarkup
    >>> cm = ChatMarkup(bullet="-")
    >>> cm("- _soon_")
    '<span class="chat-list-item"><span class="chat-marker">-</span><span><em>soon</em></span></span>'

Installation:
    pip install chatmark             # Core parser (zero runtime deps)
    pip install chatmark[test]       # + pytest and Hypothesis
"""

from collections.abc import Callable, Iterable

from chatmark.cache import DictParseCache, ParseCache, hash_config, hash_content
from chatmark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from chatmark.errors import ChatmarkError, RenderError, SerializationError
from chatmark.lexer import Lexer, classify_line
from chatmark.nodes import (
    Bold,
    BulletItem,
    CodeBlock,
    Document,
    InlineCode,
    Italic,
    Line,
    Node,
    NumberedItem,
    Plain,
    Quote,
    Span,
    Strikethrough,
    Text,
)
from chatmark.parser import Parser
from chatmark.parsing.inline import InlineFormatter, parse_inline
from chatmark.renderers.html import DEFAULT_BULLET, DEFAULT_LINE_BREAK, HtmlRenderer
from chatmark.renderers.plain import PlainRenderer, render_plain
from chatmark.renderers.protocol import DocumentRenderer
from chatmark.serialization import from_dict, from_json, to_dict, to_json
from chatmark.text import extract_text
from chatmark.tokens import LineKind, LineToken
from chatmark.utils.logger import get_logger
from chatmark.visitor import BaseVisitor, transform

__version__ = "0.1.0"

logger = get_logger(__name__)


def _parse_document(source: str, config: ParseConfig, cache: ParseCache | None) -> Document:
    """Parse under an already-active config, consulting ``cache`` if given."""
    config_hash = hash_config(config) if cache is not None else ""
    content_hash = ""
    if cache is not None and config_hash:
        content_hash = hash_content(source)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            logger.debug("Parse cache hit for %s", content_hash[:12])
            return cached

    doc = Document(children=Parser(source).parse())

    if cache is not None and config_hash:
        cache.put(content_hash, config_hash, doc)
    return doc


def parse(text: str, *, cache: ParseCache | None = None) -> Document:
    """Parse chat markup into a Document.

    Uses the config active in the current context (see
    ``parse_config_context``); defaults apply otherwise.

    Args:
        text: Message text. Any string is valid.
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result. Bypassed
            when the active config has a text_transformer.

    Returns:
        Document with one Line per ``\\n``-separated line. An empty string
        gives a Document with no lines.

    Example:
        >>> parse("1. first\\n2. second").children[1].number
        '2'
    """
    return _parse_document(text, get_parse_config(), cache)


def render(
    doc: Document,
    *,
    bullet: str = DEFAULT_BULLET,
    line_break: str = DEFAULT_LINE_BREAK,
) -> str:
    """Render a Document to an HTML fragment.

    Args:
        doc: Document to render
        bullet: Glyph shown before bullet items
        line_break: HTML inserted between consecutive lines

    Returns:
        HTML string ("" for an empty document)
    """
    return HtmlRenderer(bullet=bullet, line_break=line_break).render(doc)


class ChatMarkup:
    """High-level processor combining parser and HTML renderer.

    Usage:
        >>> cm = ChatMarkup()
        >>> cm("*bold* and ~gone~")
        '<strong>bold</strong> and <del>gone</del>'

        >>> # Fill template variables in literal text only
        >>> cm = ChatMarkup(text_transformer=lambda s: s.replace("{{name}}", "Ana"))
        >>> cm("Hi {{name}}, `{{name}}` stays")
        'Hi Ana, <code>{{name}}</code> stays'

    Thread Safety:
        Config is immutable and set via ContextVar per call. Safe to use
        one instance from several threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        text_transformer: Callable[[str], str] | None = None,
        bullet: str = DEFAULT_BULLET,
        line_break: str = DEFAULT_LINE_BREAK,
    ) -> None:
        """Initialize processor.

        Args:
            text_transformer: Optional callback applied to every Text span
            bullet: Glyph shown before bullet items
            line_break: HTML inserted between consecutive lines
        """
        self._config = ParseConfig(text_transformer=text_transformer)
        self._renderer = HtmlRenderer(bullet=bullet, line_break=line_break)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, text: str) -> str:
        """Parse and render in one call."""
        return self._renderer.render(self.parse(text))

    def parse(self, text: str, *, cache: ParseCache | None = None) -> Document:
        """Parse text into a Document using this instance's config."""
        with parse_config_context(self._config):
            return _parse_document(text, self._config, cache)

    def parse_many(
        self,
        texts: Iterable[str],
        *,
        cache: ParseCache | None = None,
    ) -> list[Document]:
        """Parse a batch of messages, setting config once for the batch.

        When cache is provided, duplicate messages within the batch hit it.

        Example:
            >>> docs = ChatMarkup().parse_many(["*a*", "_b_"])
            >>> [type(d.children[0].children[0]).__name__ for d in docs]
            ['Bold', 'Italic']
        """
        with parse_config_context(self._config):
            return [_parse_document(text, self._config, cache) for text in texts]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML with this instance's options."""
        return self._renderer.render(doc)


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_inline",
    "render",
    "render_plain",
    "extract_text",
    # High-level
    "ChatMarkup",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Nodes
    "Node",
    "Document",
    "Line",
    "Quote",
    "BulletItem",
    "NumberedItem",
    "Plain",
    "Span",
    "Text",
    "CodeBlock",
    "InlineCode",
    "Bold",
    "Italic",
    "Strikethrough",
    # Parser components
    "Lexer",
    "LineKind",
    "LineToken",
    "classify_line",
    "InlineFormatter",
    "Parser",
    # Renderers
    "DocumentRenderer",
    "HtmlRenderer",
    "PlainRenderer",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "ChatmarkError",
    "RenderError",
    "SerializationError",
]
