"""ContextVar-based parse configuration for chatmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per ChatMarkup instance, read by the parser and the
inline formatter in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In ChatMarkup class
    cm = ChatMarkup(text_transformer=fill_variables)
    html = cm("Hi *{{name}}*")  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from chatmark.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(text_transformer=str.upper))
    try:
        doc = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(text_transformer=str.upper)):
        doc = Parser(source).parse()

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        text_transformer: Optional callback applied to the content of every
            Text span (literal text only; code, bold, italic and
            strikethrough captures are left as typed). Useful for filling
            template variables after markup has been recognised.

    """

    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary, ignoring unknown keys.

        Example:
            >>> ParseConfig.from_dict({"text_transformer": str.strip, "x": 1})
            ParseConfig(text_transformer=<method 'strip' of 'str' objects>)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "chatmark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the active parse configuration for this thread/context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context only."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration (module-level singleton)."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(text_transformer=str.upper)):
        ...     doc = parse("hi *there*")
        >>> doc.children[0].children
        (Text(content='HI '), Bold(content='there'))

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
