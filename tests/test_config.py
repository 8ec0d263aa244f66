"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior and the way the
parser picks up the active config.
"""

from threading import Thread

import pytest

from chatmark import (
    ParseConfig,
    Parser,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from chatmark.nodes import Bold, Text


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        assert ParseConfig().text_transformer is None

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.text_transformer = str.upper  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"text_transformer": str.upper, "tables_enabled": True})
        assert config.text_transformer is str.upper

    def test_from_empty_dict(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        config = ParseConfig(text_transformer=str.upper)
        set_parse_config(config)
        try:
            assert get_parse_config() is config
        finally:
            reset_parse_config()
        assert get_parse_config().text_transformer is None

    def test_parser_reads_config(self) -> None:
        set_parse_config(ParseConfig(text_transformer=str.upper))
        try:
            lines = Parser("ab *cd*").parse()
        finally:
            reset_parse_config()
        assert lines[0].children == (Text(content="AB "), Bold(content="cd"))


class TestContextManager:
    """Test parse_config_context."""

    def test_restores_previous(self) -> None:
        outer = ParseConfig(text_transformer=str.lower)
        inner = ParseConfig(text_transformer=str.upper)
        with parse_config_context(outer):
            with parse_config_context(inner):
                assert get_parse_config() is inner
            assert get_parse_config() is outer
        assert get_parse_config().text_transformer is None

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(text_transformer=str.upper)):
                raise RuntimeError("boom")
        assert get_parse_config().text_transformer is None

    def test_parse_uses_context(self) -> None:
        with parse_config_context(ParseConfig(text_transformer=str.upper)):
            doc = parse("hi")
        assert doc.children[0].children == (Text(content="HI"),)


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_worker_config_does_not_leak(self) -> None:
        seen: list[ParseConfig] = []

        def worker() -> None:
            set_parse_config(ParseConfig(text_transformer=str.upper))
            seen.append(get_parse_config())

        reset_parse_config()
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen[0].text_transformer is str.upper
        assert get_parse_config() == ParseConfig()
