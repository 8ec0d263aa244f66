"""Tests for the high-level chatmark API."""

from chatmark import (
    Bold,
    BulletItem,
    ChatMarkup,
    Document,
    InlineCode,
    NumberedItem,
    Plain,
    Quote,
    Text,
    parse,
    render,
)


class TestParseFunction:
    """Tests for the parse() function."""

    def test_empty_string_is_empty_document(self) -> None:
        """Empty input produces no lines at all."""
        doc = parse("")
        assert doc == Document(children=())
        assert len(doc) == 0
        assert not doc

    def test_bold(self) -> None:
        doc = parse("*bold*")
        assert doc.children == (Plain(children=(Bold(content="bold"),)),)

    def test_unterminated_bold_is_literal(self) -> None:
        doc = parse("*unterminated")
        assert doc.children == (Plain(children=(Text(content="*unterminated"),)),)

    def test_quote_with_inline_formatting(self) -> None:
        doc = parse("> hello *world*")
        assert doc.children == (
            Quote(children=(Text(content="hello "), Bold(content="world"))),
        )

    def test_bullet_items_are_independent_lines(self) -> None:
        doc = parse("- item one\n- item two")
        assert doc.children == (
            BulletItem(children=(Text(content="item one"),)),
            BulletItem(children=(Text(content="item two"),)),
        )

    def test_numbered_items_keep_numbers_verbatim(self) -> None:
        doc = parse("1. first\n2. second")
        assert doc.children == (
            NumberedItem(children=(Text(content="first"),), number="1"),
            NumberedItem(children=(Text(content="second"),), number="2"),
        )

    def test_numbered_items_are_not_renumbered(self) -> None:
        doc = parse("3. c\n1. a\n007. b")
        assert [line.number for line in doc.children] == ["3", "1", "007"]

    def test_code_wins_over_emphasis(self) -> None:
        doc = parse("`*not bold*`")
        assert doc.children == (Plain(children=(InlineCode(code="*not bold*"),)),)

    def test_one_line_per_input_line(self) -> None:
        doc = parse("a\n\nb\n")
        assert len(doc) == 4
        assert doc.children[1] == Plain(children=())
        assert doc.children[3] == Plain(children=())

    def test_single_newline_is_two_empty_lines(self) -> None:
        assert parse("\n").children == (Plain(children=()), Plain(children=()))

    def test_document_iterates_lines(self) -> None:
        doc = parse("a\nb")
        assert list(doc) == list(doc.children)

    def test_parse_is_deterministic(self) -> None:
        text = "> *a* _b_\n- ~c~\n1. `d`"
        assert parse(text) == parse(text)


class TestRenderFunction:
    """Tests for the render() function."""

    def test_render_empty_document(self) -> None:
        assert render(parse("")) == ""

    def test_render_bold(self) -> None:
        assert render(parse("Hello *World*")) == "Hello <strong>World</strong>"

    def test_render_lines_separated_by_breaks(self) -> None:
        assert render(parse("a\nb\nc")) == "a<br />b<br />c"

    def test_render_custom_bullet(self) -> None:
        html = render(parse("- x"), bullet="→")
        assert '<span class="chat-marker">→</span>' in html


class TestChatMarkupClass:
    """Tests for the ChatMarkup class."""

    def test_call_parses_and_renders(self) -> None:
        cm = ChatMarkup()
        assert cm("_hi_") == "<em>hi</em>"

    def test_parse_returns_document(self) -> None:
        doc = ChatMarkup().parse("> q")
        assert isinstance(doc.children[0], Quote)

    def test_render_uses_instance_options(self) -> None:
        cm = ChatMarkup(bullet="*", line_break="\n")
        html = cm.render(cm.parse("- a\nb"))
        assert html == (
            '<span class="chat-list-item"><span class="chat-marker">*</span>'
            "<span>a</span></span>\nb"
        )

    def test_text_transformer_only_touches_text_spans(self) -> None:
        cm = ChatMarkup(text_transformer=str.upper)
        doc = cm.parse("hi *bold* `code` there")
        assert doc.children[0].children == (
            Text(content="HI "),
            Bold(content="bold"),
            Text(content=" "),
            InlineCode(code="code"),
            Text(content=" THERE"),
        )

    def test_text_transformer_does_not_leak(self) -> None:
        """Config is scoped to the ChatMarkup call."""
        ChatMarkup(text_transformer=str.upper).parse("abc")
        assert parse("abc").children[0].children == (Text(content="abc"),)

    def test_parse_many(self) -> None:
        docs = ChatMarkup().parse_many(["*a*", "", "- b"])
        assert len(docs) == 3
        assert docs[0].children == (Plain(children=(Bold(content="a"),)),)
        assert docs[1] == Document(children=())
        assert isinstance(docs[2].children[0], BulletItem)

    def test_config_property(self) -> None:
        cm = ChatMarkup(text_transformer=str.lower)
        assert cm.config.text_transformer is str.lower
