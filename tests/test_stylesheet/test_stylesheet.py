"""Tests for the stylesheet parser."""

import pytest

from cascadia.parser import (
    InvalidColorError,
    InvalidNumberError,
    MalformedDeclarationError,
    UnexpectedEofError,
    UnterminatedBlockError,
)
from cascadia.stylesheet import (
    Color,
    Declaration,
    Keyword,
    Rule,
    Selector,
    Size,
    Specificity,
    Stylesheet,
    StylesheetParser,
    Unit,
    parse_stylesheet,
    parse_value,
)


# ---------------------------------------------------------------------------
# Value classification
# ---------------------------------------------------------------------------


class TestParseValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("#000000", Color(0, 0, 0)),
            ("#123456", Color(18, 52, 86)),
            ("#abcdef", Color(171, 205, 239)),
            ("#ABCDEF", Color(171, 205, 239)),
        ],
    )
    def test_color(self, raw, expected):
        assert parse_value(raw) == expected

    @pytest.mark.parametrize("raw", ["#123", "#1111111", "#zyxwvu", "#"])
    def test_invalid_color(self, raw):
        with pytest.raises(InvalidColorError):
            parse_value(raw)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("10px", Size(10.0, Unit.PX)),
            ("43%", Size(43.0, Unit.PERCENT)),
            ("1.4em", Size(1.4, Unit.EM)),
            ("0.1rem", Size(0.1, Unit.REM)),
            ("10000", Size(10000.0, Unit.NONE)),
        ],
    )
    def test_size(self, raw, expected):
        assert parse_value(raw) == expected

    @pytest.mark.parametrize("raw", ["1hogehogepx", "1ab", "1px solid #123456", "1_0px"])
    def test_invalid_number(self, raw):
        with pytest.raises(InvalidNumberError):
            parse_value(raw)

    @pytest.mark.parametrize("raw", ["red", "block", "solid 1px #123456", "-4px"])
    def test_keyword_verbatim(self, raw):
        assert parse_value(raw) == Keyword(raw)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    @pytest.mark.parametrize(
        "source, expected",
        [
            (".hoge__fizz-bar", [Selector(classes=("hoge__fizz-bar",))]),
            ("div.a.b.c.d", [Selector(tag="div", classes=("a", "b", "c", "d"))]),
            (
                "button#submit_name.main",
                [Selector(tag="button", id="submit_name", classes=("main",))],
            ),
            (
                "h1,h2,    h3",
                [Selector(tag="h1"), Selector(tag="h2"), Selector(tag="h3")],
            ),
            (
                "#xxx,h2.hoge,#bar.hugahuga",
                [
                    Selector(id="xxx"),
                    Selector(tag="h2", classes=("hoge",)),
                    Selector(id="bar", classes=("hugahuga",)),
                ],
            ),
        ],
    )
    def test_selector_list(self, source, expected):
        assert StylesheetParser(source).parse_selector_list() == expected

    def test_last_id_wins(self):
        assert StylesheetParser("#a#b").parse_selector() == Selector(id="b")

    def test_space_terminates_selector(self):
        parser = StylesheetParser("div p")
        assert parser.parse_selector() == Selector(tag="div")
        assert parser.scanner.peek() == " "

    def test_empty_selector(self):
        assert StylesheetParser("{").parse_selector() == Selector()


class TestSpecificity:
    def test_fields(self):
        sel = Selector(tag="a", id="x", classes=("b", "c"))
        assert sel.specificity() == Specificity(1, 2, 1)

    def test_empty_selector_is_zero(self):
        assert Selector().specificity() == (0, 0, 0)

    def test_id_outranks_classes(self):
        id_only = Selector(id="x").specificity()
        three_classes = Selector(classes=("a", "b", "c")).specificity()
        assert id_only > three_classes

    def test_classes_outrank_tag(self):
        assert Selector(classes=("a",)).specificity() > Selector(tag="div").specificity()


# ---------------------------------------------------------------------------
# Declarations and blocks
# ---------------------------------------------------------------------------


class TestDeclarationBlock:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("{}", []),
            ("{ display: block; }", [Declaration("display", Keyword("block"))]),
            (
                "{ border: solid 1px #123456; background-color: red; }",
                [
                    Declaration("border", Keyword("solid 1px #123456")),
                    Declaration("background-color", Keyword("red")),
                ],
            ),
            ("{width:50%;}", [Declaration("width", Size(50.0, Unit.PERCENT))]),
            ("{ color :#ff0000; }", [Declaration("color", Color(255, 0, 0))]),
        ],
    )
    def test_parse_block(self, source, expected):
        assert StylesheetParser(source).parse_declaration_block() == expected

    def test_missing_colon(self):
        with pytest.raises(MalformedDeclarationError):
            StylesheetParser("{ color red; }").parse_declaration_block()

    def test_missing_semicolon(self):
        with pytest.raises(MalformedDeclarationError):
            StylesheetParser("{ color: red }").parse_declaration_block()

    def test_missing_property_name(self):
        with pytest.raises(MalformedDeclarationError):
            StylesheetParser("{ : red; }").parse_declaration_block()

    def test_missing_close_brace(self):
        with pytest.raises(UnterminatedBlockError):
            StylesheetParser("{ color: red;").parse_declaration_block()

    def test_missing_open_brace(self):
        with pytest.raises(UnterminatedBlockError):
            StylesheetParser("color: red; }").parse_declaration_block()

    def test_missing_open_brace_at_end(self):
        with pytest.raises(UnexpectedEofError):
            parse_stylesheet("div")

    def test_keyword_keeps_trailing_whitespace(self):
        rule = parse_stylesheet("a { color: red ; }").rules[0]
        assert rule.declarations == (Declaration("color", Keyword("red ")),)

    def test_size_with_trailing_whitespace_rejected(self):
        with pytest.raises(InvalidNumberError):
            parse_stylesheet("a { width: 10px ; }")

    def test_color_with_trailing_whitespace_rejected(self):
        with pytest.raises(InvalidColorError):
            parse_stylesheet("a { color: #ff0000 ; }")


# ---------------------------------------------------------------------------
# Rules and stylesheets
# ---------------------------------------------------------------------------


class TestParseRule:
    def test_rule(self):
        rule = StylesheetParser("a#link, b.thin { display: flex; margin-top: 16px; }").parse_rule()
        assert rule == Rule(
            selectors=(Selector(tag="a", id="link"), Selector(tag="b", classes=("thin",))),
            declarations=(
                Declaration("display", Keyword("flex")),
                Declaration("margin-top", Size(16.0, Unit.PX)),
            ),
        )

    def test_empty_block(self):
        rule = StylesheetParser("sel{}").parse_rule()
        assert rule == Rule(selectors=(Selector(tag="sel"),), declarations=())


class TestParseStylesheet:
    def test_source_order(self):
        source = (
            "a#link {\n display: flex; color: #d3a003; \n} \n\n  \n"
            " .cls, #modal { position: absolute; \n top: 50%; } \n "
        )
        assert parse_stylesheet(source) == Stylesheet(
            (
                Rule(
                    (Selector(tag="a", id="link"),),
                    (
                        Declaration("display", Keyword("flex")),
                        Declaration("color", Color(211, 160, 3)),
                    ),
                ),
                Rule(
                    (Selector(classes=("cls",)), Selector(id="modal")),
                    (
                        Declaration("position", Keyword("absolute")),
                        Declaration("top", Size(50.0, Unit.PERCENT)),
                    ),
                ),
            )
        )

    def test_empty_string(self):
        assert parse_stylesheet("").rules == ()

    def test_whitespace_only(self):
        assert len(parse_stylesheet("   \n\t  ")) == 0

    def test_descendant_combinator_rejected(self):
        with pytest.raises(UnterminatedBlockError):
            parse_stylesheet("div p { color: red; }")

    def test_stylesheet_is_frozen(self):
        ss = parse_stylesheet("a { color: red; }")
        with pytest.raises(AttributeError):
            ss.rules = ()  # type: ignore[misc]

    def test_iterates_rules(self):
        ss = parse_stylesheet("a{} b{}")
        assert [rule.selectors[0].tag for rule in ss] == ["a", "b"]
