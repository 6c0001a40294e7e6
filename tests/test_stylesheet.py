"""
Tests for stylesheet parsing into rule/declaration trees.
"""

import pytest

from repo_palette.exceptions import StyleParseError
from repo_palette.stylesheet import parse_stylesheet
from repo_palette.types.style import DeclarationNode, RuleNode


def test_parses_rules_and_declarations() -> None:
    nodes = parse_stylesheet("a { color: #ff0000; margin: 0 }")

    assert len(nodes) == 1
    rule = nodes[0]
    assert isinstance(rule, RuleNode)
    assert rule.prelude == "a"
    assert [child.name for child in rule.children] == ["color", "margin"]
    assert rule.children[0].value.strip() == "#ff0000"


def test_css_nesting_produces_nested_rules() -> None:
    nodes = parse_stylesheet(".card { color: #111; .title { color: #222; } &:hover { color: #333 } }")

    card = nodes[0]
    assert isinstance(card.children[0], DeclarationNode)
    assert isinstance(card.children[1], RuleNode)
    assert card.children[1].prelude == ".title"
    assert isinstance(card.children[2], RuleNode)


def test_block_at_rules_become_rule_nodes() -> None:
    nodes = parse_stylesheet(
        "@import url(base.css);"
        "@media screen { a { color: #fff } }"
        "@keyframes pulse { from { color: #000 } to { color: #fff } }"
    )

    assert len(nodes) == 2
    assert nodes[0].prelude == "@media screen"
    assert nodes[1].prelude == "@keyframes pulse"
    assert len(nodes[1].children) == 2


def test_comments_are_skipped() -> None:
    nodes = parse_stylesheet("/* a { color: #fff } */ b { /* note */ color: #000 }")

    assert len(nodes) == 1
    assert len(nodes[0].children) == 1


def test_empty_stylesheet() -> None:
    assert parse_stylesheet("") == ()


@pytest.mark.parametrize(
    "css",
    [
        "a { color: #fff } b",
        "a { color: #fff } }",
        "a { color: #fff } b { color }",
        "a { color: #fff; } .dangling",
    ],
)
def test_syntax_errors_raise(css: str) -> None:
    with pytest.raises(StyleParseError) as exc_info:
        parse_stylesheet(css, path="repo-main/broken.css")

    error = exc_info.value
    assert error.code == "STYLE_PARSE_ERROR"
    assert error.path == "repo-main/broken.css"
    assert error.line == 1
    assert "broken.css" in str(error)


def test_star_property_hack_is_read_as_declaration() -> None:
    nodes = parse_stylesheet(".clearfix { *zoom: 1; *display : inline; color: #000 } a { color: #ff0000 }")

    assert len(nodes) == 2
    assert [child.name for child in nodes[0].children] == ["*zoom", "*display", "color"]
    assert nodes[0].children[1].value.strip() == "inline"
    assert nodes[1].prelude == "a"


def test_underscore_property_hack_is_read_as_declaration() -> None:
    nodes = parse_stylesheet("a { _height: 1px; color: #fff }")

    assert [child.name for child in nodes[0].children] == ["_height", "color"]


def test_property_hacks_inside_at_rules_and_nested_rules() -> None:
    nodes = parse_stylesheet("@media screen { .a { .b { *zoom: 1; color: #111 } } }")

    inner = nodes[0].children[0].children[0]
    assert [child.name for child in inner.children] == ["*zoom", "color"]


def test_universal_nested_selector_is_not_a_hack() -> None:
    nodes = parse_stylesheet(".a { * { color: #111 } }")

    nested = nodes[0].children[0]
    assert isinstance(nested, RuleNode)
    assert nested.prelude == "*"


def test_unclosed_block_is_closed_at_end_of_input() -> None:
    nodes = parse_stylesheet("a { color: #ff0000")

    assert len(nodes) == 1
    assert nodes[0].children[0].value.strip() == "#ff0000"
