"""
Stylesheet parsing.

Turns CSS text into the RuleNode/DeclarationNode tree consumed by the
color walker, using tinycss2 for tokenizing and rule parsing.
"""

from collections.abc import Iterable
from typing import Any

import tinycss2
from tinycss2.ast import IdentToken

from repo_palette.exceptions import StyleParseError
from repo_palette.types.style import DeclarationNode, RuleNode, StyleNode

# Legacy IE property hacks (``*zoom: 1``). ``_zoom`` already tokenizes as an
# identifier and needs no rewriting.
PROPERTY_HACK_PREFIXES = frozenset({"*", "_"})


def parse_stylesheet(text: str, path: str | None = None) -> tuple[StyleNode, ...]:
    """
    Parse CSS text into a tree of rules and declarations.

    Style rules and block at-rules (``@media``, ``@supports``, ``@font-face``,
    ``@keyframes``...) become RuleNode values whose children are the parsed
    block contents, so nested rules are kept. At-rules without a block
    (``@import``, ``@charset``) produce no node.

    Inside blocks, a declaration name carrying a legacy hack prefix such as
    ``*zoom: 1`` is read as a declaration named ``*zoom``. A block left
    open at end of input is closed implicitly.

    Args:
        text: Stylesheet source
        path: Archive path of the stylesheet, used in error messages

    Returns:
        Top-level nodes in document order

    Raises:
        StyleParseError: On the first syntax error found
    """
    rules = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
    return _convert(rules, path)


def _convert(items: Iterable[Any], path: str | None) -> tuple[StyleNode, ...]:
    nodes: list[StyleNode] = []

    for item in items:
        if item.type == "error":
            _raise_parse_error(item, path)

        elif item.type == "declaration":
            nodes.append(
                DeclarationNode(value=tinycss2.serialize(item.value), name=item.name)
            )

        elif item.type in ("qualified-rule", "at-rule"):
            for token in item.prelude:
                if token.type == "error":
                    _raise_parse_error(token, path)

            if item.content is None:
                continue

            children = tinycss2.parse_blocks_contents(
                _merge_property_hacks(item.content),
                skip_comments=True,
                skip_whitespace=True,
            )
            prelude = tinycss2.serialize(item.prelude).strip()
            if item.type == "at-rule":
                prelude = f"@{item.at_keyword} {prelude}".strip()

            nodes.append(RuleNode(children=_convert(children, path), prelude=prelude))

    return tuple(nodes)


def _merge_property_hacks(tokens: list[Any]) -> list[Any]:
    """Fold ``*`` + ``zoom`` at the start of a declaration into one ident."""
    merged: list[Any] = []
    at_start = True
    index = 0

    while index < len(tokens):
        token = tokens[index]

        if (
            at_start
            and token.type == "literal"
            and token.value in PROPERTY_HACK_PREFIXES
            and index + 1 < len(tokens)
            and tokens[index + 1].type == "ident"
            and _followed_by_colon(tokens, index + 2)
        ):
            name = tokens[index + 1]
            merged.append(
                IdentToken(token.source_line, token.source_column, token.value + name.value)
            )
            index += 2
            at_start = False
            continue

        merged.append(token)
        if token.type in ("whitespace", "comment"):
            pass
        elif token == ";" or token.type == "{} block":
            at_start = True
        else:
            at_start = False
        index += 1

    return merged


def _followed_by_colon(tokens: list[Any], index: int) -> bool:
    for token in tokens[index:]:
        if token.type in ("whitespace", "comment"):
            continue
        return token == ":"
    return False


def _raise_parse_error(error: Any, path: str | None) -> None:
    raise StyleParseError(
        error.message,
        line=error.source_line,
        column=error.source_column,
        path=path,
    )
