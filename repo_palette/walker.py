"""Recursive color collection over a parsed stylesheet tree."""

from collections.abc import Iterable

from repo_palette.colors import find_colors
from repo_palette.types.colors import ColorSet
from repo_palette.types.style import DeclarationNode, RuleNode, StyleNode


def collect_colors(nodes: Iterable[StyleNode]) -> ColorSet:
    """
    Collect the distinct colors declared anywhere in a stylesheet tree.

    Traversal is depth-first with children in document order, so the
    returned set is ordered by first appearance in the source. Only
    declaration values are scanned; selectors, at-rule conditions and
    comments never contribute colors.

    Args:
        nodes: Top-level nodes of a parsed stylesheet

    Returns:
        ColorSet of canonical hex colors
    """
    colors = ColorSet()
    _walk(nodes, colors)
    return colors


def _walk(nodes: Iterable[StyleNode], colors: ColorSet) -> None:
    for node in nodes:
        match node:
            case RuleNode(children=children):
                _walk(children, colors)
            case DeclarationNode(value=value):
                colors.update(find_colors(value))
            case _:
                raise TypeError(f"Unexpected style node: {type(node).__name__}")
