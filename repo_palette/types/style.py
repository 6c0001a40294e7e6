"""Stylesheet tree data models.

A parsed stylesheet is a sequence of StyleNode values. Rules carry their
block contents as children, so rules may nest rules to any depth.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeclarationNode:
    """A single ``name: value`` declaration."""

    value: str
    name: str = ""


@dataclass(frozen=True)
class RuleNode:
    """A rule block (style rule or block at-rule) and its contents."""

    children: tuple["StyleNode", ...]
    prelude: str = ""  # selector or at-rule condition, never scanned for colors


StyleNode = RuleNode | DeclarationNode
