"""Repository palette type definitions.

This module exports the data model types shared by the pipeline stages.
"""

from repo_palette.types.colors import ColorSet
from repo_palette.types.request import RequestOptions
from repo_palette.types.style import DeclarationNode, RuleNode, StyleNode

__all__ = [
    # Request types
    "RequestOptions",
    # Stylesheet tree types
    "StyleNode",
    "RuleNode",
    "DeclarationNode",
    # Color types
    "ColorSet",
]
