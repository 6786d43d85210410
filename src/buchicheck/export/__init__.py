"""Layout and LaTeX export of automata."""

from buchicheck.export.layout import GraphEdge, GraphNode, layout_circular
from buchicheck.export.latex import (
    build_formal_definition_latex,
    build_tikz_export,
    word_to_latex,
)

__all__ = [
    "GraphEdge",
    "GraphNode",
    "layout_circular",
    "build_formal_definition_latex",
    "build_tikz_export",
    "word_to_latex",
]
