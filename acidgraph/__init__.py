"""Directed graphs with traversals, dominator trees, Graphviz output and demo commands."""

__version__ = "0.1.0"
__all__ = ["graph", "dom", "demos"]