"""Small example programs built on the graph library."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from acidgraph.graph import Graph


def build_cycle_graph() -> Graph[str]:
    """A graph A -> B, A -> C, C -> D, D -> C holding single letters."""
    g = Graph("A")

    def build(sg) -> None:
        a = sg.entry()
        b = sg.add("B")
        c = sg.add("C")
        d = sg.add("D")
        sg.create_edge(a, b)
        sg.create_edge(a, c)
        sg.create_edge(c, d)
        sg.create_edge(d, c)

    g.update(build)
    return g


def build_call_graph() -> Graph[str]:
    """A small call graph of named functions, entered at ``main``."""
    g = Graph("main")
    main = g.entry_id()
    parse = g.add("parse")
    cleanup = g.add("cleanup")
    init = g.add("init")
    exec_ = g.add("exec")
    make_string = g.add("make_string")
    compare = g.add("compare")
    printf = g.add("printf")

    g.create_edge(main, init)
    g.create_edge(main, cleanup)
    g.create_edge(main, parse)
    g.create_edge(main, printf)
    g.create_edge(parse, exec_)
    g.create_edge(init, make_string)
    g.create_edge(exec_, make_string)
    g.create_edge(exec_, compare)
    g.create_edge(exec_, printf)
    return g


def cycle_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the postorder of the cycle graph's values."""
    argparse.ArgumentParser(
        description="Print the postorder traversal of a small cyclic graph."
    ).parse_args(argv)
    g = build_cycle_graph()
    print([g.get(node_id).val for node_id in g.postorder()])
    return 0


def graph_viz_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the call graph in graphviz dot format to a file."""
    parser = argparse.ArgumentParser(
        description="Write a sample call graph in graphviz dot format."
    )
    parser.add_argument(
        "output", nargs="?", default="viz_test.dot", help="file to write"
    )
    args = parser.parse_args(argv)
    with open(args.output, "w", encoding="utf-8") as out:
        build_call_graph().dot_viz(out, "cfg")
    return 0