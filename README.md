# acidgraph

A small library for directed graphs in which every node holds a value.
A graph always has an entry node (id `0`), nodes are never removed, and
edges are directed from a start node to an end node. Node ids are plain
integers.

## Installing

```
pip install .
```

## Building a graph

```python
from acidgraph.graph import Graph

g = Graph("main")
main = g.entry_id()
parse = g.add("parse")
exec_ = g.add("exec")

g.create_edge(main, parse)
g.create_edge(parse, exec_)
```

- `Graph.add(val)` adds a node and returns its id.
- `Graph.create_edge(start, end)` raises `InvalidNodeError` (a `LookupError`
  with a `node_id` attribute) when either end is not a node of the graph.
  The start node is checked first, then the end node; nothing is added when
  either is invalid.
- `Graph.get(node_id)` returns the `Node`, or `None` for an unknown id.
  `Graph.entry()` returns the entry node.
- `Graph.find(value)` returns the id of the first node holding `value`, or
  `None`; `Graph.find_or_insert(value)` returns that id or adds a new node.
- `len(g)` is the number of nodes, and iterating over a graph yields its
  nodes in id order.

A `Node` is a dataclass with `val` (the value it holds), `entry` (ids of
nodes with an edge into it) and `exit` (ids of nodes it has an edge to).

### Batch updates

`Graph.update(changes)` calls `changes` with a `SafeGraph` view of the graph
and returns whatever `changes` returns:

```python
def build(sg):
    a = sg.entry()
    b = sg.add("b")
    sg.create_edge(a, b)
    return sg.successors(a)

g.update(build)   # (1,)
```

On a `SafeGraph`, `get`, `predecessors` and `successors` raise
`InvalidNodeError` for an id that is not in the graph; `predecessors` and
`successors` return tuples of ids. `safe_index(node_id)` returns the id when
it names a node of the graph and `None` otherwise. The view checks ids only
by range: an id taken from another graph is accepted if it is in range.

## Traversals

- `Graph.postorder()` returns the ids of the nodes reachable from the entry
  in depth-first postorder, following each node's edges in the order they
  were created.
- `Graph.breadth_first()` and `Graph.depth_first()` are generators over the
  nodes reachable from the entry, each node yielded once.

## Dominators

```python
from acidgraph.dom import DomTree

tree = DomTree(g)
tree.idom(parse)   # immediate dominator of a node
tree.doms(exec_)   # [exec_, parse, main]: the node and its dominators up to the entry
```

The entry node is its own immediate dominator. `idom` returns `None` for an
id that names no node or for a node not reachable from the entry. `doms`
returns `None` for an id that names no node and raises `InvalidNodeError`
for a node not reachable from the entry. `DomTree.get(node_id)` returns the
node, or `None`. The tree keeps the nodes as they were when it was built.

## Graphviz output

`Graph.dot_viz(file, name)` writes the graph to an open text file:

```
digraph cfg {
	main -> parse;
	parse -> exec;
}
```

one `a -> b;` line per edge, labelled with each node's value. Values are
written as they are, without quoting.

## Commands

Two small demonstration commands come with the package.

```
acidgraph-cycle
```

builds the graph A → B, A → C, C → D, D → C and prints its postorder,
`['B', 'D', 'C', 'A']`.

```
acidgraph-graph-viz [output]
```

writes an example call graph named `cfg` in Graphviz format to `output`
(default `viz_test.dot` in the current directory). It does not run Graphviz
or render an image; use the `dot` tool for that.

The graphs behind both commands are available as
`acidgraph.demos.build_cycle_graph()` and `acidgraph.demos.build_call_graph()`.

## Running the tests

```
pip install .[test]
pytest
```