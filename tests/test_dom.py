import pytest

from acidgraph.dom import DomTree
from acidgraph.graph import Graph, InvalidNodeError


def _paper_graph():
    g = Graph(5)

    def build(sg):
        five = sg.entry()
        four = sg.add(4)
        three = sg.add(3)
        two = sg.add(2)
        one = sg.add(1)
        sg.create_edge(five, four)
        sg.create_edge(five, three)
        sg.create_edge(three, two)
        sg.create_edge(four, one)
        sg.create_edge(one, two)
        sg.create_edge(two, one)

    g.update(build)
    return g


def _wikipedia_graph():
    g = Graph(1)
    one = g.entry_id()
    two = g.add(2)
    three = g.add(3)
    four = g.add(4)
    five = g.add(5)
    six = g.add(6)
    g.create_edge(one, two)
    g.create_edge(two, three)
    g.create_edge(two, four)
    g.create_edge(two, six)
    g.create_edge(three, five)
    g.create_edge(four, five)
    g.create_edge(five, two)
    return g, (one, two, three, four, five, six)


def test_graph_from_paper():
    dt = DomTree(_paper_graph())
    assert dt.idom(0) == 0
    assert dt.idom(1) == 0
    assert dt.idom(2) == 0
    assert dt.idom(3) == 0
    assert dt.idom(4) == 0


def test_wikipedia_example():
    g, (one, two, three, four, five, six) = _wikipedia_graph()
    dom = DomTree(g)
    assert dom.idom(one) == one
    assert dom.idom(two) == one
    assert dom.idom(three) == two
    assert dom.idom(four) == two
    assert dom.idom(five) == two
    assert dom.idom(six) == two


def test_doms_walks_to_entry():
    g, (one, two, _three, _four, five, _six) = _wikipedia_graph()
    dom = DomTree(g)
    assert dom.doms(five) == [five, two, one]
    assert dom.doms(one) == [one]


def test_doms_invalid_id_is_none():
    g, _ = _wikipedia_graph()
    dom = DomTree(g)
    assert dom.doms(100) is None
    assert dom.idom(100) is None
    assert dom.get(100) is None


def test_get_returns_node_values():
    g, ids = _wikipedia_graph()
    dom = DomTree(g)
    assert [dom.get(i).val for i in ids] == [1, 2, 3, 4, 5, 6]


def test_unreachable_node_has_no_idom():
    g = Graph("a")
    b = g.add("b")
    lonely = g.add("lonely")
    g.create_edge(g.entry_id(), b)
    dom = DomTree(g)
    assert dom.idom(b) == 0
    assert dom.idom(lonely) is None
    with pytest.raises(InvalidNodeError):
        dom.doms(lonely)


def test_single_node_graph():
    dom = DomTree(Graph("only"))
    assert dom.idom(0) == 0
    assert dom.doms(0) == [0]