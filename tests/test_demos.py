import io

from acidgraph.demos import (
    build_call_graph,
    build_cycle_graph,
    cycle_main,
    graph_viz_main,
)


def test_cycle_graph_postorder():
    g = build_cycle_graph()
    letters = [g.get(i).val for i in g.postorder()]
    assert letters == ["B", "D", "C", "A"]


def test_cycle_main_prints_postorder(capsys):
    assert cycle_main([]) == 0
    assert capsys.readouterr().out == "['B', 'D', 'C', 'A']\n"


def test_call_graph_shape():
    g = build_call_graph()
    assert len(g) == 8
    main = g.entry()
    assert [g.get(i).val for i in main.exit] == ["init", "cleanup", "parse", "printf"]
    printf = g.find("printf")
    assert sorted(g.get(i).val for i in g.get(printf).entry) == ["exec", "main"]


def test_call_graph_all_reachable():
    g = build_call_graph()
    assert len(g.postorder()) == len(g)
    assert g.postorder()[-1] == g.entry_id()


def test_graph_viz_main_writes_dot(tmp_path):
    target = tmp_path / "out.dot"
    assert graph_viz_main([str(target)]) == 0
    buffer = io.StringIO()
    build_call_graph().dot_viz(buffer, "cfg")
    written = target.read_text(encoding="utf-8")
    assert written == buffer.getvalue()
    assert written.startswith("digraph cfg {\n")
    assert "\tmain -> init;\n" in written
    assert "\texec -> compare;\n" in written
    assert written.endswith("}\n")
    assert written.count("->") == 9