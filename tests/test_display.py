from pathgraph.display import render_graph, render_path


def test_render_graph(chain4):
    assert render_graph(chain4) == "\n".join(
        [
            "Vertex: 1",
            "    Adj: 2 - (1)",
            "    Adj: 3 - (5)",
            "Vertex: 2",
            "    Adj: 3 - (2)",
            "Vertex: 3",
            "Vertex: 4",
        ]
    )


def test_render_graph_hides_placeholder_edges(placeholders1):
    text = render_graph(placeholders1)
    assert "Adj: 2 - (0)" not in text
    assert "2147483647" not in text
    assert "Adj: 3 - (9)" in text


def test_render_empty_graph(make_graph):
    assert render_graph(make_graph([], [])) == ""


def test_render_path(chain4):
    assert render_path(chain4, 1, 3) == "Path from 1 to 3: 1 2 3\nDistance: 3"
    assert render_path(chain4, 1, 4) == "No path from 1 to 4"
