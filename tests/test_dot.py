"""Tests for DOT serialization."""

import io

from randgraph.graph.dot import dot_string, write_dot
from randgraph.graph.types import Edge, Vertex


class TestWriteDot:
    """Exact DOT text for small graphs."""

    def test_unlabeled_vertex_and_directed_edge(self) -> None:
        out = dot_string([Vertex(0), Vertex(1)], [Edge(0, 0, 1, directed=True)])
        assert out == (
            "digraph {\n"
            '  0 [label=""]\n'
            '  1 [label=""]\n'
            '  0 -> 1 [dir="forward"] [label=""]\n'
            "}\n"
        )

    def test_undirected_edge_has_no_direction(self) -> None:
        out = dot_string([], [Edge(0, 2, 3, label="x")])
        assert '  2 -> 3 [dir="none"] [label="x"]\n' in out

    def test_non_string_labels_rendered(self) -> None:
        out = dot_string([Vertex(0, label=42)], [Edge(0, 0, 0, label=1.5)])
        assert '  0 [label="42"]\n' in out
        assert '[label="1.5"]' in out

    def test_empty_string_label(self) -> None:
        out = dot_string([Vertex(0, label="")], [])
        assert '  0 [label=""]\n' in out

    def test_labels_escaped(self) -> None:
        out = dot_string([Vertex(0, label='say "hi"\\\n')], [])
        assert '  0 [label="say \\"hi\\"\\\\\\n"]\n' in out

    def test_write_dot_to_stream(self) -> None:
        buf = io.StringIO()
        write_dot(buf, iter([Vertex(0, "a")]), iter([]))
        assert buf.getvalue() == 'digraph {\n  0 [label="a"]\n}\n'

    def test_vertices_written_before_edges(self) -> None:
        out = dot_string([Vertex(0), Vertex(1)], [Edge(0, 1, 0)])
        lines = out.splitlines()
        assert lines[0] == "digraph {"
        assert lines[1].startswith("  0 [")
        assert lines[2].startswith("  1 [")
        assert lines[3].startswith("  1 -> 0")
        assert lines[-1] == "}"
