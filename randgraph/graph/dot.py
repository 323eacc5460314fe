"""DOT serialization of vertex and edge streams.

Output follows the Graphviz DOT language
(https://graphviz.org/doc/info/lang.html). Every graph is written as a
digraph; undirected edges carry dir="none" so they render without arrows.
"""

import io
import json
from collections.abc import Iterable
from typing import Any, TextIO

from randgraph.graph.types import Edge, Vertex


def _quote(label: Any) -> str:
    """Render a label as a double-quoted DOT string; None renders empty."""
    text = "" if label is None else str(label)
    return json.dumps(text, ensure_ascii=False)


def write_dot(
    stream: TextIO, vertices: Iterable[Vertex], edges: Iterable[Edge]
) -> None:
    """Write a graph to stream in DOT, draining vertices then edges.

    Args:
        stream: Text stream to write to.
        vertices: Vertex stream, consumed once.
        edges: Edge stream, consumed once.
    """
    stream.write("digraph {\n")

    for v in vertices:
        stream.write(f"  {v.id} [label={_quote(v.label)}]\n")

    for e in edges:
        direction = "forward" if e.directed else "none"
        stream.write(
            f'  {e.v0} -> {e.v1} [dir="{direction}"] [label={_quote(e.label)}]\n'
        )

    stream.write("}\n")


def dot_string(vertices: Iterable[Vertex], edges: Iterable[Edge]) -> str:
    """Return the DOT text for a graph as a string."""
    buf = io.StringIO()
    write_dot(buf, vertices, edges)
    return buf.getvalue()
