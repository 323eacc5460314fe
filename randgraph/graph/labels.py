"""Vertex labeling from a fixed list of names."""

from collections.abc import Sequence

from randgraph.graph.types import VertexLabelFunc


def cycling_labels(labels: Sequence[str]) -> VertexLabelFunc:
    """Build a vertex labeling function that cycles through labels.

    Vertex i gets labels[i] while i < len(labels). Past the end of the
    list the labels repeat, suffixed with the vertex id to keep them
    distinct. With no labels, the vertex id itself is the label.

    Example: cycling_labels(["a", "b"]) labels vertices 0..3 as
    "a", "b", "a2", "b3".
    """
    names = tuple(labels)

    def label(vertex_id: int) -> str:
        if not names:
            return str(vertex_id)
        name = names[vertex_id % len(names)]
        if vertex_id < len(names):
            return name
        return f"{name}{vertex_id}"

    return label
