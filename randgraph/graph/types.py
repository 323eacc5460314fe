"""Graph element data structures for streamed random graphs."""

from dataclasses import dataclass
from typing import Any, Callable

VertexLabelFunc = Callable[[int], Any]
EdgeLabelFunc = Callable[[int, int, int], Any]


@dataclass(frozen=True, slots=True)
class Vertex:
    """A vertex of a generated graph.

    The id is the vertex position in generation order. A label of None
    means the vertex is unlabeled.
    """

    id: int
    label: Any = None


@dataclass(frozen=True, slots=True)
class Edge:
    """An edge connecting the vertices with ids v0 and v1.

    If directed, v0 is the tail vertex and v1 is the head vertex. The id
    counts emitted edges within one generation pass, starting at 0.
    """

    id: int
    v0: int
    v1: int
    directed: bool = False
    label: Any = None
