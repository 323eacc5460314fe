"""Graph source contract and a fixed-sequence source.

A source produces a graph as two independent lazy streams: one of
vertices and one of edges. Each call returns a fresh iterator, so a
partially consumed stream never affects later calls. Random sources
generally produce a different graph on every call.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from randgraph.graph.types import Edge, Vertex


@runtime_checkable
class Source(Protocol):
    """A source of graphs represented as streams of vertices and edges."""

    def vertices(self) -> Iterator[Vertex]: ...

    def edges(self) -> Iterator[Edge]: ...


@runtime_checkable
class RandomSource(Protocol):
    """Uniform randomness consumed by the generators.

    numpy.random.Generator satisfies this protocol.
    """

    def random(self) -> float:
        """Return a float drawn uniformly from [0, 1)."""
        ...

    def integers(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from [low, high)."""
        ...


class FixedSource:
    """Source that replays fixed vertex and edge sequences.

    Used to feed known graphs through the facade and serializers.
    """

    def __init__(
        self,
        vertices: Iterable[Vertex] = (),
        edges: Iterable[Edge] = (),
    ) -> None:
        self._vertices = tuple(vertices)
        self._edges = tuple(edges)

    def vertices(self) -> Iterator[Vertex]:
        yield from self._vertices

    def edges(self) -> Iterator[Edge]:
        yield from self._edges
