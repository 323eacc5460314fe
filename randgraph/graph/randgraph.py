"""Graph facade pairing a source with DOT output."""

import logging
from collections.abc import Iterator
from typing import TextIO

from randgraph.graph.dot import write_dot
from randgraph.graph.source import Source
from randgraph.graph.types import Edge, Vertex

log = logging.getLogger(__name__)


class RandGraph:
    """Wraps a Source to provide higher-level functionality."""

    def __init__(self, source: Source) -> None:
        self.source = source

    def vertices(self) -> Iterator[Vertex]:
        """Return a stream of vertices from the wrapped source."""
        return self.source.vertices()

    def edges(self) -> Iterator[Edge]:
        """Return a stream of edges from the wrapped source."""
        return self.source.edges()

    def write_dot(self, stream: TextIO) -> None:
        """Write one graph from the source to stream using DOT."""
        log.debug("Writing DOT graph from %r", self.source)
        write_dot(stream, self.vertices(), self.edges())
