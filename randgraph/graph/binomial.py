"""Binomial random graph generator.

Every vertex runs N independent Bernoulli trials with success probability
P; each success draws a head vertex uniformly from the admissible range
and yields an edge from the tail to that head. With multiedges allowed the
out-degree of each tail is Binomial(N, P). With multiedges disallowed a
trial whose head was already used by the same tail is discarded without
retry, so the realized out-degree is a censored binomial count rather
than an exact Binomial(N, P) sample.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterator
from typing import TYPE_CHECKING

from randgraph.graph.labels import cycling_labels
from randgraph.graph.source import RandomSource
from randgraph.graph.types import Edge, EdgeLabelFunc, Vertex, VertexLabelFunc
from randgraph.reproducibility.seed import make_rng

if TYPE_CHECKING:
    from randgraph.config.generation import GenerationConfig

log = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when a generator is configured with out-of-range parameters."""


def _is_count(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_parameters(vertices: int, trials: int, probability: float) -> None:
    """Validate binomial generator parameters.

    Args:
        vertices: Number of vertices, must be >= 0.
        trials: Number of trials per vertex, must be >= 0.
        probability: Success probability of each trial, in [0, 1].

    Raises:
        InvalidParameterError: If any parameter is out of range.
    """
    if not _is_count(trials) or trials < 0:
        raise InvalidParameterError(f"invalid number of trials: {trials!r}")
    if (
        isinstance(probability, bool)
        or not isinstance(probability, numbers.Real)
        or not 0.0 <= probability <= 1.0
    ):
        raise InvalidParameterError(
            f"invalid success probability: {probability!r}"
        )
    if not _is_count(vertices) or vertices < 0:
        raise InvalidParameterError(f"invalid number of vertices: {vertices!r}")


class Binomial:
    """Source of random graphs whose per-vertex edge count is binomial.

    The flags and label functions are plain attributes and may be changed
    after construction. A generator holds a single random source, so it
    must not run two edge passes concurrently unless that source is safe
    for concurrent use.

    Attributes:
        loops: Allow edges whose tail and head are the same vertex.
        multiedges: Allow several edges with the same tail and head.
        directed: Mark emitted edges as directed.
        vertex_label: Optional function of the vertex id.
        edge_label: Optional function of (edge id, tail, head).
    """

    def __init__(
        self,
        vertices: int,
        trials: int,
        probability: float,
        rng: RandomSource | None = None,
    ) -> None:
        check_parameters(vertices, trials, probability)

        self.n_vertices = int(vertices)
        self.trials = int(trials)
        self.probability = float(probability)

        self.loops = False
        self.multiedges = False
        self.directed = False
        self.vertex_label: VertexLabelFunc | None = None
        self.edge_label: EdgeLabelFunc | None = None

        self.rng: RandomSource = make_rng() if rng is None else rng

    @classmethod
    def from_config(
        cls, config: GenerationConfig, rng: RandomSource | None = None
    ) -> Binomial:
        """Build a generator from a GenerationConfig.

        The config seed is used when no random source is given. A
        non-empty labels tuple becomes the vertex labeling function.
        """
        if rng is None:
            rng = make_rng(config.seed)
        b = cls(config.vertices, config.trials, config.probability, rng=rng)
        b.loops = config.loops
        b.multiedges = config.multiedges
        b.directed = config.directed
        if config.labels:
            b.vertex_label = cycling_labels(config.labels)
        return b

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.n_vertices}, "
            f"trials={self.trials}, probability={self.probability}, "
            f"loops={self.loops}, multiedges={self.multiedges}, "
            f"directed={self.directed})"
        )

    def vertices(self) -> Iterator[Vertex]:
        """Yield the vertices 0..V-1 in order."""
        vertex_label = self.vertex_label
        for i in range(self.n_vertices):
            label = vertex_label(i) if vertex_label is not None else None
            yield Vertex(id=i, label=label)

    def edges(self) -> Iterator[Edge]:
        """Yield random edges, tail by tail, in trial order.

        Without loops, the heads of tail t are drawn from [t+1, V), so the
        pass ends at the last vertex. With loops, heads are drawn from
        [0, V).
        """
        n = self.n_vertices
        p = self.probability
        rng = self.rng
        loops = self.loops
        multiedges = self.multiedges
        directed = self.directed
        edge_label = self.edge_label

        next_id = 0
        discarded = 0
        tails = 0

        for tail in range(n):
            if loops:
                start = 0
            else:
                if tail == n - 1:
                    # No possible heads.
                    break
                start = tail + 1
            tails += 1

            heads: set[int] = set()
            for _ in range(self.trials):
                if rng.random() >= p:
                    continue
                head = start + int(rng.integers(0, n - start))
                if not multiedges:
                    if head in heads:
                        discarded += 1
                        continue
                    heads.add(head)

                label = (
                    edge_label(next_id, tail, head)
                    if edge_label is not None
                    else None
                )
                yield Edge(
                    id=next_id,
                    v0=tail,
                    v1=head,
                    directed=directed,
                    label=label,
                )
                next_id += 1

        log.debug(
            "Binomial edge pass complete (tails=%d, edges=%d, "
            "discarded duplicates=%d)",
            tails,
            next_id,
            discarded,
        )
