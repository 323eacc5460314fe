"""Invariant checks and degree statistics over vertex and edge streams.

The checks consume a stream once and keep only per-tail bookkeeping, so
they work on graphs too large to hold in memory as long as the number of
vertices fits.
"""

import logging
from collections.abc import Iterable

import numpy as np
from scipy.stats import binom

from randgraph.graph.types import Edge, Vertex

log = logging.getLogger(__name__)


def validate_vertices(vertices: Iterable[Vertex]) -> list[str]:
    """Check that vertex ids form the contiguous range 0..V-1 in order.

    Returns:
        List of error strings (empty = valid stream).
    """
    errors: list[str] = []
    for expected, v in enumerate(vertices):
        if v.id != expected:
            errors.append(
                f"Vertex at position {expected} has id {v.id}"
            )
    return errors


def validate_edges(
    edges: Iterable[Edge],
    n_vertices: int,
    loops: bool = True,
    multiedges: bool = True,
) -> list[str]:
    """Validate an edge stream against the generation constraints.

    Checks per edge (cheapest first):
    1. Edge ids strictly increasing, starting at 0
    2. Endpoints within [0, n_vertices)
    3. No self-loops when loops are disallowed
    4. No repeated (tail, head) pair when multiedges are disallowed

    Args:
        edges: Edge stream, consumed once.
        n_vertices: Number of vertices in the graph.
        loops: Whether self-loops are allowed.
        multiedges: Whether repeated (tail, head) pairs are allowed.

    Returns:
        List of error strings (empty = valid stream).
    """
    errors: list[str] = []
    prev_id = -1
    seen: set[tuple[int, int]] = set()

    for e in edges:
        if prev_id < 0 and e.id != 0:
            errors.append(f"First edge id is {e.id}, expected 0")
        elif prev_id >= 0 and e.id <= prev_id:
            errors.append(
                f"Edge id {e.id} does not increase (previous {prev_id})"
            )
        prev_id = e.id

        if not (0 <= e.v0 < n_vertices and 0 <= e.v1 < n_vertices):
            errors.append(
                f"Edge {e.id} ({e.v0} -> {e.v1}) references a vertex "
                f"outside [0, {n_vertices})"
            )

        if not loops and e.v0 == e.v1:
            errors.append(f"Self-loop detected: edge {e.id} on vertex {e.v0}")

        if not multiedges:
            pair = (e.v0, e.v1)
            if pair in seen:
                errors.append(
                    f"Multiedge detected: edge {e.id} repeats {e.v0} -> {e.v1}"
                )
            seen.add(pair)

    log.debug("Validated %d edges with %d errors", prev_id + 1, len(errors))
    return errors


def out_degrees(edges: Iterable[Edge], n_vertices: int) -> np.ndarray:
    """Count emitted edges per tail vertex.

    Returns:
        int64 array of shape (n_vertices,).
    """
    degrees = np.zeros(n_vertices, dtype=np.int64)
    for e in edges:
        degrees[e.v0] += 1
    return degrees


def expected_out_degree_pmf(trials: int, probability: float) -> np.ndarray:
    """Binomial(trials, probability) PMF over out-degrees 0..trials.

    This is the exact out-degree distribution of every admissible tail
    when multiedges are allowed. With multiedges disallowed, discarded
    duplicates shift mass toward lower degrees.

    Returns:
        float64 array of shape (trials + 1,) summing to 1.
    """
    k = np.arange(trials + 1)
    return binom.pmf(k, trials, probability)
