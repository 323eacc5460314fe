"""Tests for stream validation and degree statistics."""

import numpy as np
import pytest
from scipy.stats import binom

from randgraph.graph.types import Edge, Vertex
from randgraph.graph.validation import (
    expected_out_degree_pmf,
    out_degrees,
    validate_edges,
    validate_vertices,
)


class TestValidateVertices:
    def test_valid(self) -> None:
        assert validate_vertices([Vertex(0), Vertex(1), Vertex(2)]) == []

    def test_empty_is_valid(self) -> None:
        assert validate_vertices([]) == []

    def test_gap_detected(self) -> None:
        errors = validate_vertices([Vertex(0), Vertex(2)])
        assert len(errors) == 1
        assert "has id 2" in errors[0]


class TestValidateEdges:
    def test_valid_stream(self) -> None:
        edges = [Edge(0, 0, 1), Edge(1, 0, 2), Edge(2, 1, 2)]
        assert validate_edges(edges, 3, loops=False, multiedges=False) == []

    def test_first_id_must_be_zero(self) -> None:
        errors = validate_edges([Edge(1, 0, 1)], 2)
        assert any("expected 0" in e for e in errors)

    def test_ids_must_increase(self) -> None:
        errors = validate_edges([Edge(0, 0, 1), Edge(0, 0, 1)], 2)
        assert any("does not increase" in e for e in errors)

    def test_ids_may_skip(self) -> None:
        assert validate_edges([Edge(0, 0, 1), Edge(5, 0, 1)], 2) == []

    def test_out_of_range_endpoint(self) -> None:
        errors = validate_edges([Edge(0, 0, 3)], 3)
        assert any("outside [0, 3)" in e for e in errors)

    def test_self_loop_detected_when_disallowed(self) -> None:
        edges = [Edge(0, 1, 1)]
        assert validate_edges(edges, 2, loops=True) == []
        errors = validate_edges(edges, 2, loops=False)
        assert any("Self-loop" in e for e in errors)

    def test_multiedge_detected_when_disallowed(self) -> None:
        edges = [Edge(0, 0, 1), Edge(1, 0, 1)]
        assert validate_edges(edges, 2, multiedges=True) == []
        errors = validate_edges(edges, 2, multiedges=False)
        assert any("Multiedge" in e for e in errors)

    def test_reverse_pair_is_not_multiedge(self) -> None:
        edges = [Edge(0, 0, 1), Edge(1, 1, 0)]
        assert validate_edges(edges, 2, multiedges=False) == []


class TestDegrees:
    def test_out_degrees(self) -> None:
        edges = [Edge(0, 0, 1), Edge(1, 0, 2), Edge(2, 2, 2)]
        assert out_degrees(edges, 4).tolist() == [2, 0, 1, 0]

    def test_out_degrees_empty(self) -> None:
        degrees = out_degrees([], 3)
        assert degrees.dtype == np.int64
        assert degrees.tolist() == [0, 0, 0]

    def test_pmf_matches_binomial(self) -> None:
        pmf = expected_out_degree_pmf(10, 0.3)
        assert pmf.shape == (11,)
        assert pmf.sum() == pytest.approx(1.0)
        assert pmf[3] == pytest.approx(binom.pmf(3, 10, 0.3))

    def test_pmf_degenerate(self) -> None:
        assert expected_out_degree_pmf(0, 0.5).tolist() == pytest.approx([1.0])
        assert expected_out_degree_pmf(4, 1.0)[-1] == pytest.approx(1.0)
