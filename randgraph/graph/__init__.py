"""Random graph sources streaming vertices and edges, with DOT output."""

from randgraph.graph.binomial import (
    Binomial,
    InvalidParameterError,
    check_parameters,
)
from randgraph.graph.dot import dot_string, write_dot
from randgraph.graph.labels import cycling_labels
from randgraph.graph.randgraph import RandGraph
from randgraph.graph.source import FixedSource, RandomSource, Source
from randgraph.graph.types import Edge, EdgeLabelFunc, Vertex, VertexLabelFunc
from randgraph.graph.validation import (
    expected_out_degree_pmf,
    out_degrees,
    validate_edges,
    validate_vertices,
)

__all__ = [
    "Binomial",
    "Edge",
    "EdgeLabelFunc",
    "FixedSource",
    "InvalidParameterError",
    "RandGraph",
    "RandomSource",
    "Source",
    "Vertex",
    "VertexLabelFunc",
    "check_parameters",
    "cycling_labels",
    "dot_string",
    "expected_out_degree_pmf",
    "out_degrees",
    "validate_edges",
    "validate_vertices",
    "write_dot",
]
