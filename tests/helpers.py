"""Shared assertions for railgraph tests."""

from __future__ import annotations

from railgraph import pyrailgraph


def assert_markers_clear(graph: pyrailgraph) -> None:
    assert not any(pVertex.is_visited() for pVertex in graph.vertices())


def assert_incidence_symmetric(graph: pyrailgraph) -> None:
    """Every edge sits in exactly its endpoints' adjacency lists."""
    for pEdge in graph.edges():
        for pVertex in graph.vertices():
            expected = pEdge.is_incident_to(pVertex)
            assert (pEdge in graph.incident_edges(pVertex)) == expected
