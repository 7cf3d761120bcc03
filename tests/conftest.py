from __future__ import annotations

from typing import Any

import pytest

from railgraph import pyrailgraph


@pytest.fixture
def empty_graph() -> pyrailgraph:
    return pyrailgraph()


@pytest.fixture
def red_line() -> dict[str, Any]:
    """Stations P, Q, R joined by the Red line: P-Q, Q-R."""
    graph = pyrailgraph()
    p = graph.insert_vertex("P")
    q = graph.insert_vertex("Q")
    r = graph.insert_vertex("R")
    pq = graph.insert_edge(p, q, "Red")
    qr = graph.insert_edge(q, r, "Red")
    return {"graph": graph, "P": p, "Q": q, "R": r, "PQ": pq, "QR": qr}


@pytest.fixture
def chain() -> dict[str, Any]:
    """Linear chain A-B-C-D."""
    graph = pyrailgraph()
    a = graph.insert_vertex("A")
    b = graph.insert_vertex("B")
    c = graph.insert_vertex("C")
    d = graph.insert_vertex("D")
    ab = graph.insert_edge(a, b, "Green")
    bc = graph.insert_edge(b, c, "Green")
    cd = graph.insert_edge(c, d, "Green")
    return {"graph": graph, "A": a, "B": b, "C": c, "D": d, "AB": ab, "BC": bc, "CD": cd}
