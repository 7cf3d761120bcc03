"""Tests for traversal, reachability and route finding."""

from __future__ import annotations

from typing import Any

import pytest

from railgraph import GraphConsistencyError, StationNotFoundError, pyrailgraph, pyvertex
from tests import helpers


def test_all_reachable_line(red_line: dict[str, Any]) -> None:
    graph = red_line["graph"]
    assert graph.all_reachable(red_line["P"]) == [red_line["P"], red_line["Q"], red_line["R"]]
    assert graph.all_reachable(red_line["R"]) == [red_line["R"], red_line["Q"], red_line["P"]]
    helpers.assert_markers_clear(graph)


def test_all_reachable_excludes_isolated_station(red_line: dict[str, Any]) -> None:
    graph = red_line["graph"]
    s = graph.insert_vertex("S")
    reachable = graph.all_reachable(red_line["P"])
    assert set(reachable) == {red_line["P"], red_line["Q"], red_line["R"]}
    assert s not in reachable
    assert graph.all_reachable(s) == [s]


def test_all_reachable_unknown_station(red_line: dict[str, Any]) -> None:
    with pytest.raises(StationNotFoundError):
        red_line["graph"].all_reachable(pyvertex("P"))


def test_bftraverse_from_station_calls_visitor(red_line: dict[str, Any]) -> None:
    graph = red_line["graph"]
    graph.insert_vertex("S")
    seen: list[pyvertex] = []

    order = graph.bftraverse(red_line["Q"], seen.append)

    assert [station.get_name() for station in order] == ["Q", "P", "R"]
    assert seen == order
    helpers.assert_markers_clear(graph)


def test_bftraverse_whole_network_restarts(red_line: dict[str, Any]) -> None:
    graph = red_line["graph"]
    s = graph.insert_vertex("S")
    t = graph.insert_vertex("T")
    u = graph.insert_vertex("U")
    graph.insert_edge(t, u, "Blue")
    seen: list[str] = []

    order = graph.bftraverse(visitor=lambda station: seen.append(station.get_name()))

    assert seen == ["P", "Q", "R", "S", "T", "U"]
    assert order[3] is s
    assert len(order) == graph.get_vertex_count()
    helpers.assert_markers_clear(graph)


def test_bftraverse_empty_graph(empty_graph: pyrailgraph) -> None:
    assert empty_graph.bftraverse() == []


def test_bftraverse_visitor_error_leaves_markers_clear(red_line: dict[str, Any]) -> None:
    graph = red_line["graph"]

    def visitor(station: pyvertex) -> None:
        if station.get_name() == "Q":
            raise RuntimeError("stop")

    with pytest.raises(RuntimeError):
        graph.bftraverse(red_line["P"], visitor)
    helpers.assert_markers_clear(graph)


def test_most_direct_route_chain(chain: dict[str, Any]) -> None:
    graph = chain["graph"]
    route = graph.most_direct_route(chain["A"], chain["D"])
    assert route == [chain["AB"], chain["BC"], chain["CD"]]
    helpers.assert_markers_clear(graph)


def test_most_direct_route_reverse_direction(chain: dict[str, Any]) -> None:
    route = chain["graph"].most_direct_route(chain["D"], chain["A"])
    assert route == [chain["CD"], chain["BC"], chain["AB"]]


def test_most_direct_route_same_station(chain: dict[str, Any]) -> None:
    assert chain["graph"].most_direct_route(chain["A"], chain["A"]) == []


def test_most_direct_route_takes_shortcut(chain: dict[str, Any]) -> None:
    """Only the edges on the path are returned, not the whole frontier."""
    graph = chain["graph"]
    e = graph.insert_vertex("E")
    graph.insert_edge(chain["A"], e, "Spur")
    shortcut = graph.insert_edge(chain["A"], chain["C"], "Express")

    assert graph.most_direct_route(chain["A"], chain["D"]) == [shortcut, chain["CD"]]


def test_most_direct_route_tie_break_follows_adjacency_order(empty_graph: pyrailgraph) -> None:
    graph = empty_graph
    origin = graph.insert_vertex("O")
    north = graph.insert_vertex("N")
    south = graph.insert_vertex("S")
    destination = graph.insert_vertex("D")
    graph.insert_edge(origin, north, "North")
    graph.insert_edge(origin, south, "South")
    d_south = graph.insert_edge(destination, south, "South")
    graph.insert_edge(destination, north, "North")

    route = graph.most_direct_route(origin, destination)

    assert len(route) == 2
    assert route[-1] is d_south
    assert graph.route_to_vertices(route, origin) == [origin, south, destination]


def test_most_direct_route_parallel_lines(red_line: dict[str, Any]) -> None:
    graph = red_line["graph"]
    graph.insert_edge(red_line["P"], red_line["Q"], "Blue")
    route = graph.most_direct_route(red_line["P"], red_line["Q"])
    assert len(route) == 1
    assert route[0].is_incident_to(red_line["P"])


def test_most_direct_route_different_components(red_line: dict[str, Any]) -> None:
    graph = red_line["graph"]
    s = graph.insert_vertex("S")
    assert graph.most_direct_route(red_line["P"], s) == []
    helpers.assert_markers_clear(graph)


def test_most_direct_route_unknown_station(chain: dict[str, Any]) -> None:
    with pytest.raises(StationNotFoundError):
        chain["graph"].most_direct_route(chain["A"], pyvertex("D"))


def test_route_to_vertices(chain: dict[str, Any]) -> None:
    graph = chain["graph"]
    route = graph.most_direct_route(chain["A"], chain["D"])
    stations = graph.route_to_vertices(route, chain["A"])
    assert [station.get_name() for station in stations] == ["A", "B", "C", "D"]


def test_route_to_vertices_broken_route(chain: dict[str, Any]) -> None:
    with pytest.raises(ValueError):
        chain["graph"].route_to_vertices([chain["CD"]], chain["A"])


def test_traversal_detects_desynced_adjacency(red_line: dict[str, Any]) -> None:
    red_line["QR"].set_end1(red_line["P"])
    with pytest.raises(GraphConsistencyError):
        red_line["graph"].all_reachable(red_line["Q"])


def test_markers_clear_after_mixed_operations(chain: dict[str, Any]) -> None:
    graph = chain["graph"]
    graph.all_reachable(chain["B"])
    graph.bftraverse()
    graph.most_direct_route(chain["D"], chain["A"])
    graph.all_connected()
    graph.remove_vertex(chain["C"])
    graph.most_direct_route(chain["A"], chain["D"])
    graph.find_connected_components()
    helpers.assert_markers_clear(graph)
