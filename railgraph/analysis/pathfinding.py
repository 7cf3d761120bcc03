"""
Path finding and reachability analysis for rail networks.

This module provides breadth-first algorithms for traversal, reachability and
fewest-stops routing. Every edge has unit cost.
"""

import logging
from typing import Callable, Dict, List, Optional, Set, Tuple
from collections import deque

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from ..core.graph import RailGraph

logger = logging.getLogger(__name__)

Visitor = Callable[[pyvertex], None]


class PathFinder:
    """
    Path finding algorithms for rail networks.

    This class provides methods for:
    - Breadth-first traversal from a station or over the whole network
    - Finding every station reachable from a station
    - Finding the most direct route between two stations
    - Converting routes to station sequences

    Visited state lives in a set owned by each call, so vertex markers are
    never touched. Visitors must not mutate the graph.
    """

    def __init__(self, graph: RailGraph):
        """
        Initialize the path finder.

        Args:
            graph: RailGraph instance to analyze
        """
        self.graph = graph

    def _breadth_first(self, pVertex_start: pyvertex, visited: Set[pyvertex],
                       visitor: Optional[Visitor] = None) -> List[pyvertex]:
        """
        Run one BFS from a station, skipping anything already in visited.

        Args:
            pVertex_start: Start station, must be a member and not yet visited
            visited: Visited set, updated in place
            visitor: Optional callback invoked on each station in discovery order

        Returns:
            Stations in BFS discovery order
        """
        order = []
        queue = deque([pVertex_start])
        visited.add(pVertex_start)

        while queue:
            current = queue.popleft()
            order.append(current)
            if visitor is not None:
                visitor(current)

            for _, neighbor in self.graph.iter_neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return order

    def all_reachable(self, pVertex: pyvertex) -> List[pyvertex]:
        """
        Find every station reachable from a station.

        Args:
            pVertex: Start station

        Returns:
            Reachable stations in BFS discovery order, starting with pVertex

        Raises:
            StationNotFoundError: If the station is not in the graph
        """
        self.graph.require_vertex(pVertex)
        reachable = self._breadth_first(pVertex, set())
        logger.debug(f"{len(reachable)} stations reachable from {pVertex.sName!r}")
        return reachable

    def bftraverse(self, pVertex_start: Optional[pyvertex] = None,
                   visitor: Optional[Visitor] = None) -> List[pyvertex]:
        """
        Breadth-first traversal of the network.

        With a start station, only its component is traversed. Without one,
        the whole network is covered: whenever the frontier empties, the
        traversal restarts from the first unvisited station in insertion
        order.

        Args:
            pVertex_start: Optional start station
            visitor: Optional callback invoked on each station in visit order

        Returns:
            Stations in visit order; empty for an empty graph

        Raises:
            StationNotFoundError: If pVertex_start is given but not in the graph
        """
        visited: Set[pyvertex] = set()

        if pVertex_start is not None:
            self.graph.require_vertex(pVertex_start)
            return self._breadth_first(pVertex_start, visited, visitor)

        order = []
        nRestart = 0
        for pVertex in self.graph.vertices():
            if pVertex not in visited:
                order.extend(self._breadth_first(pVertex, visited, visitor))
                nRestart += 1

        logger.debug(f"Traversed {len(order)} stations in {nRestart} components")
        return order

    def most_direct_route(self, pVertex_origin: pyvertex, pVertex_destination: pyvertex) -> List[pyedge]:
        """
        Find the route with the fewest lines between two stations.

        BFS runs from the destination, recording the line and predecessor
        that discovered each station. Once the origin is discovered the
        predecessor chain is walked back to the destination, which yields
        the lines in travel order from origin to destination. Among equally
        short routes the one discovered first under the destination's
        adjacency order wins.

        Args:
            pVertex_origin: Station the route starts at
            pVertex_destination: Station the route ends at

        Returns:
            Lines from origin to destination; empty if both are the same
            station or they lie in different components

        Raises:
            StationNotFoundError: If either station is not in the graph
        """
        self.graph.require_vertex(pVertex_origin)
        self.graph.require_vertex(pVertex_destination)

        if pVertex_origin is pVertex_destination:
            return []

        discovered_by: Dict[pyvertex, Tuple[pyedge, pyvertex]] = {}
        visited = {pVertex_destination}
        queue = deque([pVertex_destination])
        found = False

        while queue and not found:
            current = queue.popleft()
            for pEdge, neighbor in self.graph.iter_neighbors(current):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                discovered_by[neighbor] = (pEdge, current)
                if neighbor is pVertex_origin:
                    found = True
                    break
                queue.append(neighbor)

        if not found:
            logger.debug(f"No route between {pVertex_origin.sName!r} and {pVertex_destination.sName!r}")
            return []

        route = []
        current = pVertex_origin
        while current is not pVertex_destination:
            pEdge, predecessor = discovered_by[current]
            route.append(pEdge)
            current = predecessor

        logger.debug(f"Route {pVertex_origin.sName!r} -> {pVertex_destination.sName!r} uses {len(route)} lines")
        return route

    def route_to_vertices(self, route: List[pyedge], pVertex_origin: pyvertex) -> List[pyvertex]:
        """
        Convert a route of lines to the stations it passes through.

        Args:
            route: Lines in travel order
            pVertex_origin: Station the route starts at

        Returns:
            Stations from origin to the end of the route

        Raises:
            ValueError: If consecutive lines do not share a station
        """
        stations = [pVertex_origin]
        current = pVertex_origin

        for pEdge in route:
            if pEdge.is_incident_to(current):
                current = pEdge.pVertex_end if current is pEdge.pVertex_start else pEdge.pVertex_start
            else:
                raise ValueError(f"Line {pEdge!r} does not continue from {current!r}")
            stations.append(current)

        return stations
