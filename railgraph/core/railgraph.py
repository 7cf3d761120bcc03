"""
Main facade class for rail network analysis.

This module provides the pyrailgraph class that exposes the full public API
while delegating to specialized modules.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from .graph import RailGraph
from ..operations.modification import NetworkModifier
from ..analysis.detection import NetworkAnalyzer
from ..analysis.pathfinding import PathFinder, Visitor

logger = logging.getLogger(__name__)


class pyrailgraph:
    """
    Main facade class for rail network analysis.

    Stations are vertices and train lines are undirected edges; several lines
    may join the same pair of stations. All traversals are breadth-first with
    unit cost per line. Not safe for concurrent use.
    """

    def __init__(self, aVertex: Optional[Sequence[pyvertex]] = None,
                 aEdge: Optional[Sequence[pyedge]] = None):
        """
        Initialize the rail network graph.

        Args:
            aVertex: Optional stations to start with
            aEdge: Optional lines between those stations
        """
        # Initialize core graph
        self._graph = RailGraph(aVertex, aEdge)

        # Initialize analysis components
        self._pathfinder = PathFinder(self._graph)
        self._analyzer = NetworkAnalyzer(self._graph, self._pathfinder)

        # Initialize operation components
        self._modifier = NetworkModifier(self._graph)

        self.adjacency_list = self._graph.adjacency_list

    # ========================================================================
    # STRUCTURAL MUTATION
    # ========================================================================

    def insert_vertex(self, sName: str) -> pyvertex:
        """Insert a new station with no lines."""
        return self._modifier.insert_vertex(sName)

    def remove_vertex(self, pVertex: pyvertex) -> str:
        """Remove a station and every line touching it; returns its name."""
        return self._modifier.remove_vertex(pVertex)

    def insert_edge(self, pVertex_a: pyvertex, pVertex_b: pyvertex, sLine: str) -> pyedge:
        """Insert a new line between two stations."""
        return self._modifier.insert_edge(pVertex_a, pVertex_b, sLine)

    def remove_edge(self, pEdge: pyedge) -> Optional[str]:
        """Remove a line; returns its name, or None if it was not in the graph."""
        return self._modifier.remove_edge(pEdge)

    def rename(self, pItem: Union[pyvertex, pyedge], sName: str) -> str:
        """Rename a station or a line; returns the previous name."""
        return self._modifier.rename(pItem, sName)

    # ========================================================================
    # STRUCTURAL QUERIES
    # ========================================================================

    def opposite(self, pEdge: pyedge, pVertex: pyvertex) -> Optional[pyvertex]:
        """Get the station at the other end of a line."""
        return self._graph.opposite(pEdge, pVertex)

    def vertices(self) -> List[pyvertex]:
        """Get all stations."""
        return self._graph.vertices()

    def edges(self) -> List[pyedge]:
        """Get all lines, each reported once."""
        return self._graph.edges()

    def are_adjacent(self, pVertex_a: pyvertex, pVertex_b: pyvertex) -> bool:
        """Check whether two stations share at least one line."""
        return self._graph.are_adjacent(pVertex_a, pVertex_b)

    def incident_edges(self, pVertex: pyvertex) -> List[pyedge]:
        """Get the lines touching a station in insertion order."""
        return self._graph.incident_edges(pVertex)

    def degree(self, pVertex: pyvertex) -> int:
        return self._graph.degree(pVertex)

    def has_vertex(self, pVertex: pyvertex) -> bool:
        return self._graph.has_vertex(pVertex)

    def has_edge(self, pEdge: pyedge) -> bool:
        return self._graph.has_edge(pEdge)

    def get_vertex_count(self) -> int:
        return self._graph.get_vertex_count()

    def get_edge_count(self) -> int:
        return self._graph.get_edge_count()

    def find_vertices_by_name(self, sName: str) -> List[pyvertex]:
        """Find every station with the given name."""
        return self._graph.find_vertices_by_name(sName)

    def get_adjacency_matrix(self) -> np.ndarray:
        """Edge multiplicity matrix in vertices() order."""
        return self._graph.get_adjacency_matrix()

    def validate_graph_structure(self) -> Dict[str, Any]:
        """Validate the internal consistency of the graph structure."""
        return self._graph.validate_graph_structure()

    # ========================================================================
    # TRAVERSAL & ROUTING
    # ========================================================================

    def all_reachable(self, pVertex: pyvertex) -> List[pyvertex]:
        """Find every station reachable from a station, in BFS order."""
        return self._pathfinder.all_reachable(pVertex)

    def bftraverse(self, pVertex_start: Optional[pyvertex] = None,
                   visitor: Optional[Visitor] = None) -> List[pyvertex]:
        """Breadth-first traversal from a station, or over the whole network."""
        return self._pathfinder.bftraverse(pVertex_start, visitor)

    def most_direct_route(self, pVertex_origin: pyvertex, pVertex_destination: pyvertex) -> List[pyedge]:
        """Find the route with the fewest lines, ordered from origin to destination."""
        return self._pathfinder.most_direct_route(pVertex_origin, pVertex_destination)

    def route_to_vertices(self, route: List[pyedge], pVertex_origin: pyvertex) -> List[pyvertex]:
        """Convert a route of lines to the stations it passes through."""
        return self._pathfinder.route_to_vertices(route, pVertex_origin)

    # ========================================================================
    # NETWORK ANALYSIS
    # ========================================================================

    def all_connected(self) -> bool:
        """Check whether every station can reach every other station."""
        return self._analyzer.all_connected()

    def find_connected_components(self) -> List[List[pyvertex]]:
        """Find connected components of the network."""
        return self._analyzer.find_connected_components()

    def find_parallel_lines(self) -> List[List[pyedge]]:
        """Find groups of lines joining the same pair of stations."""
        return self._analyzer.find_parallel_lines()

    def find_interchanges(self, min_lines: int = 2) -> List[pyvertex]:
        """Find stations served by several distinct lines."""
        return self._analyzer.find_interchanges(min_lines)

    def get_graph_statistics(self) -> Dict[str, Any]:
        """Summarize the network."""
        return self._analyzer.get_graph_statistics()
