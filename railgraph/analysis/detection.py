"""
Network analysis and pattern detection for rail networks.

This module provides algorithms for connectivity and for detecting features
such as parallel lines and interchange stations.
"""

import logging
from typing import Any, Dict, List, Tuple, DefaultDict
from collections import defaultdict

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from ..classes.utils import build_vertex_index, build_degree_array, find_connected_components
from ..core.graph import RailGraph
from .pathfinding import PathFinder

logger = logging.getLogger(__name__)


class NetworkAnalyzer:
    """
    Detects patterns and features in rail networks.

    This class provides methods for:
    - Checking whether the network is connected
    - Finding connected components
    - Finding parallel lines between the same pair of stations
    - Finding interchange stations
    - Summarizing the network
    """

    def __init__(self, graph: RailGraph, pathfinder: PathFinder):
        """
        Initialize the network analyzer.

        Args:
            graph: RailGraph instance to analyze
            pathfinder: PathFinder used for traversals
        """
        self.graph = graph
        self.pathfinder = pathfinder

    def all_connected(self) -> bool:
        """
        Check whether every station can reach every other station.

        A graph with zero or one station is connected.
        """
        aVertex = self.graph.vertices()
        if len(aVertex) <= 1:
            return True

        reachable = self.pathfinder.all_reachable(aVertex[0])
        return len(reachable) == len(aVertex)

    def find_connected_components(self) -> List[List[pyvertex]]:
        """
        Find connected components of the network.

        Returns:
            List of components, each a list of stations in BFS order.
            Components are ordered by their first station's insertion order.
        """
        aVertex = self.graph.vertices()
        aIndex = build_vertex_index(aVertex)

        adjacency_dict: Dict[int, List[int]] = {}
        for pVertex in aVertex:
            adjacency_dict[aIndex[pVertex]] = [aIndex[neighbor] for _, neighbor in self.graph.iter_neighbors(pVertex)]

        components = find_connected_components(adjacency_dict)
        logger.info(f"Found {len(components)} connected components")
        return [[aVertex[i] for i in component] for component in components]

    def find_parallel_lines(self) -> List[List[pyedge]]:
        """
        Find parallel lines (multiple lines between the same station pair).

        Returns:
            List of groups, each holding two or more lines that join the same
            unordered pair of stations, in first-seen order
        """
        aIndex = build_vertex_index(self.graph.vertices())
        line_groups: DefaultDict[Tuple[int, int], List[pyedge]] = defaultdict(list)

        for pEdge in self.graph.edges():
            iStart = aIndex[pEdge.pVertex_start]
            iEnd = aIndex[pEdge.pVertex_end]
            line_groups[(min(iStart, iEnd), max(iStart, iEnd))].append(pEdge)

        parallel_groups = [aEdge for aEdge in line_groups.values() if len(aEdge) > 1]
        logger.debug(f"Found {len(parallel_groups)} parallel line groups")
        return parallel_groups

    def find_interchanges(self, min_lines: int = 2) -> List[pyvertex]:
        """
        Find stations served by several distinct lines.

        Args:
            min_lines: Minimum number of distinct line names at the station

        Returns:
            Matching stations in insertion order
        """
        interchanges = []
        for pVertex in self.graph.vertices():
            lines = {pEdge.sLine for pEdge in self.graph.adjacency_list[pVertex]}
            if len(lines) >= min_lines:
                interchanges.append(pVertex)
        return interchanges

    def get_graph_statistics(self) -> Dict[str, Any]:
        """
        Summarize the network.

        Returns:
            Dictionary with counts of stations, lines, components, parallel
            line groups and isolated stations, plus degree figures
        """
        aVertex = self.graph.vertices()
        aEdge = self.graph.edges()
        aDegree = build_degree_array(aVertex, aEdge)

        statistics = {
            'total_vertices': len(aVertex),
            'total_edges': len(aEdge),
            'connected_components': len(self.find_connected_components()),
            'parallel_line_groups': len(self.find_parallel_lines()),
            'isolated_vertices': int((aDegree == 0).sum()),
            'mean_degree': float(aDegree.mean()) if len(aVertex) > 0 else 0.0,
            'max_degree': int(aDegree.max()) if len(aVertex) > 0 else 0,
        }
        logger.info(f"Graph statistics: {statistics}")
        return statistics
