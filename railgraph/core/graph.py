"""
Core graph data structure for rail network representation.

This module provides the fundamental graph structure without high-level operations.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from ..classes.utils import build_adjacency_matrix

logger = logging.getLogger(__name__)


class StationNotFoundError(ValueError):
    """Raised when an operation references a station that is not in the graph."""

    def __init__(self, pVertex: Any):
        self.pVertex = pVertex
        super().__init__(f"Station {pVertex!r} not found in rail graph")


class GraphConsistencyError(RuntimeError):
    """Raised when the adjacency index disagrees with edge endpoints."""


class RailGraph:
    """
    Core graph data structure for rail networks.

    This class manages the fundamental graph representation without high-level
    operations like route finding or analysis. It provides:
    - Adjacency list maintenance (station -> incident lines, insertion ordered)
    - Membership tests for stations and lines
    - Basic graph queries (opposite, adjacency, incident lines, degree)
    - Structural validation
    """

    def __init__(self, aVertex: Optional[Sequence[pyvertex]] = None,
                 aEdge: Optional[Sequence[pyedge]] = None):
        """
        Initialize the rail network graph.

        Args:
            aVertex: Optional stations to start with
            aEdge: Optional lines to start with; each line is attached to
                   those of its endpoints present in aVertex
        """
        self.adjacency_list: Dict[pyvertex, List[pyedge]] = {}

        if aVertex is not None:
            self._build_graph(aVertex, aEdge or [])
        elif aEdge:
            logger.warning(f"Ignoring {len(aEdge)} edges supplied without vertices")

    def _build_graph(self, aVertex: Sequence[pyvertex], aEdge: Sequence[pyedge]):
        """
        Build the adjacency list from vertex and edge collections.

        Every vertex gets its incident edges in the order they appear in aEdge.
        """
        self.adjacency_list.clear()

        for pVertex in aVertex:
            self.adjacency_list.setdefault(pVertex, [])

        nSkipped = 0
        for pEdge in aEdge:
            pStart, pEnd = pEdge.get_endpoints()
            if pStart not in self.adjacency_list or pEnd not in self.adjacency_list:
                nSkipped += 1
                logger.warning(f"Skipping edge {pEdge!r}: endpoint not in vertex set")
                continue

            self.adjacency_list[pStart].append(pEdge)
            if pEnd is not pStart:
                self.adjacency_list[pEnd].append(pEdge)

        logger.debug(f"Built graph with {len(self.adjacency_list)} vertices and "
                     f"{len(aEdge) - nSkipped} edges")

    # ========================================================================
    # MEMBERSHIP
    # ========================================================================

    def has_vertex(self, pVertex: pyvertex) -> bool:
        return pVertex in self.adjacency_list

    def has_edge(self, pEdge: pyedge) -> bool:
        """Check whether an edge is held by any adjacency list."""
        for aEdge in self.adjacency_list.values():
            if pEdge in aEdge:
                return True
        return False

    def require_vertex(self, pVertex: pyvertex):
        """
        Ensure a vertex belongs to the graph.

        Raises:
            StationNotFoundError: If the vertex is not a member
        """
        if pVertex not in self.adjacency_list:
            raise StationNotFoundError(pVertex)

    # ========================================================================
    # STRUCTURAL QUERIES
    # ========================================================================

    def vertices(self) -> List[pyvertex]:
        """Get all stations in insertion order."""
        return list(self.adjacency_list.keys())

    def edges(self) -> List[pyedge]:
        """
        Get all lines, each reported once.

        Returns:
            Edges in the order they are first seen across adjacency lists
        """
        seen = set()
        aEdge_out = []
        for aEdge in self.adjacency_list.values():
            for pEdge in aEdge:
                if id(pEdge) not in seen:
                    seen.add(id(pEdge))
                    aEdge_out.append(pEdge)
        return aEdge_out

    def get_vertex_count(self) -> int:
        return len(self.adjacency_list)

    def get_edge_count(self) -> int:
        return len(self.edges())

    def find_vertices_by_name(self, sName: str) -> List[pyvertex]:
        """
        Find stations with the given name.

        Names are not unique, so every match is returned in insertion order.
        """
        return [pVertex for pVertex in self.adjacency_list if pVertex.sName == sName]

    def incident_edges(self, pVertex: pyvertex) -> List[pyedge]:
        """
        Get the lines touching a station.

        Args:
            pVertex: Station to query

        Returns:
            Copy of the station's adjacency list in insertion order

        Raises:
            StationNotFoundError: If the station is not in the graph
        """
        self.require_vertex(pVertex)
        return list(self.adjacency_list[pVertex])

    def degree(self, pVertex: pyvertex) -> int:
        """Number of lines touching a station; a self loop counts once."""
        self.require_vertex(pVertex)
        return len(self.adjacency_list[pVertex])

    def opposite(self, pEdge: pyedge, pVertex: pyvertex) -> Optional[pyvertex]:
        """
        Get the station at the other end of a line.

        Args:
            pEdge: Line incident to pVertex
            pVertex: One endpoint of pEdge

        Returns:
            The other endpoint, or None if the line is not in the graph or
            pVertex is not one of its endpoints
        """
        if not self.has_edge(pEdge):
            return None
        if pVertex is None:
            return None
        if pVertex is pEdge.pVertex_start:
            return pEdge.pVertex_end
        if pVertex is pEdge.pVertex_end:
            return pEdge.pVertex_start
        return None

    def are_adjacent(self, pVertex_a: pyvertex, pVertex_b: pyvertex) -> bool:
        """
        Check whether two stations share at least one line.

        Stations outside the graph are never adjacent. A station is adjacent
        to itself only through a self loop.
        """
        if pVertex_a not in self.adjacency_list or pVertex_b not in self.adjacency_list:
            return False

        if pVertex_a is pVertex_b:
            return any(pEdge.is_self_loop() for pEdge in self.adjacency_list[pVertex_a])

        # scan the shorter list
        if len(self.adjacency_list[pVertex_b]) < len(self.adjacency_list[pVertex_a]):
            pVertex_a, pVertex_b = pVertex_b, pVertex_a
        return any(pEdge.is_incident_to(pVertex_b) for pEdge in self.adjacency_list[pVertex_a])

    def iter_neighbors(self, pVertex: pyvertex) -> Iterator[Tuple[pyedge, pyvertex]]:
        """
        Yield (line, neighbor) pairs for a station in adjacency order.

        Raises:
            GraphConsistencyError: If a listed line does not touch the station
        """
        for pEdge in self.adjacency_list[pVertex]:
            if pVertex is pEdge.pVertex_start:
                yield pEdge, pEdge.pVertex_end
            elif pVertex is pEdge.pVertex_end:
                yield pEdge, pEdge.pVertex_start
            else:
                raise GraphConsistencyError(
                    f"Edge {pEdge!r} is listed under {pVertex!r} but does not touch it")

    def get_adjacency_matrix(self) -> np.ndarray:
        """
        Edge multiplicity matrix with rows and columns in vertices() order.
        """
        return build_adjacency_matrix(self.vertices(), self.edges())

    # ========================================================================
    # VALIDATION
    # ========================================================================

    def validate_graph_structure(self) -> Dict[str, Any]:
        """
        Validate the internal consistency of the graph structure.

        Returns:
            Dictionary containing validation results
        """
        validation_results = {
            'is_valid': True,
            'issues': [],
            'statistics': {}
        }

        for pVertex, aEdge in self.adjacency_list.items():
            seen = set()
            for pEdge in aEdge:
                if id(pEdge) in seen:
                    validation_results['issues'].append(
                        f"Edge {pEdge!r} listed more than once under {pVertex!r}")
                    validation_results['is_valid'] = False
                seen.add(id(pEdge))

                if not pEdge.is_incident_to(pVertex):
                    validation_results['issues'].append(
                        f"Edge {pEdge!r} listed under non-endpoint {pVertex!r}")
                    validation_results['is_valid'] = False

        aEdge_all = self.edges()
        for pEdge in aEdge_all:
            for pEnd in pEdge.get_endpoints():
                if pEnd not in self.adjacency_list:
                    validation_results['issues'].append(
                        f"Edge {pEdge!r} references vertex {pEnd!r} outside the graph")
                    validation_results['is_valid'] = False
                elif pEdge not in self.adjacency_list[pEnd]:
                    validation_results['issues'].append(
                        f"Edge {pEdge!r} missing from adjacency list of {pEnd!r}")
                    validation_results['is_valid'] = False

        validation_results['statistics'] = {
            'total_vertices': len(self.adjacency_list),
            'total_edges': len(aEdge_all),
            'total_incidences': sum(len(aEdge) for aEdge in self.adjacency_list.values())
        }

        if not validation_results['is_valid']:
            logger.error(f"Graph validation found {len(validation_results['issues'])} issues")

        return validation_results
