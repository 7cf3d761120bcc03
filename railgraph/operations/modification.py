"""
Network modification operations for rail networks.

This module provides operations that modify network structure.
"""

import logging
from typing import List, Optional, Union

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from ..core.graph import RailGraph, StationNotFoundError

logger = logging.getLogger(__name__)


class NetworkModifier:
    """
    Handles network modification operations.

    This class provides methods for:
    - Inserting and removing stations
    - Inserting and removing lines
    - Renaming stations and lines
    """

    def __init__(self, graph: RailGraph):
        """
        Initialize the network modifier.

        Args:
            graph: RailGraph instance to modify
        """
        self.graph = graph

    def insert_vertex(self, sName: str) -> pyvertex:
        """
        Insert a new station with no lines.

        Args:
            sName: Station name

        Returns:
            The new station
        """
        pVertex = pyvertex(sName)
        self.graph.adjacency_list[pVertex] = []
        logger.debug(f"Inserted station {sName!r}")
        return pVertex

    def remove_vertex(self, pVertex: pyvertex) -> str:
        """
        Remove a station and every line touching it.

        Args:
            pVertex: Station to remove

        Returns:
            Name of the removed station

        Raises:
            StationNotFoundError: If the station is not in the graph
        """
        if pVertex not in self.graph.adjacency_list:
            raise StationNotFoundError(pVertex)

        # Collect first, the lists are edited below
        aEdge_remove = list(self.graph.adjacency_list[pVertex])
        for pEdge in aEdge_remove:
            self._unlink_edge(pEdge)

        del self.graph.adjacency_list[pVertex]
        logger.debug(f"Removed station {pVertex.sName!r} and {len(aEdge_remove)} lines")
        return pVertex.sName

    def insert_edge(self, pVertex_a: pyvertex, pVertex_b: pyvertex, sLine: str) -> pyedge:
        """
        Insert a new line between two stations.

        Parallel lines and self loops are allowed.

        Args:
            pVertex_a: One endpoint
            pVertex_b: Other endpoint
            sLine: Name of the train line

        Returns:
            The new line

        Raises:
            StationNotFoundError: If either station is not in the graph
        """
        self.graph.require_vertex(pVertex_a)
        self.graph.require_vertex(pVertex_b)

        pEdge = pyedge(pVertex_a, pVertex_b, sLine)
        self.graph.adjacency_list[pVertex_a].append(pEdge)
        if pVertex_b is not pVertex_a:
            self.graph.adjacency_list[pVertex_b].append(pEdge)

        logger.debug(f"Inserted line {sLine!r} between {pVertex_a.sName!r} and {pVertex_b.sName!r}")
        return pEdge

    def remove_edge(self, pEdge: pyedge) -> Optional[str]:
        """
        Remove a line from the graph.

        Args:
            pEdge: Line to remove

        Returns:
            Name of the removed line, or None if it was not in the graph
        """
        nRemoved = self._unlink_edge(pEdge)
        if nRemoved == 0:
            logger.debug(f"Line {pEdge!r} not found in graph")
            return None
        return pEdge.sLine

    def _unlink_edge(self, pEdge: pyedge) -> int:
        """
        Drop a line from every adjacency list holding it.

        Returns:
            Number of adjacency lists the line was removed from
        """
        aHolder: List[pyvertex] = [pVertex for pVertex, aEdge in self.graph.adjacency_list.items()
                                   if pEdge in aEdge]
        for pVertex in aHolder:
            self.graph.adjacency_list[pVertex].remove(pEdge)
        return len(aHolder)

    def rename(self, pItem: Union[pyvertex, pyedge], sName: str) -> str:
        """
        Rename a station or a line.

        Args:
            pItem: Station or line to rename
            sName: New name

        Returns:
            The previous name

        Raises:
            TypeError: If pItem is neither a station nor a line
        """
        if isinstance(pItem, pyvertex):
            return pItem.set_name(sName)
        if isinstance(pItem, pyedge):
            return pItem.set_line(sName)
        raise TypeError(f"Cannot rename object of type {type(pItem).__name__}")
