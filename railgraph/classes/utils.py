"""
Utility functions for railgraph.

This module provides array views of the network and graph algorithms that
operate on plain index-based adjacency dictionaries.
"""

import numpy as np
from typing import List, Dict, Sequence
from collections import deque
import logging

from .vertex import pyvertex
from .edge import pyedge

logger = logging.getLogger(__name__)


def build_vertex_index(aVertex: Sequence[pyvertex]) -> Dict[pyvertex, int]:
    """
    Map each vertex to its position in the given sequence.

    Args:
        aVertex: Ordered vertices

    Returns:
        Dictionary mapping vertex -> 0-based index
    """
    return {pVertex: i for i, pVertex in enumerate(aVertex)}


def build_adjacency_matrix(aVertex: Sequence[pyvertex], aEdge: Sequence[pyedge]) -> np.ndarray:
    """
    Build a symmetric matrix of edge multiplicities.

    Entry (i, j) counts the lines joining station i and station j. A self
    loop adds one to the diagonal.

    Args:
        aVertex: Ordered vertices defining rows and columns
        aEdge: Edges of the network

    Returns:
        Integer array of shape (nVertex, nVertex)
    """
    nVertex = len(aVertex)
    aIndex = build_vertex_index(aVertex)
    aMatrix = np.zeros((nVertex, nVertex), dtype=int)

    for pEdge in aEdge:
        iStart = aIndex.get(pEdge.pVertex_start)
        iEnd = aIndex.get(pEdge.pVertex_end)
        if iStart is None or iEnd is None:
            logger.warning(f"Skipping edge {pEdge!r} with endpoint outside the vertex set")
            continue
        aMatrix[iStart, iEnd] += 1
        if iStart != iEnd:
            aMatrix[iEnd, iStart] += 1

    return aMatrix


def build_degree_array(aVertex: Sequence[pyvertex], aEdge: Sequence[pyedge]) -> np.ndarray:
    """
    Count incident edges per vertex.

    Args:
        aVertex: Ordered vertices
        aEdge: Edges of the network

    Returns:
        Integer array of length nVertex; a self loop counts once
    """
    aMatrix = build_adjacency_matrix(aVertex, aEdge)
    return aMatrix.sum(axis=1)


def find_connected_components(adjacency_dict: Dict[int, List[int]]) -> List[List[int]]:
    """
    Find connected components of an undirected graph using breadth-first search.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of connected node_ids

    Returns:
        List of components, each as a list of node IDs in BFS order
    """
    components = []
    visited = set()

    for node in adjacency_dict:
        if node in visited:
            continue

        component = []
        queue = deque([node])
        visited.add(node)

        while queue:
            current = queue.popleft()
            component.append(current)

            for neighbor in adjacency_dict.get(current, []):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        components.append(component)

    return components
