"""
PyRailgraph - Rail Network Graph Library

A Python library for modelling rail networks as graphs. Stations are
vertices, train lines are undirected edges, and several lines may join the
same pair of stations. Provides structural editing plus breadth-first
reachability, connectivity and fewest-stops routing.

Main Classes:
    pyrailgraph: Main class for rail network analysis (facade)
    pyvertex: Station representation in the network
    pyedge: Train line representation between stations

Example:
    >>> from railgraph import pyrailgraph
    >>> graph = pyrailgraph()
    >>> p = graph.insert_vertex("P")
    >>> q = graph.insert_vertex("Q")
    >>> graph.insert_edge(p, q, "Red")
    >>> graph.most_direct_route(p, q)
"""

__version__ = "0.1.0"

from railgraph.classes.vertex import pyvertex
from railgraph.classes.edge import pyedge
from railgraph.core.graph import RailGraph, StationNotFoundError, GraphConsistencyError
from railgraph.core.railgraph import pyrailgraph

__all__ = [
    'pyrailgraph',
    'pyvertex',
    'pyedge',
    'RailGraph',
    'StationNotFoundError',
    'GraphConsistencyError',
]
