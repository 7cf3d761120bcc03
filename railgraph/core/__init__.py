"""
Core graph data structures and management.

This module contains the fundamental graph representation and the
pyrailgraph facade.
"""

from .graph import RailGraph, StationNotFoundError, GraphConsistencyError

__all__ = ['RailGraph', 'StationNotFoundError', 'GraphConsistencyError']
