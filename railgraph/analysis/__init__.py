"""
Network analysis modules for traversal, routing and pattern detection.
"""

from .pathfinding import PathFinder
from .detection import NetworkAnalyzer

__all__ = ['PathFinder', 'NetworkAnalyzer']
