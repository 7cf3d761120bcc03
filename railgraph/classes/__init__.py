"""
Core data classes for rail network representation.

This module contains the fundamental data structures used throughout
the railgraph library.
"""

from .vertex import pyvertex
from .edge import pyedge

__all__ = [
    'pyvertex',
    'pyedge',
]
