"""
Train line edge for the rail network graph.
"""

import logging
from typing import Optional, Tuple

from .vertex import pyvertex

logger = logging.getLogger(__name__)


class pyedge:
    """
    An undirected, labeled connection between two stations.

    The two endpoints are stored positionally but carry no direction:
    incidence is always tested against both ends. Several edges may join
    the same pair of stations, one per line.
    """

    def __init__(self, pVertex_start: Optional[pyvertex], pVertex_end: Optional[pyvertex], sLine: str):
        """
        Initialize an edge.

        Args:
            pVertex_start: First endpoint
            pVertex_end: Second endpoint
            sLine: Name of the train line
        """
        self.pVertex_start = pVertex_start
        self.pVertex_end = pVertex_end
        self.sLine = sLine

    def get_line(self) -> str:
        """Get the train line name."""
        return self.sLine

    def set_line(self, sLine: str) -> str:
        """
        Rename the train line.

        Args:
            sLine: New line name

        Returns:
            The previous line name
        """
        sLine_old = self.sLine
        self.sLine = sLine
        return sLine_old

    def get_end1(self) -> Optional[pyvertex]:
        return self.pVertex_start

    def get_end2(self) -> Optional[pyvertex]:
        return self.pVertex_end

    def set_end1(self, pVertex: Optional[pyvertex]):
        """Replace the first endpoint; None marks it as detached."""
        self.pVertex_start = pVertex

    def set_end2(self, pVertex: Optional[pyvertex]):
        """Replace the second endpoint; None marks it as detached."""
        self.pVertex_end = pVertex

    def get_endpoints(self) -> Tuple[Optional[pyvertex], Optional[pyvertex]]:
        return self.pVertex_start, self.pVertex_end

    def is_incident_to(self, pVertex: pyvertex) -> bool:
        """
        Check whether a station is one of the two endpoints.

        Args:
            pVertex: Station to test

        Returns:
            True if the station is either endpoint
        """
        if pVertex is None:
            return False
        return pVertex is self.pVertex_start or pVertex is self.pVertex_end

    def is_self_loop(self) -> bool:
        return self.pVertex_start is not None and self.pVertex_start is self.pVertex_end

    def detach(self):
        """Clear both endpoints."""
        logger.debug(f"Detaching line {self.sLine!r}")
        self.pVertex_start = None
        self.pVertex_end = None

    def __repr__(self) -> str:
        sStart = self.pVertex_start.sName if self.pVertex_start is not None else None
        sEnd = self.pVertex_end.sName if self.pVertex_end is not None else None
        return f"pyedge({sStart!r}, {sEnd!r}, {self.sLine!r})"
