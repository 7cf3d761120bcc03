"""
Station vertex for the rail network graph.
"""

import logging

logger = logging.getLogger(__name__)


class pyvertex:
    """
    A station in the rail network.

    Vertices are compared by identity, so two stations with the same name
    remain distinct entries in the graph. The visited marker is transient
    scratch state and is left false by every graph query.
    """

    def __init__(self, sName: str):
        """
        Initialize a station.

        Args:
            sName: Station name; any string is accepted, including duplicates
        """
        self.sName = sName
        self.iFlag_visited = False

    def get_name(self) -> str:
        """Get the station name."""
        return self.sName

    def set_name(self, sName: str) -> str:
        """
        Rename the station.

        Args:
            sName: New station name

        Returns:
            The previous station name
        """
        sName_old = self.sName
        self.sName = sName
        return sName_old

    def toggle_visit(self):
        """Flip the visited marker."""
        self.iFlag_visited = not self.iFlag_visited

    def is_visited(self) -> bool:
        return self.iFlag_visited

    def __repr__(self) -> str:
        return f"pyvertex({self.sName!r})"
