"""
Network operation modules for modifying rail networks.
"""

from .modification import NetworkModifier

__all__ = ['NetworkModifier']
