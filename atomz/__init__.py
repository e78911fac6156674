"""
atomz: domain core of a turn-based chain-reaction grid game.

Geometry (``atomz.geometry``), the generic game protocol (``atomz.game``)
and the classic game built on it (``atomz.classic``).
"""

__version__ = "0.1.0"
