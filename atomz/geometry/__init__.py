"""3D integer geometry: vectors, volumes and terrain."""

from .terrain import CellKind, CellMaterial, CellType, Terrain
from .vector import Distance, Position, Scalar, Vector
from .volume import Volume

__all__ = [
    "CellKind",
    "CellMaterial",
    "CellType",
    "Distance",
    "Position",
    "Scalar",
    "Terrain",
    "Vector",
    "Volume",
]
