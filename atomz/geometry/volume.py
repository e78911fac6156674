"""Axis-aligned integer bounding boxes."""

from __future__ import annotations

from typing import Iterator, Optional

from pydantic import BaseModel, model_validator

from .vector import Distance, Position, Vector


class Volume(BaseModel):
    """Bounding box between two corners.

    A volume exists only when ``bottom_left_corner < top_right_corner``
    on every axis. ``is_inside`` is inclusive of the top right corner, while
    iteration walks ``diagonal.x * diagonal.y * diagonal.z`` positions
    starting at the bottom left corner: a volume with diagonal ``(1, 1, 1)``
    contains 8 positions but enumerates 1.
    """
    bottom_left_corner: Position
    top_right_corner: Position
    diagonal: Distance

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_corners(self) -> "Volume":
        if not self.bottom_left_corner < self.top_right_corner:
            raise ValueError(
                f"bottom left corner {self.bottom_left_corner!r} must be "
                f"strictly below top right corner {self.top_right_corner!r}"
            )
        if self.diagonal != self.top_right_corner - self.bottom_left_corner:
            raise ValueError("diagonal must equal top_right_corner - bottom_left_corner")
        return self

    @classmethod
    def new(cls, blc: Position, trc: Position) -> Optional["Volume"]:
        """Create a volume from its corners.

        Returns None unless ``blc < trc`` on all three axes.

        Args:
            blc: Bottom left corner
            trc: Top right corner
        """
        if not blc < trc:
            return None
        return cls(bottom_left_corner=blc, top_right_corner=trc, diagonal=trc - blc)

    def is_inside(self, position: Position) -> bool:
        """True if ``0 <= position - blc <= diagonal`` on every axis."""
        diff = position - self.bottom_left_corner
        return diff.is_positive() and (self.diagonal - diff).is_positive()

    def volume(self) -> int:
        """Number of positions produced by iteration."""
        return self.diagonal.x * self.diagonal.y * self.diagonal.z

    def position_at(self, index: int) -> Position:
        """Map a linear index in ``[0, volume())`` to its position.

        The index is decomposed row-major: x varies fastest, then y, then z.
        """
        if not 0 <= index < self.volume():
            raise IndexError(f"index {index} outside volume of {self.volume()}")
        dx, dy = self.diagonal.x, self.diagonal.y
        origin = self.bottom_left_corner
        return Vector(
            origin.x + index % dx,
            origin.y + (index // dx) % dy,
            origin.z + index // (dx * dy),
        )

    def __iter__(self) -> Iterator[Position]:  # type: ignore[override]
        for index in range(self.volume()):
            yield self.position_at(index)

    def __len__(self) -> int:
        return self.volume()

    def __contains__(self, position: object) -> bool:
        return isinstance(position, Vector) and self.is_inside(position)
