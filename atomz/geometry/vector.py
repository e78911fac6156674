"""Integer vectors used for positions and displacements."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

# Type used to store Vector components
Scalar = int


class Vector(BaseModel):
    """Immutable 3-component integer vector.

    Vectors are ordered by a strict *partial* order: ``a < b`` only when
    every component of ``a`` is strictly less than the matching component
    of ``b``. Two vectors that are neither equal nor ordered that way are
    incomparable, so ``a < b``, ``a > b`` and ``a == b`` can all be False.
    """
    x: Scalar
    y: Scalar
    z: Scalar

    class Config:
        frozen = True

    def __init__(self, x: Scalar = 0, y: Scalar = 0, z: Scalar = 0):
        super().__init__(x=x, y=y, z=z)

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"

    def as_tuple(self) -> tuple[Scalar, Scalar, Scalar]:
        return (self.x, self.y, self.z)

    def is_positive(self) -> bool:
        """True if every component is greater than or equal to 0."""
        return self.x >= 0 and self.y >= 0 and self.z >= 0

    def __abs__(self) -> "Vector":
        return Vector(abs(self.x), abs(self.y), abs(self.z))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def partial_cmp(self, other: "Vector") -> Optional[int]:
        """Compare under the component-wise partial order.

        Returns -1 if every component is strictly less, 1 if every
        component is strictly greater, 0 if equal and None otherwise.
        """
        if self.as_tuple() == other.as_tuple():
            return 0
        if self.x < other.x and self.y < other.y and self.z < other.z:
            return -1
        if self.x > other.x and self.y > other.y and self.z > other.z:
            return 1
        return None

    def __lt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.partial_cmp(other) in (1, 0)


# A place in the grid.
Position = Vector
# A displacement between two places.
Distance = Vector
