"""Three-dimensional extents and offsets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dim3:
    """An (x, y, z) triple supporting addition and negation."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: "Dim3") -> "Dim3":
        if not isinstance(other, Dim3):
            return NotImplemented
        return Dim3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> "Dim3":
        return Dim3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"<{self.x},{self.y},{self.z}>"