"""Points on an elliptic curve: affine coordinates or the point at infinity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An affine point ``(x, y)`` on an elliptic curve."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"Coordinates({self.x}, {self.y})"


@dataclass(frozen=True)
class Infinity:
    """The point at infinity, the identity of the curve group."""

    def __str__(self) -> str:
        return "Infinity"


INFINITY = Infinity()

CurvePoint = Point | Infinity