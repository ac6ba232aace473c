"""Small 2D vector helpers used by movement, steering and dungeon code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Union

_EPSILON = 1e-7


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats, used for positions, velocities and forces."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


@dataclass(frozen=True)
class IVec2:
    """A 2D vector of integers, used for tile coordinates."""

    x: int
    y: int

    def __sub__(self, other: IVec2) -> IVec2:
        return IVec2(self.x - other.x, self.y - other.y)


class _HasXY(Protocol):
    x: Union[int, float]
    y: Union[int, float]


def safeinv(v: float) -> float:
    """Return 1/v, or v itself when v is too close to zero to invert."""
    return 1.0 / v if abs(v) > _EPSILON else v


def length_sq(v: Vec2) -> float:
    """Squared length of a vector."""
    return v.x * v.x + v.y * v.y


def length(v: Vec2) -> float:
    """Length of a vector."""
    return math.sqrt(length_sq(v))


def dot(lhs: Vec2, rhs: Vec2) -> float:
    """Dot product of two vectors."""
    return lhs.x * rhs.x + lhs.y * rhs.y


def normalize(v: Vec2) -> Vec2:
    """Unit vector in the direction of v; a zero vector stays zero."""
    return v * safeinv(length(v))


def truncate(v: Vec2, max_len: float) -> Vec2:
    """Scale v down so that its length does not exceed max_len."""
    current = length(v)
    if current > max_len:
        return v * (max_len / current)
    return v


def dist_sq(lhs: _HasXY, rhs: _HasXY) -> float:
    """Squared distance between two points with x and y attributes."""
    return float((lhs.x - rhs.x) ** 2 + (lhs.y - rhs.y) ** 2)


def dist(lhs: _HasXY, rhs: _HasXY) -> float:
    """Distance between two points with x and y attributes."""
    return math.sqrt(dist_sq(lhs, rhs))