from __future__ import annotations

from typing import Dict, Sequence, Tuple

import numpy as np


Point = Tuple[int, int]
Points = Tuple[Point, ...]


class UnsupportedRotation(ValueError):
    """Raised when a rotation other than 90, 180 or 270 degrees is requested."""


# Counter-clockwise in (x, y) with y pointing down the screen, so a positive
# angle turns clockwise on the board.
ROTATIONS: Dict[int, np.ndarray] = {
    90: np.array([[0, -1], [1, 0]], dtype=np.int64),
    180: np.array([[-1, 0], [0, -1]], dtype=np.int64),
    270: np.array([[0, 1], [-1, 0]], dtype=np.int64),
}


def _as_array(points: Sequence[Point]) -> np.ndarray:
    return np.asarray(points, dtype=np.int64).reshape(-1, 2)


def _as_points(arr: np.ndarray) -> Points:
    return tuple((int(x), int(y)) for x, y in arr)


def center(points: Sequence[Point], center_index: int) -> Point:
    x, y = points[center_index]
    return int(x), int(y)


def move(points: Sequence[Point], delta: Point) -> Points:
    """Shift every point by ``delta``."""
    return _as_points(_as_array(points) + np.asarray(delta, dtype=np.int64))


def translate(points: Sequence[Point], center_index: int, target: Point) -> Points:
    """Shift the point set so that its center point lands on ``target``."""
    cx, cy = center(points, center_index)
    return move(points, (target[0] - cx, target[1] - cy))


def rotate(points: Sequence[Point], center_index: int, degrees: int) -> Points:
    """Rotate the point set around its center point.

    Only quarter turns are supported and the identity is not a valid
    request. Point order is preserved, point ``i`` of the result is the
    image of point ``i`` of the input.
    """
    matrix = ROTATIONS.get(degrees)
    if matrix is None:
        raise UnsupportedRotation(f"Unsupported rotation: {degrees!r}")
    arr = _as_array(points)
    pivot = arr[center_index].copy()
    relative = arr - pivot
    rotated = relative @ matrix.T
    return _as_points(rotated + pivot)


def bounds(points: Sequence[Point]) -> Tuple[Point, Point]:
    """Inclusive ``(min_corner, max_corner)`` of the point set."""
    arr = _as_array(points)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return (int(lo[0]), int(lo[1])), (int(hi[0]), int(hi[1]))


def neighbors(point: Point) -> Tuple[Point, ...]:
    x, y = point
    return ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
