from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Tuple, Union

from . import geometry
from .geometry import Point, Points


class UnknownFigureKind(ValueError):
    """Raised when a figure is requested for a kind outside the seven tetrominoes."""


class FigureKind(IntEnum):
    I = 1
    O = 2
    L = 3
    J = 4
    S = 5
    Z = 6
    T = 7

    @classmethod
    def parse(cls, value: Union["FigureKind", str, int]) -> "FigureKind":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise UnknownFigureKind(f"Unknown figure kind: {value!r}") from None
        try:
            return cls(value)
        except ValueError:
            raise UnknownFigureKind(f"Unknown figure kind: {value!r}") from None


# (points, center index); points are (x, y) with y growing downwards
TEMPLATES: Dict[FigureKind, Tuple[Points, int]] = {
    FigureKind.I: (((0, 0), (1, 0), (2, 0), (3, 0)), 1),
    FigureKind.O: (((0, 0), (0, 1), (1, 0), (1, 1)), 0),
    FigureKind.L: (((0, 0), (1, 0), (2, 0), (2, 1)), 1),
    FigureKind.J: (((0, 1), (1, 1), (2, 1), (2, 0)), 1),
    FigureKind.S: (((1, 0), (1, 1), (0, 1), (0, 2)), 1),
    FigureKind.Z: (((0, 0), (0, 1), (1, 1), (1, 2)), 2),
    FigureKind.T: (((1, 0), (0, 1), (1, 1), (1, 2)), 2),
}


@dataclass(frozen=True)
class Figure:
    """A rigid tetromino pose.

    Two figures are the same state iff their ordered point sequences match;
    kind and center index ride along but do not take part in equality.
    """

    points: Points
    center_index: int = field(default=0, compare=False)
    kind: FigureKind = field(default=FigureKind.O, compare=False)

    @classmethod
    def create(cls, kind: Union[FigureKind, str, int]) -> "Figure":
        kind = FigureKind.parse(kind)
        points, center_index = TEMPLATES[kind]
        return cls(points=points, center_index=center_index, kind=kind)

    @property
    def key(self) -> Points:
        return self.points

    @property
    def center(self) -> Point:
        return geometry.center(self.points, self.center_index)

    def _with_points(self, points: Points) -> "Figure":
        return Figure(points=points, center_index=self.center_index, kind=self.kind)

    def moved(self, dx: int, dy: int) -> "Figure":
        return self._with_points(geometry.move(self.points, (dx, dy)))

    def translated(self, target: Point) -> "Figure":
        return self._with_points(geometry.translate(self.points, self.center_index, target))

    def rotated(self, degrees: int) -> "Figure":
        return self._with_points(geometry.rotate(self.points, self.center_index, degrees))

    def bounds(self) -> Tuple[Point, Point]:
        return geometry.bounds(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __str__(self) -> str:
        cells = " ".join(f"{x},{y}" for x, y in self.points)
        return f"{self.kind.name}[{cells}]"
