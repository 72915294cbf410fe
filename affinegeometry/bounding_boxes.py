"""
Axis-aligned bounding boxes
"""

from dataclasses import dataclass

from .core import GLOBAL, CoordinateSystem, check_same_system
from .points import Point2


@dataclass(frozen=True)
class BoundingBox2:
    """
    Axis-aligned 2D box

    Attributes:
        min_x, max_x, min_y, max_y: extrema, with min <= max
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    system: CoordinateSystem = GLOBAL

    @classmethod
    def from_extrema(cls, min_x, max_x, min_y, max_y, system=GLOBAL):
        """Box with the given extrema; reversed pairs are swapped"""
        return cls(
            min(min_x, max_x),
            max(min_x, max_x),
            min(min_y, max_y),
            max(min_y, max_y),
            system,
        )

    @classmethod
    def singleton(cls, point):
        return cls(point.x, point.x, point.y, point.y, point.system)

    @classmethod
    def hull_of(cls, first, *rest):
        """Smallest box containing all given points"""
        points = (first,) + rest
        check_same_system(*points)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), max(xs), min(ys), max(ys), first.system)

    def extrema(self):
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def center_point(self):
        return Point2(
            self.min_x + 0.5 * (self.max_x - self.min_x),
            self.min_y + 0.5 * (self.max_y - self.min_y),
            self.system,
        )

    def dimensions(self):
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    def contains(self, point):
        check_same_system(self, point)
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def intersects(self, other):
        """True when the boxes overlap or touch"""
        check_same_system(self, other)
        return (
            self.min_x <= other.max_x
            and other.min_x <= self.max_x
            and self.min_y <= other.max_y
            and other.min_y <= self.max_y
        )

    def union(self, other):
        check_same_system(self, other)
        return BoundingBox2(
            min(self.min_x, other.min_x),
            max(self.max_x, other.max_x),
            min(self.min_y, other.min_y),
            max(self.max_y, other.max_y),
            self.system,
        )
