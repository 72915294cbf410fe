"""
Axes: an origin point plus a direction
"""

from dataclasses import dataclass

from .core import GLOBAL, check_same_system
from .directions import Direction2, Direction3
from .points import Point2, Point3


@dataclass(frozen=True)
class Axis2:
    """A directed line in 2D"""

    origin_point: Point2
    direction: Direction2

    def __post_init__(self):
        check_same_system(self.origin_point, self.direction)

    @classmethod
    def x(cls, system=GLOBAL):
        return cls(Point2.origin(system), Direction2.positive_x(system))

    @classmethod
    def y(cls, system=GLOBAL):
        return cls(Point2.origin(system), Direction2.positive_y(system))

    @classmethod
    def through(cls, point, direction):
        return cls(point, direction)

    @property
    def system(self):
        return self.origin_point.system

    def reverse(self):
        return Axis2(self.origin_point, self.direction.reverse())

    def move_to(self, point):
        return Axis2(point, self.direction)

    def translate_by(self, vector):
        return Axis2(self.origin_point.translate_by(vector), self.direction)

    def rotate_around(self, center, angle):
        return Axis2(self.origin_point.rotate_around(center, angle), self.direction.rotate_by(angle))

    def mirror_across(self, axis):
        return Axis2(self.origin_point.mirror_across(axis), self.direction.mirror_across(axis))

    def relative_to(self, frame):
        return Axis2(self.origin_point.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame):
        return Axis2(self.origin_point.place_in(frame), self.direction.place_in(frame))


@dataclass(frozen=True)
class Axis3:
    """A directed line in 3D"""

    origin_point: Point3
    direction: Direction3

    def __post_init__(self):
        check_same_system(self.origin_point, self.direction)

    @classmethod
    def x(cls, system=GLOBAL):
        return cls(Point3.origin(system), Direction3.positive_x(system))

    @classmethod
    def y(cls, system=GLOBAL):
        return cls(Point3.origin(system), Direction3.positive_y(system))

    @classmethod
    def z(cls, system=GLOBAL):
        return cls(Point3.origin(system), Direction3.positive_z(system))

    @classmethod
    def through(cls, point, direction):
        return cls(point, direction)

    @property
    def system(self):
        return self.origin_point.system

    def reverse(self):
        return Axis3(self.origin_point, self.direction.reverse())

    def move_to(self, point):
        return Axis3(point, self.direction)

    def translate_by(self, vector):
        return Axis3(self.origin_point.translate_by(vector), self.direction)

    def rotate_around(self, axis, angle):
        return Axis3(self.origin_point.rotate_around(axis, angle),
                     self.direction.rotate_around(axis, angle))

    def mirror_across(self, plane):
        return Axis3(self.origin_point.mirror_across(plane), self.direction.mirror_across(plane))

    def relative_to(self, frame):
        return Axis3(self.origin_point.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame):
        return Axis3(self.origin_point.place_in(frame), self.direction.place_in(frame))
