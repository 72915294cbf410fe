"""
Line segments between two points
"""

from dataclasses import dataclass

from .core import check_same_system
from .bounding_boxes import BoundingBox2
from .points import Point2, Point3


@dataclass(frozen=True)
class LineSegment2:
    """Directed 2D segment from ``start_point`` to ``end_point``"""

    start_point: Point2
    end_point: Point2

    def __post_init__(self):
        check_same_system(self.start_point, self.end_point)

    @classmethod
    def from_endpoints(cls, start_point, end_point):
        return cls(start_point, end_point)

    @property
    def system(self):
        return self.start_point.system

    def endpoints(self):
        return (self.start_point, self.end_point)

    def vector(self):
        return self.end_point.vector_from(self.start_point)

    def length(self):
        return self.vector().length()

    def direction(self):
        """Direction from start to end, or None when the endpoints coincide"""
        return self.vector().direction()

    def midpoint(self):
        return Point2.midpoint(self.start_point, self.end_point)

    def interpolate(self, t):
        return Point2.interpolate_from(self.start_point, self.end_point, t)

    def reverse(self):
        return LineSegment2(self.end_point, self.start_point)

    def bounding_box(self):
        return BoundingBox2.hull_of(self.start_point, self.end_point)

    def map_endpoints(self, function):
        return LineSegment2(function(self.start_point), function(self.end_point))

    def translate_by(self, vector):
        return self.map_endpoints(lambda p: p.translate_by(vector))

    def scale_about(self, center, factor):
        return self.map_endpoints(lambda p: p.scale_about(center, factor))

    def rotate_around(self, center, angle):
        return self.map_endpoints(lambda p: p.rotate_around(center, angle))

    def mirror_across(self, axis):
        return self.map_endpoints(lambda p: p.mirror_across(axis))

    def relative_to(self, frame):
        return self.map_endpoints(lambda p: p.relative_to(frame))

    def place_in(self, frame):
        return self.map_endpoints(lambda p: p.place_in(frame))


@dataclass(frozen=True)
class LineSegment3:
    """Directed 3D segment from ``start_point`` to ``end_point``"""

    start_point: Point3
    end_point: Point3

    def __post_init__(self):
        check_same_system(self.start_point, self.end_point)

    @classmethod
    def from_endpoints(cls, start_point, end_point):
        return cls(start_point, end_point)

    @property
    def system(self):
        return self.start_point.system

    def endpoints(self):
        return (self.start_point, self.end_point)

    def vector(self):
        return self.end_point.vector_from(self.start_point)

    def length(self):
        return self.vector().length()

    def direction(self):
        return self.vector().direction()

    def midpoint(self):
        return Point3.midpoint(self.start_point, self.end_point)

    def interpolate(self, t):
        return Point3.interpolate_from(self.start_point, self.end_point, t)

    def reverse(self):
        return LineSegment3(self.end_point, self.start_point)

    def map_endpoints(self, function):
        return LineSegment3(function(self.start_point), function(self.end_point))

    def translate_by(self, vector):
        return self.map_endpoints(lambda p: p.translate_by(vector))

    def scale_about(self, center, factor):
        return self.map_endpoints(lambda p: p.scale_about(center, factor))

    def rotate_around(self, axis, angle):
        return self.map_endpoints(lambda p: p.rotate_around(axis, angle))

    def mirror_across(self, plane):
        return self.map_endpoints(lambda p: p.mirror_across(plane))

    def relative_to(self, frame):
        return self.map_endpoints(lambda p: p.relative_to(frame))

    def place_in(self, frame):
        return self.map_endpoints(lambda p: p.place_in(frame))
