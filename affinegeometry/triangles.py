"""
Triangles in 2D and 3D

Vertices are stored in the order given; nothing is reordered and
degenerate (collinear) triangles are valid values. Orientation-sensitive
queries expose the winding through the sign of the result.

All transforms are ``map_vertices`` with the matching point transform.
Mirroring reverses the winding, which flips the sign of
``counterclockwise_area``. A negative uniform scale in 2D is a half turn
combined with a scale, so it keeps the winding.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .bounding_boxes import BoundingBox2
from .circles import Circle2
from .core import check_same_system
from .planes import Plane
from .points import Point2, Point3
from .segments import LineSegment2, LineSegment3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Triangle2:
    """
    A 2D triangle

    Attributes:
        p1, p2, p3: vertices, in either winding order
    """

    p1: Point2
    p2: Point2
    p3: Point2

    def __post_init__(self):
        check_same_system(self.p1, self.p2, self.p3)

    @classmethod
    def from_vertices(cls, p1, p2, p3):
        return cls(p1, p2, p3)

    @property
    def system(self):
        return self.p1.system

    def vertices(self):
        return (self.p1, self.p2, self.p3)

    def edges(self):
        """Directed edges p1 -> p2, p2 -> p3, p3 -> p1"""
        return (
            LineSegment2(self.p1, self.p2),
            LineSegment2(self.p2, self.p3),
            LineSegment2(self.p3, self.p1),
        )

    def centroid(self):
        first = self.p2.vector_from(self.p1)
        second = self.p3.vector_from(self.p1)
        return self.p1.translate_by(first.plus(second).scale_by(1.0 / 3.0))

    def counterclockwise_area(self):
        """Signed area, positive when the vertices wind counterclockwise"""
        first = self.p2.vector_from(self.p1)
        second = self.p3.vector_from(self.p1)
        return 0.5 * first.cross(second)

    def clockwise_area(self):
        """Signed area, positive when the vertices wind clockwise"""
        return -self.counterclockwise_area()

    def area(self):
        return abs(self.counterclockwise_area())

    def contains(self, point):
        """
        Point-in-triangle test, inclusive of the boundary

        For each directed edge, the cross product of the edge vector with
        the vector from the edge start to ``point`` gives which side the
        point is on. The point is inside when all three agree (all >= 0 or
        all <= 0), which covers both winding orders.
        """
        crosses = [
            end.vector_from(start).cross(point.vector_from(start))
            for start, end in ((self.p1, self.p2), (self.p2, self.p3), (self.p3, self.p1))
        ]
        return all(c >= 0 for c in crosses) or all(c <= 0 for c in crosses)

    def bounding_box(self):
        xs = (self.p1.x, self.p2.x, self.p3.x)
        ys = (self.p1.y, self.p2.y, self.p3.y)
        return BoundingBox2.from_extrema(min(xs), max(xs), min(ys), max(ys), self.system)

    def circumcircle(self):
        """
        Circle through the three vertices

        Returns:
        --------
        Circle2 or None
            None for a degenerate (collinear) triangle
        """
        return Circle2.through_points(self.p1, self.p2, self.p3)

    def map_vertices(self, function):
        """Apply ``function`` to each vertex independently"""
        return Triangle2(function(self.p1), function(self.p2), function(self.p3))

    def scale_about(self, center, factor):
        return self.map_vertices(lambda p: p.scale_about(center, factor))

    def rotate_around(self, center, angle):
        return self.map_vertices(lambda p: p.rotate_around(center, angle))

    def translate_by(self, vector):
        return self.map_vertices(lambda p: p.translate_by(vector))

    def translate_in(self, direction, distance):
        return self.map_vertices(lambda p: p.translate_in(direction, distance))

    def mirror_across(self, axis):
        return self.map_vertices(lambda p: p.mirror_across(axis))

    def relative_to(self, frame):
        return self.map_vertices(lambda p: p.relative_to(frame))

    def place_in(self, frame):
        return self.map_vertices(lambda p: p.place_in(frame))

    def place_on(self, plane):
        """Map plane-local vertices onto ``plane`` as a Triangle3"""
        return Triangle3(self.p1.place_on(plane), self.p2.place_on(plane), self.p3.place_on(plane))

    def equal_within(self, other, tolerance=None):
        return all(
            mine.equal_within(theirs, tolerance)
            for mine, theirs in zip(self.vertices(), other.vertices())
        )

    def to_array(self):
        """Vertices as a (3, 2) NumPy array"""
        return np.array([p.coordinates() for p in self.vertices()], dtype=float)

    def to_mpl_polygon(self, **kwargs):
        """
        Convert to matplotlib Polygon patch for quick plotting

        Parameters:
        -----------
        **kwargs
            Additional arguments passed to matplotlib.patches.Polygon
            (e.g., facecolor, edgecolor, alpha, fill)

        Returns:
        --------
        matplotlib.patches.Polygon
            Closed polygon through the three vertices
        """
        try:
            from matplotlib.patches import Polygon as MPLPolygon
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_polygon(). Install with: pip install matplotlib")

        return MPLPolygon(self.to_array(), closed=True, **kwargs)


@dataclass(frozen=True)
class Triangle3:
    """
    A 3D triangle

    Attributes:
        p1, p2, p3: vertices
    """

    p1: Point3
    p2: Point3
    p3: Point3

    def __post_init__(self):
        check_same_system(self.p1, self.p2, self.p3)

    @classmethod
    def from_vertices(cls, p1, p2, p3):
        return cls(p1, p2, p3)

    @property
    def system(self):
        return self.p1.system

    def vertices(self):
        return (self.p1, self.p2, self.p3)

    def edges(self):
        return (
            LineSegment3(self.p1, self.p2),
            LineSegment3(self.p2, self.p3),
            LineSegment3(self.p3, self.p1),
        )

    def centroid(self):
        first = self.p2.vector_from(self.p1)
        second = self.p3.vector_from(self.p1)
        return self.p1.translate_by(first.plus(second).scale_by(1.0 / 3.0))

    def _cross(self):
        return self.p2.vector_from(self.p1).cross(self.p3.vector_from(self.p1))

    def area(self):
        return 0.5 * self._cross().length()

    def normal_direction(self):
        """
        Unit normal following the winding p1 -> p2 -> p3 (right-hand rule)

        Returns:
        --------
        Direction3 or None
            None for a degenerate triangle
        """
        # Unit edges keep the cross product finite for large coordinates
        first = self.p2.vector_from(self.p1).normalize()
        second = self.p3.vector_from(self.p1).normalize()
        direction = first.cross(second).direction()
        if direction is None:
            logger.debug("Degenerate triangle %s has no normal", self)
        return direction

    def plane(self):
        """Plane through the vertices with origin p1, or None when degenerate"""
        return Plane.through_points(self.p1, self.p2, self.p3)

    def map_vertices(self, function):
        return Triangle3(function(self.p1), function(self.p2), function(self.p3))

    def scale_about(self, center, factor):
        return self.map_vertices(lambda p: p.scale_about(center, factor))

    def rotate_around(self, axis, angle):
        return self.map_vertices(lambda p: p.rotate_around(axis, angle))

    def translate_by(self, vector):
        return self.map_vertices(lambda p: p.translate_by(vector))

    def translate_in(self, direction, distance):
        return self.map_vertices(lambda p: p.translate_in(direction, distance))

    def mirror_across(self, plane):
        return self.map_vertices(lambda p: p.mirror_across(plane))

    def relative_to(self, frame):
        return self.map_vertices(lambda p: p.relative_to(frame))

    def place_in(self, frame):
        return self.map_vertices(lambda p: p.place_in(frame))

    def project_into(self, plane):
        """Project onto ``plane`` and express in its local 2D coordinates"""
        return Triangle2(
            self.p1.project_into(plane),
            self.p2.project_into(plane),
            self.p3.project_into(plane),
        )

    def equal_within(self, other, tolerance=None):
        return all(
            mine.equal_within(theirs, tolerance)
            for mine, theirs in zip(self.vertices(), other.vertices())
        )

    def to_array(self):
        """Vertices as a (3, 3) NumPy array"""
        return np.array([p.coordinates() for p in self.vertices()], dtype=float)
