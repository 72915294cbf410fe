"""
Positions in 2D and 3D

Points differ from vectors in how they transform: they are moved by
translations and affected by the origin of axes, frames and planes.
"""

import logging
import math
from dataclasses import dataclass

from .core import GLOBAL, CoordinateSystem, GeometryCore, check_same_system, check_system
from .vectors import Vector2, Vector3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point2:
    """
    A 2D point

    Attributes:
        x, y: coordinates
        system: coordinate system the coordinates are expressed in
    """

    x: float
    y: float
    system: CoordinateSystem = GLOBAL

    @classmethod
    def origin(cls, system=GLOBAL):
        return cls(0.0, 0.0, system)

    @classmethod
    def from_array(cls, arr, system=GLOBAL):
        x, y = GeometryCore.numpy_to_components(arr, 2)
        return cls(x, y, system)

    @staticmethod
    def midpoint(first, second):
        return Point2.interpolate_from(first, second, 0.5)

    @staticmethod
    def interpolate_from(first, second, t):
        """Point at parameter ``t`` along first -> second (0 gives first, 1 gives second)"""
        check_same_system(first, second)
        return Point2(
            first.x + t * (second.x - first.x),
            first.y + t * (second.y - first.y),
            first.system,
        )

    @staticmethod
    def centroid(points):
        """
        Arithmetic mean of a sequence of points

        Returns:
        --------
        Point2 or None
            None for an empty sequence
        """
        points = list(points)
        if not points:
            return None
        check_same_system(*points)
        first = points[0]
        count = len(points)
        dx = sum(p.x - first.x for p in points[1:]) / count
        dy = sum(p.y - first.y for p in points[1:]) / count
        return Point2(first.x + dx, first.y + dy, first.system)

    @staticmethod
    def circumcenter(p1, p2, p3):
        """
        Center of the circle through three points

        Returns:
        --------
        Point2 or None
            None when the points are collinear (including repeated points)
        """
        check_same_system(p1, p2, p3)
        bx, by = p2.x - p1.x, p2.y - p1.y
        cx, cy = p3.x - p1.x, p3.y - p1.y
        determinant = 2 * (bx * cy - by * cx)
        if determinant == 0:
            logger.debug("Collinear points %s, %s, %s have no circumcenter", p1, p2, p3)
            return None
        b_squared = bx * bx + by * by
        c_squared = cx * cx + cy * cy
        ux = (cy * b_squared - by * c_squared) / determinant
        uy = (bx * c_squared - cx * b_squared) / determinant
        return Point2(p1.x + ux, p1.y + uy, p1.system)

    def coordinates(self):
        return (self.x, self.y)

    def to_array(self):
        return GeometryCore.components_to_numpy(self.coordinates())

    def vector_from(self, other):
        """Displacement ``self - other``"""
        check_same_system(self, other)
        return Vector2(self.x - other.x, self.y - other.y, self.system)

    def squared_distance_from(self, other):
        return self.vector_from(other).squared_length()

    def distance_from(self, other):
        return self.vector_from(other).length()

    def translate_by(self, vector):
        check_same_system(self, vector)
        return Point2(self.x + vector.x, self.y + vector.y, self.system)

    def translate_in(self, direction, distance):
        return self.translate_by(direction.to_vector().scale_by(distance))

    def scale_about(self, center, factor):
        return center.translate_by(self.vector_from(center).scale_by(factor))

    def rotate_around(self, center, angle):
        """Rotate counterclockwise about ``center`` by ``angle`` radians"""
        return center.translate_by(self.vector_from(center).rotate_by(angle))

    def mirror_across(self, axis):
        origin = axis.origin_point
        return origin.translate_by(self.vector_from(origin).mirror_across(axis))

    def project_onto(self, axis):
        """Closest point on ``axis``"""
        return axis.origin_point.translate_in(axis.direction, self.signed_distance_along(axis))

    def signed_distance_along(self, axis):
        return self.vector_from(axis.origin_point).component_in(axis.direction)

    def signed_distance_from(self, axis):
        """Positive to the left of ``axis``, negative to the right"""
        return axis.direction.to_vector().cross(self.vector_from(axis.origin_point))

    def relative_to(self, frame):
        check_system(self, frame.system, "point")
        return Point2(*self.vector_from(frame.origin_point).relative_to(frame).components(),
                      system=frame.defines)

    def place_in(self, frame):
        check_system(self, frame.defines, "point")
        displacement = Vector2(self.x, self.y, frame.defines).place_in(frame)
        return frame.origin_point.translate_by(displacement)

    def place_on(self, plane):
        """Map plane-local coordinates to the 3D point on ``plane``"""
        check_system(self, plane.defines, "point")
        return plane.point(self.x, self.y)

    def equal_within(self, other, tolerance=None):
        tolerance = GeometryCore.resolve_tolerance(tolerance)
        return self.system == other.system and self.distance_from(other) <= tolerance

    def __add__(self, vector):
        if not isinstance(vector, Vector2):
            return NotImplemented
        return self.translate_by(vector)

    def __sub__(self, other):
        if isinstance(other, Point2):
            return self.vector_from(other)
        if isinstance(other, Vector2):
            return self.translate_by(other.negate())
        return NotImplemented


@dataclass(frozen=True)
class Point3:
    """
    A 3D point

    Attributes:
        x, y, z: coordinates
        system: coordinate system the coordinates are expressed in
    """

    x: float
    y: float
    z: float
    system: CoordinateSystem = GLOBAL

    @classmethod
    def origin(cls, system=GLOBAL):
        return cls(0.0, 0.0, 0.0, system)

    @classmethod
    def from_array(cls, arr, system=GLOBAL):
        x, y, z = GeometryCore.numpy_to_components(arr, 3)
        return cls(x, y, z, system)

    @staticmethod
    def midpoint(first, second):
        return Point3.interpolate_from(first, second, 0.5)

    @staticmethod
    def interpolate_from(first, second, t):
        check_same_system(first, second)
        return Point3(
            first.x + t * (second.x - first.x),
            first.y + t * (second.y - first.y),
            first.z + t * (second.z - first.z),
            first.system,
        )

    @staticmethod
    def centroid(points):
        """Arithmetic mean of a sequence of points, or None when empty"""
        points = list(points)
        if not points:
            return None
        check_same_system(*points)
        first = points[0]
        count = len(points)
        dx = sum(p.x - first.x for p in points[1:]) / count
        dy = sum(p.y - first.y for p in points[1:]) / count
        dz = sum(p.z - first.z for p in points[1:]) / count
        return Point3(first.x + dx, first.y + dy, first.z + dz, first.system)

    def coordinates(self):
        return (self.x, self.y, self.z)

    def to_array(self):
        return GeometryCore.components_to_numpy(self.coordinates())

    def vector_from(self, other):
        check_same_system(self, other)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z, self.system)

    def squared_distance_from(self, other):
        return self.vector_from(other).squared_length()

    def distance_from(self, other):
        return self.vector_from(other).length()

    def translate_by(self, vector):
        check_same_system(self, vector)
        return Point3(self.x + vector.x, self.y + vector.y, self.z + vector.z, self.system)

    def translate_in(self, direction, distance):
        return self.translate_by(direction.to_vector().scale_by(distance))

    def scale_about(self, center, factor):
        return center.translate_by(self.vector_from(center).scale_by(factor))

    def rotate_around(self, axis, angle):
        """Rotate about ``axis`` by ``angle`` radians (right-hand rule)"""
        origin = axis.origin_point
        return origin.translate_by(self.vector_from(origin).rotate_around(axis, angle))

    def mirror_across(self, plane):
        origin = plane.origin_point
        return origin.translate_by(self.vector_from(origin).mirror_across(plane))

    def signed_distance_from(self, plane):
        """Positive on the side the plane's normal points to"""
        return self.vector_from(plane.origin_point).component_in(plane.normal_direction)

    def project_onto(self, plane):
        """Closest point on ``plane``"""
        return self.translate_in(plane.normal_direction, -self.signed_distance_from(plane))

    def project_into(self, plane):
        """Plane-local 2D coordinates of the projection onto ``plane``"""
        displacement = self.vector_from(plane.origin_point).project_into(plane)
        return Point2(displacement.x, displacement.y, plane.defines)

    def relative_to(self, frame):
        check_system(self, frame.system, "point")
        return Point3(*self.vector_from(frame.origin_point).relative_to(frame).components(),
                      system=frame.defines)

    def place_in(self, frame):
        check_system(self, frame.defines, "point")
        displacement = Vector3(self.x, self.y, self.z, frame.defines).place_in(frame)
        return frame.origin_point.translate_by(displacement)

    def equal_within(self, other, tolerance=None):
        tolerance = GeometryCore.resolve_tolerance(tolerance)
        return self.system == other.system and self.distance_from(other) <= tolerance

    def __add__(self, vector):
        if not isinstance(vector, Vector3):
            return NotImplemented
        return self.translate_by(vector)

    def __sub__(self, other):
        if isinstance(other, Point3):
            return self.vector_from(other)
        if isinstance(other, Vector3):
            return self.translate_by(other.negate())
        return NotImplemented
