"""
Oriented planes in 3D

A plane is an origin point plus three orthonormal directions: two in-plane
directions (x, y) spanning a local 2D coordinate system and a normal. The
six canonical planes are right-handed (normal = x × y). ``flip`` keeps x
and y and negates the normal only, so a flipped plane is left-handed.

Every transform goes through ``map_basis``: the point transform moves the
origin and the direction transform moves all three directions. Directions
are only ever rotated or reflected, never scaled.
"""

import logging
from dataclasses import dataclass

from .axes import Axis3
from .core import GLOBAL, CoordinateSystem, check_same_system
from .directions import Direction3
from .frames import Frame3, check_orthonormal
from .points import Point3
from .vectors import Vector3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plane:
    """
    A plane with a local 2D coordinate system

    Attributes:
        origin_point: Point3 at local coordinates (0, 0)
        x_direction, y_direction: in-plane orthonormal directions
        normal_direction: unit normal
        defines: coordinate system tag of the plane's local 2D coordinates
    """

    origin_point: Point3
    x_direction: Direction3
    y_direction: Direction3
    normal_direction: Direction3
    defines: CoordinateSystem = GLOBAL

    def __post_init__(self):
        check_same_system(self.origin_point, self.x_direction, self.y_direction,
                          self.normal_direction)
        check_orthonormal(self.x_direction, self.y_direction, self.normal_direction)

    @classmethod
    def _canonical(cls, x_direction, y_direction, normal_direction, system):
        return cls(Point3.origin(system), x_direction, y_direction, normal_direction)

    @classmethod
    def xy(cls, system=GLOBAL):
        return cls._canonical(Direction3.positive_x(system), Direction3.positive_y(system),
                              Direction3.positive_z(system), system)

    @classmethod
    def xz(cls, system=GLOBAL):
        return cls._canonical(Direction3.positive_x(system), Direction3.positive_z(system),
                              Direction3.positive_y(system).reverse(), system)

    @classmethod
    def yx(cls, system=GLOBAL):
        return cls._canonical(Direction3.positive_y(system), Direction3.positive_x(system),
                              Direction3.positive_z(system).reverse(), system)

    @classmethod
    def yz(cls, system=GLOBAL):
        return cls._canonical(Direction3.positive_y(system), Direction3.positive_z(system),
                              Direction3.positive_x(system), system)

    @classmethod
    def zx(cls, system=GLOBAL):
        return cls._canonical(Direction3.positive_z(system), Direction3.positive_x(system),
                              Direction3.positive_y(system), system)

    @classmethod
    def zy(cls, system=GLOBAL):
        return cls._canonical(Direction3.positive_z(system), Direction3.positive_y(system),
                              Direction3.positive_x(system).reverse(), system)

    @classmethod
    def from_point_and_normal(cls, origin_point, normal_direction, defines=GLOBAL):
        """
        Plane through ``origin_point`` with the given normal

        The in-plane x and y directions are chosen by basis completion so
        that x × y equals the normal; which in-plane pair is chosen is
        otherwise unspecified.
        """
        x_direction, y_direction = normal_direction.perpendicular_basis()
        return cls(origin_point, x_direction, y_direction, normal_direction, defines)

    @classmethod
    def through_points(cls, p1, p2, p3, defines=GLOBAL):
        """
        Plane through three points

        The origin is ``p1``, the x direction points towards ``p2`` and the
        normal follows the counterclockwise winding p1 -> p2 -> p3.

        Returns:
        --------
        Plane or None
            None when the points are collinear
        """
        first = p2.vector_from(p1)
        second = p3.vector_from(p1)
        normal_direction = first.normalize().cross(second.normalize()).direction()
        x_direction = first.direction()
        if normal_direction is None or x_direction is None:
            logger.debug("Collinear points %s, %s, %s do not define a plane", p1, p2, p3)
            return None
        y_direction = Direction3._from_vector(normal_direction.cross(x_direction))
        return cls(p1, x_direction, y_direction, normal_direction, defines)

    @classmethod
    def from_frame(cls, frame):
        """Plane spanned by the frame's X and Y directions, with Z as normal"""
        return cls(frame.origin_point, frame.x_direction, frame.y_direction,
                   frame.z_direction, frame.defines)

    @property
    def system(self):
        return self.origin_point.system

    def to_frame(self):
        return Frame3(self.origin_point, self.x_direction, self.y_direction,
                      self.normal_direction, self.defines)

    def point(self, x, y):
        """Global 3D point at local coordinates (x, y)"""
        return self.origin_point.translate_by(self.vector(x, y))

    def vector(self, x, y):
        """Global 3D vector with local components (x, y)"""
        xd, yd = self.x_direction, self.y_direction
        return Vector3(
            x * xd.x + y * yd.x,
            x * xd.y + y * yd.y,
            x * xd.z + y * yd.z,
            self.system,
        )

    def project_point(self, point):
        """Local 2D coordinates of the projection of ``point``"""
        return point.project_into(self)

    def project_vector(self, vector):
        """Local 2D components of the in-plane part of ``vector``"""
        return vector.project_into(self)

    def normal_axis(self):
        return Axis3(self.origin_point, self.normal_direction)

    def x_axis(self):
        return Axis3(self.origin_point, self.x_direction)

    def y_axis(self):
        return Axis3(self.origin_point, self.y_direction)

    def offset_by(self, distance):
        """Translate along the normal by a signed distance"""
        return self.translate_in(self.normal_direction, distance)

    def flip(self):
        """Negate the normal, leaving origin and in-plane directions unchanged"""
        return Plane(self.origin_point, self.x_direction, self.y_direction,
                     self.normal_direction.reverse(), self.defines)

    def move_to(self, point):
        return Plane(point, self.x_direction, self.y_direction,
                     self.normal_direction, self.defines)

    def map_basis(self, point_function, direction_function):
        """
        Apply a point transform to the origin and a direction transform to
        each of the three directions
        """
        return Plane(
            point_function(self.origin_point),
            direction_function(self.x_direction),
            direction_function(self.y_direction),
            direction_function(self.normal_direction),
            self.defines,
        )

    def scale_about(self, center, factor):
        """Scale the origin about ``center``; the directions are unchanged"""
        return self.map_basis(lambda p: p.scale_about(center, factor), lambda d: d)

    def translate_by(self, vector):
        return self.map_basis(lambda p: p.translate_by(vector), lambda d: d)

    def translate_in(self, direction, distance):
        return self.map_basis(lambda p: p.translate_in(direction, distance), lambda d: d)

    def rotate_around(self, axis, angle):
        return self.map_basis(
            lambda p: p.rotate_around(axis, angle),
            lambda d: d.rotate_around(axis, angle),
        )

    def mirror_across(self, plane):
        return self.map_basis(
            lambda p: p.mirror_across(plane),
            lambda d: d.mirror_across(plane),
        )

    def relative_to(self, frame):
        return self.map_basis(
            lambda p: p.relative_to(frame),
            lambda d: d.relative_to(frame),
        )

    def place_in(self, frame):
        return self.map_basis(
            lambda p: p.place_in(frame),
            lambda d: d.place_in(frame),
        )

    def equal_within(self, other, tolerance=None):
        return (
            self.origin_point.equal_within(other.origin_point, tolerance)
            and self.x_direction.equal_within(other.x_direction, tolerance)
            and self.y_direction.equal_within(other.y_direction, tolerance)
            and self.normal_direction.equal_within(other.normal_direction, tolerance)
        )
