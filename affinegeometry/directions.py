"""
Unit-length directions in 2D and 3D

A direction is a vector known to have unit length. The only ways to get
one are the axis constructors, ``Direction2.from_angle``,
``Vector.direction()`` (which refuses the zero vector) and transforming an
existing direction; constructing one from raw components checks the length.
"""

import math
from dataclasses import dataclass

from .core import GLOBAL, CoordinateSystem, GeometryCore, check_same_system
from .errors import InvalidBasisError
from .vectors import Vector2, Vector3


def _check_unit(components, kind):
    squared = sum(c * c for c in components)
    if abs(squared - 1.0) > GeometryCore.resolve_basis_tolerance():
        raise InvalidBasisError(
            f"{kind} components {components} do not have unit length"
        )


@dataclass(frozen=True)
class Direction2:
    """A 2D unit vector"""

    x: float
    y: float
    system: CoordinateSystem = GLOBAL

    def __post_init__(self):
        _check_unit((self.x, self.y), "Direction2")

    @classmethod
    def positive_x(cls, system=GLOBAL):
        """Positive X direction"""
        return cls(1.0, 0.0, system)

    @classmethod
    def positive_y(cls, system=GLOBAL):
        """Positive Y direction"""
        return cls(0.0, 1.0, system)

    @classmethod
    def from_angle(cls, angle, system=GLOBAL):
        """Direction at ``angle`` radians counterclockwise from positive X"""
        return cls(math.cos(angle), math.sin(angle), system)

    @classmethod
    def _from_vector(cls, vector):
        return cls(vector.x, vector.y, vector.system)

    def components(self):
        return (self.x, self.y)

    def to_vector(self):
        return Vector2(self.x, self.y, self.system)

    def to_angle(self):
        """Angle from positive X, in (-pi, pi]"""
        return math.atan2(self.y, self.x)

    def reverse(self):
        return Direction2(-self.x, -self.y, self.system)

    def perpendicular_to(self):
        """Rotated 90 degrees counterclockwise"""
        return Direction2(-self.y, self.x, self.system)

    def rotate_counterclockwise(self):
        return Direction2(-self.y, self.x, self.system)

    def rotate_clockwise(self):
        return Direction2(self.y, -self.x, self.system)

    def rotate_by(self, angle):
        return self._from_vector(self.to_vector().rotate_by(angle))

    def mirror_across(self, axis):
        return self._from_vector(self.to_vector().mirror_across(axis))

    def component_in(self, other):
        check_same_system(self, other)
        return self.x * other.x + self.y * other.y

    def angle_from(self, other):
        """Signed counterclockwise angle from ``other`` to this direction"""
        check_same_system(self, other)
        cross = other.x * self.y - other.y * self.x
        dot = other.x * self.x + other.y * self.y
        return math.atan2(cross, dot)

    def relative_to(self, frame):
        return self._from_vector(self.to_vector().relative_to(frame))

    def place_in(self, frame):
        return self._from_vector(self.to_vector().place_in(frame))

    def equal_within(self, other, tolerance=None):
        return self.to_vector().equal_within(other.to_vector(), tolerance)


@dataclass(frozen=True)
class Direction3:
    """A 3D unit vector"""

    x: float
    y: float
    z: float
    system: CoordinateSystem = GLOBAL

    def __post_init__(self):
        _check_unit((self.x, self.y, self.z), "Direction3")

    @classmethod
    def positive_x(cls, system=GLOBAL):
        return cls(1.0, 0.0, 0.0, system)

    @classmethod
    def positive_y(cls, system=GLOBAL):
        return cls(0.0, 1.0, 0.0, system)

    @classmethod
    def positive_z(cls, system=GLOBAL):
        return cls(0.0, 0.0, 1.0, system)

    @classmethod
    def _from_vector(cls, vector):
        return cls(vector.x, vector.y, vector.z, vector.system)

    def components(self):
        return (self.x, self.y, self.z)

    def to_vector(self):
        return Vector3(self.x, self.y, self.z, self.system)

    def reverse(self):
        return Direction3(-self.x, -self.y, -self.z, self.system)

    def perpendicular_to(self):
        """Some direction perpendicular to this one"""
        return self.to_vector().perpendicular_to().direction()

    def perpendicular_basis(self):
        """
        Complete this direction to an orthonormal basis

        Returns:
        --------
        (Direction3, Direction3)
            ``(x, y)`` such that both are perpendicular to this direction
            and ``x × y`` equals it
        """
        x_direction = self.perpendicular_to()
        y_direction = self._from_vector(self.cross(x_direction))
        return x_direction, y_direction

    def cross(self, other):
        return self.to_vector().cross(other.to_vector())

    def component_in(self, other):
        check_same_system(self, other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle_from(self, other):
        """Unsigned angle between the two directions, in [0, pi]"""
        return math.atan2(self.cross(other).length(), self.component_in(other))

    def rotate_around(self, axis, angle):
        return self._from_vector(self.to_vector().rotate_around(axis, angle))

    def mirror_across(self, plane):
        return self._from_vector(self.to_vector().mirror_across(plane))

    def relative_to(self, frame):
        return self._from_vector(self.to_vector().relative_to(frame))

    def place_in(self, frame):
        return self._from_vector(self.to_vector().place_in(frame))

    def equal_within(self, other, tolerance=None):
        return self.to_vector().equal_within(other.to_vector(), tolerance)
