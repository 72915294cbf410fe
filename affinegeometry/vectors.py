"""
Free vectors in 2D and 3D

Vectors have no position: translating, or the origin of an axis, frame or
plane, never affects them. Every operation returns a new vector.
"""

import logging
import math
import numbers
from dataclasses import dataclass

from .core import GLOBAL, CoordinateSystem, GeometryCore, check_same_system, check_system
from .transforms import apply_linear, axis_rotation_matrix, mirror_matrix, reflection_matrix, rotation_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vector2:
    """
    A 2D vector

    Attributes:
        x, y: components
        system: coordinate system the components are expressed in
    """

    x: float
    y: float
    system: CoordinateSystem = GLOBAL

    @classmethod
    def zero(cls, system=GLOBAL):
        return cls(0.0, 0.0, system)

    @classmethod
    def from_polar(cls, radius, angle, system=GLOBAL):
        """Vector of length ``radius`` at ``angle`` radians from the positive X axis"""
        return cls(radius * math.cos(angle), radius * math.sin(angle), system)

    @classmethod
    def from_array(cls, arr, system=GLOBAL):
        x, y = GeometryCore.numpy_to_components(arr, 2)
        return cls(x, y, system)

    def components(self):
        return (self.x, self.y)

    def to_array(self):
        return GeometryCore.components_to_numpy(self.components())

    def squared_length(self):
        """Squared Euclidean length, for threshold comparisons without a sqrt"""
        return self.x * self.x + self.y * self.y

    def length(self):
        return math.sqrt(self.squared_length())

    def direction(self):
        """
        Normalize to a Direction2

        Returns:
        --------
        Direction2 or None
            None when the vector is exactly zero

        Components are first divided by the largest absolute component, so
        huge and subnormal vectors normalize without overflow or underflow.
        """
        from .directions import Direction2

        scale = max(abs(self.x), abs(self.y))
        if scale == 0.0:
            logger.debug("Zero vector has no direction")
            return None
        x, y = self.x / scale, self.y / scale
        length = math.sqrt(x * x + y * y)
        return Direction2(x / length, y / length, self.system)

    def normalize(self):
        """Unit vector in the same direction, or the zero vector"""
        direction = self.direction()
        if direction is None:
            return self
        return direction.to_vector()

    def plus(self, other):
        check_same_system(self, other)
        return Vector2(self.x + other.x, self.y + other.y, self.system)

    def subtract(self, other):
        """Return ``self - other``"""
        check_same_system(self, other)
        return Vector2(self.x - other.x, self.y - other.y, self.system)

    def subtract_from(self, other):
        """Return ``other - self``"""
        return other.subtract(self)

    def scale_by(self, factor):
        return Vector2(self.x * factor, self.y * factor, self.system)

    def negate(self):
        return Vector2(-self.x, -self.y, self.system)

    def dot(self, other):
        check_same_system(self, other)
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        """
        Scalar 2D cross product ``x1*y2 - y1*x2``

        Positive when ``other`` is counterclockwise from ``self``; the
        magnitude is the product of the lengths times the sine of the
        angle between them.
        """
        check_same_system(self, other)
        return self.x * other.y - self.y * other.x

    def perpendicular_to(self):
        """Rotate 90 degrees counterclockwise: ``(x, y) -> (-y, x)``"""
        return Vector2(-self.y, self.x, self.system)

    def rotate_by(self, angle):
        """Rotate counterclockwise by ``angle`` radians"""
        x, y = apply_linear(rotation_matrix(angle), self.components())
        return Vector2(x, y, self.system)

    def rotate_counterclockwise(self):
        return Vector2(-self.y, self.x, self.system)

    def rotate_clockwise(self):
        return Vector2(self.y, -self.x, self.system)

    def mirror_across(self, axis):
        """Reflect across a line through the origin parallel to ``axis``"""
        check_same_system(self, axis)
        dx, dy = axis.direction.components()
        x, y = apply_linear(mirror_matrix(dx, dy), self.components())
        return Vector2(x, y, self.system)

    def component_in(self, direction):
        """Scalar projection onto a direction"""
        check_same_system(self, direction)
        return self.x * direction.x + self.y * direction.y

    def projection_in(self, direction):
        """Vector projection onto a direction"""
        return direction.to_vector().scale_by(self.component_in(direction))

    def project_onto(self, axis):
        """Component of the vector parallel to ``axis``"""
        return self.projection_in(axis.direction)

    def relative_to(self, frame):
        """Express in the local coordinates of ``frame``"""
        check_system(self, frame.system, "vector")
        return Vector2(
            self.x * frame.x_direction.x + self.y * frame.x_direction.y,
            self.x * frame.y_direction.x + self.y * frame.y_direction.y,
            frame.defines,
        )

    def place_in(self, frame):
        """Convert from the local coordinates of ``frame`` to its parent system"""
        check_system(self, frame.defines, "vector")
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2(
            self.x * xd.x + self.y * yd.x,
            self.x * xd.y + self.y * yd.y,
            frame.system,
        )

    def equal_within(self, other, tolerance=None):
        tolerance = GeometryCore.resolve_tolerance(tolerance)
        return self.system == other.system and self.subtract(other).length() <= tolerance

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor):
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return self.scale_by(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if not isinstance(divisor, numbers.Real):
            return NotImplemented
        return Vector2(self.x / divisor, self.y / divisor, self.system)

    def __neg__(self):
        return self.negate()


@dataclass(frozen=True)
class Vector3:
    """
    A 3D vector

    Attributes:
        x, y, z: components
        system: coordinate system the components are expressed in
    """

    x: float
    y: float
    z: float
    system: CoordinateSystem = GLOBAL

    @classmethod
    def zero(cls, system=GLOBAL):
        return cls(0.0, 0.0, 0.0, system)

    @classmethod
    def from_array(cls, arr, system=GLOBAL):
        x, y, z = GeometryCore.numpy_to_components(arr, 3)
        return cls(x, y, z, system)

    def components(self):
        return (self.x, self.y, self.z)

    def to_array(self):
        return GeometryCore.components_to_numpy(self.components())

    def squared_length(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self):
        return math.sqrt(self.squared_length())

    def direction(self):
        """
        Normalize to a Direction3

        Returns:
        --------
        Direction3 or None
            None when the vector is exactly zero
        """
        from .directions import Direction3

        scale = max(abs(self.x), abs(self.y), abs(self.z))
        if scale == 0.0:
            logger.debug("Zero vector has no direction")
            return None
        x, y, z = self.x / scale, self.y / scale, self.z / scale
        length = math.sqrt(x * x + y * y + z * z)
        return Direction3(x / length, y / length, z / length, self.system)

    def normalize(self):
        direction = self.direction()
        if direction is None:
            return self
        return direction.to_vector()

    def plus(self, other):
        check_same_system(self, other)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z, self.system)

    def subtract(self, other):
        """Return ``self - other``"""
        check_same_system(self, other)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z, self.system)

    def subtract_from(self, other):
        """Return ``other - self``"""
        return other.subtract(self)

    def scale_by(self, factor):
        return Vector3(self.x * factor, self.y * factor, self.z * factor, self.system)

    def negate(self):
        return Vector3(-self.x, -self.y, -self.z, self.system)

    def dot(self, other):
        check_same_system(self, other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        check_same_system(self, other)
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            self.system,
        )

    def perpendicular_to(self):
        """
        Some vector perpendicular to this one

        The smallest component is zeroed and the other two swapped with a
        sign change, which keeps the result well conditioned. The zero
        vector maps to itself.
        """
        abs_x, abs_y, abs_z = abs(self.x), abs(self.y), abs(self.z)
        if abs_x <= abs_y:
            if abs_x <= abs_z:
                return Vector3(0.0, -self.z, self.y, self.system)
            return Vector3(-self.y, self.x, 0.0, self.system)
        if abs_y <= abs_z:
            return Vector3(self.z, 0.0, -self.x, self.system)
        return Vector3(-self.y, self.x, 0.0, self.system)

    def rotate_around(self, axis, angle):
        """Rotate about the direction of ``axis`` (its origin is ignored)"""
        check_same_system(self, axis)
        matrix = axis_rotation_matrix(axis.direction.components(), angle)
        return Vector3(*apply_linear(matrix, self.components()), system=self.system)

    def mirror_across(self, plane):
        """Reflect across a plane through the origin parallel to ``plane``"""
        check_same_system(self, plane)
        matrix = reflection_matrix(plane.normal_direction.components())
        return Vector3(*apply_linear(matrix, self.components()), system=self.system)

    def component_in(self, direction):
        check_same_system(self, direction)
        return self.x * direction.x + self.y * direction.y + self.z * direction.z

    def projection_in(self, direction):
        return direction.to_vector().scale_by(self.component_in(direction))

    def project_onto(self, axis):
        return self.projection_in(axis.direction)

    def project_onto_plane(self, plane):
        """Remove the component along the plane's normal"""
        return self.subtract(self.projection_in(plane.normal_direction))

    def project_into(self, plane):
        """In-plane components as a Vector2 in the plane's local system"""
        return Vector2(
            self.component_in(plane.x_direction),
            self.component_in(plane.y_direction),
            plane.defines,
        )

    def relative_to(self, frame):
        check_system(self, frame.system, "vector")
        return Vector3(
            self.component_in(frame.x_direction),
            self.component_in(frame.y_direction),
            self.component_in(frame.z_direction),
            frame.defines,
        )

    def place_in(self, frame):
        check_system(self, frame.defines, "vector")
        xd, yd, zd = frame.x_direction, frame.y_direction, frame.z_direction
        return Vector3(
            self.x * xd.x + self.y * yd.x + self.z * zd.x,
            self.x * xd.y + self.y * yd.y + self.z * zd.y,
            self.x * xd.z + self.y * yd.z + self.z * zd.z,
            frame.system,
        )

    def equal_within(self, other, tolerance=None):
        tolerance = GeometryCore.resolve_tolerance(tolerance)
        return self.system == other.system and self.subtract(other).length() <= tolerance

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor):
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return self.scale_by(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if not isinstance(divisor, numbers.Real):
            return NotImplemented
        return Vector3(self.x / divisor, self.y / divisor, self.z / divisor, self.system)

    def __neg__(self):
        return self.negate()
