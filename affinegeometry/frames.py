"""
Local coordinate frames

A frame is an origin point plus an orthonormal set of basis directions,
all expressed in the frame's parent coordinate system (``system``). The
frame in turn defines a local coordinate system (``defines``):

    local = value.relative_to(frame)    # system -> defines
    value = local.place_in(frame)       # defines -> system

The basis is checked for orthonormality on construction and never
re-orthonormalized afterwards. Handedness is not enforced.
"""

from dataclasses import dataclass

from .core import GLOBAL, CoordinateSystem, GeometryCore, check_same_system
from .axes import Axis2, Axis3
from .errors import InvalidBasisError
from .directions import Direction2, Direction3
from .points import Point2, Point3
from .transforms import placement_matrix


def check_orthonormal(*directions):
    """Raise InvalidBasisError unless the directions are mutually perpendicular"""
    tolerance = GeometryCore.resolve_basis_tolerance()
    for i, first in enumerate(directions):
        for second in directions[i + 1:]:
            if abs(first.component_in(second)) > tolerance:
                raise InvalidBasisError(
                    f"Basis directions {first.components()} and "
                    f"{second.components()} are not perpendicular"
                )


@dataclass(frozen=True)
class Frame2:
    """
    A 2D frame

    Attributes:
        origin_point: frame origin in the parent system
        x_direction, y_direction: orthonormal basis in the parent system
        defines: coordinate system tag of the frame's local coordinates
    """

    origin_point: Point2
    x_direction: Direction2
    y_direction: Direction2
    defines: CoordinateSystem = GLOBAL

    def __post_init__(self):
        check_same_system(self.origin_point, self.x_direction, self.y_direction)
        check_orthonormal(self.x_direction, self.y_direction)

    @classmethod
    def at_origin(cls, system=GLOBAL, defines=GLOBAL):
        return cls(Point2.origin(system), Direction2.positive_x(system),
                   Direction2.positive_y(system), defines)

    @classmethod
    def at_point(cls, point, defines=GLOBAL):
        """Frame at ``point`` aligned with the parent axes"""
        return cls(point, Direction2.positive_x(point.system),
                   Direction2.positive_y(point.system), defines)

    @classmethod
    def with_x_direction(cls, direction, origin_point, defines=GLOBAL):
        """Right-handed frame whose X axis points along ``direction``"""
        return cls(origin_point, direction, direction.perpendicular_to(), defines)

    @property
    def system(self):
        return self.origin_point.system

    def x_axis(self):
        return Axis2(self.origin_point, self.x_direction)

    def y_axis(self):
        return Axis2(self.origin_point, self.y_direction)

    def is_right_handed(self):
        return self.x_direction.to_vector().cross(self.y_direction.to_vector()) > 0

    def reverse_x(self):
        return Frame2(self.origin_point, self.x_direction.reverse(), self.y_direction, self.defines)

    def reverse_y(self):
        return Frame2(self.origin_point, self.x_direction, self.y_direction.reverse(), self.defines)

    def move_to(self, point):
        return Frame2(point, self.x_direction, self.y_direction, self.defines)

    def translate_by(self, vector):
        return self.move_to(self.origin_point.translate_by(vector))

    def rotate_around(self, center, angle):
        return Frame2(
            self.origin_point.rotate_around(center, angle),
            self.x_direction.rotate_by(angle),
            self.y_direction.rotate_by(angle),
            self.defines,
        )

    def relative_to(self, frame):
        return Frame2(
            self.origin_point.relative_to(frame),
            self.x_direction.relative_to(frame),
            self.y_direction.relative_to(frame),
            self.defines,
        )

    def place_in(self, frame):
        return Frame2(
            self.origin_point.place_in(frame),
            self.x_direction.place_in(frame),
            self.y_direction.place_in(frame),
            self.defines,
        )

    def to_matrix(self):
        """
        Homogeneous 3x3 matrix mapping local coordinates to the parent system

        Returns:
        --------
        ndarray, shape (3, 3)
            Usable with ``transforms.apply_transform``
        """
        return placement_matrix(
            self.origin_point.coordinates(),
            [self.x_direction.components(), self.y_direction.components()],
        )


@dataclass(frozen=True)
class Frame3:
    """
    A 3D frame

    Attributes:
        origin_point: frame origin in the parent system
        x_direction, y_direction, z_direction: orthonormal basis
        defines: coordinate system tag of the frame's local coordinates
    """

    origin_point: Point3
    x_direction: Direction3
    y_direction: Direction3
    z_direction: Direction3
    defines: CoordinateSystem = GLOBAL

    def __post_init__(self):
        check_same_system(self.origin_point, self.x_direction, self.y_direction, self.z_direction)
        check_orthonormal(self.x_direction, self.y_direction, self.z_direction)

    @classmethod
    def at_origin(cls, system=GLOBAL, defines=GLOBAL):
        return cls.at_point(Point3.origin(system), defines)

    @classmethod
    def at_point(cls, point, defines=GLOBAL):
        system = point.system
        return cls(point, Direction3.positive_x(system), Direction3.positive_y(system),
                   Direction3.positive_z(system), defines)

    @classmethod
    def with_z_direction(cls, direction, origin_point, defines=GLOBAL):
        """Right-handed frame with Z along ``direction`` and an arbitrary X/Y"""
        x_direction, y_direction = direction.perpendicular_basis()
        return cls(origin_point, x_direction, y_direction, direction, defines)

    @property
    def system(self):
        return self.origin_point.system

    def x_axis(self):
        return Axis3(self.origin_point, self.x_direction)

    def y_axis(self):
        return Axis3(self.origin_point, self.y_direction)

    def z_axis(self):
        return Axis3(self.origin_point, self.z_direction)

    def is_right_handed(self):
        return self.x_direction.cross(self.y_direction).dot(self.z_direction.to_vector()) > 0

    def reverse_x(self):
        return Frame3(self.origin_point, self.x_direction.reverse(), self.y_direction,
                      self.z_direction, self.defines)

    def reverse_y(self):
        return Frame3(self.origin_point, self.x_direction, self.y_direction.reverse(),
                      self.z_direction, self.defines)

    def reverse_z(self):
        return Frame3(self.origin_point, self.x_direction, self.y_direction,
                      self.z_direction.reverse(), self.defines)

    def move_to(self, point):
        return Frame3(point, self.x_direction, self.y_direction, self.z_direction, self.defines)

    def translate_by(self, vector):
        return self.move_to(self.origin_point.translate_by(vector))

    def rotate_around(self, axis, angle):
        return Frame3(
            self.origin_point.rotate_around(axis, angle),
            self.x_direction.rotate_around(axis, angle),
            self.y_direction.rotate_around(axis, angle),
            self.z_direction.rotate_around(axis, angle),
            self.defines,
        )

    def relative_to(self, frame):
        return Frame3(
            self.origin_point.relative_to(frame),
            self.x_direction.relative_to(frame),
            self.y_direction.relative_to(frame),
            self.z_direction.relative_to(frame),
            self.defines,
        )

    def place_in(self, frame):
        return Frame3(
            self.origin_point.place_in(frame),
            self.x_direction.place_in(frame),
            self.y_direction.place_in(frame),
            self.z_direction.place_in(frame),
            self.defines,
        )

    def to_matrix(self):
        """Homogeneous 4x4 matrix mapping local coordinates to the parent system"""
        return placement_matrix(
            self.origin_point.coordinates(),
            [
                self.x_direction.components(),
                self.y_direction.components(),
                self.z_direction.components(),
            ],
        )
