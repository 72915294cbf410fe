#!/usr/bin/env python3
"""
Tests for directions, axes and frames
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from affinegeometry import (
    Axis2,
    CoordinateSystem,
    CoordinateSystemMismatchError,
    Direction2,
    Direction3,
    Frame2,
    Frame3,
    InvalidBasisError,
    Point2,
    Point3,
    Vector3,
    apply_transform,
    to_euclidean,
    to_homogeneous,
)

LOCAL = CoordinateSystem("local")


def test_direction_requires_unit_length():
    """Raw components must already be normalized"""
    with pytest.raises(InvalidBasisError):
        Direction2(1.0, 1.0)
    with pytest.raises(InvalidBasisError):
        Direction3(0.0, 0.0, 0.0)

    assert Direction2(0.6, 0.8).components() == (0.6, 0.8)
    print("✓ Unit length check test passed")


def test_direction_angles():
    """from_angle, to_angle and angle_from"""
    direction = Direction2.from_angle(0.75)

    assert np.isclose(direction.to_angle(), 0.75)
    assert np.isclose(Direction2.positive_y().angle_from(Direction2.positive_x()), math.pi / 2)
    assert np.isclose(Direction2.positive_x().angle_from(Direction2.positive_y()), -math.pi / 2)
    assert np.isclose(Direction3.positive_z().angle_from(Direction3.positive_x()), math.pi / 2)
    print("✓ Direction angle test passed")


def test_direction2_quarter_turns():
    """perpendicular_to turns counterclockwise"""
    x = Direction2.positive_x()

    assert x.perpendicular_to() == Direction2.positive_y()
    assert x.rotate_clockwise() == Direction2.positive_y().reverse()
    assert x.rotate_by(math.pi).equal_within(x.reverse())
    print("✓ Direction quarter turn test passed")


def test_perpendicular_basis_is_orthonormal_and_right_handed():
    """Basis completion gives x, y with x × y equal to the direction"""
    samples = [
        Direction3.positive_z(),
        Direction3.positive_x().reverse(),
        Vector3(1, 2, 3).direction(),
        Vector3(-4, 0.5, -0.1).direction(),
        Vector3(0.3, -7, 2).direction(),
    ]
    for normal in samples:
        x_direction, y_direction = normal.perpendicular_basis()
        assert np.isclose(x_direction.component_in(normal), 0.0, atol=1e-12)
        assert np.isclose(y_direction.component_in(normal), 0.0, atol=1e-12)
        assert np.isclose(x_direction.component_in(y_direction), 0.0, atol=1e-12)
        assert x_direction.cross(y_direction).equal_within(normal.to_vector())
    print("✓ Perpendicular basis test passed")


def test_frame_rejects_non_orthonormal_basis():
    """Frames fail loudly rather than re-orthonormalizing"""
    with pytest.raises(InvalidBasisError):
        Frame2(Point2.origin(), Direction2.positive_x(), Direction2.from_angle(1.0))
    with pytest.raises(InvalidBasisError):
        Frame3(
            Point3.origin(),
            Direction3.positive_x(),
            Direction3.positive_x(),
            Direction3.positive_z(),
        )
    print("✓ Non-orthonormal basis test passed")


def test_frame_handedness():
    """Reversing one axis makes a frame left-handed"""
    frame = Frame2.at_origin()

    assert frame.is_right_handed()
    assert not frame.reverse_x().is_right_handed()
    assert not frame.reverse_y().is_right_handed()
    assert Frame3.at_origin().is_right_handed()
    assert not Frame3.at_origin().reverse_z().is_right_handed()
    print("✓ Frame handedness test passed")


def test_frame3_with_z_direction():
    """Frame built around a given Z direction"""
    z_direction = Vector3(1, 1, 1).direction()
    frame = Frame3.with_z_direction(z_direction, Point3(1, 2, 3))

    assert frame.z_direction == z_direction
    assert frame.is_right_handed()
    assert frame.z_axis().origin_point == Point3(1, 2, 3)
    print("✓ Frame3 with_z_direction test passed")


def test_point_round_trip_through_frame():
    """place_in undoes relative_to"""
    frame = Frame2.at_point(Point2(3, -2)).rotate_around(Point2(1, 1), 0.9)
    for point in [Point2(0, 0), Point2(5.5, -1.25), Point2(-100, 42)]:
        assert point.relative_to(frame).place_in(frame).equal_within(point)

    frame3 = Frame3.at_point(Point3(1, 2, 3)).rotate_around(
        Frame3.at_origin().x_axis(), 0.4
    )
    point = Point3(-3, 0.5, 9)
    assert point.relative_to(frame3).place_in(frame3).equal_within(point)
    print("✓ Point frame round trip test passed")


def test_frame_origin_is_local_origin():
    """The frame origin has local coordinates (0, 0)"""
    frame = Frame2.with_x_direction(Direction2.from_angle(2.1), Point2(7, 8))

    assert frame.origin_point.relative_to(frame).equal_within(Point2.origin())
    assert Point2(1, 0).place_in(frame).equal_within(
        Point2(7, 8).translate_in(frame.x_direction, 1)
    )
    print("✓ Frame origin test passed")


def test_frame_relative_to_frame_round_trip():
    """Frames themselves convert between systems"""
    outer = Frame2.at_point(Point2(-4, 2)).rotate_around(Point2(-4, 2), -0.3)
    inner = Frame2.at_point(Point2(1, 1)).rotate_around(Point2(0, 0), 1.7)

    restored = inner.relative_to(outer).place_in(outer)
    assert restored.origin_point.equal_within(inner.origin_point)
    assert restored.x_direction.equal_within(inner.x_direction)
    assert restored.y_direction.equal_within(inner.y_direction)
    print("✓ Frame round trip test passed")


def test_coordinate_system_tags_follow_conversions():
    """relative_to produces the frame's local tag; place_in reverses it"""
    frame = Frame2.at_point(Point2(1, 1), defines=LOCAL)
    point = Point2(4, 5)

    local = point.relative_to(frame)
    assert local.system == LOCAL
    assert local == Point2(3, 4, LOCAL)
    assert local.place_in(frame) == point

    with pytest.raises(CoordinateSystemMismatchError):
        point.place_in(frame)
    with pytest.raises(CoordinateSystemMismatchError):
        local.relative_to(frame)
    print("✓ Coordinate system tag test passed")


def test_frame_matrix_matches_place_in():
    """Homogeneous placement matrix agrees with place_in"""
    frame = Frame2.at_point(Point2(2, -1)).rotate_around(Point2(0, 0), 0.6)
    local_points = np.array([[0.0, 0.0], [1.0, 2.0], [-3.0, 0.5]])

    placed = to_euclidean(apply_transform(frame.to_matrix(), to_homogeneous(local_points)))
    expected = np.array([Point2(x, y).place_in(frame).coordinates() for x, y in local_points])
    assert np.allclose(placed, expected)

    frame3 = Frame3.with_z_direction(Vector3(0, 1, 1).direction(), Point3(1, 1, 1))
    assert frame3.to_matrix().shape == (4, 4)
    assert np.allclose(
        frame3.to_matrix() @ np.array([0.0, 0.0, 1.0, 1.0]),
        to_homogeneous(Point3(0, 0, 1).place_in(frame3).to_array()),
    )
    print("✓ Frame matrix test passed")


def test_axis_transforms():
    """Axes move their origin and turn their direction"""
    axis = Axis2.through(Point2(1, 0), Direction2.positive_x())

    rotated = axis.rotate_around(Point2.origin(), math.pi / 2)
    assert rotated.origin_point.equal_within(Point2(0, 1))
    assert rotated.direction.equal_within(Direction2.positive_y())

    mirrored = axis.mirror_across(Axis2.y())
    assert mirrored.origin_point == Point2(-1, 0)
    assert mirrored.direction == Direction2.positive_x().reverse()
    assert axis.reverse().direction == Direction2(-1.0, 0.0)
    print("✓ Axis transform test passed")
