#!/usr/bin/env python3
"""
Tests for Triangle2 and Triangle3
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
    Axis3,
    CoordinateSystem,
    CoordinateSystemMismatchError,
    Direction2,
    Direction3,
    Frame2,
    LineSegment2,
    Plane,
    Point2,
    Point3,
    Triangle2,
    Triangle3,
    Vector2,
    Vector3,
)

TRIANGLE_ABOVE = Triangle2.from_vertices(Point2(1, 1), Point2(2, 1), Point2(1, 3))

SAMPLE_TRIANGLES = [
    TRIANGLE_ABOVE,
    Triangle2.from_vertices(Point2(1, 3), Point2(2, 1), Point2(1, 1)),
    Triangle2.from_vertices(Point2(-5, 2.5), Point2(7.25, -1), Point2(0.1, 9)),
    Triangle2.from_vertices(Point2(0, 0), Point2(1, 1), Point2(2, 2)),
    Triangle2.from_vertices(Point2(4, 4), Point2(4, 4), Point2(4, 4)),
]


def test_measurements_of_triangle_above():
    """Area, centroid and signed areas of a known triangle"""
    assert np.isclose(TRIANGLE_ABOVE.area(), 1.0)
    assert np.isclose(TRIANGLE_ABOVE.counterclockwise_area(), 1.0)
    assert np.isclose(TRIANGLE_ABOVE.clockwise_area(), -1.0)

    centroid = TRIANGLE_ABOVE.centroid()
    assert np.allclose(centroid.coordinates(), [1.3333333, 1.6666667])
    print("✓ Triangle measurement test passed")


def test_vertices_are_stored_as_given():
    """from_vertices neither reorders nor validates"""
    p1, p2, p3 = Point2(1, 3), Point2(2, 1), Point2(1, 1)
    triangle = Triangle2.from_vertices(p1, p2, p3)

    assert triangle.vertices() == (p1, p2, p3)
    print("✓ Vertex storage test passed")


def test_signed_area_properties():
    """area = |ccw area| and clockwise area = -ccw area"""
    for triangle in SAMPLE_TRIANGLES:
        assert triangle.area() == abs(triangle.counterclockwise_area())
        assert triangle.clockwise_area() == -triangle.counterclockwise_area()
        assert triangle.area() >= 0
    assert SAMPLE_TRIANGLES[1].counterclockwise_area() < 0
    assert SAMPLE_TRIANGLES[3].area() == 0
    print("✓ Signed area property test passed")


def test_edges_are_cyclic():
    """Edges run p1 -> p2 -> p3 -> p1"""
    p1, p2, p3 = TRIANGLE_ABOVE.vertices()

    assert TRIANGLE_ABOVE.edges() == (
        LineSegment2(p1, p2),
        LineSegment2(p2, p3),
        LineSegment2(p3, p1),
    )
    print("✓ Edge test passed")


def test_contains():
    """Interior, exterior and boundary points"""
    assert TRIANGLE_ABOVE.contains(Point2(1.5, 1.5))
    assert not TRIANGLE_ABOVE.contains(Point2(0, 0))
    assert not TRIANGLE_ABOVE.contains(Point2(2, 3))

    # Edge midpoint lies on the boundary
    assert TRIANGLE_ABOVE.contains(Point2(1.5, 1))
    print("✓ Containment test passed")


def test_contains_is_independent_of_winding():
    """Reversing the vertex order does not change containment"""
    reversed_triangle = SAMPLE_TRIANGLES[1]
    for point in [Point2(1.5, 1.5), Point2(0, 0), Point2(1.2, 2.0), Point2(3, 1)]:
        assert reversed_triangle.contains(point) == TRIANGLE_ABOVE.contains(point)
    print("✓ Winding independence test passed")


def test_vertices_are_contained():
    """Every vertex lies on its own triangle's boundary"""
    for triangle in SAMPLE_TRIANGLES:
        for vertex in triangle.vertices():
            assert triangle.contains(vertex)
    print("✓ Vertex containment test passed")


def test_bounding_box():
    """Componentwise extrema of the vertices"""
    box = SAMPLE_TRIANGLES[2].bounding_box()

    assert box.extrema() == (-5, 7.25, -1, 9)
    assert TRIANGLE_ABOVE.bounding_box().extrema() == (1, 2, 1, 3)
    print("✓ Bounding box test passed")


def test_circumcircle():
    """Circle through the vertices"""
    circle = Triangle2.from_vertices(Point2(0, 0), Point2(2, 0), Point2(0, 2)).circumcircle()

    assert circle.center_point == Point2(1, 1)
    assert np.isclose(circle.radius, math.sqrt(2))

    circle = SAMPLE_TRIANGLES[2].circumcircle()
    for vertex in SAMPLE_TRIANGLES[2].vertices():
        assert np.isclose(vertex.distance_from(circle.center_point), circle.radius)
    print("✓ Circumcircle test passed")


def test_circumcircle_of_collinear_points_is_none():
    """Degenerate triangles have no circumcircle"""
    collinear = Triangle2.from_vertices(Point2(0, 0), Point2(1, 1), Point2(2, 2))

    assert collinear.circumcircle() is None
    assert SAMPLE_TRIANGLES[4].circumcircle() is None
    print("✓ Collinear circumcircle test passed")


def test_scale_about():
    """Scaling about the origin"""
    scaled = TRIANGLE_ABOVE.scale_about(Point2.origin(), 2)

    assert scaled.vertices() == (Point2(2, 2), Point2(4, 2), Point2(2, 6))
    assert np.isclose(scaled.area(), 4.0)
    print("✓ Triangle scale test passed")


def test_negative_scale_is_a_half_turn():
    """Negative uniform scaling in 2D keeps the winding"""
    scaled = TRIANGLE_ABOVE.scale_about(Point2.origin(), -2)

    assert scaled.vertices() == (Point2(-2, -2), Point2(-4, -2), Point2(-2, -6))
    assert np.isclose(scaled.counterclockwise_area(), 4.0)

    half_turn = TRIANGLE_ABOVE.scale_about(Point2.origin(), 2).rotate_around(Point2.origin(), math.pi)
    assert scaled.equal_within(half_turn)
    print("✓ Negative scale test passed")


def test_mirror_flips_winding():
    """Mirroring reverses the sign of the counterclockwise area"""
    for axis in [Axis2.x(), Axis2.y(), Axis2.through(Point2(3, -1), Direction2.from_angle(0.4))]:
        mirrored = TRIANGLE_ABOVE.mirror_across(axis)
        assert np.isclose(mirrored.counterclockwise_area(), -TRIANGLE_ABOVE.counterclockwise_area())
        assert np.isclose(mirrored.area(), TRIANGLE_ABOVE.area())
    print("✓ Mirror winding test passed")


def test_rigid_transforms_preserve_area():
    """Translation and rotation keep the signed area"""
    moved = (
        TRIANGLE_ABOVE
        .translate_by(Vector2(10, -3))
        .translate_in(Direction2.positive_x(), 2)
        .rotate_around(Point2(4, 4), 2.2)
    )

    assert np.isclose(moved.counterclockwise_area(), TRIANGLE_ABOVE.counterclockwise_area())
    assert TRIANGLE_ABOVE.translate_by(Vector2(10, -3)).vertices() == (
        Point2(11, -2), Point2(12, -2), Point2(11, 0)
    )
    print("✓ Rigid transform test passed")


def test_map_vertices():
    """map_vertices applies a function to each vertex independently"""
    swapped = TRIANGLE_ABOVE.map_vertices(lambda p: Point2(p.y, p.x))

    assert swapped.vertices() == (Point2(1, 1), Point2(1, 2), Point2(3, 1))
    print("✓ map_vertices test passed")


def test_frame_round_trip():
    """place_in undoes relative_to"""
    frames = [
        Frame2.at_origin(),
        Frame2.at_point(Point2(3, -7)),
        Frame2.with_x_direction(Direction2.from_angle(2.5), Point2(-1, 4)),
        Frame2.at_point(Point2(0.5, 0.5)).reverse_y(),
    ]
    for frame in frames:
        for triangle in SAMPLE_TRIANGLES:
            assert triangle.relative_to(frame).place_in(frame).equal_within(triangle)
    print("✓ Triangle frame round trip test passed")


def test_left_handed_frame_flips_winding():
    """Expressing a triangle in a left-handed frame reverses its winding"""
    frame = Frame2.at_origin().reverse_x()
    local = TRIANGLE_ABOVE.relative_to(frame)

    assert np.isclose(local.counterclockwise_area(), -1.0)
    print("✓ Left-handed frame test passed")


def test_vertices_must_share_coordinate_system():
    """Mixing coordinate systems fails on construction"""
    local = CoordinateSystem("local")

    with pytest.raises(CoordinateSystemMismatchError):
        Triangle2.from_vertices(Point2(0, 0), Point2(1, 0), Point2(0, 1, local))
    print("✓ Coordinate system check test passed")


def test_to_array():
    """Vertices as a NumPy array"""
    arr = TRIANGLE_ABOVE.to_array()

    assert arr.shape == (3, 2)
    assert np.allclose(arr, [[1, 1], [2, 1], [1, 3]])
    print("✓ to_array test passed")


def test_to_matplotlib():
    """Triangle to matplotlib patch conversion"""
    try:
        from matplotlib.patches import Polygon as MPLPolygon
    except ImportError:
        print("⊘ Matplotlib not installed - skipping matplotlib tests")
        return

    patch = TRIANGLE_ABOVE.to_mpl_polygon(fill=False)

    assert isinstance(patch, MPLPolygon)
    assert np.allclose(patch.get_xy()[:3], TRIANGLE_ABOVE.to_array())
    print("✓ Triangle to matplotlib Polygon patch test passed")


def test_triangle3_measurements():
    """Area, normal and plane of a 3D triangle"""
    triangle = Triangle3.from_vertices(Point3(0, 0, 0), Point3(1, 0, 0), Point3(0, 1, 0))

    assert np.isclose(triangle.area(), 0.5)
    assert triangle.normal_direction().equal_within(Vector3(0, 0, 1).direction())
    assert triangle.centroid().equal_within(Point3(1 / 3, 1 / 3, 0))

    plane = triangle.plane()
    assert plane.origin_point == Point3(0, 0, 0)
    assert plane.normal_direction.equal_within(triangle.normal_direction())
    print("✓ Triangle3 measurement test passed")


def test_triangle3_degenerate():
    """Collinear 3D triangles have no normal and no plane"""
    triangle = Triangle3.from_vertices(Point3(0, 0, 0), Point3(1, 1, 1), Point3(3, 3, 3))

    assert triangle.area() == 0
    assert triangle.normal_direction() is None
    assert triangle.plane() is None
    print("✓ Triangle3 degenerate test passed")


def test_triangle3_plane_round_trip():
    """place_on and project_into are inverse for in-plane triangles"""
    plane = Plane.from_point_and_normal(Point3(1, 2, 3), Vector3(1, -1, 2).direction())
    placed = TRIANGLE_ABOVE.place_on(plane)

    assert np.isclose(placed.area(), TRIANGLE_ABOVE.area())
    assert placed.project_into(plane).equal_within(TRIANGLE_ABOVE)
    assert placed.normal_direction().equal_within(plane.normal_direction)
    print("✓ Triangle3 plane round trip test passed")


def test_triangle3_transforms():
    """3D transforms map every vertex"""
    triangle = Triangle3.from_vertices(Point3(0, 0, 0), Point3(1, 0, 0), Point3(0, 1, 0))

    rotated = triangle.rotate_around(Axis3.x(), math.pi / 2)
    assert rotated.normal_direction().equal_within(Vector3(0, -1, 0).direction())

    mirrored = triangle.translate_by(Vector3(0, 0, 2)).mirror_across(Plane.xy())
    assert mirrored.p1 == Point3(0, 0, -2)
    assert mirrored.normal_direction().equal_within(Vector3(0, 0, 1).direction())

    scaled = triangle.scale_about(Point3.origin(), 3)
    assert np.isclose(scaled.area(), 4.5)
    print("✓ Triangle3 transform test passed")


def test_triangle3_normal_with_huge_coordinates():
    """Normals and planes stay defined when cross products would overflow"""
    triangle = Triangle3.from_vertices(
        Point3(0, 0, 0), Point3(1e200, 0, 0), Point3(0, 1e200, 0)
    )

    assert triangle.normal_direction().equal_within(Direction3.positive_z())
    plane = triangle.plane()
    assert plane.normal_direction.equal_within(Direction3.positive_z())
    assert plane.x_direction == Direction3.positive_x()

    far = Triangle3.from_vertices(
        Point3(1e160, 1e160, 0), Point3(2e160, 1e160, 0), Point3(1e160, 3e160, 0)
    )
    assert far.normal_direction().equal_within(Direction3.positive_z())
    print("✓ Huge triangle normal test passed")


def test_round_trip_far_from_origin_needs_scaled_tolerance():
    """equal_within is absolute, so large coordinates need a larger tolerance"""
    triangle = Triangle2.from_vertices(
        Point2(1e8, 1e8), Point2(1e8 + 3, 1e8), Point2(1e8, 1e8 + 4)
    )
    frame = Frame2.with_x_direction(Direction2.from_angle(0.7), Point2(-5, 12))
    restored = triangle.relative_to(frame).place_in(frame)

    # Rounding error here is about 1e-16 relative to the coordinates
    assert restored.equal_within(triangle, tolerance=1e8 * 1e-12)
    print("✓ Far round trip test passed")
