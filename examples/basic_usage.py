#!/usr/bin/env python3
"""
Basic usage examples for affinegeometry
"""

import math

import numpy as np
from affinegeometry import (
    Axis2,
    Circle2,
    Frame2,
    Plane,
    Point2,
    Triangle2,
    Vector3,
    setup_logging,
    to_euclidean,
    to_homogeneous,
)


def example_triangle():
    """Example using Triangle2"""
    print("=== Triangle Example ===")

    triangle = Triangle2.from_vertices(Point2(1, 1), Point2(2, 1), Point2(1, 3))
    print(f"Triangle: {triangle}")
    print(f"Area: {triangle.area():.3f}")
    print(f"Counterclockwise area: {triangle.counterclockwise_area():.3f}")
    print(f"Centroid: {triangle.centroid()}")

    test_point = Point2(1.5, 1.5)
    print(f"Contains {test_point}: {triangle.contains(test_point)}")

    mirrored = triangle.mirror_across(Axis2.x())
    print(f"Mirrored counterclockwise area: {mirrored.counterclockwise_area():.3f}")

    circle = triangle.circumcircle()
    print(f"Circumcircle: {circle}")

    return triangle, circle


def example_frames():
    """Example converting between global and local coordinates"""
    print("\n=== Frame Example ===")

    frame = Frame2.at_point(Point2(5, 0)).rotate_around(Point2(5, 0), math.pi / 4)
    point = Point2(6, 1)

    local = point.relative_to(frame)
    print(f"Global {point} -> local {local}")
    print(f"Back to global: {local.place_in(frame)}")
    print(f"Placement matrix:\n{frame.to_matrix()}")


def example_planes():
    """Example projecting onto a plane"""
    print("\n=== Plane Example ===")

    plane = Plane.from_point_and_normal(
        Plane.xy().point(1, 1).translate_by(Vector3(0, 0, 2)),
        Vector3(0, 1, 1).direction(),
    )
    triangle = Triangle2.from_vertices(Point2(0, 0), Point2(1, 0), Point2(0, 1))
    placed = triangle.place_on(plane)

    print(f"Plane normal: {plane.normal_direction}")
    print(f"Placed triangle area: {placed.area():.3f}")
    print(f"Normal matches plane: {placed.normal_direction().equal_within(plane.normal_direction)}")


def example_coordinate_transforms():
    """Example using homogeneous coordinates"""
    print("\n=== Coordinate Transform Example ===")

    euclidean_points = np.array([
        [1.0, 2.0],
        [3.0, 4.0],
        [5.0, 6.0]
    ])
    homogeneous_points = to_homogeneous(euclidean_points)
    print(f"Homogeneous points:\n{homogeneous_points}")

    recovered_points = to_euclidean(homogeneous_points)
    difference = np.abs(euclidean_points - recovered_points)
    print(f"Max difference: {np.max(difference):.2e}")


def plot_examples():
    """Plot the triangle with its circumcircle"""
    import matplotlib.pyplot as plt

    print("\n=== Plotting Examples ===")

    triangle, circle = example_triangle()
    circle_points = Circle2(circle.center_point, circle.radius).points(100)

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.add_patch(triangle.to_mpl_polygon(fill=False, edgecolor='b', linewidth=2))
    ax.plot(circle_points[:, 0], circle_points[:, 1], 'g-', label='Circumcircle')
    ax.plot(circle.center_point.x, circle.center_point.y, 'ro', markersize=8, label='Center')
    ax.set_aspect('equal')
    ax.grid(True)
    ax.legend()
    ax.set_title('Triangle and circumcircle')

    plt.tight_layout()
    plt.savefig('affinegeometry_examples.png', dpi=150, bbox_inches='tight')
    print("Saved plot as 'affinegeometry_examples.png'")
    plt.show()


if __name__ == "__main__":
    setup_logging()

    example_triangle()
    example_frames()
    example_planes()
    example_coordinate_transforms()

    # Create plots if matplotlib is available
    try:
        plot_examples()
    except ImportError:
        print("Matplotlib not available - skipping plots")
        print("Install with: pip install matplotlib")
