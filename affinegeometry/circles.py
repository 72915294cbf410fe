"""
Circles in the plane
"""

import math
from dataclasses import dataclass

import numpy as np

from .bounding_boxes import BoundingBox2
from .points import Point2


@dataclass(frozen=True)
class Circle2:
    """
    A circle given by its center point and radius

    Attributes:
        center_point: Point2
        radius: float, non-negative
    """

    center_point: Point2
    radius: float

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError("Radius must be non-negative")

    @classmethod
    def with_radius(cls, radius, center_point):
        return cls(center_point, abs(radius))

    @classmethod
    def through_points(cls, p1, p2, p3):
        """
        Circle passing through three points

        Parameters:
        -----------
        p1, p2, p3 : Point2
            Points on the circle

        Returns:
        --------
        Circle2 or None
            None when the points are collinear

        Examples:
        ---------
        >>> circle = Circle2.through_points(Point2(1, 0), Point2(0, 1), Point2(-1, 0))
        >>> circle.radius
        1.0
        """
        center = Point2.circumcenter(p1, p2, p3)
        if center is None:
            return None
        radius = center.distance_from(p1)
        return cls(center, radius)

    @property
    def system(self):
        return self.center_point.system

    def diameter(self):
        return 2 * self.radius

    def area(self):
        return math.pi * self.radius ** 2

    def circumference(self):
        return 2 * math.pi * self.radius

    def contains(self, point):
        """True if ``point`` is inside or on the circle"""
        return point.squared_distance_from(self.center_point) <= self.radius ** 2

    def distance_to_point(self, point):
        """Distance from ``point`` to the boundary (negative if inside)"""
        return point.distance_from(self.center_point) - self.radius

    def bounding_box(self):
        c = self.center_point
        r = self.radius
        return BoundingBox2(c.x - r, c.x + r, c.y - r, c.y + r, c.system)

    def points(self, n_points=100):
        """
        Sample points on the circle boundary

        Points are generated counterclockwise starting from angle 0.

        Parameters:
        -----------
        n_points : int, optional
            Number of points to generate (default: 100)

        Returns:
        --------
        points : ndarray, shape (n_points, 2)
            Points on circle boundary as [x, y] coordinates

        Examples:
        ---------
        >>> circle = Circle2(Point2(0, 0), 1.0)
        >>> points = circle.points(64)
        >>> points.shape
        (64, 2)
        >>> np.allclose(np.linalg.norm(points, axis=1), 1.0)
        True
        """
        theta = np.linspace(0, 2 * np.pi, n_points, endpoint=False)

        x = self.center_point.x + self.radius * np.cos(theta)
        y = self.center_point.y + self.radius * np.sin(theta)

        return np.column_stack([x, y])

    def scale_about(self, center, factor):
        return Circle2(self.center_point.scale_about(center, factor), abs(factor) * self.radius)

    def translate_by(self, vector):
        return Circle2(self.center_point.translate_by(vector), self.radius)

    def rotate_around(self, center, angle):
        return Circle2(self.center_point.rotate_around(center, angle), self.radius)

    def mirror_across(self, axis):
        return Circle2(self.center_point.mirror_across(axis), self.radius)

    def relative_to(self, frame):
        return Circle2(self.center_point.relative_to(frame), self.radius)

    def place_in(self, frame):
        return Circle2(self.center_point.place_in(frame), self.radius)

    def to_mpl_circle(self, **kwargs):
        """
        Convert to matplotlib Circle patch for quick plotting

        Parameters:
        -----------
        **kwargs
            Additional arguments passed to matplotlib.patches.Circle
            (e.g., facecolor, edgecolor, alpha, fill)

        Returns:
        --------
        matplotlib.patches.Circle

        Example:
        --------
        >>> import matplotlib.pyplot as plt
        >>> circle = Circle2(Point2(100, 200), 15)
        >>> fig, ax = plt.subplots()
        >>> ax.add_patch(circle.to_mpl_circle(fill=False, edgecolor='r'))
        """
        try:
            from matplotlib.patches import Circle as MPLCircle
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_circle(). Install with: pip install matplotlib")

        return MPLCircle(self.center_point.coordinates(), self.radius, **kwargs)
