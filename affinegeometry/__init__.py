"""
affinegeometry

Immutable 2D/3D geometric values with exact, well-tested affine and
Euclidean operations: vectors, directions, points, axes, frames, planes,
line segments, bounding boxes, circles and triangles.

Every value is a frozen dataclass. Transformations (translate, rotate,
scale, mirror) and coordinate conversions (``relative_to`` / ``place_in``)
return new values and never mutate their inputs, so values can be shared
freely between threads.

# Quick Start
```python
import math
from affinegeometry import Point2, Triangle2, Frame2

triangle = Triangle2.from_vertices(Point2(1, 1), Point2(2, 1), Point2(1, 3))
triangle.area()                      # 1.0
triangle.contains(Point2(1.5, 1.5))  # True
triangle.circumcircle()              # Circle2(...) or None if collinear

frame = Frame2.at_point(Point2(5, 0)).rotate_around(Point2(5, 0), math.pi / 4)
local = triangle.relative_to(frame)
local.place_in(frame).equal_within(triangle)  # True
```

# Features
- Signed/unsigned areas, containment and circumcircles for triangles
- Orthonormal frames and planes for local/global coordinate conversion
- Optional absence (``None``) for undefined results such as the direction
  of a zero vector
- Coordinate-system tags that fail loudly when mixed
- NumPy interchange (``to_array`` / ``from_array``) and optional
  matplotlib patches
"""

import logging

from .core import GLOBAL, CoordinateSystem, GeometryCore
from .errors import CoordinateSystemMismatchError, GeometryError, InvalidBasisError
from .vectors import Vector2, Vector3
from .directions import Direction2, Direction3
from .points import Point2, Point3
from .axes import Axis2, Axis3
from .frames import Frame2, Frame3
from .planes import Plane
from .segments import LineSegment2, LineSegment3
from .bounding_boxes import BoundingBox2
from .circles import Circle2
from .triangles import Triangle2, Triangle3
from .transforms import to_homogeneous, to_euclidean, apply_transform
from .logging_config import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "GLOBAL",
    "CoordinateSystem",
    "GeometryCore",
    "GeometryError",
    "CoordinateSystemMismatchError",
    "InvalidBasisError",
    "Vector2",
    "Vector3",
    "Direction2",
    "Direction3",
    "Point2",
    "Point3",
    "Axis2",
    "Axis3",
    "Frame2",
    "Frame3",
    "Plane",
    "LineSegment2",
    "LineSegment3",
    "BoundingBox2",
    "Circle2",
    "Triangle2",
    "Triangle3",
    "to_homogeneous",
    "to_euclidean",
    "apply_transform",
    "setup_logging",
]
