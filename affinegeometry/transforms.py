"""
Matrix helpers for transformations and homogeneous coordinates

This module builds the NumPy matrices the primitives use for rotation,
reflection and frame placement, and converts point arrays to and from
homogeneous coordinates.

# Key Functions
- `rotation_matrix()`: 2x2 counterclockwise rotation
- `mirror_matrix()`: 2x2 reflection across a line through the origin
- `axis_rotation_matrix()`: 3x3 rotation about a unit axis (Rodrigues)
- `reflection_matrix()`: 3x3 reflection across a plane through the origin
- `placement_matrix()`: homogeneous local-to-global matrix of a frame
- `to_homogeneous()`, `to_euclidean()`, `apply_transform()`
"""

import math

import numpy as np


def rotation_matrix(angle):
    """
    Counterclockwise 2D rotation matrix

    Parameters:
    -----------
    angle : float
        Rotation angle in radians

    Returns:
    --------
    ndarray, shape (2, 2)
    """
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    return np.array([
        [cos_angle, -sin_angle],
        [sin_angle, cos_angle],
    ])


def mirror_matrix(dx, dy):
    """
    Reflection across the line through the origin with unit direction (dx, dy)

    Returns:
    --------
    ndarray, shape (2, 2)
        ``[[1 - 2dy², 2dxdy], [2dxdy, 1 - 2dx²]]``
    """
    return np.array([
        [1 - 2 * dy * dy, 2 * dx * dy],
        [2 * dx * dy, 1 - 2 * dx * dx],
    ])


def axis_rotation_matrix(axis_components, angle):
    """
    Rotation by ``angle`` about a unit axis, counterclockwise when looking
    down the axis towards the origin

    Parameters:
    -----------
    axis_components : array-like, shape (3,)
        Unit axis direction
    angle : float
        Rotation angle in radians

    Returns:
    --------
    ndarray, shape (3, 3)
    """
    ux, uy, uz = axis_components
    cross_matrix = np.array([
        [0.0, -uz, uy],
        [uz, 0.0, -ux],
        [-uy, ux, 0.0],
    ])
    outer = np.outer([ux, uy, uz], [ux, uy, uz])
    cos_angle = math.cos(angle)
    return (
        cos_angle * np.eye(3)
        + math.sin(angle) * cross_matrix
        + (1 - cos_angle) * outer
    )


def reflection_matrix(normal_components):
    """Householder reflection ``I - 2nnᵀ`` for a unit normal"""
    n = np.asarray(normal_components, dtype=float)
    return np.eye(3) - 2 * np.outer(n, n)


def apply_linear(matrix, components):
    """Multiply a component tuple by ``matrix``, returning a tuple of floats"""
    result = matrix @ np.asarray(components, dtype=float)
    return tuple(float(value) for value in result)


def placement_matrix(origin_components, basis_components):
    """
    Homogeneous matrix mapping local coordinates to global coordinates

    Parameters:
    -----------
    origin_components : array-like, shape (N,)
        Frame origin in global coordinates
    basis_components : sequence of N array-likes, shape (N,)
        Frame basis directions in global coordinates

    Returns:
    --------
    ndarray, shape (N+1, N+1)
        Basis directions as columns, origin as the translation column
    """
    origin = np.asarray(origin_components, dtype=float)
    size = origin.shape[0]
    matrix = np.eye(size + 1)
    matrix[:size, :size] = np.column_stack(basis_components)
    matrix[:size, size] = origin
    return matrix


def to_homogeneous(points):
    """
    Convert Euclidean coordinates to homogeneous coordinates

    Appends a coordinate of 1.

    Parameters:
    -----------
    points : array-like
        - 1D array of shape (N,) -> homogeneous (N+1,)
        - 2D array of shape (M, N) -> homogeneous (M, N+1)

    Returns:
    --------
    points_homogeneous : ndarray

    Examples:
    ---------
    >>> to_homogeneous(np.array([1.0, 2.0]))
    array([1., 2., 1.])
    """
    points = np.asarray(points, dtype=float)

    if points.ndim == 1:
        return np.append(points, 1.0)
    elif points.ndim == 2:
        ones = np.ones((points.shape[0], 1))
        return np.hstack([points, ones])
    else:
        raise ValueError("Points must be 1D or 2D array")


def to_euclidean(points):
    """
    Convert homogeneous coordinates to Euclidean coordinates

    Performs perspective division by the last coordinate and removes it.

    Parameters:
    -----------
    points : array-like
        - 1D array of shape (N,) -> Euclidean (N-1,)
        - 2D array of shape (M, N) -> Euclidean (M, N-1)

    Returns:
    --------
    points_euclidean : ndarray

    Raises:
    -------
    ValueError
        If a homogeneous coordinate (last element) is zero

    Examples:
    ---------
    >>> to_euclidean(np.array([2.0, 4.0, 2.0]))
    array([1., 2.])
    """
    points = np.asarray(points, dtype=float)

    if points.ndim == 1:
        if points[-1] == 0:
            raise ValueError("Cannot convert a point at infinity")
        return points[:-1] / points[-1]
    elif points.ndim == 2:
        w = points[:, -1:]
        if np.any(w == 0):
            raise ValueError("Cannot convert a point at infinity")
        return points[:, :-1] / w
    else:
        raise ValueError("Points must be 1D or 2D array")


def apply_transform(transform_matrix, points):
    """
    Apply a homogeneous transformation to points

    Parameters:
    -----------
    transform_matrix : array-like, shape (N, N)
        Homogeneous transformation matrix (N = 3 in 2D, 4 in 3D)
    points : array-like
        Points in homogeneous coordinates, shape (N,) or (M, N)

    Returns:
    --------
    ndarray
        Transformed points
    """
    transform_matrix = np.asarray(transform_matrix, dtype=float)
    points = np.asarray(points, dtype=float)

    size = transform_matrix.shape[0]
    if transform_matrix.shape != (size, size) or size not in (3, 4):
        raise ValueError("Transform matrix must be 3x3 or 4x4")

    if points.ndim == 1:
        if points.shape[0] != size:
            raise ValueError(f"Points must be in homogeneous coordinates ({size}D)")
        return transform_matrix @ points
    elif points.ndim == 2:
        if points.shape[1] != size:
            raise ValueError(f"Points must be in homogeneous coordinates ({size}D)")
        return (transform_matrix @ points.T).T
    else:
        raise ValueError("Points must be 1D or 2D array")
