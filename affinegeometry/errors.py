"""
Exception types raised on precondition violations
"""


class GeometryError(Exception):
    """Base class for affinegeometry errors"""


class CoordinateSystemMismatchError(GeometryError, ValueError):
    """Operands are tagged with different coordinate systems"""


class InvalidBasisError(GeometryError, ValueError):
    """A direction is not unit length, or a basis is not orthonormal"""
