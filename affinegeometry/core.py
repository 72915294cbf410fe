"""
Core configuration and coordinate-system tagging for affinegeometry
"""

import logging
import os
from dataclasses import dataclass

import numpy as np

from .errors import CoordinateSystemMismatchError

logger = logging.getLogger(__name__)

TOLERANCE_ENV_VAR = "AFFINEGEOMETRY_TOLERANCE"
DEFAULT_TOLERANCE = 1e-9
DEFAULT_BASIS_TOLERANCE = 1e-9


@dataclass(frozen=True)
class CoordinateSystem:
    """
    Tag naming the coordinate system (and units) a primitive lives in.

    Two primitives may only be combined when their tags compare equal.
    Frames and planes carry a second tag for the local system they define.
    """

    name: str = "global"
    units: str = "unitless"

    def __repr__(self):
        return f"CoordinateSystem({self.name!r}, {self.units!r})"


GLOBAL = CoordinateSystem()


def check_same_system(*items):
    """
    Raise CoordinateSystemMismatchError unless all items share one tag

    Parameters:
    -----------
    *items : objects with a ``system`` attribute

    Returns:
    --------
    CoordinateSystem
        The shared tag
    """
    system = items[0].system
    for item in items[1:]:
        if item.system != system:
            raise CoordinateSystemMismatchError(
                f"Cannot combine values in {system!r} and {item.system!r}"
            )
    return system


def check_system(item, system, what="value"):
    """Raise unless ``item`` is tagged with ``system``"""
    if item.system != system:
        raise CoordinateSystemMismatchError(
            f"Expected {what} in {system!r}, got {item.system!r}"
        )


class GeometryCore:
    """Process-wide settings shared by every primitive"""

    tolerance = DEFAULT_TOLERANCE
    basis_tolerance = DEFAULT_BASIS_TOLERANCE
    _configured = False

    @classmethod
    def configure(cls, tolerance=None, basis_tolerance=None):
        """
        Set the comparison and basis tolerances

        Parameters:
        -----------
        tolerance : float, optional
            Absolute distance used as the default of every
            ``equal_within``. It does not scale with the magnitude of the
            coordinates, so values far from the origin need a larger
            explicit tolerance. When omitted, ``AFFINEGEOMETRY_TOLERANCE``
            is read from the environment, falling back to the current value.
        basis_tolerance : float, optional
            Slack allowed by the unit-length check on directions and the
            orthonormality check on frame and plane bases. Independent of
            ``tolerance``.
        """
        if tolerance is None:
            raw = os.environ.get(TOLERANCE_ENV_VAR)
            if raw is not None:
                try:
                    tolerance = float(raw)
                except ValueError:
                    raise ValueError(
                        f"{TOLERANCE_ENV_VAR} must be a number, got {raw!r}"
                    )
        if tolerance is not None:
            if not tolerance > 0:
                raise ValueError("Tolerance must be positive")
            cls.tolerance = float(tolerance)
            logger.info("Geometry tolerance set to %g", cls.tolerance)
        if basis_tolerance is not None:
            if not basis_tolerance > 0:
                raise ValueError("Basis tolerance must be positive")
            cls.basis_tolerance = float(basis_tolerance)
            logger.info("Basis tolerance set to %g", cls.basis_tolerance)
        cls._configured = True

    @classmethod
    def ensure_configured(cls):
        """Run configure() once, picking up the environment"""
        if not cls._configured:
            cls.configure()

    @classmethod
    def reset(cls):
        """Restore default settings"""
        cls.tolerance = DEFAULT_TOLERANCE
        cls.basis_tolerance = DEFAULT_BASIS_TOLERANCE
        cls._configured = False

    @classmethod
    def resolve_tolerance(cls, tolerance=None):
        """Return ``tolerance`` or the configured (absolute) default"""
        if tolerance is not None:
            return tolerance
        cls.ensure_configured()
        return cls.tolerance

    @classmethod
    def resolve_basis_tolerance(cls):
        cls.ensure_configured()
        return cls.basis_tolerance

    @staticmethod
    def components_to_numpy(components):
        """Convert a tuple of floats to a NumPy array"""
        return np.array(components, dtype=float)

    @staticmethod
    def numpy_to_components(arr, size):
        """
        Convert a NumPy array of shape (size,) to a tuple of floats

        Raises:
        -------
        ValueError
            If the array does not have the expected shape
        """
        arr = np.asarray(arr, dtype=float)
        if arr.shape != (size,):
            raise ValueError(f"Expected array of shape ({size},), got {arr.shape}")
        return tuple(float(value) for value in arr)
