# -*- coding: utf-8 -*-
"""
IO Models Common - Reusable primitive types for metadata dataclasses.

Coordinate building blocks shared by the raw record views and the
canonical metadata model.

Author
------
ceosmeta developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from dataclasses import dataclass

# Third-party
import numpy as np


@dataclass
class XYZ:
    """Earth-centered coordinate triple.

    Used for both positions (meters) and velocities (m/s), in either
    the earth-fixed or the inertial frame.

    Parameters
    ----------
    x : float
        X component.
    y : float
        Y component.
    z : float
        Z component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'XYZ':
        """Build from any length-3 sequence."""
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))
