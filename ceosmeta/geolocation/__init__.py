# -*- coding: utf-8 -*-
"""
Geolocation Module - Orbit and earth geometry services.

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

from ceosmeta.geolocation.base import GeometryServices
from ceosmeta.geolocation.orbit import OrbitGeometry
from ceosmeta.geolocation.utils import (
    ellipsoid_radius,
    fixed_to_inertial,
    frame_number,
    unit_scale,
)

__all__ = [
    'GeometryServices',
    'OrbitGeometry',
    'ellipsoid_radius',
    'fixed_to_inertial',
    'frame_number',
    'unit_scale',
]
