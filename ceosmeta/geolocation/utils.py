# -*- coding: utf-8 -*-
"""
Geolocation Utilities - Helper functions for orbit and earth geometry.

Ellipsoid radius, earth-fixed to inertial rotation, frame numbering
from latitude, and physical unit-scale detection.

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

from typing import Tuple

import numpy as np

# Earth rotation rate (rad/s)
EARTH_ROTATION_RATE = 7.292115e-5

# Earth gravitational constant (m^3/s^2)
EARTH_GM = 3.986004418e14

SPEED_OF_LIGHT = 299792458.0

# Orbit inclinations (degrees) used by the frame calculator
_INCLINATIONS = (
    ('ERS', 98.5),
    ('JERS', 97.7),
    ('RSAT', 98.6),
    ('ALOS', 98.16),
)

# Frame numbering: 7200 frames per orbit, 0.05 degrees of argument of
# latitude per frame
_FRAME_STEP = 0.05
_FRAMES_PER_ORBIT = 7200


def ellipsoid_radius(
    geocentric_lat: float,
    re_major: float,
    re_minor: float
) -> float:
    """
    Radius of an ellipsoid of revolution at a geocentric latitude.

    Parameters
    ----------
    geocentric_lat : float
        Geocentric latitude in degrees
    re_major, re_minor : float
        Semi-major and semi-minor axes in meters

    Returns
    -------
    float
        Distance from the ellipsoid center to its surface, in meters
    """
    lat = np.radians(geocentric_lat)
    a, b = re_major, re_minor
    return float(a * b / np.sqrt((b * np.cos(lat))**2 + (a * np.sin(lat))**2))


def fixed_to_inertial(
    pos: np.ndarray,
    vel: np.ndarray,
    gha: float
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Rotate an earth-fixed state into an inertial frame.

    Rotates position and velocity about the z axis by the Greenwich hour
    angle and adds the earth rotation velocity ``omega x r``.

    Parameters
    ----------
    pos : np.ndarray
        Earth-fixed position (3,) in meters
    vel : np.ndarray
        Earth-fixed velocity (3,) in m/s
    gha : float
        Greenwich hour angle in degrees

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        Inertial position and velocity
    """
    ang = np.radians(gha)
    c, s = np.cos(ang), np.sin(ang)
    rot = np.array([[c, -s, 0.0],
                    [s, c, 0.0],
                    [0.0, 0.0, 1.0]])
    ipos = rot @ np.asarray(pos, dtype=np.float64)
    ivel = rot @ np.asarray(vel, dtype=np.float64)
    ivel = ivel + np.array([-EARTH_ROTATION_RATE * ipos[1],
                            EARTH_ROTATION_RATE * ipos[0],
                            0.0])
    return ipos, ivel


def inclination_for(sensor: str) -> float:
    """Orbit inclination (degrees) of a mission, ERS when unrecognized."""
    name = sensor.strip().upper()
    for prefix, inc in _INCLINATIONS:
        if name.startswith(prefix):
            return inc
    return _INCLINATIONS[0][1]


def frame_number(sensor: str, lat: float, orbit_dir: str) -> int:
    """
    Frame number of a scene center latitude.

    The argument of latitude is recovered from the geodetic latitude and
    the orbit inclination, then counted in 0.05 degree frames from the
    ascending node. Descending passes occupy frames 1800-5400.

    Parameters
    ----------
    sensor : str
        Mission label (``'ERS1'``, ``'RSAT-1'``, ``'ALOS'``, ...)
    lat : float
        Scene center latitude in degrees
    orbit_dir : str
        ``'D'`` for descending; anything else is treated as ascending

    Returns
    -------
    int
        Frame number in ``[0, 7200)``
    """
    inc = np.radians(inclination_for(sensor))
    ratio = np.clip(np.sin(np.radians(lat)) / np.sin(inc), -1.0, 1.0)
    arg = np.degrees(np.arcsin(ratio))

    if orbit_dir == 'D':
        frame = (180.0 - arg) / _FRAME_STEP
    elif arg < 0.0:
        frame = (360.0 + arg) / _FRAME_STEP
    else:
        frame = arg / _FRAME_STEP
    return int(round(frame)) % _FRAMES_PER_ORBIT


def unit_scale(value: float, expected: float) -> float:
    """
    Power-of-1000 factor that brings a value to its expected magnitude.

    CEOS producers disagree on units (m vs. km, Hz vs. kHz vs. MHz,
    s vs. ms vs. us). The factor ``1000**k`` with ``k`` in ``[-3, 3]``
    that puts ``|value| * factor`` closest to ``expected`` on a
    logarithmic scale is returned.

    Parameters
    ----------
    value : float
        Value as stored in the record
    expected : float
        Nominal magnitude of the quantity in SI units

    Returns
    -------
    float
        Multiplicative correction; 1.0 for a zero value
    """
    if value == 0.0 or expected == 0.0:
        return 1.0
    target = np.log10(abs(expected))
    current = np.log10(abs(value))
    exponents = np.arange(-3, 4)
    best = exponents[np.argmin(np.abs(current + 3 * exponents - target))]
    return float(1000.0 ** best)
