# -*- coding: utf-8 -*-
"""
Orbit Geometry - Default geometry services from platform state vectors.

Implements ``GeometryServices`` by interpolating the state vectors held
in the metadata with ``scipy.interpolate.interp1d`` and propagating them
with a fourth-order Runge-Kutta integrator of two-body motion in the
rotating earth-fixed frame.

Dependencies
------------
scipy

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
import logging
import math
from datetime import datetime, timedelta
from typing import List, Optional

# Third-party
import numpy as np
from scipy.interpolate import interp1d

# ceosmeta internal
from ceosmeta.exceptions import GeolocationError
from ceosmeta.geolocation.base import GeometryServices
from ceosmeta.geolocation.utils import (
    EARTH_GM,
    EARTH_ROTATION_RATE,
    ellipsoid_radius,
    fixed_to_inertial,
    frame_number,
    unit_scale,
)
from ceosmeta.IO.models.common import XYZ
from ceosmeta.IO.models.metadata import (
    CeosMetadata,
    StateVector,
    StateVectorBlock,
)
from ceosmeta.IO.models.records import PlatformPositionRecord
from ceosmeta.timeutils import (
    date_hms2sec,
    date_ymd2datetime,
    seconds_between,
)

logger = logging.getLogger(__name__)

# WGS84, used when the metadata carries no ellipsoid
_WGS84_MAJOR = 6378137.0
_WGS84_MINOR = 6356752.314245

_INTERP_KIND = {2: 'linear', 3: 'quadratic'}


def _state_array(vec: StateVector) -> np.ndarray:
    return np.concatenate([vec.position.to_array(), vec.velocity.to_array()])


def _state_vector(t: float, state: np.ndarray) -> StateVector:
    return StateVector(time=float(t),
                       position=XYZ.from_array(state[:3]),
                       velocity=XYZ.from_array(state[3:]))


def _derivative(state: np.ndarray) -> np.ndarray:
    """Time derivative of (r, v) in the rotating earth-fixed frame."""
    r = state[:3]
    v = state[3:]
    w = EARTH_ROTATION_RATE
    acc = -EARTH_GM * r / np.linalg.norm(r)**3
    # Coriolis and centrifugal terms
    acc = acc + np.array([2.0 * w * v[1] + w * w * r[0],
                          -2.0 * w * v[0] + w * w * r[1],
                          0.0])
    return np.concatenate([v, acc])


class OrbitGeometry(GeometryServices):
    """
    Geometry services computed from the metadata state vectors.

    Parameters
    ----------
    max_step : float, default=5.0
        Largest Runge-Kutta step in seconds.

    Examples
    --------
    >>> geom = OrbitGeometry()
    >>> geom.unit_scale(56.5, 0.0565)
    0.001
    """

    def __init__(self, max_step: float = 5.0) -> None:
        self.max_step = max_step

    # ---------------------------------------------------------------
    # State vectors
    # ---------------------------------------------------------------

    @staticmethod
    def _vectors(meta: CeosMetadata) -> List[StateVector]:
        block = meta.state_vectors
        if block is None or not block.vectors:
            raise GeolocationError(
                "Metadata holds no state vectors to evaluate the orbit"
            )
        return block.vectors

    @staticmethod
    def image_start(meta: CeosMetadata, center_time: datetime) -> datetime:
        """Start of imaging: center time minus half the scene duration."""
        sar = meta.sar
        aztpp = sar.azimuth_time_per_pixel if sar is not None else None
        lines = sar.original_line_count if sar is not None else None
        if not aztpp or not lines:
            return center_time
        return center_time - timedelta(seconds=(lines // 2) * abs(aztpp))

    def read_state_vectors(
        self,
        meta: CeosMetadata,
        ppdr: PlatformPositionRecord,
        center_time: datetime,
    ) -> Optional[StateVectorBlock]:
        data = ppdr.as_array()
        if data.shape[0] == 0:
            logger.warning("Platform position record holds no state vectors")
            return None

        start = self.image_start(meta, center_time)
        t0 = self.time_delta(meta, ppdr, center_time)
        vectors = [_state_vector(t0 + i * ppdr.data_int, row)
                   for i, row in enumerate(data)]
        return StateVectorBlock(
            year=start.year,
            julian_day=start.timetuple().tm_yday,
            second=date_hms2sec(start),
            vectors=vectors,
        )

    def time_delta(
        self,
        meta: CeosMetadata,
        ppdr: PlatformPositionRecord,
        center_time: datetime,
    ) -> float:
        first = date_ymd2datetime(ppdr.year, ppdr.month, ppdr.day,
                                  ppdr.gmt_sec)
        return seconds_between(first, self.image_start(meta, center_time))

    def state_vector_at(self, meta: CeosMetadata, t: float) -> StateVector:
        vectors = self._vectors(meta)
        if len(vectors) == 1:
            vec = vectors[0]
            dt = t - vec.time
            pos = vec.position.to_array() + vec.velocity.to_array() * dt
            return StateVector(time=float(t), position=XYZ.from_array(pos),
                               velocity=vec.velocity)

        times = np.array([v.time for v in vectors], dtype=np.float64)
        states = np.vstack([_state_array(v) for v in vectors])
        kind = _INTERP_KIND.get(len(vectors), 'cubic')
        func = interp1d(times, states, axis=0, kind=kind,
                        fill_value='extrapolate', assume_sorted=False)
        return _state_vector(t, func(t))

    def _propagate(self, state: np.ndarray, dt: float) -> np.ndarray:
        if dt == 0.0:
            return state
        steps = max(1, int(math.ceil(abs(dt) / self.max_step)))
        h = dt / steps
        for _ in range(steps):
            k1 = _derivative(state)
            k2 = _derivative(state + 0.5 * h * k1)
            k3 = _derivative(state + 0.5 * h * k2)
            k4 = _derivative(state + h * k3)
            state = state + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
        return state

    def propagate_state(
        self, meta: CeosMetadata, count: int, interval: float
    ) -> None:
        start = self.state_vector_at(meta, 0.0)
        state = _state_array(start)
        vectors = []
        t = 0.0
        for i in range(count):
            target = i * interval
            state = self._propagate(state, target - t)
            t = target
            vectors.append(_state_vector(t, state))
        meta.state_vectors.vectors = vectors
        logger.debug("Propagated %d state vectors at %.3f s spacing",
                     count, interval)

    # ---------------------------------------------------------------
    # Earth geometry
    # ---------------------------------------------------------------

    def _time_at_line(self, meta: CeosMetadata, row: float) -> float:
        sar = meta.sar
        shift = (sar.time_shift or 0.0) if sar is not None else 0.0
        aztpp = (sar.azimuth_time_per_pixel or 0.0) if sar is not None else 0.0
        return shift + row * aztpp

    def earth_radius(
        self, meta: CeosMetadata, row: float, col: float
    ) -> float:
        st = self.state_vector_at(meta, self._time_at_line(meta, row))
        pos = st.position.to_array()
        lat = np.degrees(np.arcsin(pos[2] / np.linalg.norm(pos)))
        general = meta.general
        re_major = general.re_major or _WGS84_MAJOR
        re_minor = general.re_minor or _WGS84_MINOR
        return ellipsoid_radius(lat, re_major, re_minor)

    def satellite_height(
        self, meta: CeosMetadata, row: float, col: float
    ) -> float:
        st = self.state_vector_at(meta, self._time_at_line(meta, row))
        return float(np.linalg.norm(st.position.to_array()))

    def to_inertial(self, state: StateVector, gha: float) -> StateVector:
        pos, vel = fixed_to_inertial(state.position.to_array(),
                                     state.velocity.to_array(), gha)
        return StateVector(time=state.time, position=XYZ.from_array(pos),
                           velocity=XYZ.from_array(vel))

    # ---------------------------------------------------------------
    # Catalog helpers
    # ---------------------------------------------------------------

    def frame_number(self, sensor: str, lat: float, orbit_dir: str) -> int:
        return frame_number(sensor, lat, orbit_dir)

    def unit_scale(self, value: float, expected: float) -> float:
        return unit_scale(value, expected)
