# -*- coding: utf-8 -*-
"""
Shared test fixtures - Synthetic CEOS data files and geometry services.

All fixtures are synthetic; no real CEOS products are required.

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
import struct
from pathlib import Path

# Third-party
import pytest

# ceosmeta internal
from ceosmeta.geolocation.base import GeometryServices
from ceosmeta.geolocation.utils import unit_scale
from ceosmeta.IO.models.common import XYZ
from ceosmeta.IO.models.metadata import StateVector, StateVectorBlock


# ===================================================================
# Synthetic data file
# ===================================================================

_HEADER_FMT = '>IBBBBI'
_FIRST_RECORD_LENGTH = 720
_LINE_PREFIX = 400
_LINE_DATA = 64


def build_data_file(
    path: Path,
    acq_msec: int = 0,
    sar_cib: int = 2,
    tran_polar: int = 0,
    recv_polar: int = 0,
    chirp_linear: int = 0,
    first_record_length: int = _FIRST_RECORD_LENGTH,
) -> Path:
    """Write a descriptor record followed by one image record."""
    descriptor = struct.pack(_HEADER_FMT, 1, 63, 192, 18, 18,
                             first_record_length)
    descriptor += bytes(max(first_record_length - 12, 0))

    prefix = bytearray(_LINE_PREFIX)
    struct.pack_into('>i', prefix, 32, acq_msec)
    struct.pack_into('>h', prefix, 36, sar_cib)
    struct.pack_into('>h', prefix, 40, tran_polar)
    struct.pack_into('>h', prefix, 42, recv_polar)
    struct.pack_into('>i', prefix, 64, chirp_linear)
    line = struct.pack(_HEADER_FMT, 2, 50, 11, 18, 20,
                       12 + _LINE_PREFIX + _LINE_DATA)
    line += bytes(prefix) + bytes(_LINE_DATA)

    path.write_bytes(descriptor + line)
    return path


@pytest.fixture
def data_file_factory(tmp_path):
    """Build synthetic CEOS data files inside ``tmp_path``."""
    counter = [0]

    def _make(**kwargs):
        counter[0] += 1
        return build_data_file(tmp_path / f"IMG-{counter[0]:02d}.D", **kwargs)

    return _make


# ===================================================================
# Geometry services stub
# ===================================================================

class StubGeometry(GeometryServices):
    """Geometry services with fixed answers that records its calls."""

    EARTH_RADIUS = 6371000.0
    SATELLITE_HEIGHT = 7150000.0
    FRAME = 999
    TIME_DELTA = 1.5

    def __init__(self):
        self.frame_calls = []
        self.propagations = []
        self.radius_calls = []

    def earth_radius(self, meta, row, col):
        self.radius_calls.append((row, col))
        return self.EARTH_RADIUS

    def satellite_height(self, meta, row, col):
        return self.SATELLITE_HEIGHT

    def state_vector_at(self, meta, t):
        return StateVector(time=t,
                           position=XYZ(7.0e6, 0.0, 0.0),
                           velocity=XYZ(0.0, 0.0, 7500.0))

    def to_inertial(self, state, gha):
        return state

    def frame_number(self, sensor, lat, orbit_dir):
        self.frame_calls.append((sensor, lat, orbit_dir))
        return self.FRAME

    def unit_scale(self, value, expected):
        return unit_scale(value, expected)

    def propagate_state(self, meta, count, interval):
        self.propagations.append((count, interval))

    def read_state_vectors(self, meta, ppdr, center_time):
        vectors = [StateVector(time=60.0 * i,
                               position=XYZ(7.0e6, 0.0, 0.0),
                               velocity=XYZ(0.0, 0.0, 7500.0))
                   for i in range(3)]
        return StateVectorBlock(year=2000, julian_day=1, second=0.0,
                                vectors=vectors)

    def time_delta(self, meta, ppdr, center_time):
        return self.TIME_DELTA


@pytest.fixture
def stub_services():
    return StubGeometry()
