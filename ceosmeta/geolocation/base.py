# -*- coding: utf-8 -*-
"""
Geometry Services Base - Abstract interface for orbit/earth geometry.

The SAR normalizer and the projection initializer delegate every
orbit-dependent quantity (earth radius, satellite height, interpolated
and propagated state vectors, inertial rotation, frame numbers) and the
physical unit-scale detection to a ``GeometryServices`` implementation.
``OrbitGeometry`` in ``ceosmeta.geolocation.orbit`` is the default.

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

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ceosmeta.IO.models.metadata import (
        CeosMetadata,
        StateVector,
        StateVectorBlock,
    )
    from ceosmeta.IO.models.records import PlatformPositionRecord


class GeometryServices(ABC):
    """
    Abstract base class for the geometry services used during a decode.

    Implementations are stateless with respect to a decode: everything
    they need is read from the metadata passed in. Times are seconds
    relative to the start of imaging.

    Notes
    -----
    Services that evaluate the orbit require ``meta.state_vectors`` to
    be populated and raise ``GeolocationError`` otherwise.
    """

    @abstractmethod
    def earth_radius(
        self, meta: 'CeosMetadata', row: float, col: float
    ) -> float:
        """
        Earth radius below the satellite at an image pixel.

        Parameters
        ----------
        meta : CeosMetadata
            Metadata with state vectors and SAR timing
        row, col : float
            Image pixel

        Returns
        -------
        float
            Radius in meters
        """
        pass

    @abstractmethod
    def satellite_height(
        self, meta: 'CeosMetadata', row: float, col: float
    ) -> float:
        """
        Distance from earth center to the satellite at an image pixel.

        Returns
        -------
        float
            Height in meters
        """
        pass

    @abstractmethod
    def state_vector_at(self, meta: 'CeosMetadata', t: float) -> 'StateVector':
        """
        Earth-fixed state vector interpolated at a time.

        Parameters
        ----------
        meta : CeosMetadata
        t : float
            Seconds since the start of imaging

        Returns
        -------
        StateVector
        """
        pass

    @abstractmethod
    def to_inertial(self, state: 'StateVector', gha: float) -> 'StateVector':
        """
        Convert an earth-fixed state vector to the inertial frame.

        Parameters
        ----------
        state : StateVector
            Earth-fixed state
        gha : float
            Greenwich hour angle in degrees

        Returns
        -------
        StateVector
            Inertial state with the same time
        """
        pass

    @abstractmethod
    def frame_number(self, sensor: str, lat: float, orbit_dir: str) -> int:
        """Frame number of a scene from its center latitude."""
        pass

    @abstractmethod
    def unit_scale(self, value: float, expected: float) -> float:
        """Factor that corrects a stored value to its expected units."""
        pass

    @abstractmethod
    def propagate_state(
        self, meta: 'CeosMetadata', count: int, interval: float
    ) -> None:
        """
        Replace the state vectors with evenly spaced propagated ones.

        Parameters
        ----------
        meta : CeosMetadata
            Metadata whose state vector block is rewritten in place
        count : int
            Number of vectors to produce
        interval : float
            Seconds between vectors, starting at the start of imaging
        """
        pass

    @abstractmethod
    def read_state_vectors(
        self,
        meta: 'CeosMetadata',
        ppdr: 'PlatformPositionRecord',
        center_time: datetime,
    ) -> Optional['StateVectorBlock']:
        """
        Build the state vector block from a platform position record.

        Parameters
        ----------
        meta : CeosMetadata
            Metadata with SAR timing populated
        ppdr : PlatformPositionRecord
        center_time : datetime
            Scene center time

        Returns
        -------
        StateVectorBlock or None
            None when the record holds no vectors
        """
        pass

    @abstractmethod
    def time_delta(
        self,
        meta: 'CeosMetadata',
        ppdr: 'PlatformPositionRecord',
        center_time: datetime,
    ) -> float:
        """Seconds from the start of imaging to the first state vector."""
        pass
