# -*- coding: utf-8 -*-
"""
Canonical Metadata - Facility-independent metadata model for SAR/optical.

Nested dataclasses for the blocks every CEOS decode populates: the
general block, the SAR block, the optional location (corner) block,
the optional map projection block, and the time-ordered state vector
sequence. The decoder only fills fields; the caller owns the object.

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
from dataclasses import dataclass, field
from typing import List, Optional, Union

# Third-party
import numpy as np

# ceosmeta internal
from ceosmeta.IO.models.base import MetadataBlock
from ceosmeta.IO.models.common import XYZ
from ceosmeta.vocabulary import (
    DataType,
    ImageDataType,
    ImageType,
    PolarizationMode,
    ProjectionType,
)


# ===================================================================
# General block
# ===================================================================

@dataclass
class GeneralBlock(MetadataBlock):
    """Sensor, product, and image-geometry summary.

    Parameters
    ----------
    sensor : str, optional
        Mission label (``'ERS1'``, ``'RSAT-1'``, ``'ALOS'``, ...).
    sensor_name : str, optional
        Instrument label (``'SAR'``, ``'AVNIR'``, ``'PRISM'``).
    mode : str, optional
        Beam mode (``'STD'``, ``'ST4'``, ``'SWB'``, ...).
    processor : str, optional
        ``'<facility>/<system>/<version>'``.
    data_type : DataType, optional
        Sample data type of the image file.
    image_data_type : ImageDataType, optional
        Radiometric content (optical products only).
    system : str, optional
        Host byte-order tag (``'lil_ieee'`` / ``'big_ieee'``).
    orbit : int, optional
        Orbit number.
    orbit_direction : str, optional
        ``'A'`` or ``'D'``.
    frame : int, optional
        Frame number.
    band_number : int, optional
    line_count, sample_count : int, optional
        Image dimensions.
    start_line, start_sample : int, optional
    x_pixel_size, y_pixel_size : float, optional
        Range and azimuth pixel size (m).
    center_latitude, center_longitude : float, optional
        Scene center (degrees).
    re_major, re_minor : float, optional
        Ellipsoid semi-axes (m).
    bit_error_rate : float, optional
    missing_lines : int, optional
    no_data : float, optional
    """

    sensor: Optional[str] = None
    sensor_name: Optional[str] = None
    mode: Optional[str] = None
    processor: Optional[str] = None
    data_type: Optional[DataType] = None
    image_data_type: Optional[ImageDataType] = None
    system: Optional[str] = None
    orbit: Optional[int] = None
    orbit_direction: Optional[str] = None
    frame: Optional[int] = None
    band_number: Optional[int] = None
    line_count: Optional[int] = None
    sample_count: Optional[int] = None
    start_line: Optional[int] = None
    start_sample: Optional[int] = None
    x_pixel_size: Optional[float] = None
    y_pixel_size: Optional[float] = None
    center_latitude: Optional[float] = None
    center_longitude: Optional[float] = None
    re_major: Optional[float] = None
    re_minor: Optional[float] = None
    bit_error_rate: Optional[float] = None
    missing_lines: Optional[int] = None
    no_data: Optional[float] = None


# ===================================================================
# SAR block
# ===================================================================

@dataclass
class SarBlock(MetadataBlock):
    """SAR acquisition and processing parameters.

    Doppler coefficients are quadratic polynomials stored as arrays of
    shape ``(3,)``; a triple judged to be fill data is all NaN.

    Parameters
    ----------
    polarization : str, optional
        Transmit/receive polarization (``'HH'``, ``'VV'``, ``'HV'``...).
    polarization_mode : PolarizationMode, optional
        Channel configuration (ALOS only).
    image_type : ImageType, optional
        Slant range, ground range, or map projected.
    look_direction : str, optional
        ``'R'`` or ``'L'``.
    look_count : int, optional
    deskewed : bool, optional
    original_line_count, original_sample_count : int, optional
    line_increment, sample_increment : float, optional
    range_time_per_pixel : float, optional
        Seconds.
    azimuth_time_per_pixel : float, optional
        Seconds; negative when the image runs backwards in time.
    slant_shift, time_shift : float, optional
    slant_range_first_pixel : float, optional
        Meters.
    wavelength : float, optional
        Meters.
    prf : float, optional
        Hz.
    earth_radius, satellite_height : float, optional
        Meters, at the scene center.
    satellite_binary_time, satellite_clock_time : str, optional
    range_doppler_coefficients : np.ndarray, optional
        Hz, Hz/pixel, Hz/pixel^2.
    azimuth_doppler_coefficients : np.ndarray, optional
        Hz, Hz/line, Hz/line^2.
    azimuth_processing_bandwidth : float, optional
    chirp_rate : float, optional
    pulse_duration : float, optional
        Seconds.
    range_sampling_rate : float, optional
        Hz.
    """

    polarization: Optional[str] = None
    polarization_mode: Optional[PolarizationMode] = None
    image_type: Optional[ImageType] = None
    look_direction: Optional[str] = None
    look_count: Optional[int] = None
    deskewed: Optional[bool] = None
    original_line_count: Optional[int] = None
    original_sample_count: Optional[int] = None
    line_increment: Optional[float] = None
    sample_increment: Optional[float] = None
    range_time_per_pixel: Optional[float] = None
    azimuth_time_per_pixel: Optional[float] = None
    slant_shift: Optional[float] = None
    time_shift: Optional[float] = None
    slant_range_first_pixel: Optional[float] = None
    wavelength: Optional[float] = None
    prf: Optional[float] = None
    earth_radius: Optional[float] = None
    satellite_height: Optional[float] = None
    satellite_binary_time: Optional[str] = None
    satellite_clock_time: Optional[str] = None
    range_doppler_coefficients: Optional[np.ndarray] = None
    azimuth_doppler_coefficients: Optional[np.ndarray] = None
    azimuth_processing_bandwidth: Optional[float] = None
    chirp_rate: Optional[float] = None
    pulse_duration: Optional[float] = None
    range_sampling_rate: Optional[float] = None


# ===================================================================
# Location block
# ===================================================================

@dataclass
class LocationBlock(MetadataBlock):
    """Geographic corners of the image (degrees)."""

    lat_start_near_range: Optional[float] = None
    lon_start_near_range: Optional[float] = None
    lat_start_far_range: Optional[float] = None
    lon_start_far_range: Optional[float] = None
    lat_end_near_range: Optional[float] = None
    lon_end_near_range: Optional[float] = None
    lat_end_far_range: Optional[float] = None
    lon_end_far_range: Optional[float] = None


# ===================================================================
# Projection block
# ===================================================================

@dataclass
class AtctParams(MetadataBlock):
    """Along-track/cross-track projection parameters.

    Parameters
    ----------
    rlocal : float, optional
        Local earth radius (m).
    alpha1, alpha2, alpha3 : float, optional
        Rotation angles (degrees) defining a latitude/longitude-style
        system centered under the satellite at the start of imaging.
    """

    rlocal: Optional[float] = None
    alpha1: Optional[float] = None
    alpha2: Optional[float] = None
    alpha3: Optional[float] = None


@dataclass
class LambertParams(MetadataBlock):
    """Lambert conformal conic parameters (degrees)."""

    plat1: Optional[float] = None
    plat2: Optional[float] = None
    lat0: Optional[float] = None
    lon0: Optional[float] = None


@dataclass
class PolarStereoParams(MetadataBlock):
    """Polar stereographic parameters.

    Parameters
    ----------
    slat, slon : float, optional
        Reference latitude and longitude (degrees).
    fixed_pole : bool
        True when the pole is the fixed pre-RADARSAT UPS pole rather
        than one read from the record.
    """

    slat: Optional[float] = None
    slon: Optional[float] = None
    fixed_pole: bool = False


@dataclass
class UtmParams(MetadataBlock):
    """Universal transverse Mercator parameters."""

    zone: Optional[int] = None
    false_easting: Optional[float] = None
    false_northing: Optional[float] = None
    lat0: Optional[float] = None
    lon0: Optional[float] = None
    scale_factor: Optional[float] = None


ProjectionParams = Union[AtctParams, LambertParams, PolarStereoParams,
                         UtmParams]


@dataclass
class ProjectionBlock(MetadataBlock):
    """Map projection of a projected image.

    Parameters
    ----------
    type : ProjectionType, optional
    param : ProjectionParams, optional
        Type-specific parameters; None for the unset slant/ground types.
    start_x, start_y : float, optional
        Projection coordinates of the upper-left pixel.
    per_x, per_y : float, optional
        Pixel spacing in projection coordinates.
    units : str, optional
    hem : str, optional
        ``'N'`` or ``'S'``.
    re_major, re_minor : float, optional
        Ellipsoid semi-axes (m).
    height : float, optional
        Average scene height (m).
    """

    type: Optional[ProjectionType] = None
    param: Optional[ProjectionParams] = None
    start_x: Optional[float] = None
    start_y: Optional[float] = None
    per_x: Optional[float] = None
    per_y: Optional[float] = None
    units: Optional[str] = None
    hem: Optional[str] = None
    re_major: Optional[float] = None
    re_minor: Optional[float] = None
    height: Optional[float] = None


# ===================================================================
# State vectors
# ===================================================================

@dataclass
class StateVector(MetadataBlock):
    """Satellite position and velocity at one time.

    Parameters
    ----------
    time : float
        Seconds relative to the start of imaging.
    position : XYZ
        Earth-fixed position (m).
    velocity : XYZ
        Earth-fixed velocity (m/s).
    """

    time: float = 0.0
    position: XYZ = field(default_factory=XYZ)
    velocity: XYZ = field(default_factory=XYZ)


@dataclass
class StateVectorBlock(MetadataBlock):
    """Time-ordered state vectors plus their reference epoch.

    Parameters
    ----------
    year : int, optional
    julian_day : int, optional
        Day of year of the reference epoch.
    second : float, optional
        Seconds of day of the reference epoch.
    vectors : List[StateVector]
    """

    year: Optional[int] = None
    julian_day: Optional[int] = None
    second: Optional[float] = None
    vectors: List[StateVector] = field(default_factory=list)

    @property
    def vector_count(self) -> int:
        return len(self.vectors)


# ===================================================================
# Top-level metadata
# ===================================================================

@dataclass
class CeosMetadata(MetadataBlock):
    """Canonical metadata produced by a CEOS decode.

    Parameters
    ----------
    general : GeneralBlock
    sar : SarBlock, optional
    location : LocationBlock, optional
    projection : ProjectionBlock, optional
        Present for projected images and the ScanSAR fallback.
    state_vectors : StateVectorBlock, optional

    Examples
    --------
    >>> from ceosmeta import ceos_init
    >>> meta = ceos_init(reader)
    >>> meta.general.sensor
    'ERS1'
    >>> meta.sar.image_type
    <ImageType.GROUND: 'G'>
    """

    general: GeneralBlock = field(default_factory=GeneralBlock)
    sar: Optional[SarBlock] = None
    location: Optional[LocationBlock] = None
    projection: Optional[ProjectionBlock] = None
    state_vectors: Optional[StateVectorBlock] = None

    @classmethod
    def shell(cls) -> 'CeosMetadata':
        """Empty metadata with general and SAR blocks allocated."""
        return cls(general=GeneralBlock(), sar=SarBlock())

    @property
    def has_orbit(self) -> bool:
        """True when at least one state vector is held."""
        block = self.state_vectors
        return block is not None and bool(block.vectors)
