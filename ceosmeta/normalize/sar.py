# -*- coding: utf-8 -*-
"""
SAR Metadata Normalizer - Canonical metadata from SAR leader records.

Maps the dataset summary, image file descriptor, map projection,
platform position, processing parameter and facility records of a SAR
product onto the general, SAR, location, projection and state vector
blocks of ``CeosMetadata``.

Each field family is derived by a small function that takes only the
records it needs; ``ceos_init_sar`` composes them in the order the
derivations depend on each other and owns the record bundle for the
duration of the decode.

Many rules below look arbitrary. They reproduce how each processing
facility has filled its records over the years and are kept as found.

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
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

# Third-party
import numpy as np

# ceosmeta internal
from ceosmeta.classify import CeosDescriptor
from ceosmeta.config import DecoderConfig
from ceosmeta.exceptions import MissingRecordError
from ceosmeta.geolocation.base import GeometryServices
from ceosmeta.geolocation.utils import SPEED_OF_LIGHT
from ceosmeta.IO.base import CeosRecordReader
from ceosmeta.IO.line_header import read_first_time, read_polarization
from ceosmeta.IO.models.metadata import CeosMetadata, LocationBlock, SarBlock
from ceosmeta.IO.models.records import (
    AsfFacilityRecord,
    DatasetSummaryRecord,
    EsaFacilityRecord,
    ImageFileDescriptor,
    MapProjectionRecord,
    ProcessingParameterRecord,
    first_token,
    leading_int,
)
from ceosmeta.normalize.projection import init_projection
from ceosmeta.normalize.records import RecordBundle, acquire_records
from ceosmeta.timeutils import date_dssr2date, date_dssr2time
from ceosmeta.vocabulary import (
    DataType,
    Facility,
    ImageType,
    PolarizationMode,
    Processor,
    Product,
    Satellite,
)

logger = logging.getLogger(__name__)

# Byte-size class -> data type; anything else is BYTE
_DATA_TYPES = {
    2: DataType.INTEGER16,
    4: DataType.INTEGER32,
    6: DataType.COMPLEX_BYTE,
    7: DataType.COMPLEX_INTEGER16,
    9: DataType.COMPLEX_REAL32,
}

# RADARSAT-1 ScanSAR beam from the third beam identifier
_SCANSAR_BEAMS = (
    ('WD3', 'SWA'),
    ('ST5', 'SWB'),
    ('ST6', 'SNA'),
)
_SCANSAR_DEFAULT_BEAM = 'SNB'
_RSI_SCANSAR_BEAM = 'SWB'

_RSAT_BEAM_PREFIXES = {'S': 'ST', 'W': 'WD', 'F': 'FN'}

# Frame numbers of descending passes
_DESCENDING_FRAMES = (1791, 5391)

# Image type from the product when no other evidence exists
_PRODUCT_IMAGE_TYPES = {
    Product.CCSD: ImageType.SLANT,
    Product.SLC: ImageType.SLANT,
    Product.RAW: ImageType.SLANT,
    Product.LOW_REZ: ImageType.GROUND,
    Product.HI_REZ: ImageType.GROUND,
    Product.SGF: ImageType.GROUND,
}

# Processors whose images run backwards in time
_FLIPPED_PROCESSORS = (Processor.ASP, Processor.SPS, Processor.PREC)


# ===================================================================
# Identification
# ===================================================================

@dataclass(frozen=True)
class MissionInfo:
    """Sensor label, beam mode, polarization, and forced image type."""

    sensor: str
    mode: str
    polarization: Optional[str] = None
    image_type: Optional[ImageType] = None


def rsat_beam_name(
    dssr: DatasetSummaryRecord,
    facility: Facility,
    ppr: Optional[ProcessingParameterRecord],
) -> Tuple[str, Optional[ImageType]]:
    """
    RADARSAT-1 beam mode name.

    Parameters
    ----------
    dssr : DatasetSummaryRecord
    facility : Facility
    ppr : ProcessingParameterRecord, optional
        Its beam type overrides everything for CDPF and FOCUS data.

    Returns
    -------
    Tuple[str, ImageType or None]
        Beam name, and ``ImageType.PROJECTED`` for RSI ScanSAR products
        (which carry no beam identifier) or None.
    """
    image_type = None
    if dssr.product_type.strip().startswith('SCANSAR'):
        if facility is Facility.RSI:
            beam = _RSI_SCANSAR_BEAM
            image_type = ImageType.PROJECTED
        else:
            beam = _SCANSAR_DEFAULT_BEAM
            beam3 = dssr.beam3.strip()
            for code, name in _SCANSAR_BEAMS:
                if beam3.startswith(code):
                    beam = name
                    break
    else:
        beam1 = dssr.beam1.strip()
        number = leading_int(beam1[2:])
        code = beam1[:1]
        if code in _RSAT_BEAM_PREFIXES:
            beam = f"{_RSAT_BEAM_PREFIXES[code]}{number}"
        elif code == 'E':
            beam = f"{'EH' if beam1[1:2] == 'H' else 'EL'}{number}"
        else:
            beam = ''

    fac_id = dssr.fac_id.strip()
    if ppr is not None and (fac_id.startswith('CDPF')
                            or fac_id.startswith('FOCUS')):
        beam = ppr.beam_type.strip()
    return beam, image_type


def identify_mission(
    dssr: DatasetSummaryRecord,
    facility: Facility,
    ppr: Optional[ProcessingParameterRecord] = None,
) -> MissionInfo:
    """
    Sensor label, mode and polarization from the mission and sensor ids.

    ALOS polarization is not in the leader; it is returned as None and
    read from the data file line headers by the caller.
    """
    sensor_id = dssr.sensor_id.strip()
    mission_id = dssr.mission_id.strip()

    if sensor_id.startswith('ERS-1') or mission_id.startswith('ERS1'):
        return MissionInfo('ERS1', 'STD', 'VV')
    if sensor_id.startswith('ERS-2') or mission_id.startswith('ERS2'):
        return MissionInfo('ERS2', 'STD', 'VV')
    if sensor_id.startswith('JERS-1'):
        return MissionInfo('JERS1', 'STD', 'HH')
    if sensor_id.startswith('ALOS'):
        return MissionInfo('ALOS', '???')
    if sensor_id.startswith('RSAT-1'):
        beam, image_type = rsat_beam_name(dssr, facility, ppr)
        return MissionInfo('RSAT-1', beam, 'HH', image_type)
    return MissionInfo(first_token(dssr.mission_id), dssr.beam1.strip())


def processor_label(dssr: DatasetSummaryRecord) -> str:
    """``'<facility>/<system>/<version>'`` from the summary record."""
    return '/'.join(first_token(f)
                    for f in (dssr.fac_id, dssr.sys_id, dssr.ver_id))


# ===================================================================
# Image layout
# ===================================================================

def data_type(iof: ImageFileDescriptor) -> DataType:
    """
    Sample data type of the image file.

    The byte-size class combines bytes per sample with five per extra
    sample in a group, so complex types land on 6, 7 and 9.

    Parameters
    ----------
    iof : ImageFileDescriptor

    Returns
    -------
    DataType
    """
    bits = iof.bitssamp
    # FOCUS writes bits per group instead of bits per sample
    if bits * iof.sampdata > iof.bytgroup * 8:
        bits //= 2
    size = (bits + 7) // 8 + (iof.sampdata - 1) * 5
    if size < 6 and iof.formatid.strip().startswith('COMPLEX'):
        size += (10 - size) // 2
    return _DATA_TYPES.get(size, DataType.BYTE)


def image_dimensions(
    iof: ImageFileDescriptor, dssr: DatasetSummaryRecord,
) -> Tuple[int, int]:
    """
    Line and sample count of the image.

    Samples per line exclude the record prefix/suffix and the left and
    right border pixels. When either count comes out zero, both fall
    back to twice the scene center line and pixel.
    """
    lines = iof.numofrec
    samples = ((iof.reclen - iof.predata - iof.sufdata) // iof.bytgroup
               - iof.lbrdrpxl - iof.rbrdrpxl)
    if lines == 0 or samples == 0:
        return dssr.sc_lin * 2, dssr.sc_pix * 2
    return lines, samples


def original_dimensions(
    iof: ImageFileDescriptor,
    dssr: DatasetSummaryRecord,
    desc: CeosDescriptor,
) -> Tuple[int, int]:
    """Original line and sample count, before any later resampling."""
    lines = iof.numofrec
    samples = ((iof.reclen - iof.predata - iof.sufdata
                - iof.lbrdrpxl - iof.rbrdrpxl) // iof.bytgroup)
    if lines == 0 or samples == 0:
        lines, samples = dssr.sc_lin * 2, dssr.sc_pix * 2
    if desc.processor is Processor.FOCUS and desc.product is Product.PRI:
        samples = iof.datgroup
    return lines, samples


def frame_from_product_id(sensor: str, product_id: str) -> Optional[int]:
    """Frame number embedded in RADARSAT-1 and ALOS product ids."""
    if sensor == 'RSAT-1':
        chunk = product_id[7:10]
    elif sensor == 'ALOS':
        chunk = product_id[11:15]
    else:
        return None
    frame = leading_int(chunk, default=-1)
    return frame if frame >= 0 else None


def orbit_direction(asc_des: str, frame: Optional[int]) -> str:
    """First character of the pass flag, else inferred from the frame."""
    direction = asc_des[:1]
    if direction in ('', ' '):
        lo, hi = _DESCENDING_FRAMES
        direction = 'D' if frame is not None and lo <= frame <= hi else 'A'
    return direction


def image_type(
    current: Optional[ImageType],
    desc: CeosDescriptor,
    mpdr: Optional[MapProjectionRecord],
    asf_facdr: Optional[AsfFacilityRecord],
) -> Optional[ImageType]:
    """
    Image geometry by priority: projection record or ScanSAR narrow,
    then the ASF ground/slant flag, then the product type.

    Returns ``current`` when no rule applies.
    """
    if mpdr is not None or desc.product is Product.SCN:
        return ImageType.PROJECTED
    if asf_facdr is not None:
        if asf_facdr.grndslnt.strip().startswith('GROUND'):
            return ImageType.GROUND
        return ImageType.SLANT
    return _PRODUCT_IMAGE_TYPES.get(desc.product, current)


# ===================================================================
# Doppler
# ===================================================================

def sanitize_doppler(coefs: np.ndarray, threshold: float) -> np.ndarray:
    """
    Replace a Doppler triple by NaN when its constant term is fill data.

    Parameters
    ----------
    coefs : np.ndarray
        Quadratic coefficients, shape ``(3,)``.
    threshold : float
        Constant terms with magnitude at or above this are not physical.

    Returns
    -------
    np.ndarray
        ``coefs`` unchanged, or three NaNs.
    """
    coefs = np.asarray(coefs, dtype=np.float64)
    if abs(coefs[0]) >= threshold:
        logger.info("Doppler constant %g out of range, coefficients unset",
                    coefs[0])
        return np.full(3, np.nan)
    return coefs


def doppler_coefficients(
    dssr: DatasetSummaryRecord,
    facility: Facility,
    threshold: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Range and azimuth Doppler centroid polynomials.

    CDPF stores the range centroid in the Doppler rate fields. ESA (and
    the D-PAF/I-PAF facilities) give it per two-way range time, which is
    converted to per-meter terms.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        Range then azimuth coefficients, shape ``(3,)`` each.
    """
    if facility is Facility.CDPF:
        rng = np.array(dssr.crt_rate, dtype=np.float64)
    elif facility is Facility.ESA:
        c = SPEED_OF_LIGHT
        rng = np.array([dssr.crt_dopcen[0],
                        dssr.crt_dopcen[1] / (c * 2),
                        dssr.crt_dopcen[2] / (c * c * 4)])
    else:
        rng = np.array(dssr.crt_dopcen, dtype=np.float64)
    azi = np.array(dssr.alt_dopcen, dtype=np.float64)
    return sanitize_doppler(rng, threshold), sanitize_doppler(azi, threshold)


# ===================================================================
# Radiometry and timing
# ===================================================================

def look_count(
    satellite: Satellite,
    range_sampling_rate: float,
    mpdr: Optional[MapProjectionRecord],
    n_rnglok: float,
    current: Optional[int],
) -> Optional[int]:
    """
    Number of looks of the product.

    Parameters
    ----------
    satellite : Satellite
    range_sampling_rate : float
        Unit-corrected range sampling rate (MHz).
    mpdr : MapProjectionRecord, optional
    n_rnglok : float
        Range looks from the summary record.
    current : int, optional
        Value already assigned, kept where no rule applies.
    """
    if satellite is Satellite.ERS:
        return 5
    if satellite is Satellite.JERS:
        return 3
    if satellite is Satellite.RSAT:
        # fine beams sample faster than 20 MHz
        return 4 if range_sampling_rate < 20.0 else 1
    if satellite is Satellite.ALOS:
        if mpdr is not None:
            return int(n_rnglok + 0.5)
        return current
    logger.warning("Unknown satellite, look count left unset")
    return current


def deskewed(
    asf_facdr: Optional[AsfFacilityRecord],
    esa_facdr: Optional[EsaFacilityRecord],
) -> bool:
    if asf_facdr is not None:
        return asf_facdr.deskewf.strip()[:1].upper() == 'Y'
    return esa_facdr is not None


def bit_error_rate(
    asf_facdr: Optional[AsfFacilityRecord],
    esa_facdr: Optional[EsaFacilityRecord],
) -> float:
    if asf_facdr is not None:
        return asf_facdr.biterrrt
    if esa_facdr is not None:
        return esa_facdr.ber
    return 0.0


def slant_range_first_pixel(
    dssr: DatasetSummaryRecord,
    asf_facdr: Optional[AsfFacilityRecord],
    esa_facdr: Optional[EsaFacilityRecord],
    range_gate: float,
) -> float:
    """
    Slant range to the first pixel in meters.

    Parameters
    ----------
    range_gate : float
        Unit-corrected range gate delay (s).
    """
    if asf_facdr is not None:
        return asf_facdr.sltrngfp * 1000.0
    if esa_facdr is not None:
        return dssr.rng_time[0] * SPEED_OF_LIGHT / 2000.0
    return range_gate * SPEED_OF_LIGHT / 2.0


def _divide(num: float, den: float) -> float:
    """Quotient; a zero divisor gives a signed infinity, or NaN for 0/0."""
    if den != 0:
        return num / den
    logger.warning("Division of %g by zero in azimuth timing", num)
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num)


def azimuth_time_per_pixel(
    reader: CeosRecordReader,
    desc: CeosDescriptor,
    dssr: DatasetSummaryRecord,
    asf_facdr: Optional[AsfFacilityRecord],
    y_pixel_size: float,
    original_lines: int,
) -> float:
    """
    Seconds between image lines.

    ASF data divide the line spacing by the swath velocity. Everything
    else spreads the time from the first to the center line over half
    the original lines. The first line time comes from the data file
    line header, except for ESA and FOCUS data, which record it in the
    summary record.

    A zero swath velocity or a single-line image gives an infinite or
    NaN time rather than an error.

    Raises
    ------
    MissingRecordError
        If the line header is needed and the reader has no data file.
    """
    if asf_facdr is not None:
        return _divide(y_pixel_size, asf_facdr.swathvel)

    if desc.facility is Facility.ESA or desc.processor is Processor.FOCUS:
        first = date_dssr2time(dssr.az_time_first)
    else:
        if reader.data_path is None:
            raise MissingRecordError(
                "First line time needs the data file line header, "
                "but no data file was given"
            )
        first = read_first_time(reader.data_path)
    center = date_dssr2time(dssr.inp_sctim)
    logger.debug("firstTime: %f centerTime: %f", first, center)
    return _divide(center - first, original_lines // 2)


# ===================================================================
# Orchestration
# ===================================================================

def _host_system() -> str:
    return 'lil_ieee' if sys.byteorder == 'little' else 'big_ieee'


def _scale(
    services: GeometryServices, value: float, expected: float,
) -> float:
    return value * services.unit_scale(value, expected)


def _fill_general(
    meta: CeosMetadata,
    reader: CeosRecordReader,
    desc: CeosDescriptor,
    records: RecordBundle,
    services: GeometryServices,
    config: DecoderConfig,
) -> None:
    dssr, iof = records.dssr, records.iof
    general, sar = meta.general, meta.sar

    mission = identify_mission(dssr, desc.facility, records.ppr)
    general.sensor = mission.sensor
    general.sensor_name = 'SAR'
    general.mode = mission.mode
    sar.polarization = mission.polarization
    if mission.image_type is not None:
        sar.image_type = mission.image_type
    if mission.sensor == 'ALOS':
        if reader.data_path is None:
            raise MissingRecordError(
                "ALOS polarization needs the data file line header, "
                "but no data file was given"
            )
        info = read_polarization(reader.data_path)
        sar.polarization = info.polarization
        sar.polarization_mode = info.polarization_mode
        sar.chirp_rate = info.chirp_rate

    general.processor = processor_label(dssr)
    general.data_type = data_type(iof)
    general.system = _host_system()
    general.orbit = leading_int(dssr.revolution)

    frame = frame_from_product_id(general.sensor, dssr.product_id)
    if frame is not None:
        general.frame = frame
    if desc.facility is Facility.RSI:
        # RSI records carry no frame; uses the direction known so far
        general.frame = services.frame_number(
            'ERS', dssr.pro_lat, general.orbit_direction or '')

    general.band_number = 0
    general.orbit_direction = orbit_direction(dssr.asc_des, general.frame)
    general.line_count, general.sample_count = image_dimensions(iof, dssr)

    sar.wavelength = _scale(services, dssr.wave_length,
                            config.expected_wavelength)
    sar.prf = _scale(services, dssr.prf, config.expected_prf)
    sar.azimuth_processing_bandwidth = dssr.bnd_azi
    if general.sensor != 'ALOS':
        sar.chirp_rate = dssr.phas_coef[2]
    sar.pulse_duration = dssr.rng_length / 1e7
    sar.range_sampling_rate = dssr.rng_samp_rate * 1e6

    general.start_line = 0
    general.start_sample = 0
    general.x_pixel_size = dssr.pixel_spacing
    general.y_pixel_size = dssr.line_spacing
    # ALOS L1.1 carries no pixel spacing
    if (general.sensor == 'ALOS'
            and general.data_type is DataType.COMPLEX_REAL32):
        general.x_pixel_size = SPEED_OF_LIGHT / (2.0 * sar.range_sampling_rate)
        general.y_pixel_size = config.alos_complex_azimuth_pixel_size
        single = sar.polarization_mode is PolarizationMode.SINGLE
        sar.look_count = 4 if single else 2

    general.center_latitude = dssr.pro_lat
    general.center_longitude = dssr.pro_long
    if meta.projection is not None:
        meta.projection.height = 0.0

    if general.frame is None:
        general.frame = services.frame_number(
            general.sensor, general.center_latitude, general.orbit_direction)

    general.re_major = (dssr.ellip_maj * 1000.0 if dssr.ellip_maj < 10000.0
                        else dssr.ellip_maj)
    general.re_minor = (dssr.ellip_min * 1000.0 if dssr.ellip_min < 10000.0
                        else dssr.ellip_min)
    general.bit_error_rate = bit_error_rate(records.asf_facdr,
                                            records.esa_facdr)
    general.no_data = config.no_data


def _fill_sar(
    meta: CeosMetadata,
    reader: CeosRecordReader,
    desc: CeosDescriptor,
    records: RecordBundle,
    services: GeometryServices,
    config: DecoderConfig,
) -> None:
    dssr, iof = records.dssr, records.iof
    asf_facdr, esa_facdr = records.asf_facdr, records.esa_facdr
    general, sar = meta.general, meta.sar

    sar.image_type = image_type(sar.image_type, desc, records.mpdr, asf_facdr)
    sar.look_direction = 'R' if dssr.clock_ang >= 0.0 else 'L'

    rsr = dssr.rng_samp_rate
    gate = dssr.rng_gate
    if desc.satellite in (Satellite.ERS, Satellite.RSAT):
        rsr = _scale(services, rsr, config.expected_range_sampling_rate)
    if desc.satellite is Satellite.RSAT:
        gate = _scale(services, gate, config.expected_range_gate)
    sar.look_count = look_count(desc.satellite, rsr, records.mpdr,
                                dssr.n_rnglok, sar.look_count)

    sar.deskewed = deskewed(asf_facdr, esa_facdr)
    sar.original_line_count, sar.original_sample_count = (
        original_dimensions(iof, dssr, desc))
    sar.line_increment = 1.0
    sar.sample_increment = 1.0
    sar.range_time_per_pixel = dssr.n_rnglok / _scale(
        services, rsr, config.expected_sampling_frequency)

    sar.azimuth_time_per_pixel = azimuth_time_per_pixel(
        reader, desc, dssr, asf_facdr, general.y_pixel_size,
        sar.original_line_count)

    sar.slant_shift = 0.0
    if general.orbit_direction == 'D':
        sar.time_shift = 0.0
    elif general.orbit_direction == 'A':
        sar.time_shift = abs(sar.original_line_count
                             * sar.azimuth_time_per_pixel)
    if asf_facdr is not None and desc.processor in _FLIPPED_PROCESSORS:
        # flip top-to-bottom
        sar.time_shift = sar.azimuth_time_per_pixel * asf_facdr.alines
        sar.azimuth_time_per_pixel *= -1.0

    sar.slant_range_first_pixel = slant_range_first_pixel(
        dssr, asf_facdr, esa_facdr,
        _scale(services, gate, config.expected_range_gate))

    sar.range_doppler_coefficients, sar.azimuth_doppler_coefficients = (
        doppler_coefficients(dssr, desc.facility, config.doppler_threshold))

    sar.satellite_binary_time = first_token(dssr.sat_bintim)
    sar.satellite_clock_time = first_token(dssr.sat_clktim)


def _needs_propagation(desc: CeosDescriptor) -> bool:
    if desc.facility is Facility.ASF:
        return desc.processor is not Processor.PREC
    return True


def _fill_orbit(
    meta: CeosMetadata,
    desc: CeosDescriptor,
    records: RecordBundle,
    services: GeometryServices,
    config: DecoderConfig,
) -> None:
    dssr, ppdr, asf_facdr = records.dssr, records.ppdr, records.asf_facdr
    general, sar = meta.general, meta.sar

    center_time = None
    if ppdr is not None:
        center_time = date_dssr2date(dssr.inp_sctim)
        meta.state_vectors = services.read_state_vectors(meta, ppdr,
                                                         center_time)

    if sar.image_type is ImageType.PROJECTED:
        init_projection(meta, dssr, records.mpdr, services)

    if asf_facdr is not None:
        sar.earth_radius = asf_facdr.eradcntr * 1000.0
        sar.satellite_height = sar.earth_radius + asf_facdr.scalt * 1000
    elif meta.has_orbit:
        row = general.line_count // 2
        col = general.sample_count // 2
        sar.earth_radius = services.earth_radius(meta, row, col)
        sar.satellite_height = services.satellite_height(meta, row, col)
    else:
        logger.warning("No state vectors, earth radius and satellite "
                       "height left unset")

    if not _needs_propagation(desc):
        return
    if not meta.has_orbit:
        logger.warning("No state vectors, skipping propagation")
        return

    count = config.initial_vector_count
    interval = (sar.original_line_count // 2) * abs(sar.azimuth_time_per_pixel)
    meta.state_vectors.vectors[0].time = services.time_delta(meta, ppdr,
                                                             center_time)
    if (desc.processor is not Processor.PREC
            and interval < config.max_half_duration):
        while abs(interval) > config.max_propagation_interval:
            interval /= 2
            count = count * 2 - 1
        services.propagate_state(meta, count, interval)


def _fill_location(meta: CeosMetadata, asf_facdr: AsfFacilityRecord) -> None:
    meta.location = LocationBlock(
        lat_start_near_range=asf_facdr.nearslat,
        lon_start_near_range=asf_facdr.nearslon,
        lat_start_far_range=asf_facdr.farslat,
        lon_start_far_range=asf_facdr.farslon,
        lat_end_near_range=asf_facdr.nearelat,
        lon_end_near_range=asf_facdr.nearelon,
        lat_end_far_range=asf_facdr.farelat,
        lon_end_far_range=asf_facdr.farelon,
    )


def ceos_init_sar(
    reader: CeosRecordReader,
    desc: CeosDescriptor,
    meta: CeosMetadata,
    services: GeometryServices,
    config: DecoderConfig,
) -> CeosMetadata:
    """
    Populate metadata from the records of a SAR product.

    Parameters
    ----------
    reader : CeosRecordReader
        Reader for the leader/data pair.
    desc : CeosDescriptor
        Classification of the product; must hold the summary record.
    meta : CeosMetadata
        Caller-owned metadata, filled in place. A missing SAR block is
        allocated.
    services : GeometryServices
    config : DecoderConfig

    Returns
    -------
    CeosMetadata
        ``meta``.

    Raises
    ------
    MissingRecordError
        If the summary or image file descriptor record is absent, or a
        line header is needed and there is no data file.
    ProjectionError
        If the map projection designator is not recognized.
    """
    if meta.sar is None:
        meta.sar = SarBlock()

    with acquire_records(reader, desc) as records:
        _fill_general(meta, reader, desc, records, services, config)
        _fill_sar(meta, reader, desc, records, services, config)
        _fill_orbit(meta, desc, records, services, config)
        if records.asf_facdr is not None:
            _fill_location(meta, records.asf_facdr)

    logger.info("Decoded %s %s scene, orbit %s frame %s",
                meta.general.sensor, meta.general.mode,
                meta.general.orbit, meta.general.frame)
    return meta
