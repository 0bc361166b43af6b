# -*- coding: utf-8 -*-
"""
CEOS Record Views - Read-only views of fixed-layout CEOS records.

One frozen dataclass per record type consumed by the decoder. Field
names follow the CEOS leader/data file mnemonics so that a record
reader can fill them directly from its field tables. Character fields
keep their fixed-width padding; the decoder trims them where needed.

Only the fields used by the normalizers are modeled.

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
import re
from dataclasses import dataclass
from typing import Tuple

# Third-party
import numpy as np


@dataclass(frozen=True)
class DatasetSummaryRecord:
    """Dataset summary record (DSSR), leader file.

    Parameters
    ----------
    product_id : str
        Scene/product identifier. RADARSAT-1 and ALOS embed the frame
        number in it.
    inp_sctim : str
        Input scene center time, ``YYYYMMDDhhmmssttt``.
    asc_des : str
        Ascending/descending flag; the first character is used.
    pro_lat, pro_long : float
        Processed scene center latitude/longitude (degrees).
    ellip_maj, ellip_min : float
        Ellipsoid semi-major/semi-minor axes (km or m).
    sc_lin, sc_pix : int
        Scene center line and pixel (half-scene counts).
    mission_id : str
        Mission identifier (``'ERS1'``, ``'RSAT-1'``, ...).
    sensor_id : str
        Sensor identifier (``'ERS-1 ...'``, ``'ALOS-SAR ...'``, ...).
    revolution : str
        Orbit number as text.
    clock_ang : float
        Sensor clock angle; negative for left-looking.
    wave_length : float
        Radar wavelength, in historically inconsistent units.
    phas_coef : tuple of float
        Range chirp phase coefficients; index 2 is the linear chirp rate.
    rng_samp_rate : float
        Range sampling rate (nominally MHz).
    rng_gate : float
        Range gate delay.
    rng_length : float
        Range pulse length (units of 1e-7 s).
    prf : float
        Pulse repetition frequency.
    sat_bintim, sat_clktim : str
        Satellite binary time and satellite clock time.
    fac_id, sys_id, ver_id : str
        Processing facility, system, and version identifiers.
    lev_code : str
        Product level code.
    product_type : str
        Product type descriptor.
    n_azilok, n_rnglok : float
        Number of azimuth and range looks.
    bnd_azi : float
        Azimuth processing bandwidth.
    alt_dopcen, crt_dopcen : tuple of float
        Along-track and cross-track Doppler centroid coefficients.
    crt_rate : tuple of float
        Cross-track Doppler rate coefficients (CDPF stores the centroid
        here).
    line_spacing, pixel_spacing : float
        Line and pixel spacing (m).
    beam1, beam2, beam3, beam4 : str
        Beam identifiers.
    az_time_first, az_time_center : str
        Zero-Doppler azimuth time of the first and center lines.
    rng_time : tuple of float
        Zero-Doppler range times (ms) of first, center and last pixel.
    """

    product_id: str = ''
    inp_sctim: str = ''
    asc_des: str = ''
    pro_lat: float = 0.0
    pro_long: float = 0.0
    ellip_maj: float = 0.0
    ellip_min: float = 0.0
    sc_lin: int = 0
    sc_pix: int = 0
    mission_id: str = ''
    sensor_id: str = ''
    revolution: str = ''
    clock_ang: float = 0.0
    wave_length: float = 0.0
    phas_coef: Tuple[float, ...] = (0.0, 0.0, 0.0, 0.0, 0.0)
    rng_samp_rate: float = 0.0
    rng_gate: float = 0.0
    rng_length: float = 0.0
    prf: float = 0.0
    sat_bintim: str = ''
    sat_clktim: str = ''
    fac_id: str = ''
    sys_id: str = ''
    ver_id: str = ''
    lev_code: str = ''
    product_type: str = ''
    n_azilok: float = 0.0
    n_rnglok: float = 0.0
    bnd_azi: float = 0.0
    alt_dopcen: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    crt_dopcen: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    crt_rate: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    line_spacing: float = 0.0
    pixel_spacing: float = 0.0
    beam1: str = ''
    beam2: str = ''
    beam3: str = ''
    beam4: str = ''
    az_time_first: str = ''
    az_time_center: str = ''
    rng_time: Tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class ImageFileDescriptor:
    """Image file descriptor record (IOF), first record of the data file.

    Parameters
    ----------
    numofrec : int
        Number of image records (lines).
    reclen : int
        Image record length in bytes.
    predata, sufdata : int
        Prefix and suffix bytes per record.
    bytgroup : int
        Bytes per data group (pixel).
    lbrdrpxl, rbrdrpxl : int
        Left and right border pixels per line.
    bitssamp : int
        Bits per sample.
    sampdata : int
        Samples per data group.
    datgroup : int
        Data groups per line.
    formatid : str
        SAR data format type identifier (e.g. ``'COMPLEX INTEGER*2'``).
    """

    numofrec: int = 0
    reclen: int = 0
    predata: int = 0
    sufdata: int = 0
    bytgroup: int = 1
    lbrdrpxl: int = 0
    rbrdrpxl: int = 0
    bitssamp: int = 8
    sampdata: int = 1
    datgroup: int = 0
    formatid: str = ''


@dataclass(frozen=True)
class MapProjectionRecord:
    """Map projection data record (MPDR), leader file.

    Corner coordinates (``tlc*``, ``trc*``, ``blc*``) are map
    coordinates in kilometers for map projections; for along-track /
    cross-track products they are used as stored.
    """

    mpdesc: str = ''
    mpdesig: str = ''
    npixels: int = 0
    nlines: int = 0
    utmzone: str = ''
    utmeast: float = 0.0
    utmnorth: float = 0.0
    utmlat: float = 0.0
    utmlong: float = 0.0
    utmscale: float = 0.0
    upslat: float = 0.0
    upslong: float = 0.0
    nsppara1: float = 0.0
    nsppara2: float = 0.0
    tlcnorth: float = 0.0
    tlceast: float = 0.0
    trcnorth: float = 0.0
    trceast: float = 0.0
    blcnorth: float = 0.0
    blceast: float = 0.0
    blclat: float = 0.0
    blclong: float = 0.0


@dataclass(frozen=True)
class FileDescriptorRecord:
    """Leader file descriptor record (FDR).

    Parameters
    ----------
    l_facdr : int
        Length of the facility-related data record. 1717 identifies an
        ASF facility record, 12288 an ESA one.
    """

    l_facdr: int = 0


@dataclass(frozen=True)
class PlatformPositionRecord:
    """Platform position data record (PPDR), leader file.

    Parameters
    ----------
    ndata : int
        Number of state vectors.
    year, month, day : int
        Date of the first state vector.
    gmt_sec : float
        Seconds of day of the first state vector.
    data_int : float
        Interval between state vectors (seconds).
    pos_vec : tuple of tuple of float
        One ``(x, y, z, vx, vy, vz)`` tuple per state vector, earth-fixed,
        meters and m/s.
    """

    ndata: int = 0
    year: int = 1970
    month: int = 1
    day: int = 1
    gmt_sec: float = 0.0
    data_int: float = 0.0
    pos_vec: Tuple[Tuple[float, ...], ...] = ()

    def as_array(self) -> np.ndarray:
        """State vectors as a float64 array of shape ``(ndata, 6)``."""
        arr = np.asarray(self.pos_vec, dtype=np.float64)
        return arr.reshape(-1, 6)[:self.ndata]


@dataclass(frozen=True)
class ProcessingParameterRecord:
    """Processing parameter record (PPR), RADARSAT CDPF/FOCUS leaders."""

    beam_type: str = ''


@dataclass(frozen=True)
class AsfFacilityRecord:
    """ASF facility-related data record.

    Parameters
    ----------
    grndslnt : str
        ``'GROUND'`` or ``'SLANT'`` range flag.
    deskewf : str
        Deskew flag (``'Y'``/``'N'``).
    swathvel : float
        Swath (ground) velocity, m/s.
    alines : int
        Number of azimuth lines.
    sltrngfp : float
        Slant range to first pixel (km).
    eradcntr : float
        Earth radius at scene center (km).
    scalt : float
        Spacecraft altitude above nadir (km).
    biterrrt : float
        Bit error rate.
    nearslat, nearslon, farslat, farslon : float
        Start-of-image near/far range corner latitude/longitude.
    nearelat, nearelon, farelat, farelon : float
        End-of-image near/far range corner latitude/longitude.
    """

    grndslnt: str = ''
    deskewf: str = ''
    swathvel: float = 0.0
    alines: int = 0
    sltrngfp: float = 0.0
    eradcntr: float = 0.0
    scalt: float = 0.0
    biterrrt: float = 0.0
    nearslat: float = 0.0
    nearslon: float = 0.0
    farslat: float = 0.0
    farslon: float = 0.0
    nearelat: float = 0.0
    nearelon: float = 0.0
    farelat: float = 0.0
    farelon: float = 0.0


@dataclass(frozen=True)
class EsaFacilityRecord:
    """ESA facility-related data record."""

    ber: float = 0.0


@dataclass(frozen=True)
class SceneHeaderRecord:
    """Scene header record (SHR) of ALOS optical (AVNIR/PRISM) leaders.

    Parameters
    ----------
    mission_id : str
        Mission identifier.
    sensor_id : str
        Sensor identifier (``'AVNIR-2 ...'``, ``'PRISM ...'``).
    orbit : int
        Orbit number.
    orbit_dir : str
        Orbit direction; the first character is used.
    lines, samples : int
        Image dimensions.
    sc_lat, sc_lon : float
        Scene center latitude/longitude (degrees).
    """

    mission_id: str = ''
    sensor_id: str = ''
    orbit: int = 0
    orbit_dir: str = ''
    lines: int = 0
    samples: int = 0
    sc_lat: float = 0.0
    sc_lon: float = 0.0


# ===================================================================
# Fixed-width field helpers
# ===================================================================

_LEADING_INT = re.compile(r'\s*[+-]?\d+')


def leading_int(text: str, default: int = 0) -> int:
    """Integer at the start of a field, ``default`` when there is none.

    Trailing characters are ignored: ``' 12N'`` gives 12.
    """
    m = _LEADING_INT.match(text)
    return int(m.group()) if m else default


def first_token(text: str) -> str:
    """Field text up to the first space, leading spaces skipped."""
    parts = text.split()
    return parts[0] if parts else ''
