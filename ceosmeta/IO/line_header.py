# -*- coding: utf-8 -*-
"""
CEOS Line Headers - Polarization, chirp and first-line time extraction.

Some quantities are absent from the leader records of ALOS products and
only appear in the prefix of each image record of the data file. This
module reads the prefix of the second image record (the first record
after the image file descriptor) and decodes:

- transmit/receive polarization and the single/dual/quad channel mode
  from the signal data record prefix,
- the linear chirp rate from the same prefix,
- the acquisition time of the first line from the processed data
  record prefix.

Every CEOS record starts with a 12-byte big-endian header whose last
field is the total record length, so the payload between the two
prefixes can be skipped without knowing the image layout.

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
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

# ceosmeta internal
from ceosmeta.exceptions import LineHeaderError
from ceosmeta.vocabulary import PolarizationMode

logger = logging.getLogger(__name__)


# ===================================================================
# Record layout
# ===================================================================

# record sequence number, subtype codes (4 bytes), record length
_RECORD_HEADER_FMT = '>IBBBBI'
_RECORD_HEADER_SIZE = struct.calcsize(_RECORD_HEADER_FMT)  # 12 bytes

# Prefix sizes following the record header
_SIGNAL_PREFIX_SIZE = 400
_PROCESSED_PREFIX_SIZE = 180

# Field offsets within the prefix (record byte position minus 13)
_ACQ_MSEC = ('>i', 32)
_SAR_CIB = ('>h', 36)
_TRAN_POLAR = ('>h', 40)
_RECV_POLAR = ('>h', 42)
_CHIRP_LINEAR = ('>i', 64)

_POLARIZATION_LETTERS = {0: 'H', 1: 'V'}

# Channel codes 1 and 2 are swapped relative to the published ALOS
# format description; products in the wild follow this table.
_POLARIZATION_MODES = {
    1: PolarizationMode.DUAL,
    2: PolarizationMode.SINGLE,
    4: PolarizationMode.QUAD,
}


@dataclass(frozen=True)
class LineHeaderInfo:
    """Fields decoded from a signal data line header.

    Parameters
    ----------
    polarization : str
        Two letters, transmit then receive (``'H'``, ``'V'`` or ``'_'``
        for an unrecognized code).
    polarization_mode : PolarizationMode or None
        Channel configuration, None for an unrecognized code.
    chirp_rate : float
        Linear chirp rate (Hz/s).
    """

    polarization: str
    polarization_mode: Optional[PolarizationMode]
    chirp_rate: float


def _read_exact(fp: BinaryIO, size: int, path: Path) -> bytes:
    buf = fp.read(size)
    if len(buf) < size:
        raise LineHeaderError(
            f"Data file too short for line header: {path} "
            f"(wanted {size} bytes, got {len(buf)})"
        )
    return buf


def _field(buf: bytes, layout: Tuple[str, int]) -> int:
    fmt, offset = layout
    return struct.unpack_from(fmt, buf, offset)[0]


def _read_second_prefix(path: Union[str, Path], prefix_size: int) -> bytes:
    """Return the line-header prefix of the second record of a data file.

    Parameters
    ----------
    path : str or Path
        CEOS data file.
    prefix_size : int
        Bytes of prefix following each 12-byte record header.

    Raises
    ------
    LineHeaderError
        If the file ends before the second prefix, or the first record
        declares a length shorter than its own header.
    """
    path = Path(path)
    with open(path, 'rb') as fp:
        header = _read_exact(fp, _RECORD_HEADER_SIZE, path)
        recsiz = struct.unpack(_RECORD_HEADER_FMT, header)[-1]
        _read_exact(fp, prefix_size, path)
        skip = recsiz - (_RECORD_HEADER_SIZE + prefix_size)
        if skip < 0:
            raise LineHeaderError(
                f"Record length {recsiz} in {path} is shorter than "
                f"its line header"
            )
        _read_exact(fp, skip, path)
        _read_exact(fp, _RECORD_HEADER_SIZE, path)
        return _read_exact(fp, prefix_size, path)


def read_polarization(path: Union[str, Path]) -> LineHeaderInfo:
    """Decode polarization and chirp rate from the signal line header.

    Parameters
    ----------
    path : str or Path
        CEOS data file.

    Returns
    -------
    LineHeaderInfo

    Raises
    ------
    LineHeaderError
        If the file is too short to hold the line header.

    Examples
    --------
    >>> info = read_polarization('IMG-HH-ALPSRP000000000-H1.0__A')
    >>> info.polarization, info.polarization_mode
    ('HH', <PolarizationMode.DUAL: 'dual'>)
    """
    buf = _read_second_prefix(path, _SIGNAL_PREFIX_SIZE)

    tran = _field(buf, _TRAN_POLAR)
    recv = _field(buf, _RECV_POLAR)
    polarization = (_POLARIZATION_LETTERS.get(tran, '_')
                    + _POLARIZATION_LETTERS.get(recv, '_'))

    cib = _field(buf, _SAR_CIB)
    mode = _POLARIZATION_MODES.get(cib)
    if mode is None:
        logger.warning("Unrecognized polarization channel code %d in %s",
                       cib, path)

    chirp_rate = _field(buf, _CHIRP_LINEAR) * 1000.0
    logger.debug("Line header of %s: polarization=%s mode=%s chirp=%g",
                 path, polarization, mode, chirp_rate)
    return LineHeaderInfo(polarization, mode, chirp_rate)


def read_first_time(path: Union[str, Path]) -> float:
    """Acquisition time of day of the first image line, in seconds.

    Parameters
    ----------
    path : str or Path
        CEOS data file.

    Returns
    -------
    float
        Seconds of day.

    Raises
    ------
    LineHeaderError
        If the file is too short to hold the line header.
    """
    buf = _read_second_prefix(path, _PROCESSED_PREFIX_SIZE)
    return _field(buf, _ACQ_MSEC) / 1000.0
