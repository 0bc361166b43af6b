# -*- coding: utf-8 -*-
"""
CEOS Classifier - Resolve satellite, sensor, facility, processor, product.

Reads the identifying fields of the dataset summary record (SAR) or the
scene header record (optical) and resolves each classification axis
through an ordered prefix table. Tables are evaluated first-match-wins
with case-sensitive prefix comparison against space-trimmed fields.
Unresolved axes become the ``UNKNOWN`` member of their enum and a
diagnostic is logged; classification itself never aborts once a
summary or scene header record is available.

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
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, TypeVar

# ceosmeta internal
from ceosmeta.exceptions import MissingRecordError
from ceosmeta.IO.base import CeosRecordReader
from ceosmeta.IO.models.records import DatasetSummaryRecord, SceneHeaderRecord
from ceosmeta.vocabulary import (
    Facility,
    Processor,
    Product,
    Satellite,
    Sensor,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')
PrefixTable = Sequence[Tuple[str, T]]


# ===================================================================
# Prefix tables
# ===================================================================

SATELLITE_TABLE: PrefixTable = (
    ('E', Satellite.ERS),
    ('J', Satellite.JERS),
    ('R', Satellite.RSAT),
    ('A', Satellite.ALOS),
)

OPTICAL_SATELLITE_TABLE: PrefixTable = (
    ('A', Satellite.ALOS),
)

OPTICAL_SENSOR_TABLE: PrefixTable = (
    ('AVNIR', Sensor.AVNIR),
    ('PRISM', Sensor.PRISM),
)

# First match wins; 'ES' covers every ESA facility id (ESRIN, ESA-...).
FACILITY_TABLE: PrefixTable = (
    ('ASF', Facility.ASF),
    ('ES', Facility.ESA),
    ('CDPF', Facility.CDPF),
    ('D-PAF', Facility.ESA),
    ('I-PAF', Facility.ESA),
    ('EOC', Facility.EOC),
    ('RSI', Facility.RSI),
)

# 'PRE' rather than 'PREC': only three characters have ever been compared.
ASF_PROCESSOR_TABLE: PrefixTable = (
    ('ASP', Processor.ASP),
    ('SPS', Processor.SPS),
    ('PRE', Processor.PREC),
    ('ARDOP', Processor.ARDOP),
    ('PP', Processor.PP),
    ('SP2', Processor.SP2),
    ('AMM', Processor.AMM),
    ('DPS', Processor.DPS),
    ('MSSAR', Processor.MSSAR),
    ('FOCUS', Processor.FOCUS),
)

# Processor code 'PC' is resolved from the product type
PC_PROCESSOR_TABLE: PrefixTable = (
    ('SCANSAR', Processor.SP3),
    ('FUL', Processor.PREC),
)

ASF_PRODUCT_TABLE: PrefixTable = (
    ('LOW', Product.LOW_REZ),
    ('FUL', Product.HI_REZ),
    ('SCANSAR', Product.SCANSAR),
    ('CCSD', Product.CCSD),
    ('COMPLEX', Product.SLC),
    ('RAMP', Product.RAMP),
    ('SPECIAL PRODUCT(SINGL-LOOK COMP)', Product.SLC),
    ('SLANT RANGE COMPLEX', Product.SLC),
    ('SAR PRECISION IMAGE', Product.PRI),
    ('SAR GEOREF FINE', Product.SGF),
    ('STANDARD GEOCODED IMAGE', Product.SGI),
)

# Raw signal is not listed: ESA raw products have always been reported as
# unknown, unlike the D-PAF and I-PAF ones.
ESA_PRODUCT_TABLE: PrefixTable = (
    ('SAR PRECISION IMAGE', Product.PRI),
)

PAF_PRODUCT_TABLE: PrefixTable = (
    ('SAR RAW SIGNAL', Product.RAW),
)

CDPF_PRODUCT_TABLE: PrefixTable = (
    ('SPECIAL PRODUCT(SINGL-LOOK COMP)', Product.SLC),
    ('SCANSAR WIDE', Product.SCANSAR),
)

EOC_LEVEL_TABLE: PrefixTable = (
    ('1.0', Product.RAW),
    ('1.1', Product.SLC),
)

EOC_PRODUCT_TABLE: PrefixTable = (
    ('STANDARD GEOCODED IMAGE', Product.SGI),
)

RSI_PRODUCT_TABLE: PrefixTable = (
    ('SCANSAR WIDE', Product.SCANSAR),
    ('SAR GEOREF EXTRA FINE', Product.SGF),
    ('SCANSAR NARROW', Product.SCN),
)

# Product table per facility-id prefix, for facilities other than ASF/EOC
_PRODUCT_TABLES = {
    'ES': ESA_PRODUCT_TABLE,
    'CDPF': CDPF_PRODUCT_TABLE,
    'D-PAF': PAF_PRODUCT_TABLE,
    'I-PAF': PAF_PRODUCT_TABLE,
    'RSI': RSI_PRODUCT_TABLE,
}

_NUMBER = re.compile(r'\d+(?:\.\d*)?')


# ===================================================================
# Descriptor
# ===================================================================

@dataclass
class CeosDescriptor:
    """Classification of one CEOS product.

    Built fresh for each decode and discarded after normalization.

    Parameters
    ----------
    satellite : Satellite
    sensor : Sensor
    facility : Facility
    processor : Processor
    product : Product
    version : float
        Processor version, 0.0 when the version field holds no number.
    dssr : DatasetSummaryRecord, optional
        Summary record, present for SAR products.
    shr : SceneHeaderRecord, optional
        Scene header record, present for optical products.
    """

    satellite: Satellite = Satellite.UNKNOWN
    sensor: Sensor = Sensor.UNKNOWN
    facility: Facility = Facility.UNKNOWN
    processor: Processor = Processor.UNKNOWN
    product: Product = Product.UNKNOWN
    version: float = 0.0
    dssr: Optional[DatasetSummaryRecord] = None
    shr: Optional[SceneHeaderRecord] = None

    @property
    def is_sar(self) -> bool:
        """True when classified from a dataset summary record."""
        return self.dssr is not None


# ===================================================================
# Pure resolution functions
# ===================================================================

def match_prefix(
    text: str, table: PrefixTable, default: T,
) -> T:
    """First table entry whose prefix starts the space-trimmed text.

    Parameters
    ----------
    text : str
        Fixed-width field value.
    table : sequence of (str, T)
        Ordered ``(prefix, tag)`` pairs.
    default : T
        Returned when no prefix matches.

    Returns
    -------
    T
    """
    text = text.strip()
    for prefix, tag in table:
        if text.startswith(prefix):
            return tag
    return default


def parse_version(ver_id: str) -> float:
    """First number embedded in a version field, 0.0 when none."""
    m = _NUMBER.search(ver_id)
    return float(m.group()) if m else 0.0


def resolve_satellite(mission_id: str) -> Satellite:
    """Satellite family from the first character of the mission id."""
    sat = match_prefix(mission_id, SATELLITE_TABLE, Satellite.UNKNOWN)
    if sat is Satellite.UNKNOWN:
        logger.warning("Unknown satellite '%s'", mission_id.strip())
    return sat


def resolve_sar_sensor(satellite: Satellite) -> Sensor:
    return Sensor.PALSAR if satellite is Satellite.ALOS else Sensor.SAR


def resolve_optical(shr: SceneHeaderRecord) -> Tuple[Satellite, Sensor]:
    """Satellite and sensor of an optical product."""
    sat = match_prefix(shr.mission_id, OPTICAL_SATELLITE_TABLE,
                       Satellite.UNKNOWN)
    if sat is Satellite.UNKNOWN:
        logger.warning("Unknown satellite '%s'", shr.mission_id.strip())
        return sat, Sensor.UNKNOWN
    sensor = match_prefix(shr.sensor_id, OPTICAL_SENSOR_TABLE,
                          Sensor.UNKNOWN)
    if sensor is Sensor.UNKNOWN:
        logger.warning("Unknown sensor '%s'", shr.sensor_id.strip())
    return sat, sensor


def resolve_facility(fac_id: str) -> Facility:
    """Processing facility from the facility id."""
    fac = match_prefix(fac_id, FACILITY_TABLE, Facility.UNKNOWN)
    if fac is Facility.UNKNOWN:
        logger.error("SEVERE WARNING: unknown CEOS facility '%s'",
                     fac_id.strip())
    return fac


def resolve_asf_processor(sys_id: str, product_type: str) -> Processor:
    """ASF processor from the system id.

    The ``SKY`` code is not handled here; see ``classify_dssr``.
    """
    proc = match_prefix(sys_id, ASF_PROCESSOR_TABLE, None)
    if proc is not None:
        return proc
    if sys_id.strip().startswith('PC'):
        return match_prefix(product_type, PC_PROCESSOR_TABLE,
                            Processor.UNKNOWN)
    logger.warning("Unknown ASF processor '%s'", sys_id.strip())
    return Processor.UNKNOWN


def resolve_product(dssr: DatasetSummaryRecord) -> Product:
    """Product variant from the product type (or level code for EOC)."""
    fac_id = dssr.fac_id.strip()
    if fac_id.startswith('ASF'):
        prod = match_prefix(dssr.product_type, ASF_PRODUCT_TABLE,
                            Product.UNKNOWN)
        label = 'ASF'
    elif fac_id.startswith('EOC'):
        prod = match_prefix(dssr.lev_code, EOC_LEVEL_TABLE, None)
        if prod is None:
            prod = match_prefix(dssr.product_type, EOC_PRODUCT_TABLE,
                                Product.UNKNOWN)
        label = 'EOC'
    else:
        for prefix, table in _PRODUCT_TABLES.items():
            if fac_id.startswith(prefix):
                prod = match_prefix(dssr.product_type, table,
                                    Product.UNKNOWN)
                label = prefix
                break
        else:
            return Product.UNKNOWN
    if prod is Product.UNKNOWN:
        logger.warning("Unknown %s product type '%s'", label,
                       dssr.product_type.strip())
    return prod


# ===================================================================
# Classification
# ===================================================================

def classify_dssr(dssr: DatasetSummaryRecord) -> CeosDescriptor:
    """Classify a SAR product from its dataset summary record.

    Parameters
    ----------
    dssr : DatasetSummaryRecord

    Returns
    -------
    CeosDescriptor
    """
    satellite = resolve_satellite(dssr.mission_id)
    desc = CeosDescriptor(
        satellite=satellite,
        sensor=resolve_sar_sensor(satellite),
        version=parse_version(dssr.ver_id),
        dssr=dssr,
    )

    desc.facility = resolve_facility(dssr.fac_id)
    if desc.facility is Facility.UNKNOWN:
        return desc

    if desc.facility is Facility.ASF:
        if dssr.sys_id.strip().startswith('SKY'):
            # VEXCEL level-zero processor, not ASF
            desc.facility = Facility.VEXCEL
            desc.processor = Processor.LZP
            desc.product = Product.CCSD
            return desc
        desc.processor = resolve_asf_processor(dssr.sys_id,
                                               dssr.product_type)
    else:
        logger.info("Data set processed by %s", dssr.fac_id.strip())

    desc.product = resolve_product(dssr)
    return desc


def classify_shr(shr: SceneHeaderRecord) -> CeosDescriptor:
    """Classify an optical product from its scene header record."""
    satellite, sensor = resolve_optical(shr)
    return CeosDescriptor(satellite=satellite, sensor=sensor, shr=shr)


def _read_identifying_record(reader: CeosRecordReader):
    dssr = reader.read_dssr()
    if dssr is not None:
        return dssr, None
    shr = reader.read_shr()
    if shr is None:
        raise MissingRecordError(
            f"Neither a dataset summary record nor a scene header record "
            f"could be read from {reader.leader_path}"
        )
    return None, shr


def classify(reader: CeosRecordReader) -> CeosDescriptor:
    """Classify the product behind a record reader.

    Tries the dataset summary record first and falls back to the
    optical scene header record.

    Parameters
    ----------
    reader : CeosRecordReader

    Returns
    -------
    CeosDescriptor

    Raises
    ------
    MissingRecordError
        If neither identifying record is present.
    """
    dssr, shr = _read_identifying_record(reader)
    if dssr is not None:
        return classify_dssr(dssr)
    return classify_shr(shr)


def get_sensor(reader: CeosRecordReader) -> CeosDescriptor:
    """Resolve only satellite and sensor.

    Enough to choose between the SAR and the optical decode path
    without resolving facility, processor, or product.

    Raises
    ------
    MissingRecordError
        If neither identifying record is present.
    """
    dssr, shr = _read_identifying_record(reader)
    if dssr is not None:
        satellite = resolve_satellite(dssr.mission_id)
        return CeosDescriptor(satellite=satellite,
                              sensor=resolve_sar_sensor(satellite),
                              dssr=dssr)
    return classify_shr(shr)
