# -*- coding: utf-8 -*-
"""
Normalize Module - Decode CEOS records into canonical metadata.

``ceos_init`` is the entry point: it resolves the sensor, then runs the
SAR or the optical normalizer. The map projection initializer is
invoked by the SAR normalizer for projected and ScanSAR images.

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
from typing import Optional

# ceosmeta internal
from ceosmeta.classify import classify, get_sensor
from ceosmeta.config import DecoderConfig, load_config
from ceosmeta.geolocation.base import GeometryServices
from ceosmeta.geolocation.orbit import OrbitGeometry
from ceosmeta.IO.base import CeosRecordReader
from ceosmeta.IO.models.metadata import CeosMetadata
from ceosmeta.normalize.optical import ceos_init_optical
from ceosmeta.normalize.projection import atct_init, init_projection
from ceosmeta.normalize.sar import ceos_init_sar
from ceosmeta.vocabulary import Sensor

logger = logging.getLogger(__name__)

_SAR_SENSORS = (Sensor.SAR, Sensor.PALSAR)
_OPTICAL_SENSORS = (Sensor.AVNIR, Sensor.PRISM)


def ceos_init(
    reader: CeosRecordReader,
    meta: Optional[CeosMetadata] = None,
    services: Optional[GeometryServices] = None,
    config: Optional[DecoderConfig] = None,
) -> CeosMetadata:
    """
    Decode a CEOS product into canonical metadata.

    Parameters
    ----------
    reader : CeosRecordReader
        Reader for the leader/data pair. Closed on return.
    meta : CeosMetadata, optional
        Metadata to fill. A fresh shell is allocated when omitted.
    services : GeometryServices, optional
        Geometry services. Defaults to ``OrbitGeometry()``.
    config : DecoderConfig, optional
        Defaults to the packaged configuration.

    Returns
    -------
    CeosMetadata

    Raises
    ------
    MissingRecordError
        If a mandatory record is absent.
    ProjectionError
        If the map projection designator is not recognized.

    Examples
    --------
    >>> from ceosmeta import ceos_init, MemoryRecordReader
    >>> meta = ceos_init(MemoryRecordReader(dssr=dssr, ifiledr=iof))
    >>> meta.general.processor
    'ASF/SPS/3.2'
    """
    if meta is None:
        meta = CeosMetadata.shell()
    if services is None:
        services = OrbitGeometry()
    if config is None:
        config = load_config()

    with reader:
        sensor = get_sensor(reader).sensor
        if sensor in _SAR_SENSORS:
            ceos_init_sar(reader, classify(reader), meta, services, config)
        elif sensor in _OPTICAL_SENSORS:
            ceos_init_optical(classify(reader), meta)
        else:
            logger.warning("Sensor could not be resolved, nothing decoded")
    return meta


__all__ = [
    'ceos_init',
    'ceos_init_sar',
    'ceos_init_optical',
    'init_projection',
    'atct_init',
]
