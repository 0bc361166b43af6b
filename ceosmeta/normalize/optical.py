# -*- coding: utf-8 -*-
"""
Optical Metadata Normalizer - Canonical metadata from ALOS scene headers.

AVNIR-2 and PRISM leaders carry a scene header record instead of a
dataset summary record. Only the general block is filled. Pixel size,
ellipsoid, bit error rate, missing lines and the no-data value are not
recorded in the scene header and stay unset; the scene center is the
nominal one from the header.

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
import sys

# ceosmeta internal
from ceosmeta.classify import CeosDescriptor
from ceosmeta.exceptions import MissingRecordError
from ceosmeta.IO.models.metadata import CeosMetadata
from ceosmeta.IO.models.records import first_token
from ceosmeta.vocabulary import DataType, ImageDataType, Sensor

logger = logging.getLogger(__name__)

_SENSOR_NAMES = {
    Sensor.AVNIR: 'AVNIR',
    Sensor.PRISM: 'PRISM',
}


def ceos_init_optical(desc: CeosDescriptor, meta: CeosMetadata) -> CeosMetadata:
    """
    Populate the general block from an optical scene header record.

    Parameters
    ----------
    desc : CeosDescriptor
        Classification holding the scene header record.
    meta : CeosMetadata
        Caller-owned metadata, filled in place.

    Returns
    -------
    CeosMetadata
        ``meta``.

    Raises
    ------
    MissingRecordError
        If the descriptor holds no scene header record.
    """
    shr = desc.shr
    if shr is None:
        raise MissingRecordError("No scene header record for optical decode")

    general = meta.general
    general.sensor = first_token(shr.mission_id)
    sensor_name = _SENSOR_NAMES.get(desc.sensor)
    if sensor_name is not None:
        general.sensor_name = sensor_name
    general.mode = 'STD'
    general.data_type = DataType.BYTE
    general.image_data_type = ImageDataType.AMPLITUDE_IMAGE
    general.system = 'lil_ieee' if sys.byteorder == 'little' else 'big_ieee'
    general.orbit = shr.orbit
    general.orbit_direction = shr.orbit_dir[:1]
    general.line_count = shr.lines
    general.sample_count = shr.samples
    general.center_latitude = shr.sc_lat
    general.center_longitude = shr.sc_lon

    logger.info("Decoded %s %s scene, orbit %s", general.sensor,
                general.sensor_name, general.orbit)
    return meta
