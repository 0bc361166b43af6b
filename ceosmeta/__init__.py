# -*- coding: utf-8 -*-
"""
ceosmeta - CEOS satellite metadata decoder.

Normalizes the facility-specific leader and data file records of CEOS
SAR (ERS, JERS, RADARSAT-1, ALOS PALSAR) and ALOS optical (AVNIR-2,
PRISM) products into one canonical metadata model.

Dependencies
------------
numpy
scipy
pyyaml

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

__version__ = "0.1.0"

from ceosmeta.exceptions import (
    CeosError,
    ValidationError,
    MissingRecordError,
    ProjectionError,
    LineHeaderError,
    GeolocationError,
)
from ceosmeta.vocabulary import (
    Satellite,
    Sensor,
    Facility,
    Processor,
    Product,
    DataType,
    ImageDataType,
    ImageType,
    ProjectionType,
    PolarizationMode,
)
from ceosmeta.config import DecoderConfig, load_config
from ceosmeta.classify import CeosDescriptor, classify, get_sensor
from ceosmeta.IO import CeosRecordReader, MemoryRecordReader
from ceosmeta.IO.models import CeosMetadata
from ceosmeta.geolocation import GeometryServices, OrbitGeometry
from ceosmeta.normalize import ceos_init

__all__ = [
    'CeosError',
    'ValidationError',
    'MissingRecordError',
    'ProjectionError',
    'LineHeaderError',
    'GeolocationError',
    'Satellite',
    'Sensor',
    'Facility',
    'Processor',
    'Product',
    'DataType',
    'ImageDataType',
    'ImageType',
    'ProjectionType',
    'PolarizationMode',
    'DecoderConfig',
    'load_config',
    'CeosDescriptor',
    'classify',
    'get_sensor',
    'CeosRecordReader',
    'MemoryRecordReader',
    'CeosMetadata',
    'GeometryServices',
    'OrbitGeometry',
    'ceos_init',
]
