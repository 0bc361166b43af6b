# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for CEOS metadata decoding.

Defines the closed tag sets used by the classifier and the normalizers:
satellites, sensors, processing facilities, processors, product
variants, sample data types, image geometries, and projection types.
Every classification axis carries an ``UNKNOWN`` member so that an
unrecognized identifying string still yields a usable tag.

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

from enum import Enum


class Satellite(Enum):
    """Satellite family, resolved from the first mission-id character."""

    ERS = "ERS"
    JERS = "JERS"
    RSAT = "RSAT"
    ALOS = "ALOS"
    UNKNOWN = "unknown"


class Sensor(Enum):
    """Instrument that acquired the scene.

    ``SAR`` and ``PALSAR`` select the SAR normalizer; ``AVNIR`` and
    ``PRISM`` select the optical normalizer.
    """

    SAR = "SAR"
    PALSAR = "PALSAR"
    AVNIR = "AVNIR"
    PRISM = "PRISM"
    UNKNOWN = "unknown"


class Facility(Enum):
    """Ground facility that processed the data set."""

    ASF = "ASF"
    ESA = "ESA"
    CDPF = "CDPF"
    EOC = "EOC"
    RSI = "RSI"
    VEXCEL = "VEXCEL"
    UNKNOWN = "unknown"


class Processor(Enum):
    """SAR processor that generated the product (ASF facility only)."""

    ASP = "ASP"
    SPS = "SPS"
    PREC = "PREC"
    ARDOP = "ARDOP"
    PP = "PP"
    SP2 = "SP2"
    SP3 = "SP3"
    AMM = "AMM"
    DPS = "DPS"
    MSSAR = "MSSAR"
    FOCUS = "FOCUS"
    LZP = "LZP"
    UNKNOWN = "unknown"


class Product(Enum):
    """Product variant as named by the processing facility."""

    CCSD = "CCSD"
    RAW = "RAW"
    SLC = "SLC"
    PRI = "PRI"
    LOW_REZ = "LOW_REZ"
    HI_REZ = "HI_REZ"
    RAMP = "RAMP"
    SCANSAR = "SCANSAR"
    SCN = "SCN"
    SGF = "SGF"
    SGI = "SGI"
    UNKNOWN = "unknown"


class DataType(Enum):
    """Sample data type of the image file."""

    BYTE = "BYTE"
    INTEGER16 = "INTEGER16"
    INTEGER32 = "INTEGER32"
    COMPLEX_BYTE = "COMPLEX_BYTE"
    COMPLEX_INTEGER16 = "COMPLEX_INTEGER16"
    COMPLEX_REAL32 = "COMPLEX_REAL32"


class ImageDataType(Enum):
    """Radiometric content of the image samples."""

    AMPLITUDE_IMAGE = "AMPLITUDE_IMAGE"


class ImageType(Enum):
    """SAR image geometry."""

    SLANT = "S"
    GROUND = "G"
    PROJECTED = "P"


class ProjectionType(Enum):
    """Map projection tag of a projected image.

    ``SLANT_UNSET`` and ``GROUND_UNSET`` record a map projection data
    record that merely describes slant or ground range geometry; they
    carry no projection parameters.
    """

    SLANT_UNSET = "slant_unset"
    GROUND_UNSET = "ground_unset"
    ALONG_TRACK_CROSS_TRACK = "atct"
    LAMBERT_CONFORMAL_CONIC = "lamcc"
    POLAR_STEREOGRAPHIC = "ps"
    UNIVERSAL_TRANSVERSE_MERCATOR = "utm"


class PolarizationMode(Enum):
    """Polarization channel configuration from the ALOS line header."""

    SINGLE = "single"
    DUAL = "dual"
    QUAD = "quad"
