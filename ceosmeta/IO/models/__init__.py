# -*- coding: utf-8 -*-
"""
IO Models - Typed record views and canonical metadata containers.

Re-exports all model classes from submodules for convenient access:

    from ceosmeta.IO.models import CeosMetadata, DatasetSummaryRecord

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

# Base
from ceosmeta.IO.models.base import MetadataBlock

# Common primitives
from ceosmeta.IO.models.common import XYZ

# Raw CEOS records
from ceosmeta.IO.models.records import (
    DatasetSummaryRecord,
    ImageFileDescriptor,
    MapProjectionRecord,
    FileDescriptorRecord,
    PlatformPositionRecord,
    ProcessingParameterRecord,
    AsfFacilityRecord,
    EsaFacilityRecord,
    SceneHeaderRecord,
    first_token,
    leading_int,
)

# Canonical metadata
from ceosmeta.IO.models.metadata import (
    CeosMetadata,
    GeneralBlock,
    SarBlock,
    LocationBlock,
    ProjectionBlock,
    ProjectionParams,
    AtctParams,
    LambertParams,
    PolarStereoParams,
    UtmParams,
    StateVector,
    StateVectorBlock,
)

__all__ = [
    'MetadataBlock',
    'XYZ',
    'DatasetSummaryRecord',
    'ImageFileDescriptor',
    'MapProjectionRecord',
    'FileDescriptorRecord',
    'PlatformPositionRecord',
    'ProcessingParameterRecord',
    'AsfFacilityRecord',
    'EsaFacilityRecord',
    'SceneHeaderRecord',
    'first_token',
    'leading_int',
    'CeosMetadata',
    'GeneralBlock',
    'SarBlock',
    'LocationBlock',
    'ProjectionBlock',
    'ProjectionParams',
    'AtctParams',
    'LambertParams',
    'PolarStereoParams',
    'UtmParams',
    'StateVector',
    'StateVectorBlock',
]
