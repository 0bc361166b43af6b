# -*- coding: utf-8 -*-
"""
Record Bundle - Scoped acquisition of the CEOS records of one decode.

Reads every record the SAR normalizer consumes into a ``RecordBundle``
and guarantees the bundle is released on every exit path, including
the fatal ones. Only the dataset summary and image file descriptor
records are mandatory; every other record is ``None`` when absent.

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
from contextlib import contextmanager
from dataclasses import dataclass, fields
from typing import Iterator, Optional

# ceosmeta internal
from ceosmeta.classify import CeosDescriptor
from ceosmeta.exceptions import MissingRecordError
from ceosmeta.IO.base import CeosRecordReader
from ceosmeta.IO.models.records import (
    AsfFacilityRecord,
    DatasetSummaryRecord,
    EsaFacilityRecord,
    FileDescriptorRecord,
    ImageFileDescriptor,
    MapProjectionRecord,
    PlatformPositionRecord,
    ProcessingParameterRecord,
)

logger = logging.getLogger(__name__)

# Facility record lengths announced by the leader file descriptor
ASF_FACDR_LENGTH = 1717
ESA_FACDR_LENGTH = 12288


@dataclass
class RecordBundle:
    """Records read for one SAR decode."""

    dssr: Optional[DatasetSummaryRecord] = None
    iof: Optional[ImageFileDescriptor] = None
    mpdr: Optional[MapProjectionRecord] = None
    fdr: Optional[FileDescriptorRecord] = None
    ppdr: Optional[PlatformPositionRecord] = None
    ppr: Optional[ProcessingParameterRecord] = None
    asf_facdr: Optional[AsfFacilityRecord] = None
    esa_facdr: Optional[EsaFacilityRecord] = None
    released: bool = False

    def release(self) -> None:
        """Drop every record reference."""
        for f in fields(self):
            if f.name != 'released':
                setattr(self, f.name, None)
        self.released = True


def _is_cdpf(dssr: DatasetSummaryRecord) -> bool:
    return dssr.fac_id.strip().startswith('CDPF')


def read_records(
    reader: CeosRecordReader, desc: CeosDescriptor, bundle: RecordBundle,
) -> None:
    """Fill a bundle from a reader.

    Parameters
    ----------
    reader : CeosRecordReader
    desc : CeosDescriptor
        Classification holding the summary record.
    bundle : RecordBundle
        Filled in place so that partially read records are still
        released by the caller when a mandatory record is missing.

    Raises
    ------
    MissingRecordError
        If the dataset summary or image file descriptor record is absent.
    """
    if desc.dssr is None:
        raise MissingRecordError(
            f"No dataset summary record in {reader.leader_path}"
        )
    bundle.dssr = desc.dssr

    bundle.iof = reader.read_ifiledr()
    if bundle.iof is None:
        raise MissingRecordError(
            f"No image file descriptor record in {reader.data_path}"
        )

    # CDPF map projection records are unusable
    if not _is_cdpf(desc.dssr):
        bundle.mpdr = reader.read_mpdr()
    bundle.fdr = reader.read_fdr()
    bundle.ppdr = reader.read_ppdr()
    bundle.ppr = reader.read_ppr()

    if bundle.fdr is not None:
        if bundle.fdr.l_facdr == ASF_FACDR_LENGTH:
            bundle.asf_facdr = reader.read_asf_facdr()
        elif (bundle.fdr.l_facdr == ESA_FACDR_LENGTH
              and not _is_cdpf(desc.dssr)):
            bundle.esa_facdr = reader.read_esa_facdr()

    logger.debug(
        "Records read: %s",
        ', '.join(f.name for f in fields(bundle)
                  if f.name != 'released'
                  and getattr(bundle, f.name) is not None),
    )


@contextmanager
def acquire_records(
    reader: CeosRecordReader, desc: CeosDescriptor,
) -> Iterator[RecordBundle]:
    """Read the record bundle and release it when the block exits.

    Examples
    --------
    >>> with acquire_records(reader, desc) as records:
    ...     records.iof.numofrec
    """
    bundle = RecordBundle()
    try:
        read_records(reader, desc, bundle)
        yield bundle
    finally:
        bundle.release()
