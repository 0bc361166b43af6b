# -*- coding: utf-8 -*-
"""
Memory Record Reader - CEOS reader backed by already-decoded records.

Serves record views that were decoded elsewhere (by an external field
reader, a cache, or a test fixture). Any record not supplied is reported
as absent.

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
from pathlib import Path
from typing import Optional, Union

# ceosmeta internal
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
    SceneHeaderRecord,
)


class MemoryRecordReader(CeosRecordReader):
    """Record reader over in-memory record views.

    Parameters
    ----------
    dssr : DatasetSummaryRecord, optional
    shr : SceneHeaderRecord, optional
    ifiledr : ImageFileDescriptor, optional
    mpdr : MapProjectionRecord, optional
    fdr : FileDescriptorRecord, optional
    ppdr : PlatformPositionRecord, optional
    ppr : ProcessingParameterRecord, optional
    asf_facdr : AsfFacilityRecord, optional
    esa_facdr : EsaFacilityRecord, optional
    leader_path : str or Path, optional
    data_path : str or Path, optional
        Data file consulted by the line-header extractor (ALOS only).

    Attributes
    ----------
    closed : bool
        True once ``close()`` has been called.

    Examples
    --------
    >>> reader = MemoryRecordReader(dssr=dssr, ifiledr=iof)
    >>> reader.read_mpdr() is None
    True
    """

    def __init__(
        self,
        dssr: Optional[DatasetSummaryRecord] = None,
        shr: Optional[SceneHeaderRecord] = None,
        ifiledr: Optional[ImageFileDescriptor] = None,
        mpdr: Optional[MapProjectionRecord] = None,
        fdr: Optional[FileDescriptorRecord] = None,
        ppdr: Optional[PlatformPositionRecord] = None,
        ppr: Optional[ProcessingParameterRecord] = None,
        asf_facdr: Optional[AsfFacilityRecord] = None,
        esa_facdr: Optional[EsaFacilityRecord] = None,
        leader_path: Optional[Union[str, Path]] = None,
        data_path: Optional[Union[str, Path]] = None,
    ) -> None:
        super().__init__(leader_path, data_path)
        self._dssr = dssr
        self._shr = shr
        self._ifiledr = ifiledr
        self._mpdr = mpdr
        self._fdr = fdr
        self._ppdr = ppdr
        self._ppr = ppr
        self._asf_facdr = asf_facdr
        self._esa_facdr = esa_facdr
        self.closed = False

    def read_dssr(self) -> Optional[DatasetSummaryRecord]:
        return self._dssr

    def read_shr(self) -> Optional[SceneHeaderRecord]:
        return self._shr

    def read_ifiledr(self) -> Optional[ImageFileDescriptor]:
        return self._ifiledr

    def read_mpdr(self) -> Optional[MapProjectionRecord]:
        return self._mpdr

    def read_fdr(self) -> Optional[FileDescriptorRecord]:
        return self._fdr

    def read_ppdr(self) -> Optional[PlatformPositionRecord]:
        return self._ppdr

    def read_ppr(self) -> Optional[ProcessingParameterRecord]:
        return self._ppr

    def read_asf_facdr(self) -> Optional[AsfFacilityRecord]:
        return self._asf_facdr

    def read_esa_facdr(self) -> Optional[EsaFacilityRecord]:
        return self._esa_facdr

    def close(self) -> None:
        self.closed = True
