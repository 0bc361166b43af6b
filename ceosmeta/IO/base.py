# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interface for CEOS record readers.

Defines the contract between the decoder and the low-level field
readers that parse fixed-layout CEOS records out of a leader/data file
pair. Every read returns a typed record view, or ``None`` when the
record is absent from the product. Absence is not an error at this
layer; the decoder decides which records are mandatory.

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

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


class CeosRecordReader(ABC):
    """
    Abstract base class for CEOS record readers.

    Concrete readers locate and decode the records of one CEOS product.
    The leader file holds the summary, projection, position and facility
    records; the data file holds the image file descriptor and the
    signal/processed-data line headers.

    Attributes
    ----------
    leader_path : Path or None
        Path to the leader file.
    data_path : Path or None
        Path to the data file paired with the leader.

    Notes
    -----
    Readers are context managers. ``close()`` is called on exit of the
    ``with`` block, including when decoding raises.
    """

    def __init__(
        self,
        leader_path: Optional[Union[str, Path]] = None,
        data_path: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Initialize the record reader.

        Parameters
        ----------
        leader_path : Union[str, Path], optional
            Path to the leader file.
        data_path : Union[str, Path], optional
            Path to the data file.

        Raises
        ------
        FileNotFoundError
            If a given path does not exist.
        """
        self.leader_path = self._check_path(leader_path)
        self.data_path = self._check_path(data_path)

    @staticmethod
    def _check_path(
        path: Optional[Union[str, Path]],
    ) -> Optional[Path]:
        if path is None:
            return None
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path

    @abstractmethod
    def read_dssr(self) -> Optional[DatasetSummaryRecord]:
        """Read the dataset summary record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_shr(self) -> Optional[SceneHeaderRecord]:
        """Read the optical scene header record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_ifiledr(self) -> Optional[ImageFileDescriptor]:
        """Read the image file descriptor record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_mpdr(self) -> Optional[MapProjectionRecord]:
        """Read the map projection data record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_fdr(self) -> Optional[FileDescriptorRecord]:
        """Read the leader file descriptor record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_ppdr(self) -> Optional[PlatformPositionRecord]:
        """Read the platform position data record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_ppr(self) -> Optional[ProcessingParameterRecord]:
        """Read the processing parameter record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_asf_facdr(self) -> Optional[AsfFacilityRecord]:
        """Read the ASF facility-related record, or ``None`` if absent."""
        pass

    @abstractmethod
    def read_esa_facdr(self) -> Optional[EsaFacilityRecord]:
        """Read the ESA facility-related record, or ``None`` if absent."""
        pass

    def close(self) -> None:
        """
        Close the reader and release resources.

        Default implementation does nothing. Override if the reader
        maintains open file handles.
        """
        pass

    def __enter__(self) -> 'CeosRecordReader':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
