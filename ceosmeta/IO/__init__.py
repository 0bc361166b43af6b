# -*- coding: utf-8 -*-
"""
IO Module - CEOS record readers, line-header extraction, and data models.

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

from ceosmeta.IO.base import CeosRecordReader
from ceosmeta.IO.memory import MemoryRecordReader
from ceosmeta.IO.line_header import (
    LineHeaderInfo,
    read_first_time,
    read_polarization,
)

__all__ = [
    'CeosRecordReader',
    'MemoryRecordReader',
    'LineHeaderInfo',
    'read_first_time',
    'read_polarization',
]
