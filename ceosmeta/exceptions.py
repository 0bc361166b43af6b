# -*- coding: utf-8 -*-
"""
CEOS Exception Hierarchy - Domain-specific exceptions for metadata decoding.

Provides a small exception hierarchy that lets callers catch decoder
errors distinctly from Python built-in exceptions. All exceptions
subclass both ``CeosError`` and the appropriate built-in exception for
backward compatibility.

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


class CeosError(Exception):
    """Base exception for all CEOS decoding errors."""


class ValidationError(CeosError, ValueError):
    """Invalid input parameters or configuration."""


class MissingRecordError(CeosError, IOError):
    """A mandatory CEOS record could not be read.

    Raised when neither a dataset summary record nor a scene header
    record is present, or when a SAR product lacks its image file
    descriptor record. Decoding cannot continue.
    """


class ProjectionError(CeosError, ValueError):
    """Map projection designator matches no known projection.

    There is no safe default projection, so the decode is aborted.
    """


class LineHeaderError(CeosError, IOError):
    """Data file too short to hold the requested line headers."""


class GeolocationError(CeosError, RuntimeError):
    """Orbit geometry could not be evaluated.

    Raised when a geometry service needs state vectors that the
    metadata does not hold.
    """
