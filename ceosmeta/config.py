# -*- coding: utf-8 -*-
"""
Decoder Configuration - Tunable constants loaded from YAML.

The packaged ``config.yaml`` next to this module holds the defaults.
``load_config`` merges an optional user YAML file over those defaults
and returns a frozen ``DecoderConfig``.

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
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import yaml

# ceosmeta internal
from ceosmeta.exceptions import ValidationError

CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass(frozen=True)
class DecoderConfig:
    """Constants consumed by the SAR normalizer.

    Parameters
    ----------
    doppler_threshold : float
        Magnitude of the constant Doppler term at or above which the
        whole coefficient triple is treated as unset.
    initial_vector_count : int
        State vector count before interval halving.
    max_propagation_interval : float
        Propagation interval ceiling in seconds.
    max_half_duration : float
        Half-scene durations at or above this (seconds) skip
        propagation entirely.
    expected_wavelength, expected_prf, expected_range_sampling_rate,
    expected_sampling_frequency, expected_range_gate : float
        Nominal physical magnitudes handed to the unit-scale service.
    alos_complex_azimuth_pixel_size : float
        Azimuth pixel size assigned to ALOS L1.1 complex products.
    no_data : float
        No-data value written into the general block.
    """

    doppler_threshold: float = 15000.0
    initial_vector_count: int = 3
    max_propagation_interval: float = 15.0
    max_half_duration: float = 360.0
    expected_wavelength: float = 0.0565
    expected_prf: float = 1653.0
    expected_range_sampling_rate: float = 18.96
    expected_sampling_frequency: float = 18.96e6
    expected_range_gate: float = 5.5e-3
    alos_complex_azimuth_pixel_size: float = 3.125
    no_data: float = 0.0


# (yaml section, yaml key) -> DecoderConfig field
_KEY_MAP = {
    ('doppler', 'sentinel_threshold'): 'doppler_threshold',
    ('propagation', 'initial_vector_count'): 'initial_vector_count',
    ('propagation', 'max_interval'): 'max_propagation_interval',
    ('propagation', 'max_half_duration'): 'max_half_duration',
    ('units', 'expected_wavelength'): 'expected_wavelength',
    ('units', 'expected_prf'): 'expected_prf',
    ('units', 'expected_range_sampling_rate'): 'expected_range_sampling_rate',
    ('units', 'expected_sampling_frequency'): 'expected_sampling_frequency',
    ('units', 'expected_range_gate'): 'expected_range_gate',
    ('alos', 'complex_azimuth_pixel_size'): 'alos_complex_azimuth_pixel_size',
    ('general', 'no_data'): 'no_data',
}


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path) as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValidationError(
            f"Configuration file {path} must hold a mapping, "
            f"got {type(cfg).__name__}"
        )
    return cfg


def _flatten(cfg: Dict[str, Any], source: Path) -> Dict[str, Any]:
    """Map nested YAML sections onto ``DecoderConfig`` field names."""
    values: Dict[str, Any] = {}
    for section, entries in cfg.items():
        if not isinstance(entries, dict):
            raise ValidationError(
                f"Section '{section}' in {source} must be a mapping"
            )
        for key, val in entries.items():
            name = _KEY_MAP.get((section, key))
            if name is None:
                raise ValidationError(
                    f"Unknown configuration key '{section}.{key}' in {source}"
                )
            values[name] = val
    return values


def load_config(
    path: Optional[Union[str, Path]] = None,
) -> DecoderConfig:
    """Load the decoder configuration.

    Parameters
    ----------
    path : str or Path, optional
        User YAML file whose keys override the packaged defaults.

    Returns
    -------
    DecoderConfig

    Raises
    ------
    ValidationError
        If a file is not a mapping of sections, or names an unknown key.
    FileNotFoundError
        If ``path`` does not exist.
    """
    values = _flatten(_read_yaml(CONFIG_PATH), CONFIG_PATH)
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        values.update(_flatten(_read_yaml(path), path))

    values['initial_vector_count'] = int(values['initial_vector_count'])
    for name, val in values.items():
        if name != 'initial_vector_count':
            values[name] = float(val)
    return DecoderConfig(**values)
