# -*- coding: utf-8 -*-
"""
Metadata Block Base - Dict-like access for typed metadata dataclasses.

Provides ``MetadataBlock``, a dataclass mixin that exposes the typed
fields of each canonical metadata block through dict-like access
(``block['orbit']``, ``'frame' in block``, ``block.get('mode')``) and
flattens them with ``to_dict()``.

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
from dataclasses import dataclass, fields as dc_fields
from typing import Any, Dict, Iterator, List


@dataclass
class MetadataBlock:
    """Base class for the blocks of the canonical metadata model.

    Subclasses declare typed fields; unset fields hold ``None``. Dict-like
    methods only report fields that have been populated, matching the
    behavior of a dict where absent keys return ``False``.

    Examples
    --------
    >>> general = GeneralBlock(sensor='ERS1', orbit=12345)
    >>> general['orbit']
    12345
    >>> 'frame' in general
    False
    >>> general.get('frame', -1)
    -1
    """

    def _field_names(self) -> List[str]:
        return [f.name for f in dc_fields(self)]

    def __getitem__(self, key: str) -> Any:
        """Access a field by name.

        Raises
        ------
        KeyError
            If the block has no field called ``key``.
        """
        if key in self._field_names():
            return getattr(self, key)
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        if key not in self._field_names():
            raise KeyError(key)
        setattr(self, key, value)

    def __contains__(self, key: str) -> bool:
        """Check if the field exists and has a non-None value."""
        return key in self._field_names() and getattr(self, key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by key with a default, like ``dict.get()``."""
        try:
            val = self[key]
        except KeyError:
            return default
        return default if val is None else val

    def keys(self) -> List[str]:
        """Return names of populated fields."""
        return [name for name in self._field_names()
                if getattr(self, name) is not None]

    def items(self) -> List[tuple]:
        """Return ``(name, value)`` pairs of populated fields."""
        return [(k, self[k]) for k in self.keys()]

    def to_dict(self) -> Dict[str, Any]:
        """Convert populated fields to a flat dictionary.

        Nested blocks are converted recursively.
        """
        result: Dict[str, Any] = {}
        for name in self.keys():
            val = getattr(self, name)
            if isinstance(val, MetadataBlock):
                val = val.to_dict()
            elif isinstance(val, list):
                val = [v.to_dict() if isinstance(v, MetadataBlock) else v
                       for v in val]
            result[name] = val
        return result

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())
