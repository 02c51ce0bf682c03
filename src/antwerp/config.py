## lattice generation settings for antwerp
## Copyright (c) 2023 antwerp contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Lattice generation settings.

Settings can be built directly, from a mapping, or loaded from a YAML
file:
- An explicit path passed to ``load_settings``
- The file named by the ``ANTWERP_SETTINGS`` environment variable
- Otherwise the defaults

Example settings file::

    side_length: 1.0
    tolerance: 1.0e-6
    precision: 40
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from antwerp.numerics import FLOAT, FloatField, RealField, epsilon, mp_field

__all__ = [
    "ANTWERP_SETTINGS",
    "LatticeSettings",
    "load_settings",
]

logger = logging.getLogger(__name__)

# Environment variable naming a YAML settings file
ANTWERP_SETTINGS = "ANTWERP_SETTINGS"


@dataclass(frozen=True)
class LatticeSettings:
    """Tunable parameters of lattice generation."""

    side_length: float = 1.0
    tolerance: float = epsilon          # vertex and edge coincidence
    reference_tile: int = 0             # first tile of anchor feature lists
    precision: Optional[int] = None     # mpmath decimal digits, None for float
    vertex_rotation_degrees: int = 180  # rotation about a vertex feature

    def __post_init__(self):
        if self.side_length <= 0:
            raise ValueError(f"side_length must be positive, got {self.side_length}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.reference_tile < 0:
            raise ValueError(f"reference_tile must be non-negative, got {self.reference_tile}")
        if self.precision is not None and self.precision < 1:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.vertex_rotation_degrees % 360 == 0:
            raise ValueError("vertex_rotation_degrees must not be a whole turn")

    def field(self) -> RealField:
        """The numeric field geometry is generated in."""
        if self.precision is None:
            if self.tolerance == FLOAT.tolerance:
                return FLOAT
            return FloatField(self.tolerance)
        return mp_field(self.precision, self.tolerance)

    def with_overrides(self, **overrides: Any) -> "LatticeSettings":
        return replace(self, **overrides)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LatticeSettings":
        """Build settings from a mapping, rejecting unknown keys."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ValueError(f"unknown lattice settings: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for name, value in data.items():
            if name in ("side_length", "tolerance"):
                values[name] = float(value)
            elif name == "precision":
                values[name] = None if value is None else int(value)
            else:
                values[name] = int(value)
        return cls(**values)


def load_settings(path: Optional[Path | str] = None) -> LatticeSettings:
    """Load settings from ``path``, or from ``$ANTWERP_SETTINGS``.

    Returns the defaults when neither names a file.
    """
    if path is None:
        path = os.environ.get(ANTWERP_SETTINGS)
        if not path:
            return LatticeSettings()

    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"settings file must contain a mapping: {settings_path}")

    logger.debug("loaded lattice settings from %s", settings_path)
    return LatticeSettings.from_mapping(data)
