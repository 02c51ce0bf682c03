# -*- coding: utf-8 -*-
"""antwerp: tiling configuration notation and lattice generation

Usage:
    from antwerp import parse, generate

    config = parse("6-3,3/r60/r(h5)")
    lattice = generate(config, iterations=2)
    for index, tile in enumerate(lattice.tiles):
        print(index, tile.centroid(), lattice.neighbours(index))
"""

from importlib.metadata import PackageNotFoundError, version

from .errors import (
    AntwerpError,
    Diagnostic,
    GeometryError,
    GeometryErrorKind,
    ParseError,
    ParseErrorKind,
)
from .notation import (
    Centre,
    Configuration,
    Corner,
    Edge,
    Origin,
    Reflection,
    Rotation,
    Vertex,
    format_configuration,
    parse,
)
from .config import LatticeSettings, load_settings
from .lattice import Lattice, generate

try:
    __version__ = version("antwerp")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "AntwerpError",
    "Diagnostic",
    "GeometryError",
    "GeometryErrorKind",
    "ParseError",
    "ParseErrorKind",
    "Centre",
    "Configuration",
    "Corner",
    "Edge",
    "Origin",
    "Reflection",
    "Rotation",
    "Vertex",
    "format_configuration",
    "parse",
    "LatticeSettings",
    "load_settings",
    "Lattice",
    "generate",
]
