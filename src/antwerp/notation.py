## tiling configuration notation for antwerp
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

"""
Tiling configuration notation.

A configuration is written as the seed polygon, the phases of polygons
grown around it and the transformations that replicate the patch,
separated by slashes::

    12-6,4/m30/r(c2)

- ``12`` is the seed, a dodecagon.
- ``-6,4`` is one phase: a hexagon then a square, glued onto
  successive free edges.  Further phases follow, each after a ``-``.
- ``m30`` reflects across the line through the origin at 30 degrees.
- ``r(c2)`` rotates about the centre of tile 2.

Transformations are ``r`` (rotation) or ``m`` (reflection) followed by
nothing (the origin, at an angle derived from the seed), an angle in
degrees about the origin, or a parenthesized vertex feature: ``v``
for a corner, ``c`` for a centre and ``h`` for an edge midpoint,
followed by the feature index.

Usage:
    from antwerp.notation import parse, format_configuration

    config = parse("3-4-3,3/m30/r(h2)")
    assert format_configuration(config) == "3-4-3,3/m30/r(h2)"
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from antwerp.errors import (
    error_empty_transformation,
    error_empty_vertex_specifier,
    error_invalid_seed,
    error_invalid_shape,
    error_invalid_vertex_index,
    error_missing_transformations,
    error_unknown_transformation_char,
    error_unknown_vertex_type_char,
)


# --- Vertex features ---

@dataclass(frozen=True)
class Corner:
    """A vertex of the reference patch."""
    index: int

    def __str__(self) -> str:
        return format_vertex_type(self)


@dataclass(frozen=True)
class Centre:
    """The centroid of a tile of the reference patch."""
    index: int

    def __str__(self) -> str:
        return format_vertex_type(self)


@dataclass(frozen=True)
class Edge:
    """An edge midpoint of the reference patch."""
    index: int

    def __str__(self) -> str:
        return format_vertex_type(self)


VertexType = Union[Corner, Centre, Edge]


# --- Transformation sources ---

@dataclass(frozen=True)
class Origin:
    """The global origin, with an optional angle in degrees."""
    angle: Optional[int] = None

    def __str__(self) -> str:
        return format_source(self)


@dataclass(frozen=True)
class Vertex:
    """A named feature of the reference patch."""
    feature: VertexType

    def __str__(self) -> str:
        return format_source(self)


TransformationSource = Union[Origin, Vertex]


# --- Transformations ---

@dataclass(frozen=True)
class Rotation:
    source: TransformationSource

    def __str__(self) -> str:
        return format_transformation(self)


@dataclass(frozen=True)
class Reflection:
    source: TransformationSource

    def __str__(self) -> str:
        return format_transformation(self)


Transformation = Union[Rotation, Reflection]


@dataclass(frozen=True)
class Configuration:
    """A parsed tiling configuration.

    ``phases`` and ``transformations`` are stored as tuples, so two
    configurations compare equal whenever their contents do.
    """
    seed: int
    phases: Tuple[Tuple[int, ...], ...]
    transformations: Tuple[Transformation, ...]

    def __post_init__(self):
        object.__setattr__(self, "phases", tuple(tuple(p) for p in self.phases))
        object.__setattr__(self, "transformations", tuple(self.transformations))
        if not self.transformations:
            raise ValueError("a configuration needs at least one transformation")

    @classmethod
    def parse(cls, text: str) -> "Configuration":
        return parse(text)

    def __str__(self) -> str:
        return format_configuration(self)


# --- Parsing ---

_INTEGER = re.compile(r"[0-9]+")

_TRANSFORMATION_KINDS = {
    "r": Rotation,
    "m": Reflection,
}

_VERTEX_TYPES = {
    "v": Corner,
    "c": Centre,
    "h": Edge,
}


def _parse_integer(token: str) -> Optional[int]:
    if _INTEGER.fullmatch(token) is None:
        return None
    return int(token)


class NotationParser:
    """
    Parser for tiling configuration strings.

    Parsing stops at the first error, which is raised as a
    ``ParseError`` carrying the offending fragment and its offset.
    """

    def __init__(self, text: str):
        self.text = text

    def parse(self) -> Configuration:
        pieces = self.text.split("/")
        if len(pieces) < 2:
            raise error_missing_transformations(self.text)

        seed, phases = self._parse_polygons(pieces[0])

        transformations = []
        offset = len(pieces[0]) + 1
        for piece in pieces[1:]:
            transformations.append(self._parse_transformation(piece, offset))
            offset += len(piece) + 1

        return Configuration(seed, phases, transformations)

    def _parse_polygons(self, piece: str):
        tokens = piece.split("-")

        seed = _parse_integer(tokens[0])
        if seed is None:
            raise error_invalid_seed(tokens[0], 0, self.text)

        phases = []
        offset = len(tokens[0]) + 1
        for token in tokens[1:]:
            phase = []
            item_offset = offset
            for item in token.split(","):
                order = _parse_integer(item)
                if order is None:
                    raise error_invalid_shape(item, item_offset, self.text)
                phase.append(order)
                item_offset += len(item) + 1
            phases.append(tuple(phase))
            offset += len(token) + 1

        return seed, phases

    def _parse_transformation(self, piece: str, offset: int) -> Transformation:
        if not piece:
            raise error_empty_transformation(offset, self.text)

        # The kind is checked before anything else, even for a bare letter
        kind = _TRANSFORMATION_KINDS.get(piece[0])
        if kind is None:
            raise error_unknown_transformation_char(piece[0], offset, self.text)

        return kind(self._parse_source(piece[1:], offset + 1))

    def _parse_source(self, remainder: str, offset: int) -> TransformationSource:
        if not remainder:
            return Origin()

        angle = _parse_integer(remainder)
        if angle is not None:
            return Origin(angle)

        # Drop the enclosing parentheses
        spec = remainder[1:-1]
        if not spec:
            raise error_empty_vertex_specifier(remainder, offset, self.text)

        vertex_type = _VERTEX_TYPES.get(spec[0])
        if vertex_type is None:
            raise error_unknown_vertex_type_char(spec[0], offset + 1, self.text)

        index = _parse_integer(spec[1:])
        if index is None:
            raise error_invalid_vertex_index(spec[1:], offset + 2, self.text)

        return Vertex(vertex_type(index))


def parse(text: str) -> Configuration:
    """Parse a tiling configuration string."""
    return NotationParser(text).parse()


# --- Formatting ---

def format_vertex_type(vertex_type: VertexType) -> str:
    if isinstance(vertex_type, Corner):
        return f"v{vertex_type.index}"
    elif isinstance(vertex_type, Centre):
        return f"c{vertex_type.index}"
    elif isinstance(vertex_type, Edge):
        return f"h{vertex_type.index}"
    raise TypeError(f"not a vertex feature: {vertex_type!r}")


def format_source(source: TransformationSource) -> str:
    if isinstance(source, Origin):
        return "" if source.angle is None else str(source.angle)
    elif isinstance(source, Vertex):
        return f"({format_vertex_type(source.feature)})"
    raise TypeError(f"not a transformation source: {source!r}")


def format_transformation(transformation: Transformation) -> str:
    if isinstance(transformation, Rotation):
        return "r" + format_source(transformation.source)
    elif isinstance(transformation, Reflection):
        return "m" + format_source(transformation.source)
    raise TypeError(f"not a transformation: {transformation!r}")


def format_configuration(config: Configuration) -> str:
    """Render a configuration in the notation accepted by ``parse``."""
    text = str(config.seed)
    if config.phases:
        text += "-" + "-".join(",".join(str(order) for order in phase)
                               for phase in config.phases)
    return text + "/" + "/".join(format_transformation(t)
                                 for t in config.transformations)
