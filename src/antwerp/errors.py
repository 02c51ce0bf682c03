## exceptions and diagnostics for antwerp
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
Exceptions and diagnostics for antwerp.

Error code ranges:
- E1xx: notation parse errors
- G2xx: geometry errors
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ParseErrorKind(Enum):
    """Reasons a tiling notation string can be rejected."""
    MISSING_TRANSFORMATIONS = "E101"
    INVALID_SEED = "E102"
    INVALID_SHAPE = "E103"
    EMPTY_TRANSFORMATION = "E104"
    UNKNOWN_TRANSFORMATION_CHAR = "E105"
    EMPTY_VERTEX_SPECIFIER = "E106"
    UNKNOWN_VERTEX_TYPE_CHAR = "E107"
    INVALID_VERTEX_INDEX = "E108"


class GeometryErrorKind(Enum):
    """Reasons a polygon cannot be constructed."""
    UNSUPPORTED_POLYGON_ORDER = "G201"
    DEGENERATE_POLYGON = "G202"
    NON_POSITIVE_SIDE_LENGTH = "G203"
    NON_POSITIVE_VERTEX_COUNT = "G204"


@dataclass
class Diagnostic:
    """A single diagnostic message about a notation string."""
    code: str                       # E101, E102, etc.
    message: str                    # Human-readable message
    fragment: str                   # The offending substring
    offset: int                     # 0-indexed position of fragment in text
    text: Optional[str] = None      # The full notation string
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        parts = [f"{self.offset}: error[{self.code}]: {self.message}"]

        # Source with caret under the fragment
        if show_source and self.text is not None:
            parts.append(f"  | {self.text}")
            parts.append(f"  | {' ' * self.offset}{'^' * max(1, len(self.fragment))}")

        for hint in self.hints:
            parts.append(f"  = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "message": self.message,
            "fragment": self.fragment,
            "range": {
                "start": self.offset,
                "end": self.offset + len(self.fragment),
            },
            "hints": self.hints,
        }


class AntwerpError(Exception):
    """Base exception for antwerp errors."""
    pass


class ParseError(AntwerpError):
    """A notation string could not be parsed (E1xx)."""

    def __init__(self, kind: ParseErrorKind, diagnostic: Diagnostic):
        self.kind = kind
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def fragment(self) -> str:
        return self.diagnostic.fragment

    def __str__(self) -> str:
        return self.diagnostic.format()


class GeometryError(AntwerpError):
    """A polygon could not be constructed (G2xx)."""

    def __init__(self, kind: GeometryErrorKind, message: str, value: Any = None):
        self.kind = kind
        self.value = value
        super().__init__(f"error[{kind.value}]: {message}")


# --- Parse error codes ---

def _parse_error(kind: ParseErrorKind, message: str, fragment: str, offset: int,
                 text: Optional[str], hints: Optional[List[str]] = None) -> ParseError:
    diag = Diagnostic(
        code=kind.value,
        message=message,
        fragment=fragment,
        offset=offset,
        text=text,
        hints=hints or [],
    )
    return ParseError(kind, diag)


def error_missing_transformations(text: str) -> ParseError:
    """E101: No '/'-separated transformation follows the polygons."""
    return _parse_error(
        ParseErrorKind.MISSING_TRANSFORMATIONS,
        "expected at least one transformation after the polygons",
        text, 0, text,
        hints=["append a transformation, e.g. '/r60' or '/m30'"],
    )


def error_invalid_seed(fragment: str, offset: int, text: str = None) -> ParseError:
    """E102: The seed polygon is not an integer."""
    return _parse_error(
        ParseErrorKind.INVALID_SEED,
        f"invalid seed polygon '{fragment}'",
        fragment, offset, text,
        hints=["the seed is the side count of the first polygon, e.g. '6'"],
    )


def error_invalid_shape(fragment: str, offset: int, text: str = None) -> ParseError:
    """E103: A phase entry is not an integer."""
    return _parse_error(
        ParseErrorKind.INVALID_SHAPE,
        f"invalid polygon '{fragment}' in phase",
        fragment, offset, text,
        hints=["phases are comma separated side counts, e.g. '3,4,3'"],
    )


def error_empty_transformation(offset: int, text: str = None) -> ParseError:
    """E104: Nothing between two '/' separators."""
    return _parse_error(
        ParseErrorKind.EMPTY_TRANSFORMATION,
        "empty transformation",
        "", offset, text,
    )


def error_unknown_transformation_char(fragment: str, offset: int, text: str = None) -> ParseError:
    """E105: A transformation does not start with 'r' or 'm'."""
    return _parse_error(
        ParseErrorKind.UNKNOWN_TRANSFORMATION_CHAR,
        f"unknown transformation '{fragment}'",
        fragment, offset, text,
        hints=["use 'r' for a rotation or 'm' for a reflection"],
    )


def error_empty_vertex_specifier(fragment: str, offset: int, text: str = None) -> ParseError:
    """E106: Parentheses without a vertex feature."""
    return _parse_error(
        ParseErrorKind.EMPTY_VERTEX_SPECIFIER,
        f"empty vertex specifier '{fragment}'",
        fragment, offset, text,
        hints=["name a vertex feature, e.g. '(v1)', '(c2)' or '(h3)'"],
    )


def error_unknown_vertex_type_char(fragment: str, offset: int, text: str = None) -> ParseError:
    """E107: A vertex feature does not start with 'v', 'c' or 'h'."""
    return _parse_error(
        ParseErrorKind.UNKNOWN_VERTEX_TYPE_CHAR,
        f"unknown vertex type '{fragment}'",
        fragment, offset, text,
        hints=["'v' is a corner, 'c' a centre and 'h' an edge midpoint"],
    )


def error_invalid_vertex_index(fragment: str, offset: int, text: str = None) -> ParseError:
    """E108: The index of a vertex feature is not an integer."""
    return _parse_error(
        ParseErrorKind.INVALID_VERTEX_INDEX,
        f"invalid vertex index '{fragment}'",
        fragment, offset, text,
    )


# --- Geometry error codes ---

def error_unsupported_polygon_order(order: int) -> GeometryError:
    """G201: Tiles must be triangles, squares, hexagons, octagons or dodecagons."""
    return GeometryError(
        GeometryErrorKind.UNSUPPORTED_POLYGON_ORDER,
        f"unsupported polygon order {order}",
        order,
    )


def error_degenerate_polygon(count: int) -> GeometryError:
    """G202: Fewer than three distinct vertices."""
    return GeometryError(
        GeometryErrorKind.DEGENERATE_POLYGON,
        f"polygon needs at least 3 distinct vertices, got {count}",
        count,
    )


def error_non_positive_side_length(side_length) -> GeometryError:
    """G203: Regular polygon side length must be positive."""
    return GeometryError(
        GeometryErrorKind.NON_POSITIVE_SIDE_LENGTH,
        f"side length must be positive, got {side_length}",
        side_length,
    )


def error_non_positive_vertex_count(order: int) -> GeometryError:
    """G204: Regular polygons need at least three vertices."""
    return GeometryError(
        GeometryErrorKind.NON_POSITIVE_VERTEX_COUNT,
        f"regular polygon needs at least 3 vertices, got {order}",
        order,
    )
