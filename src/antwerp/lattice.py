## lattice generation for antwerp
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
Lattice generation
==================

``generate`` turns a ``Configuration`` into a ``Lattice``: an ordered
list of polygon tiles plus, for every tile, the indices of the tiles
it shares an edge with.

Generation runs in three stages:

1. The seed tile is centred on the origin and turned so that its
   attachment edge lies horizontally below the centre.

2. Each phase glues its tiles, in order, onto successive free edges
   of the previous ring (the seed, for the first phase).  Every
   polygon order has a fixed attachment edge (its *starting index*)
   that is laid against the frontier edge.  An order of ``0`` leaves
   the frontier edge empty.

3. The transformations are applied in sequence, each to the tiles
   present so far, for ``iterations`` passes.  The first pass acts on
   the whole patch.  Every later pass first grows the phases again
   around the free edges of the tiles the pass before introduced, then
   transforms those tiles together with the new growth, so the
   lattice spreads outward.  Rotations are repeated until they close
   up.  A placed or transformed tile that coincides with an existing
   tile is merged into it.

Tiles live in a flat list and adjacency is held as indices into it.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from antwerp.config import LatticeSettings
from antwerp.geometry.poly2 import Poly2, regular_tile
from antwerp.geometry.vec2 import Vec2
from antwerp.notation import (
    Centre,
    Configuration,
    Corner,
    Edge,
    Origin,
    Reflection,
    Rotation,
    Transformation,
    Vertex,
    VertexType,
)

__all__ = [
    "STARTING_INDEX",
    "Lattice",
    "generate",
    "starting_index",
]

logger = logging.getLogger(__name__)

## attachment edge of each supported polygon order; the offsets for
## the octagon and dodecagon keep tiles glued around a shared vertex
## closing up without gaps
STARTING_INDEX = {3: 0, 4: 0, 6: 0, 8: 1, 12: 2}

Motion = Callable[[Poly2], Poly2]


def starting_index(order: int) -> int:
    """Index of the edge new tiles of ``order`` sides are glued by."""
    return STARTING_INDEX[order]


@dataclass
class Lattice:
    """Tiles in placement order and their edge adjacency."""

    tiles: List[Poly2] = field(default_factory=list)
    connectivity: List[List[int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tiles)

    def neighbours(self, index: int) -> List[int]:
        return list(self.connectivity[index])

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Each adjacent pair of tile indices once, lower index first."""
        for i, adjacent in enumerate(self.connectivity):
            for j in adjacent:
                if i < j:
                    yield i, j


class _LatticeBuilder:
    """Arena of tiles with spatial lookup of centroids and edges."""

    def __init__(self, num, side_length):
        self.num = num
        self.side_length = side_length
        self.tiles: List[Poly2] = []
        self.connectivity: List[List[int]] = []
        self._cell = num.tolerance * 4
        self._tile_cells: Dict[Tuple[int, int], List[int]] = {}
        self._edge_cells: Dict[Tuple[int, int], List[Tuple[int, int]]] = {}

    def _key(self, p: Vec2) -> Tuple[int, int]:
        return (math.floor(float(p.x) / self._cell),
                math.floor(float(p.y) / self._cell))

    def _nearby(self, cells, p: Vec2):
        kx, ky = self._key(p)
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                yield from cells.get((kx + dx, ky + dy), ())

    def tile(self, order: int) -> Poly2:
        return regular_tile(order, self.side_length, self.num)

    def find(self, poly: Poly2) -> Optional[int]:
        """Index of a present tile with the same vertex set as ``poly``."""
        for i in self._nearby(self._tile_cells, poly.centroid()):
            if self.tiles[i].coincides(poly):
                return i
        return None

    def add(self, poly: Poly2) -> Tuple[int, bool]:
        """Add ``poly`` unless it coincides with a present tile.

        Returns the tile index and whether a new tile was appended.
        """
        existing = self.find(poly)
        if existing is not None:
            return existing, False

        index = len(self.tiles)
        self.tiles.append(poly)
        self.connectivity.append([])
        self._tile_cells.setdefault(self._key(poly.centroid()), []).append(index)
        for k, e in enumerate(poly.edges()):
            for other in self._sharing(e, index):
                self.link(index, other)
            self._edge_cells.setdefault(self._key(e.centre()), []).append((index, k))
        return index, True

    def _sharing(self, e, index: int) -> Iterator[int]:
        for other, k in self._nearby(self._edge_cells, e.centre()):
            if other != index and self.tiles[other].edge(k).coincides(e):
                yield other

    def unique(self, points: List[Vec2]) -> List[Vec2]:
        """``points`` in order, dropping any close to an earlier one."""
        seen: Dict[Tuple[int, int], List[Vec2]] = {}
        unique = []
        for p in points:
            if any(p.close(q) for q in self._nearby(seen, p)):
                continue
            seen.setdefault(self._key(p), []).append(p)
            unique.append(p)
        return unique

    def link(self, i: int, j: int) -> None:
        if i == j or j in self.connectivity[i]:
            return
        self.connectivity[i].append(j)
        self.connectivity[j].append(i)

    def is_free(self, index: int, k: int) -> bool:
        """Is edge ``k`` of tile ``index`` not shared with another tile."""
        return next(self._sharing(self.tiles[index].edge(k), index), None) is None

    def lattice(self) -> Lattice:
        return Lattice(list(self.tiles), [list(c) for c in self.connectivity])


# --- Seed and phases ---

def _seed_tile(builder: _LatticeBuilder, order: int) -> Poly2:
    num = builder.num
    tile = builder.tile(order)
    s = starting_index(order)
    ## turn the midpoint of edge s to point straight down; triangles are
    ## placed by this same rotation rather than by a separate translation
    return tile.rotate(-num.frac_pi_2 - num.tau * (s + num.half) / order)


def _attach(builder: _LatticeBuilder, order: int, parent: int, k: int) -> Poly2:
    """Tile of ``order`` sides glued onto edge ``k`` of tile ``parent``."""
    target = builder.tiles[parent].edge(k)
    ## reflected tiles run clockwise
    if builder.tiles[parent].area() < 0:
        target = target.reversed()
    tile = builder.tile(order)
    a = starting_index(order)
    own = tile.edge(a)
    angle = target.reversed().direction().angle() - own.direction().angle()
    turned = tile.rotate(angle)
    return turned.translate(target.end - turned.vertex(a))


def _free_edges(builder: _LatticeBuilder, index: int, first: int) -> List[Tuple[int, int]]:
    n = builder.tiles[index].order
    edges = []
    for j in range(n):
        k = (first + j) % n
        if builder.is_free(index, k):
            edges.append((index, k))
    return edges


def _frontier(builder: _LatticeBuilder, indices: List[int]) -> List[Tuple[int, int]]:
    """Free edges of the given tiles, each starting after its attachment edge."""
    frontier = []
    for index in indices:
        tile = builder.tiles[index]
        frontier.extend(_free_edges(builder, index, starting_index(tile.order) + 1))
    return frontier


def _grow_phases(builder: _LatticeBuilder, phases, frontier) -> List[int]:
    """Glue each phase onto the frontier, returning the new tile indices."""
    grown = []
    for number, phase in enumerate(phases, start=1):
        placed = []
        position = 0
        for order in phase:
            while position < len(frontier) and not builder.is_free(*frontier[position]):
                position += 1
            if position >= len(frontier):
                logger.warning("phase %d: no free edge left for %d of its polygons",
                               number, len(phase) - len(placed))
                break
            parent, k = frontier[position]
            position += 1

            if order == 0:
                logger.debug("phase %d: gap at edge %d of tile %d", number, k, parent)
                continue

            index, new = builder.add(_attach(builder, order, parent, k))
            builder.link(index, parent)
            if new:
                placed.append(index)
                logger.debug("phase %d: placed %d-gon %d on edge %d of tile %d",
                             number, order, index, k, parent)
            else:
                logger.debug("phase %d: %d-gon on edge %d of tile %d merged into tile %d",
                             number, order, k, parent, index)

        grown.extend(placed)
        frontier = _frontier(builder, placed)
    return grown


# --- Transformations ---

def _features(builder: _LatticeBuilder, feature: VertexType, reference: int) -> List[Vec2]:
    """Points a vertex feature index selects from, reference tile first."""
    if reference >= len(builder.tiles):
        logger.warning("reference tile %d does not exist, using tile 0", reference)
        reference = 0
    order = [reference] + [i for i in range(len(builder.tiles)) if i != reference]
    tiles = [builder.tiles[i] for i in order]

    if isinstance(feature, Corner):
        return builder.unique([v for t in tiles for v in t.vertices])
    elif isinstance(feature, Centre):
        return [t.centroid() for t in tiles]
    elif isinstance(feature, Edge):
        return builder.unique([e.centre() for t in tiles for e in t.edges()])
    raise TypeError(f"not a vertex feature: {feature!r}")


def _anchor(builder: _LatticeBuilder, feature: VertexType, reference: int) -> Vec2:
    points = _features(builder, feature, reference)
    if feature.index >= len(points):
        logger.warning("%s: only %d points available, wrapping index", feature, len(points))
    return points[feature.index % len(points)]


def _turns(degrees) -> int:
    """Number of rotations by ``degrees`` before returning to the start."""
    return 360 // math.gcd(int(degrees), 360)


def _rotations(num, degrees, about=None) -> List[Motion]:
    step = num.radians(degrees)
    return [(lambda poly, angle=step * j: poly.rotate(angle, about))
            for j in range(1, _turns(degrees))]


def _motions(transformation: Transformation, config: Configuration,
             builder: _LatticeBuilder, settings: LatticeSettings,
             anchors: Dict[int, Vec2], position: int) -> List[Motion]:
    """Rigid motions producing the copies made by one transformation."""
    num = builder.num

    if isinstance(transformation, Rotation):
        source = transformation.source
        if isinstance(source, Origin):
            if source.angle is None:
                step = num.tau / config.seed
                return [(lambda poly, angle=step * j: poly.rotate(angle))
                        for j in range(1, config.seed)]
            return _rotations(num, source.angle)
        elif isinstance(source, Vertex):
            if position not in anchors:
                anchors[position] = _anchor(builder, source.feature, settings.reference_tile)
            return _rotations(num, settings.vertex_rotation_degrees, anchors[position])
        raise TypeError(f"not a transformation source: {source!r}")

    elif isinstance(transformation, Reflection):
        source = transformation.source
        if isinstance(source, Origin):
            degrees = 90 if source.angle is None else source.angle
            axis = Vec2.unit(num.radians(degrees), num)
        elif isinstance(source, Vertex):
            if position not in anchors:
                anchors[position] = _anchor(builder, source.feature, settings.reference_tile)
            axis = anchors[position]
            if axis.close(Vec2.zero(num)):
                axis = Vec2.unit(num.frac_pi_2, num)
        else:
            raise TypeError(f"not a transformation source: {source!r}")
        return [lambda poly: poly.reflect(axis)]

    raise TypeError(f"not a transformation: {transformation!r}")


def _replicate(builder: _LatticeBuilder, motions: List[Motion], sources: List[int]) -> List[int]:
    """Apply each motion to the source tiles, returning new tile indices."""
    added = []
    for motion in motions:
        images = {}
        for i in sources:
            j, new = builder.add(motion(builder.tiles[i]))
            images[i] = j
            if new:
                added.append(j)
        # Copies keep the adjacency of their pre-images
        for i in sources:
            for k in list(builder.connectivity[i]):
                if k in images:
                    builder.link(images[i], images[k])
    return added


def generate(config: Configuration, iterations: int = 1,
             settings: Optional[LatticeSettings] = None) -> Lattice:
    """Generate the tiles and connectivity described by ``config``.

    Raises ``GeometryError`` if the configuration names a polygon
    order that cannot tile.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    if settings is None:
        settings = LatticeSettings()

    builder = _LatticeBuilder(settings.field(), settings.side_length)
    builder.add(_seed_tile(builder, config.seed))

    s = starting_index(config.seed)
    _grow_phases(builder, config.phases,
                 [(0, (s + j) % config.seed) for j in range(config.seed)])
    logger.debug("patch of %d tiles from %d phases", len(builder.tiles), len(config.phases))

    anchors: Dict[int, Vec2] = {}
    newest = list(range(len(builder.tiles)))
    for number in range(1, iterations + 1):
        introduced = []
        if number > 1:
            introduced.extend(_grow_phases(builder, config.phases,
                                           _frontier(builder, newest)))
        working = newest + introduced
        for position, transformation in enumerate(config.transformations):
            motions = _motions(transformation, config, builder, settings, anchors, position)
            added = _replicate(builder, motions, working)
            working.extend(added)
            introduced.extend(added)
        logger.debug("pass %d: %s added %d tiles", number, config, len(introduced))
        if not introduced:
            break
        newest = introduced

    logger.info("generated %d tiles for %s", len(builder.tiles), config)
    return builder.lattice()
