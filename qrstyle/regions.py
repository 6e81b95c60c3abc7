# -*- coding: utf-8 -*-
"""
QR Code Regions Module

This module classifies the modules of a QR symbol by structural role. Only the
three 7x7 finder patterns are singled out: their outer ring (border), their
inner 5x5 block (interior) and everything else (data). Styling strategies
draw each region independently.

Functions:
    finder_anchors: Top-left corners of the three finder patterns
    classify_module: Region of a single module
    is_same_region_neighbor: Adjacency test used by corner-aware shapes
    probe_neighbors: All four adjacency flags for one module
"""

from enum import Enum
from typing import List, NamedTuple, Protocol


FINDER_SIZE = 7
FINDER_CENTER_OFFSET = 3
FINDER_INNER_OFFSET = 2
FINDER_INNER_SIZE = 3

# Below this size the three finder windows overlap
MIN_SEPARATED_SIZE = 2 * FINDER_SIZE


class Region(Enum):
    """Structural role of a dark module."""
    FINDER_INTERIOR = 0
    FINDER_BORDER = 1
    DATA = 2


class Direction(Enum):
    """Orthogonal neighbour offsets as (dx, dy)."""
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)


class Point(NamedTuple):
    x: int
    y: int


class Neighbors(NamedTuple):
    """Same-region flags for the four orthogonal neighbours."""
    n: bool = False
    e: bool = False
    s: bool = False
    w: bool = False


class ModuleMatrix(Protocol):
    """Read-only square module grid produced by an encoder."""

    size: int

    def get_module(self, x: int, y: int) -> bool:
        ...


def finder_anchors(size: int) -> List[Point]:
    """
    Return the top-left corners of the three finder patterns.

    The order is fixed: top-left, top-right, bottom-left. Strategies that draw
    one shape per finder rely on it.

    Args:
        size (int): Symbol size in modules (21 for v1, 25 for v2, etc.)

    Returns:
        List[Point]: Three anchor points

    Example:
        >>> finder_anchors(25)
        [Point(x=0, y=0), Point(x=18, y=0), Point(x=0, y=18)]
    """
    return [
        Point(0, 0),
        Point(size - FINDER_SIZE, 0),
        Point(0, size - FINDER_SIZE),
    ]


def _in_window(point: Point, anchor: Point) -> bool:
    return (anchor.x <= point.x <= anchor.x + FINDER_SIZE - 1
            and anchor.y <= point.y <= anchor.y + FINDER_SIZE - 1)


def classify_module(point: Point, size: int) -> Region:
    """
    Classify a module coordinate by structural region.

    The function is pure: the region depends only on the coordinate and the
    symbol size, never on the module value.

    Args:
        point (Point): Module coordinate, 0 <= x, y < size
        size (int): Symbol size in modules

    Returns:
        Region: FINDER_BORDER on the outer ring of a finder window,
            FINDER_INTERIOR inside it, DATA everywhere else

    Example:
        >>> classify_module(Point(0, 0), 25)
        <Region.FINDER_BORDER: 1>
        >>> classify_module(Point(3, 3), 25)
        <Region.FINDER_INTERIOR: 0>
        >>> classify_module(Point(10, 10), 25)
        <Region.DATA: 2>

    Note:
        With size < 14 the windows overlap and the first matching anchor wins.
        The renderer refuses such matrices before classifying anything.
    """
    last = FINDER_SIZE - 1
    for anchor in finder_anchors(size):
        if not _in_window(point, anchor):
            continue
        on_ring = (point.x in (anchor.x, anchor.x + last)
                   or point.y in (anchor.y, anchor.y + last))
        return Region.FINDER_BORDER if on_ring else Region.FINDER_INTERIOR
    return Region.DATA


def is_same_region_neighbor(point: Point, direction: Direction,
                            matrix: ModuleMatrix, size: int) -> bool:
    """
    Check whether the neighbour in ``direction`` is dark and shares the region.

    Args:
        point (Point): Module being drawn
        direction (Direction): Which neighbour to probe
        matrix (ModuleMatrix): Module grid
        size (int): Symbol size in modules

    Returns:
        bool: False when the neighbour is off the grid, light, or belongs to
            another region
    """
    dx, dy = direction.value
    nx, ny = point.x + dx, point.y + dy
    if nx < 0 or ny < 0 or nx >= size or ny >= size:
        return False
    if not matrix.get_module(nx, ny):
        return False
    return classify_module(Point(nx, ny), size) == classify_module(point, size)


def probe_neighbors(point: Point, matrix: ModuleMatrix, size: int) -> Neighbors:
    """Compute the four adjacency flags for ``point``."""
    return Neighbors(
        n=is_same_region_neighbor(point, Direction.NORTH, matrix, size),
        e=is_same_region_neighbor(point, Direction.EAST, matrix, size),
        s=is_same_region_neighbor(point, Direction.SOUTH, matrix, size),
        w=is_same_region_neighbor(point, Direction.WEST, matrix, size),
    )
