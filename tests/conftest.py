"""Shared test fixtures."""

from __future__ import annotations

import pytest

from qrstyle.qr_generator import BoolMatrix, SegnoMatrix, make_qr


def blank_rows(size: int, on=()):
    """Square grid of light modules with the (x, y) pairs in ``on`` dark."""
    rows = [[False] * size for _ in range(size)]
    for x, y in on:
        rows[y][x] = True
    return rows


def dark_modules(matrix):
    return [(x, y) for y in range(matrix.size) for x in range(matrix.size)
            if matrix.get_module(x, y)]


@pytest.fixture
def qr21() -> SegnoMatrix:
    return SegnoMatrix(make_qr("qrstyle", ecc='L', version=1))


@pytest.fixture
def qr25() -> SegnoMatrix:
    return SegnoMatrix(make_qr("https://example.com/qr", ecc='M', version=2))


@pytest.fixture
def full21() -> BoolMatrix:
    return BoolMatrix([[True] * 21 for _ in range(21)])
