"""Algorithms over two-dimensional grids and matrices."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

_LAND = ("1", 1)


def num_islands(grid: Sequence[Sequence[Any]]) -> int:
    """Count groups of land cells (``"1"``) joined up, down, left or right.

    The grid is left unchanged.
    """
    land = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell in _LAND
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            i, j = stack.pop()
            for neighbour in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
                if neighbour in land:
                    land.remove(neighbour)
                    stack.append(neighbour)
    return islands


def flip_and_invert_image(image: Sequence[MutableSequence[int]]) -> Sequence[MutableSequence[int]]:
    """Mirror each row of a 0/1 image and invert its bits, in place; return the image."""
    for row in image:
        row[:] = [value ^ 1 for value in reversed(row)]
    return image


def generate_matrix(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` matrix filled with 1..n*n in a clockwise spiral."""
    if n < 0:
        raise ValueError("n must be non-negative")
    matrix = [[0] * n for _ in range(n)]
    directions = ((0, 1), (1, 0), (0, -1), (-1, 0))
    heading = 0
    i = j = 0
    for value in range(1, n * n + 1):
        matrix[i][j] = value
        di, dj = directions[heading]
        ni, nj = i + di, j + dj
        if not (0 <= ni < n and 0 <= nj < n) or matrix[ni][nj]:
            heading = (heading + 1) % 4
            di, dj = directions[heading]
            ni, nj = i + di, j + dj
        i, j = ni, nj
    return matrix


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix whose rows and columns ascend."""
    if not matrix or not matrix[0]:
        return False
    i, j = 0, len(matrix[0]) - 1
    while i < len(matrix) and j >= 0:
        value = matrix[i][j]
        if value == target:
            return True
        if value > target:
            j -= 1
        else:
            i += 1
    return False