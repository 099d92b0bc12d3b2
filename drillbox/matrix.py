"""Matrix rotation, spiral traversal and adjacency-table formatting."""

from __future__ import annotations

from typing import Sequence

MAX_SIZE = 10


def _rows(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix rotated by 90 degrees clockwise.

    Both dimensions must lie between 1 and ``MAX_SIZE``.
    """
    rows = _rows(matrix)
    if not 1 <= len(rows) <= MAX_SIZE:
        raise ValueError(f"number of rows must be 1-{MAX_SIZE}")
    if not 1 <= len(rows[0]) <= MAX_SIZE:
        raise ValueError(f"number of columns must be 1-{MAX_SIZE}")
    return [list(column) for column in zip(*reversed(rows))]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in clockwise spiral order starting at the top left."""
    rows = _rows(matrix)
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def format_adjacency(names: Sequence[str], matrix: Sequence[Sequence[int]]) -> str:
    """Render an adjacency matrix as a tab-separated table labelled by node names."""
    rows = _rows(matrix)
    names = list(names)
    if len(rows) != len(names) or any(len(row) != len(names) for row in rows):
        raise ValueError("adjacency matrix must be square and match the node names")
    lines = ["Nodes\t" + "".join(f"{name}\t" for name in names)]
    for name, row in zip(names, rows):
        lines.append(f"{name}\t" + "".join(f"{value}\t" for value in row))
    return "\n".join(lines) + "\n"