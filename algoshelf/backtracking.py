"""Backtracking puzzles: N queens, number-grid filling and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import NamedTuple

DIGITS = range(1, 10)


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board.

    A placement gives the queen's column for each row, top to bottom.
    Placements come in the order found by trying columns left to right,
    row by row.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []
    used_columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(columns)
            return
        for col in range(n):
            if col in used_columns or row - col in falling or row + col in rising:
                continue
            columns.append(col)
            used_columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            yield from place(row + 1)
            columns.pop()
            used_columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)

    yield from place(0)


def format_board(board: Sequence[int]) -> str:
    """Draw a placement with ``Q`` for a queen and ``*`` for an empty square."""
    size = len(board)
    for col in board:
        if not 0 <= col < size:
            raise ValueError(f"column {col} is outside 0..{size - 1}")
    return "\n".join(
        " ".join("Q" if square == col else "*" for square in range(size))
        for col in board
    )


def is_valid_placement(
    grid: Sequence[Sequence[int]], row: int, col: int, num: int
) -> bool:
    """Whether ``num`` appears neither in ``row`` nor in column ``col`` of ``grid``.

    Only the row and the column are checked; 3 by 3 boxes are not.
    """
    if num in grid[row]:
        return False
    return all(line[col] != num for line in grid)


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of ``grid`` with digits 1 to 9 so no row or column repeats one.

    Cells are filled row by row, trying the smallest digit first, and the
    first complete grid found is returned as a new list of rows. The input
    is left unchanged. Returns None when no filling exists.
    """
    cells = [list(line) for line in grid]
    width = len(cells[0]) if cells else 0
    if any(len(line) != width for line in cells):
        raise ValueError("grid rows must all have the same length")
    empty = [
        (r, c) for r, line in enumerate(cells) for c, value in enumerate(line) if value == 0
    ]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        r, c = empty[index]
        for num in DIGITS:
            if is_valid_placement(cells, r, c, num):
                cells[r][c] = num
                if fill(index + 1):
                    return True
                cells[r][c] = 0
        return False

    return cells if fill(0) else None


class Move(NamedTuple):
    """One disk moved from the top of one rod to the top of another."""

    source: str
    target: str

    def __str__(self) -> str:
        return f"Move a rod from the top of {self.source} to the top of {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> Iterator[Move]:
    """The moves that carry ``n`` disks from ``source`` to ``target``, in order."""
    if n < 1:
        raise ValueError("there must be at least one disk")
    if n == 1:
        yield Move(source, target)
        return
    yield from tower_of_hanoi(n - 1, source, target, auxiliary)
    yield Move(source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, source, target)