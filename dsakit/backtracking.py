"""Backtracking searches: queens, mazes, combinations, keypads, sudoku and Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations, product
from typing import NamedTuple

__all__ = [
    "KEYPAD",
    "Move",
    "solve_n_queens",
    "rat_in_maze",
    "combinations_of",
    "keypad_combinations",
    "solve_sudoku",
    "tower_of_hanoi",
]

KEYPAD: tuple[str, ...] = (
    "",
    "",
    "abc",
    "def",
    "ghi",
    "jkl",
    "mno",
    "pqrs",
    "tuv",
    "wxyz",
)
"""Letters on each phone key; 0 and 1 carry none."""


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens.

    Each board is a list of rows, ``Q`` for a queen and ``.`` for empty.
    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError("board size must be non-negative")
    board = [["."] * n for _ in range(n)]
    row_used = [False] * n
    rising = [False] * max(2 * n - 1, 0)
    falling = [False] * max(2 * n - 1, 0)
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row_used[row] or rising[row + col] or falling[n - 1 + col - row]:
                continue
            board[row][col] = "Q"
            row_used[row] = rising[row + col] = falling[n - 1 + col - row] = True
            place(col + 1)
            board[row][col] = "."
            row_used[row] = rising[row + col] = falling[n - 1 + col - row] = False

    place(0)
    return solutions


_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell.

    Cells equal to 1 are open. Paths use the letters D, L, R and U and
    never revisit a cell; they are produced trying the moves in that order.
    """
    n = len(grid)
    if n == 0:
        return []
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    if grid[0][0] == 0:
        return []
    visited = [[False] * n for _ in range(n)]
    visited[0][0] = True
    paths: list[str] = []
    steps: list[str] = []

    def walk(x: int, y: int) -> None:
        if x == n - 1 and y == n - 1:
            paths.append("".join(steps))
            return
        for letter, dx, dy in _MAZE_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and not visited[nx][ny] and grid[nx][ny] == 1:
                visited[nx][ny] = True
                steps.append(letter)
                walk(nx, ny)
                steps.pop()
                visited[nx][ny] = False

    walk(0, 0)
    return paths


def combinations_of(values: Iterable, r: int) -> list[tuple]:
    """Return every choice of ``r`` elements, keeping their original order."""
    if r < 0:
        raise ValueError("combination size must be non-negative")
    return list(combinations(list(values), r))


def keypad_combinations(digits: Iterable[int] | str) -> list[str]:
    """Return every word the digit sequence can spell on a phone keypad.

    A digit without letters (0 or 1) leaves no words at all.
    """
    keys = []
    for digit in digits:
        value = int(digit)
        if not 0 <= value <= 9:
            raise ValueError(f"{digit!r} is not a keypad digit")
        keys.append(KEYPAD[value])
    return ["".join(letters) for letters in product(*keys)]


def _safe(grid: list[list[int]], row: int, col: int, num: int) -> bool:
    if grid[row][col] != 0:
        return False
    if num in grid[row]:
        return False
    if any(grid[r][col] == num for r in range(9)):
        return False
    top, left = row - row % 3, col - col % 3
    return all(
        grid[r][c] != num for r in range(top, top + 3) for c in range(left, left + 3)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the empty (0) cells of a 9x9 sudoku.

    Returns a solved copy, or None when no completion exists.
    """
    cells = [list(row) for row in grid]
    if len(cells) != 9 or any(len(row) != 9 for row in cells):
        raise ValueError("sudoku grid must be 9x9")
    if any(not 0 <= value <= 9 for row in cells for value in row):
        raise ValueError("sudoku cells hold 0 to 9")

    def fill() -> bool:
        empty = next(
            ((r, c) for r in range(9) for c in range(9) if cells[r][c] == 0), None
        )
        if empty is None:
            return True
        row, col = empty
        for num in range(1, 10):
            if _safe(cells, row, col, num):
                cells[row][col] = num
                if fill():
                    return True
                cells[row][col] = 0
        return False

    return cells if fill() else None


class Move(NamedTuple):
    """One Tower of Hanoi move."""

    disc: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"shift disc {self.disc} from {self.source} to {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", helper: str = "B", target: str = "C"
) -> list[Move]:
    """Return the moves that carry ``n`` discs from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("number of discs must be non-negative")
    moves: list[Move] = []

    def shift(count: int, src: str, via: str, dst: str) -> None:
        if count == 0:
            return
        shift(count - 1, src, dst, via)
        moves.append(Move(count, src, dst))
        shift(count - 1, via, src, dst)

    shift(n, source, helper, target)
    return moves