"""Backtracking solvers: N queens, sudoku and a rat in a maze."""

from __future__ import annotations

from collections.abc import Sequence

_DIGITS = "123456789"
_EMPTY = "."


def solve_n_queens(n: int) -> list[str] | None:
    """First placement of ``n`` non-attacking queens, rows as ``.``/``Q`` strings.

    Returns None when no placement exists.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)
        return False

    if not place(0):
        return None
    return ["." * col + "Q" + "." * (n - col - 1) for col in columns]


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]] | None:
    """Fill the ``.`` cells of a 9x9 board with digits; None if impossible.

    The input is left unchanged; the solved grid is returned as new rows.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("a sudoku board has 9 rows of 9 cells")
    if any(cell not in _DIGITS and cell != _EMPTY for row in grid for cell in row):
        raise ValueError("cells must be digits 1-9 or '.'")
    empties = [(r, c) for r in range(9) for c in range(9) if grid[r][c] == _EMPTY]

    def fits(row: int, col: int, digit: str) -> bool:
        top, left = 3 * (row // 3), 3 * (col // 3)
        for i in range(9):
            if grid[row][i] == digit or grid[i][col] == digit:
                return False
            if grid[top + i // 3][left + i % 3] == digit:
                return False
        return True

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for digit in _DIGITS:
            if fits(row, col, digit):
                grid[row][col] = digit
                if fill(index + 1):
                    return True
                grid[row][col] = _EMPTY
        return False

    return grid if fill(0) else None


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Path of 1s from top left to bottom right moving down or right.

    Returns a matrix marking the path with 1, or None when there is none.
    """
    size = len(maze)
    if any(len(row) != size for row in maze):
        raise ValueError("solve_maze() needs a square maze")
    path = [[0] * size for _ in range(size)]

    def walk(x: int, y: int) -> bool:
        if x == size - 1 and y == size - 1:
            path[x][y] = 1
            return True
        if 0 <= x < size and 0 <= y < size and maze[x][y] == 1:
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None