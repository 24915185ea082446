"""Grid route search: one search that seeks out blooming flowers, one that avoids them."""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .campus import EMPTY_CELL, GRID_COLS, GRID_ROWS, Point

BLOCKED_CELL = "0"
FLOWER_CELL = "3"
STRAIGHT_COST = 10
DIAGONAL_COST = 14
MAX_FLOWER_COUNT = 20
MAX_PATH_COST = 100000
POLLEN_PENALTY = 20

Cell = tuple[int, int]
Grid = Sequence[Sequence[str]]

_DIRECTIONS: tuple[Cell, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def heuristic(a: Sequence[int], b: Sequence[int]) -> int:
    """Estimated cost between two grid cells: ten per step of Manhattan distance."""
    return 10 * (abs(a[0] - b[0]) + abs(a[1] - b[1]))


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _to_cell(point: Sequence[float]) -> Cell:
    return (_round_half_away(point[0]), _round_half_away(point[1]))


def _in_bounds(cell: Cell) -> bool:
    return 0 <= cell[0] < GRID_ROWS and 0 <= cell[1] < GRID_COLS


def _cell_at(grid: Grid, cell: Cell) -> str:
    row, col = cell
    if row >= len(grid):
        return EMPTY_CELL
    line = grid[row]
    return line[col] if col < len(line) else EMPTY_CELL


def _around(cell: Cell):
    for dr, dc in _DIRECTIONS:
        neighbour = (cell[0] + dr, cell[1] + dc)
        if _in_bounds(neighbour):
            yield neighbour


def _step_cost(direction: Cell) -> int:
    return DIAGONAL_COST if direction[0] != 0 and direction[1] != 0 else STRAIGHT_COST


@dataclass(slots=True)
class _Node:
    pos: Cell
    g: int
    score: int
    extra: int
    parent: Optional["_Node"]


def _trace(node: _Node) -> list[Point]:
    path: list[Point] = []
    current: Optional[_Node] = node
    while current is not None:
        path.append((float(current.pos[0]), float(current.pos[1])))
        current = current.parent
    path.reverse()
    return path


def flower_path(start: Point, end: Point, grid: Grid) -> list[Point]:
    """Find a route from start to end that passes as many flower cells ahead of it as it can.

    Returns the grid cells of the route, start and end included, or an empty list.
    """
    start_cell = _to_cell(start)
    end_cell = _to_cell(end)
    counter = itertools.count()

    start_node = _Node(start_cell, 0, heuristic(start_cell, end_cell), 0, None)
    open_set: list[tuple[int, int, _Node]] = [(start_node.score, next(counter), start_node)]
    best_scores: dict[Cell, int] = {start_cell: start_node.score}

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current.pos == end_cell:
            return _trace(current)
        if current.score > best_scores.get(current.pos, 0):
            continue

        current_h = heuristic(current.pos, end_cell)
        for direction in _DIRECTIONS:
            neighbour = (current.pos[0] + direction[0], current.pos[1] + direction[1])
            if not _in_bounds(neighbour):
                continue
            if _cell_at(grid, neighbour) == BLOCKED_CELL:
                continue

            count = current.extra + sum(
                1
                for around in _around(neighbour)
                if _cell_at(grid, around) == FLOWER_CELL
                and heuristic(around, end_cell) < current_h
            )

            new_g = current.g + _step_cost(direction)
            if new_g > MAX_PATH_COST:
                continue
            new_h = heuristic(neighbour, end_cell)
            reward = count * 8 + count * count
            new_score = new_g + new_h - reward

            best = best_scores.get(neighbour)
            if best is None or new_score < best:
                node = _Node(neighbour, new_g, new_score, min(count, MAX_FLOWER_COUNT), current)
                best_scores[neighbour] = new_score
                heapq.heappush(open_set, (new_score, next(counter), node))
    return []


def avoid_path(start: Point, end: Point, grid: Grid) -> list[Point]:
    """Find a route from start to end that keeps away from flower cells.

    Every step onto a cell next to a flower costs a fixed penalty. Returns the
    grid cells of the route, start and end included, or an empty list.
    """
    start_cell = _to_cell(start)
    end_cell = _to_cell(end)
    counter = itertools.count()

    start_node = _Node(start_cell, 0, heuristic(start_cell, end_cell), 0, None)
    open_set: list[tuple[int, int, _Node]] = [(start_node.score, next(counter), start_node)]
    best_scores: dict[Cell, int] = {start_cell: start_node.score}

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current.pos == end_cell:
            return _trace(current)
        if current.score > best_scores.get(current.pos, 0):
            continue

        for direction in _DIRECTIONS:
            neighbour = (current.pos[0] + direction[0], current.pos[1] + direction[1])
            if not _in_bounds(neighbour):
                continue
            if _cell_at(grid, neighbour) == BLOCKED_CELL:
                continue

            new_g = current.g + _step_cost(direction)
            new_h = heuristic(neighbour, end_cell)
            penalty = current.extra
            if any(_cell_at(grid, around) == FLOWER_CELL for around in _around(neighbour)):
                penalty += POLLEN_PENALTY
            score = new_g + new_h + penalty

            best = best_scores.get(neighbour, 0)
            if not best or score < best:
                node = _Node(neighbour, new_g, score, penalty, current)
                best_scores[neighbour] = score
                heapq.heappush(open_set, (score, next(counter), node))
    return []