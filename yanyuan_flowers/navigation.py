"""Route planning between named campus places, seeking or avoiding blooming flowers."""

from __future__ import annotations

from .campus import CELL_SIZE, GRID_COLS, GRID_ROWS, CampusMap, Point
from .flowers import FlowerInfo
from .pathfinding import FLOWER_CELL, avoid_path, flower_path

ALL_MONTHS = 0


class NavigationError(Exception):
    """Raised when a route cannot be planned."""


def is_flowering(flower: FlowerInfo, month: int) -> bool:
    """Return True if the flower blooms in month; month 0 stands for every month."""
    if month == ALL_MONTHS:
        return True
    return flower.blooms_in(month)


def mark_flowers(campus: CampusMap, month: int) -> list[list[str]]:
    """Return a copy of the campus grid with every place that has a blooming flower marked."""
    grid = [list(row) for row in campus.grid]
    for location in campus.locations:
        if not any(is_flowering(flower, month) for flower in location.flowers):
            continue
        row, col = int(location.position[0]), int(location.position[1])
        if 0 <= row < GRID_ROWS and 0 <= col < GRID_COLS:
            grid[row][col] = FLOWER_CELL
    return grid


def find_path(
    campus: CampusMap, start: Point, end: Point, avoid_flowers: bool, month: int
) -> list[Point]:
    """Search a route between two grid positions, with the flowers of month marked."""
    grid = mark_flowers(campus, month)
    if avoid_flowers:
        return avoid_path(start, end, grid)
    return flower_path(start, end, grid)


def navigate(
    campus: CampusMap,
    start_name: str,
    end_name: str,
    avoid_flowers: bool = False,
    month: int = ALL_MONTHS,
) -> list[Point]:
    """Plan a route between two named places and return its grid cells."""
    start_name = start_name.strip()
    end_name = end_name.strip()
    if not start_name or not end_name:
        raise NavigationError("请输入起点和终点")

    start = campus.position_of(start_name)
    if start is None:
        raise NavigationError(f"找不到起点: {start_name}")
    end = campus.position_of(end_name)
    if end is None:
        raise NavigationError(f"找不到终点: {end_name}")

    path = find_path(campus, start, end, avoid_flowers, month)
    if not path:
        raise NavigationError("无法找到可行路径")
    return path


def to_pixel(point: Point) -> Point:
    """Convert a (row, column) grid cell to the (x, y) pixel at its centre on the map image."""
    row, col = point
    half = CELL_SIZE / 2
    return ((col + 1) * CELL_SIZE - half, (row + 1) * CELL_SIZE - half)