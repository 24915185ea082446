"""The campus map: named places, the walkable grid and flowers linked to places."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from .checkin import CheckinRecord
from .flowers import FlowerInfo

GRID_ROWS = 138
GRID_COLS = 104
CELL_SIZE = 36
EMPTY_CELL = " "

Point = tuple[float, float]

_LOCATION_TABLE: tuple[tuple[str, int, int], ...] = (
    ("西门", 51, 4),
    ("西侧门", 71, 4),
    ("朗润园", 21, 55),
    ("朗润湖", 22, 66),
    ("镜春园", 32, 59),
    ("成府园", 44, 98),
    ("荷花池", 38, 30),
    ("民主楼", 43, 30),
    ("华表", 51, 18),
    ("红楼", 44, 42),
    ("一体", 48, 71),
    ("未名湖", 45, 51),
    ("东操场", 39, 81),
    ("廖凯原楼", 43, 84),
    ("东侧门", 70, 99),
    ("档案馆", 58, 31),
    ("蔡元培像", 57, 35),
    ("校史馆", 67, 20),
    ("勺海", 78, 14),
    ("勺园宾馆", 88, 19),
    ("正太国际中心", 93, 18),
    ("西南门", 120, 7),
    ("学五食堂", 108, 23),
    ("临湖轩", 61, 51),
    ("俄文楼", 70, 44),
    ("一教", 74, 60),
    ("老生物楼", 74, 75),
    ("国关大楼", 82, 21),
    ("一院", 78, 27),
    ("二院", 82, 27),
    ("三院", 86, 27),
    ("静园", 84, 35),
    ("四院", 78, 43),
    ("五院", 82, 43),
    ("六院", 86, 43),
    ("图书馆", 81, 62),
    ("网球场", 93, 27),
    ("燕南园", 106, 36),
    ("第一食堂", 119, 33),
    ("哲学楼", 90, 62),
    ("百讲", 101, 56),
    ("南门", 130, 62),
    ("地学楼", 83, 72),
    ("文史楼", 79, 72),
    ("东门", 80, 99),
    ("金光生命科学楼", 79, 90),
    ("老化学楼", 88, 70),
    ("光华楼", 95, 70),
    ("东南门", 98, 100),
    ("理教", 89, 77),
    ("理科一号楼", 92, 76),
    ("英杰交流中心", 97, 86),
    ("博雅塔", 59, 74),
    ("二教", 103, 76),
    ("邱德拔体育馆", 106, 94),
    ("五四操场", 118, 70),
    ("遥感楼", 69, 84),
    ("塞万提斯像", 72, 21),
    ("北阁", 68, 32),
    ("南阁", 74, 30),
    ("鸣鹤园", 45, 16),
)


def grid_to_display(position: Point) -> Point:
    """Convert a (row, column) grid position to (x, y) pixel coordinates on the map image."""
    row, col = position
    return (float((col + 1) * CELL_SIZE), float((row + 1) * CELL_SIZE))


@dataclass
class Location:
    """A named place on campus, its grid position and the flowers growing there."""

    name: str
    position: Point
    flowers: list[FlowerInfo] = field(default_factory=list)
    display_pos: Point = field(init=False)

    def __post_init__(self) -> None:
        row, col = self.position
        self.position = (float(row), float(col))
        self.display_pos = grid_to_display(self.position)


def default_locations() -> list[Location]:
    """Return the built-in campus places, in their fixed order."""
    return [Location(name, (row, col)) for name, row, col in _LOCATION_TABLE]


def _blank_grid() -> list[list[str]]:
    return [[EMPTY_CELL] * GRID_COLS for _ in range(GRID_ROWS)]


class CampusMap:
    """Campus places plus a character grid; '0' cells are impassable."""

    def __init__(self, locations: Iterable[Location] | None = None) -> None:
        self.locations: list[Location] = (
            default_locations() if locations is None else list(locations)
        )
        self.grid: list[list[str]] = _blank_grid()

    def load_grid(self, path: str | Path) -> int:
        """Load the grid from a text file; return the number of rows read."""
        with open(path, encoding="latin-1") as stream:
            return self.load_grid_lines(stream)

    def load_grid_lines(self, lines: Iterable[str]) -> int:
        """Fill grid rows from text lines, skipping blank ones; return the number of rows read."""
        row = 0
        for raw in lines:
            if row >= GRID_ROWS:
                break
            line = raw.strip()
            if not line:
                continue
            cells = list(line[:GRID_COLS])
            cells.extend(EMPTY_CELL * (GRID_COLS - len(cells)))
            self.grid[row] = cells
            row += 1
        return row

    def link_flowers(self, flowers: Iterable[FlowerInfo]) -> None:
        """Attach each flower to every place it grows at, replacing earlier links."""
        for location in self.locations:
            location.flowers.clear()
        by_name: dict[str, Location] = {}
        for location in self.locations:
            by_name.setdefault(location.name, location)
        for flower in flowers:
            for place in flower.locations:
                target = by_name.get(place)
                if target is not None:
                    target.flowers.append(flower)

    def location_names(self) -> list[str]:
        """Return the names of all places in map order."""
        return [location.name for location in self.locations]

    def _find(self, name: str) -> Location | None:
        return next((loc for loc in self.locations if loc.name == name), None)

    def position_of(self, name: str) -> Point | None:
        """Return the grid position of the named place, or None if it is unknown."""
        location = self._find(name)
        return location.position if location is not None else None

    def flowers_at(self, name: str) -> list[FlowerInfo]:
        """Return the flowers linked to the named place; empty if the place is unknown."""
        location = self._find(name)
        return list(location.flowers) if location is not None else []

    def nearest_location(self, point: Point) -> Location | None:
        """Return the place whose display position is closest to point by Manhattan distance."""
        px, py = point
        best: Location | None = None
        best_distance = float("inf")
        for location in self.locations:
            dx, dy = location.display_pos
            distance = abs(dx - px) + abs(dy - py)
            if distance < best_distance:
                best_distance = distance
                best = location
        return best

    def icon_locations(self, month: int) -> list[Location]:
        """Return places that get a flower icon: any linked flower if month is 0,
        otherwise a flower blooming in that month."""
        if month == 0:
            return [loc for loc in self.locations if loc.flowers]
        if month > 0:
            return [
                loc
                for loc in self.locations
                if any(flower.blooms_in(month) for flower in loc.flowers)
            ]
        return []

    def checkin_locations(self, records: Iterable[CheckinRecord]) -> list[Location]:
        """Return places, in map order, that appear in at least one check-in record."""
        visited = {record.location for record in records}
        return [loc for loc in self.locations if loc.name in visited]


def describe_flower(flower: FlowerInfo) -> str:
    """Return the text shown for a flower: its name, blooming months and description."""
    months = ", ".join(str(month) for month in flower.florescence)
    return (
        f"🌸 花名: {flower.name}\n"
        f"📅 花期: {months}月\n"
        f"📖 介绍:\n{flower.introduction}"
    )


def _as_sequence(value: Sequence[str]) -> list[str]:
    return list(value)