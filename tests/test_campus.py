import pytest

from yanyuan_flowers.campus import (
    CELL_SIZE,
    EMPTY_CELL,
    GRID_COLS,
    GRID_ROWS,
    CampusMap,
    Location,
    default_locations,
    describe_flower,
    grid_to_display,
)
from yanyuan_flowers.checkin import CheckinRecord
from yanyuan_flowers.flowers import FlowerInfo, default_flowers


@pytest.fixture
def campus():
    campus_map = CampusMap()
    campus_map.link_flowers(default_flowers())
    return campus_map


def test_default_location_names_unique_and_ordered():
    names = [loc.name for loc in default_locations()]
    assert len(names) == len(set(names))
    assert names[0] == "西门"
    assert names[-1] == "鸣鹤园"


def test_display_pos_matches_grid_to_display():
    for location in default_locations():
        assert location.display_pos == grid_to_display(location.position)


def test_grid_to_display_origin():
    assert grid_to_display((0, 0)) == (CELL_SIZE, CELL_SIZE)


def test_grid_to_display_swaps_axes():
    x, y = grid_to_display((0, 5))
    assert x > y


def test_position_of_known_and_unknown(campus):
    assert campus.position_of("西门") == (51.0, 4.0)
    assert campus.position_of("不存在") is None


def test_location_names_follow_map_order(campus):
    assert campus.location_names() == [loc.name for loc in default_locations()]


def test_flowers_at_lake(campus):
    names = [f.name for f in campus.flowers_at("未名湖")]
    assert "山桃" in names
    assert "甘菊" in names


def test_flowers_at_unknown_is_empty(campus):
    assert campus.flowers_at("不存在") == []


def test_linked_flowers_grow_at_their_location(campus):
    for location in campus.locations:
        for flower in location.flowers:
            assert location.name in flower.locations


def test_every_flower_linked_somewhere(campus):
    linked = {f.id for loc in campus.locations for f in loc.flowers}
    assert linked == {f.id for f in default_flowers()}


def test_relink_replaces_previous_links(campus):
    only = FlowerInfo(id=100, name="测试花", florescence=(1,), locations=("红楼",))
    campus.link_flowers([only])
    assert campus.flowers_at("红楼") == [only]
    assert campus.flowers_at("未名湖") == []


def test_nearest_location_at_display_pos(campus):
    for location in campus.locations:
        assert campus.nearest_location(location.display_pos).name == location.name


def test_nearest_location_empty_map():
    assert CampusMap([]).nearest_location((0.0, 0.0)) is None


def test_nearest_location_prefers_first_on_tie():
    a = Location("甲", (0, 0))
    b = Location("乙", (0, 2))
    campus_map = CampusMap([a, b])
    midpoint = grid_to_display((0, 1))
    assert campus_map.nearest_location(midpoint) is a


def test_icon_locations_all_months(campus):
    icons = campus.icon_locations(0)
    assert icons == [loc for loc in campus.locations if loc.flowers]


def test_icon_locations_for_month(campus):
    icons = campus.icon_locations(4)
    assert icons
    for location in icons:
        assert any(f.blooms_in(4) for f in location.flowers)
    assert set(l.name for l in icons) <= set(l.name for l in campus.icon_locations(0))


def test_icon_locations_month_without_bloom(campus):
    assert campus.icon_locations(12) == []


def test_icon_locations_negative_month(campus):
    assert campus.icon_locations(-1) == []


def test_checkin_locations(campus):
    records = [
        CheckinRecord(location="博雅塔"),
        CheckinRecord(location="西门"),
        CheckinRecord(location="博雅塔"),
        CheckinRecord(location="不存在"),
    ]
    names = [loc.name for loc in campus.checkin_locations(records)]
    assert names == ["西门", "博雅塔"]


def test_blank_grid_shape():
    campus_map = CampusMap()
    assert len(campus_map.grid) == GRID_ROWS
    assert all(len(row) == GRID_COLS for row in campus_map.grid)
    assert campus_map.grid[0][0] == EMPTY_CELL


def test_load_grid_lines_skips_blank_and_pads():
    campus_map = CampusMap()
    rows = campus_map.load_grid_lines(["", "  010  ", "   ", "1" * (GRID_COLS + 5)])
    assert rows == 2
    assert campus_map.grid[0][:3] == ["0", "1", "0"]
    assert campus_map.grid[0][3] == EMPTY_CELL
    assert len(campus_map.grid[0]) == GRID_COLS
    assert campus_map.grid[1] == ["1"] * GRID_COLS
    assert campus_map.grid[2][0] == EMPTY_CELL


def test_load_grid_lines_stops_at_row_limit():
    campus_map = CampusMap()
    rows = campus_map.load_grid_lines(["1"] * (GRID_ROWS + 10))
    assert rows == GRID_ROWS
    assert len(campus_map.grid) == GRID_ROWS


def test_load_grid_from_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("\n".join(["0" * GRID_COLS, "1" * GRID_COLS]) + "\n", encoding="latin-1")
    campus_map = CampusMap()
    assert campus_map.load_grid(path) == 2
    assert campus_map.grid[0] == ["0"] * GRID_COLS
    assert campus_map.grid[1] == ["1"] * GRID_COLS


def test_load_grid_missing_file(tmp_path):
    with pytest.raises(OSError):
        CampusMap().load_grid(tmp_path / "missing.txt")


def test_describe_flower():
    flower = FlowerInfo(id=7, name="测试花", florescence=(3, 4), introduction="介绍文字")
    text = describe_flower(flower)
    assert "花名: 测试花" in text
    assert "花期: 3, 4月" in text
    assert text.endswith("介绍文字")