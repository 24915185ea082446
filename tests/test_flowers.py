import pytest

from yanyuan_flowers.flowers import (
    FlowerCatalog,
    FlowerInfo,
    LocationManager,
    default_catalog,
    default_flowers,
)


@pytest.fixture
def catalog():
    return default_catalog()


def test_catalog_has_all_flowers(catalog):
    assert len(catalog) == 69


def test_ids_are_sequential(catalog):
    assert [f.id for f in catalog] == list(range(1, 70))


def test_by_id(catalog):
    assert catalog.by_id(1).name == "迎春花"
    assert catalog.by_id(69).name == "甘菊"


def test_by_id_missing(catalog):
    assert catalog.by_id(1000) is None


def test_by_name(catalog):
    flower = catalog.by_name("山桃")
    assert flower.id == 2
    assert flower.locations == ("未名湖",)


def test_by_name_missing(catalog):
    assert catalog.by_name("不存在的花") is None


def test_at_location_keeps_catalogue_order(catalog):
    assert [f.name for f in catalog.at_location("勺海")] == ["迎春花", "紫薇"]


def test_at_location_unknown(catalog):
    assert catalog.at_location("火星") == []


def test_every_flower_found_at_its_locations(catalog):
    for flower in catalog:
        for place in flower.locations:
            assert flower in catalog.at_location(place)


def test_florescence_months_valid(catalog):
    for flower in catalog:
        assert flower.florescence
        assert all(1 <= m <= 12 for m in flower.florescence)


def test_blooms_in():
    flower = default_catalog().by_name("棣棠花")
    assert flower.florescence == (4, 5, 9, 10)
    assert flower.blooms_in(9)
    assert not flower.blooms_in(7)


def test_custom_catalog():
    a = FlowerInfo(1, "甲", (1,), ("北阁",), "")
    b = FlowerInfo(2, "乙", (2,), ("北阁", "南阁"), "")
    cat = FlowerCatalog([a, b])
    assert list(cat) == [a, b]
    assert cat.at_location("南阁") == [b]
    assert cat.at_location("北阁") == [a, b]


def test_default_flowers_returns_fresh_list():
    first = default_flowers()
    first.clear()
    assert len(default_flowers()) == 69


def test_location_manager_roundtrip():
    manager = LocationManager()
    manager.add_location("西门", (51, 4))
    assert manager.get_location("西门") == (51.0, 4.0)


def test_location_manager_missing():
    assert LocationManager().get_location("西门") is None


def test_location_manager_overwrite_and_names():
    manager = LocationManager()
    manager.add_location("b", (1, 1))
    manager.add_location("a", (2, 2))
    manager.add_location("b", (3, 3))
    assert manager.names() == ["a", "b"]
    assert manager.get_location("b") == (3.0, 3.0)