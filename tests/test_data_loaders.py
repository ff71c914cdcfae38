"""Tests for data loaders."""

from pathlib import Path

import pytest

import buildcalc
from buildcalc.data.loaders import (
    ChampionNotFoundError,
    get_champion_by_id,
    get_champions_by_tag,
    get_item_by_id,
    get_items_by_tag,
    load_champions,
    load_items,
    require_champion,
)
from buildcalc.data.loaders import champion_loader, item_loader
from buildcalc.data.models import ResourceType


class TestChampionLoader:
    """Tests for champion loading functionality."""

    def test_data_files_ship_inside_package(self):
        package_dir = Path(buildcalc.__file__).parent
        assert champion_loader.CHAMPIONS_FILE.is_file()
        assert item_loader.ITEMS_FILE.is_file()
        assert package_dir in champion_loader.CHAMPIONS_FILE.parents
        assert package_dir in item_loader.ITEMS_FILE.parents

    def test_load_champions_returns_dict(self):
        champions = load_champions()
        assert isinstance(champions, dict)
        assert {"Garen", "Ahri", "Jinx", "Malphite", "Zed"} <= set(champions)

    def test_stats_are_canonical(self):
        garen = load_champions()["Garen"]
        assert garen.stat("attack_damage") == 69
        assert garen.stat("attack_damage_per_level") == 4.5
        assert garen.stat("magic_resist") == 32
        assert garen.stat("movement_speed") == 340

    def test_get_champion_by_id_found(self):
        champion = get_champion_by_id("Jinx")
        assert champion is not None
        assert champion.title == "the Loose Cannon"

    def test_get_champion_case_insensitive(self):
        assert get_champion_by_id("garen").id == "Garen"

    def test_get_champion_by_id_not_found(self):
        assert get_champion_by_id("nonexistent_champion") is None

    def test_require_champion_raises(self):
        with pytest.raises(ChampionNotFoundError) as excinfo:
            require_champion("nonexistent_champion")
        assert isinstance(excinfo.value, LookupError)
        assert excinfo.value.champion_id == "nonexistent_champion"

    def test_resource_types(self):
        assert require_champion("Zed").resource_type == ResourceType.ENERGY
        assert require_champion("Garen").resource_type == ResourceType.NONE
        assert require_champion("Ahri").resource_type == ResourceType.MANA

    def test_spells(self):
        assert require_champion("Ahri").spell("AhriQ").name == "Orb of Deception"

    def test_get_champions_by_tag(self):
        marksmen = get_champions_by_tag("Marksman")
        assert [c.id for c in marksmen] == ["Jinx"]

    def test_clear_cache(self):
        first = load_champions()
        champion_loader.clear_cache()
        assert load_champions() is not first


class TestItemLoader:
    """Tests for item loading functionality."""

    def test_hidden_and_unpurchasable_skipped(self):
        items = load_items()
        assert "3031" in items
        assert "3040" not in items
        assert "3400" not in items

    def test_item_stats(self):
        edge = get_item_by_id("3031")
        assert edge.stat("attack_damage") == 65
        assert edge.stat("crit_chance") == pytest.approx(25.0)
        assert edge.passive("Perfection") is not None
        assert edge.total_cost == 3450

    def test_percent_stats(self):
        assert get_item_by_id("3006").stat("attack_speed") == pytest.approx(35.0)
        assert get_item_by_id("3036").stat("armor_penetration_percent") == pytest.approx(35.0)

    def test_unmapped_stat_preserved(self):
        cowl = get_item_by_id("3211")
        assert cowl.stat("_unmapped_PercentBaseHPRegenMod") == 1.0

    def test_get_item_by_id_not_found(self):
        assert get_item_by_id("9999") is None

    def test_get_items_by_tag(self):
        boots = get_items_by_tag("Boots")
        assert {i.id for i in boots} == {"3006", "3020"}

    def test_clear_cache(self):
        first = load_items()
        item_loader.clear_cache()
        assert load_items() is not first
