"""Tests for vendor data conversion."""

import logging

import pytest

from buildcalc.core.rules import StatMappingRules
from buildcalc.core.stat_converter import (
    StatConverter,
    convert_effects,
    extract_actives,
    extract_passives,
    fill_default_stats,
    validate_stats,
)
from buildcalc.data.models import ResourceType


@pytest.fixture
def converter():
    return StatConverter()


class TestConvertStats:
    """Tests for stat block conversion."""

    def test_flat_stat(self, converter):
        assert converter.convert_stats({"FlatPhysicalDamageMod": 10}) == {"attack_damage": 10}

    def test_crit_is_rescaled(self, converter):
        stats = converter.convert_stats({"FlatCritChanceMod": 0.25})
        assert stats["crit_chance"] == pytest.approx(25.0)

    def test_percent_is_rescaled(self, converter):
        stats = converter.convert_stats({
            "PercentAttackSpeedMod": 0.35,
            "PercentMovementSpeedMod": 0.05,
            "PercentLifeStealMod": 0.15,
        })
        assert stats["attack_speed"] == pytest.approx(35.0)
        assert stats["movement_speed_percent"] == pytest.approx(5.0)
        assert stats["life_steal"] == pytest.approx(15.0)

    def test_penetration_keys(self, converter):
        stats = converter.convert_stats({
            "FlatArmorPenetrationMod": 18,
            "PercentArmorPenetrationMod": 0.3,
            "FlatMagicPenetrationMod": 12,
            "PercentMagicPenetrationMod": 0.4,
        })
        assert stats["lethality"] == 18
        assert stats["armor_penetration_percent"] == pytest.approx(30.0)
        assert stats["magic_penetration_flat"] == 12
        assert stats["magic_penetration_percent"] == pytest.approx(40.0)

    def test_zero_values_dropped(self, converter):
        assert converter.convert_stats({"FlatArmorMod": 0, "FlatSpellBlockMod": 25}) == {"magic_resist": 25}

    def test_unmapped_key_preserved_with_warning(self, converter, caplog):
        with caplog.at_level(logging.WARNING):
            stats = converter.convert_stats({"FlatShinyMod": 3})
        assert stats == {"_unmapped_FlatShinyMod": 3}
        assert "FlatShinyMod" in caplog.text

    def test_custom_mapping(self):
        converter = StatConverter(StatMappingRules(mappings={"Shiny": "armor"}))
        assert converter.convert_stats({"Shiny": 4}) == {"armor": 4}

    def test_reverse_mapping(self, converter):
        vendor = converter.convert_to_vendor_format({"attack_damage": 10, "crit_chance": 25, "nothing": 1})
        assert vendor["FlatPhysicalDamageMod"] == 10
        assert vendor["FlatCritChanceMod"] == pytest.approx(0.25)
        assert len(vendor) == 2


class TestConvertChampion:
    """Tests for champion record conversion."""

    @pytest.fixture
    def raw_champion(self):
        return {
            "id": "Zed",
            "key": "238",
            "name": "Zed",
            "title": "the Master of Shadows",
            "tags": ["Assassin"],
            "partype": "Energy",
            "stats": {"hp": 654, "hpperlevel": 99, "attackdamage": 63, "attackspeed": 0.651},
            "spells": [{"id": "ZedQ", "name": "Razor Shuriken", "tooltip": "80 (+110% bonus AD)"}],
        }

    def test_converts_record(self, converter, raw_champion):
        champion = converter.convert_champion(raw_champion)
        assert champion.id == "Zed"
        assert champion.title == "the Master of Shadows"
        assert champion.tags == ["Assassin"]
        assert champion.stat("health") == 654
        assert champion.stat("health_per_level") == 99
        assert champion.spell("ZedQ").name == "Razor Shuriken"

    def test_absent_stats_default_to_zero(self, converter, raw_champion):
        champion = converter.convert_champion(raw_champion)
        assert champion.stats["crit_chance"] == 0
        assert champion.stats["armor"] == 0

    def test_resource_type(self, converter, raw_champion):
        assert converter.convert_champion(raw_champion).resource_type == ResourceType.ENERGY
        raw_champion["partype"] = "None"
        assert converter.convert_champion(raw_champion).resource_type == ResourceType.NONE
        raw_champion["partype"] = "Mana"
        assert converter.convert_champion(raw_champion).resource_type == ResourceType.MANA

    def test_missing_record(self, converter):
        assert converter.convert_champion(None) is None
        assert converter.convert_champion({}) is None

    def test_record_without_id_is_skipped(self, converter, raw_champion, caplog):
        nameless = {"name": "X", "stats": {}}
        with caplog.at_level(logging.WARNING):
            assert converter.convert_champion(nameless) is None
        assert "without id" in caplog.text

        champions = converter.convert_all_champions({"X": nameless, "Zed": raw_champion})
        assert list(champions) == ["Zed"]

    def test_convert_all(self, converter, raw_champion):
        champions = converter.convert_all_champions({"Zed": raw_champion})
        assert list(champions) == ["Zed"]


class TestConvertItem:
    """Tests for item record conversion."""

    @pytest.fixture
    def raw_item(self):
        return {
            "name": "Infinity Edge",
            "description": "<stats>65 AD</stats><li><passive>Perfection:</passive> Crit damage.",
            "plaintext": "Massively enhances critical strikes",
            "from": ["1038", "1037", "1018"],
            "gold": {"base": 625, "purchasable": True, "total": 3450, "sell": 2415},
            "tags": ["Damage", "CriticalStrike"],
            "stats": {"FlatPhysicalDamageMod": 65, "FlatCritChanceMod": 0.25},
            "effect": {"Effect1Amount": 35},
            "depth": 3,
        }

    def test_converts_record(self, converter, raw_item):
        item = converter.convert_item(raw_item, item_id="3031")
        assert item.id == "3031"
        assert item.name == "Infinity Edge"
        assert item.total_cost == 3450
        assert item.gold.sell == 2415
        assert item.is_purchasable
        assert item.builds_from == ["1038", "1037", "1018"]
        assert item.stat("attack_damage") == 65
        assert item.stat("crit_chance") == pytest.approx(25.0)
        assert item.effects[0].value == 35

    def test_passives_parsed(self, converter, raw_item):
        item = converter.convert_item(raw_item, item_id="3031")
        assert [p.name for p in item.passives] == ["Perfection"]
        assert item.passive("Perfection") is not None

    def test_missing_record(self, converter):
        assert converter.convert_item(None) is None

    def test_convert_all_skips_hidden_and_unpurchasable(self, converter, raw_item):
        items = converter.convert_all_items({
            "3031": raw_item,
            "3040": {"name": "Seraph's Embrace", "gold": {"purchasable": False, "total": 3000}},
            "3400": {"name": "Your Cut", "hideFromAll": True},
        })
        assert list(items) == ["3031"]


class TestHelpers:
    """Tests for module-level conversion helpers."""

    def test_convert_effects(self):
        effects = convert_effects({"Effect3Amount": "oops", "Effect1Amount": 5})
        assert [(e.index, e.value) for e in effects] == [(1, 5.0), (3, 0.0)]

    def test_extract_named_effects(self):
        description = "<passive>Annul:</passive> shield <active>Wraith Step</active>"
        assert [p.name for p in extract_passives(description)] == ["Annul"]
        assert [a.name for a in extract_actives(description)] == ["Wraith Step"]
        assert extract_passives("") == []

    def test_validate_stats(self):
        result = validate_stats({"health": 500, "armor": 30})
        assert not result["is_valid"]
        assert "mana" in result["missing_stats"]
        assert result["present_stats"] == ["health", "armor"]

    def test_fill_default_stats(self):
        filled = fill_default_stats({"health": 5})
        assert filled["health"] == 5
        assert filled["mana"] == 0
        assert validate_stats(filled)["is_valid"]

    def test_convert_rune(self, converter):
        rune = converter.convert_rune({"id": 8005, "key": "PressTheAttack", "name": "Press the Attack"})
        assert rune.id == 8005
        assert rune.name == "Press the Attack"
        assert converter.convert_rune(None) is None

    def test_rune_without_id_is_skipped(self, converter, caplog):
        with caplog.at_level(logging.WARNING):
            assert converter.convert_rune({"key": "Conqueror", "name": "Conqueror"}) is None
        assert "without id" in caplog.text
