"""Tests for the rule tables."""

import json

import pytest
from pydantic import ValidationError

from buildcalc.core.rules import DEFAULT_RULES, GameRules, ShardSlot, load_rules


class TestDefaultRules:
    """Tests for the default rule revision."""

    def test_shard_table(self):
        shards = DEFAULT_RULES.shards
        assert shards.choices(ShardSlot.OFFENSE) == ["adaptive_force", "attack_speed", "ability_haste"]
        assert shards.choices(ShardSlot.FLEX) == ["adaptive_force", "movement_speed", "health_scaling"]
        assert shards.choices(ShardSlot.DEFENSE) == ["health", "armor", "magic_resist"]

        adaptive = shards.effect(ShardSlot.OFFENSE, "adaptive_force")
        assert (adaptive.ad, adaptive.ap) == (5.4, 9.0)
        assert shards.effect(ShardSlot.OFFENSE, "attack_speed").factor == pytest.approx(1.10)

    def test_unknown_shard_choice(self):
        assert DEFAULT_RULES.shards.effect(ShardSlot.DEFENSE, "attack_speed") is None
        assert DEFAULT_RULES.shards.effect(ShardSlot.DEFENSE, None) is None

    def test_item_rules(self):
        assert DEFAULT_RULES.items.max_items == 6
        assert DEFAULT_RULES.items.passive_effects["Perfection"] == {"crit_damage": 35.0}
        assert "attack_speed" in DEFAULT_RULES.items.multiplicative_stats

    def test_buff_tables(self):
        assert DEFAULT_RULES.buffs.baron == {"attack_damage": 25, "ability_power": 40}
        assert DEFAULT_RULES.buffs.dragon_per_stack["magic_resist"] == 3

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_RULES.version = "1.0"


class TestLoadRules:
    """Tests for loading a rule revision from JSON."""

    def test_partial_override(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({
            "version": "16.1.1",
            "items": {"passive_effects": {"Perfection": {"crit_damage": 40}}},
            "buffs": {"baron": {"attack_damage": 30}},
        }))

        rules = load_rules(path)
        assert rules.version == "16.1.1"
        assert rules.items.passive_effects["Perfection"]["crit_damage"] == 40
        assert rules.items.max_items == 6
        assert rules.buffs.baron == {"attack_damage": 30}
        assert rules.shards == DEFAULT_RULES.shards

    def test_shard_override(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({
            "shards": {"shards": {"defense": {"armor": {"kind": "flat", "stat": "armor", "value": 9}}}},
        }))

        rules = load_rules(path)
        assert rules.shards.effect(ShardSlot.DEFENSE, "armor").value == 9
        assert rules.shards.effect(ShardSlot.OFFENSE, "adaptive_force") is None

    def test_invalid_rules(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"items": {"max_items": 0}}))
        with pytest.raises(ValidationError):
            load_rules(path)

    def test_default_construction_matches(self):
        assert GameRules() == DEFAULT_RULES
