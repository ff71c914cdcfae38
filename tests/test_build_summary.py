"""Tests for build cost, gold efficiency and stat comparison."""

import pytest

from buildcalc.core.build_summary import (
    compare_stats,
    gold_efficiency,
    gold_value,
    item_stat_totals,
    summarize_build,
    total_cost,
)
from buildcalc.core.stat_calculator import FinalStats
from buildcalc.data.models import Item


def make_item(item_id, cost, **stats):
    return Item(id=item_id, name=item_id, gold={"total": cost}, stats=stats)


class TestCostAndEfficiency:
    """Tests for gold calculations."""

    def test_total_cost(self):
        items = [make_item("a", 350, attack_damage=10), make_item("b", 1300, attack_damage=40)]
        assert total_cost(items) == 1650
        assert total_cost([]) == 0

    def test_basic_items_are_fully_efficient(self):
        assert gold_efficiency([make_item("sword", 350, attack_damage=10)]) == 100
        assert gold_efficiency([make_item("cloak", 600, crit_chance=15)]) == 100

    def test_unvalued_stats_count_as_zero(self):
        shoes = make_item("shoes", 1100, movement_speed=45, magic_penetration_flat=12)
        assert gold_efficiency([shoes]) == 49

    def test_empty_build(self):
        assert gold_efficiency([]) == 0

    def test_free_build(self):
        assert gold_efficiency([make_item("free", 0, attack_damage=10)]) == 0

    def test_stat_totals(self):
        items = [make_item("a", 350, attack_damage=10), make_item("b", 300, attack_damage=5, armor=15)]
        assert item_stat_totals(items) == {"attack_damage": 15, "armor": 15}
        assert gold_value({"attack_damage": 15, "armor": 15}) == pytest.approx(15 * 35 + 15 * 20)

    def test_summarize_build(self):
        summary = summarize_build([make_item("sword", 350, attack_damage=10)])
        assert summary.item_count == 1
        assert summary.total_cost == 350
        assert summary.gold_efficiency == 100
        assert summary.stat_totals == {"attack_damage": 10}


class TestCompareStats:
    """Tests for stat comparison between two builds."""

    def test_only_changed_stats(self):
        before = FinalStats.from_stats({"health": 1000, "attack_damage": 100, "armor": 40})
        after = FinalStats.from_stats({"health": 1000, "attack_damage": 150, "armor": 40})
        differences = compare_stats(before, after)
        assert set(differences) == {"attack_damage"}
        assert differences["attack_damage"].difference == 50
        assert differences["attack_damage"].percent == pytest.approx(50.0)

    def test_negative_difference(self):
        before = FinalStats.from_stats({"armor": 80})
        after = FinalStats.from_stats({"armor": 40})
        difference = compare_stats(before, after)["armor"]
        assert difference.difference == -40
        assert difference.before == 80
        assert difference.after == 40

    def test_zero_baseline_has_no_percent(self):
        before = FinalStats.from_stats({"ability_power": 0})
        after = FinalStats.from_stats({"ability_power": 100})
        assert compare_stats(before, after)["ability_power"].percent is None

    def test_identical(self):
        stats = FinalStats.from_stats({"health": 1000})
        assert compare_stats(stats, stats) == {}
