"""Tests for combat API routes."""

import pytest
from fastapi.testclient import TestClient

from buildcalc.api.main import app

client = TestClient(app)


class TestCombatRoutes:
    """Tests for attacker versus target calculation."""

    def test_basic_combat(self):
        response = client.post("/api/combat/calculate", json={
            "attacker": {"champion_id": "Jinx"},
            "target": {"champion_id": "Malphite"},
        })
        assert response.status_code == 200
        data = response.json()
        # 59 AD against 37 armor
        assert data["auto_attack_damage"] == pytest.approx(59 * 100 / 137)
        assert data["dps"] == pytest.approx(data["auto_attack_damage"] * 0.625)
        assert data["time_to_kill"] == pytest.approx(665 / data["dps"])
        assert data["ability_damage"] == {}

    def test_target_level_from_target_build(self):
        """Lethality and armor both scale with the target build level."""
        attacker = {"champion_id": "Zed", "item_ids": ["3142"]}
        low = client.post("/api/combat/calculate", json={
            "attacker": attacker,
            "target": {"champion_id": "Garen", "level": 1},
        }).json()
        high = client.post("/api/combat/calculate", json={
            "attacker": attacker,
            "target": {"champion_id": "Garen", "level": 18},
        }).json()

        low_armor = 38 - 18 * (0.6 + 0.4 / 18)
        high_armor = 38 + 4.2 * 17 - 18
        assert low["auto_attack_damage"] == pytest.approx((63 + 55) * 100 / (100 + low_armor))
        assert high["auto_attack_damage"] == pytest.approx((63 + 55) * 100 / (100 + high_armor))

    def test_ability_damage(self):
        response = client.post("/api/combat/calculate", json={
            "attacker": {"champion_id": "Ahri", "item_ids": ["3020"]},
            "target": {"champion_id": "Garen"},
            "spell_ids": ["AhriQ", "AhriE"],
        })
        assert response.status_code == 200
        data = response.json()
        # 40 raw against 32 MR minus 12 flat pen
        assert data["ability_damage"]["AhriQ"] == pytest.approx(40 * 100 / 120)
        assert data["ability_damage"]["AhriE"] == pytest.approx(80 * 100 / 120)
        assert data["total_burst"] == pytest.approx(
            data["ability_damage"]["AhriQ"] + data["ability_damage"]["AhriE"] + data["auto_attack_damage"]
        )

    def test_unknown_spell(self):
        response = client.post("/api/combat/calculate", json={
            "attacker": {"champion_id": "Ahri"},
            "target": {"champion_id": "Garen"},
            "spell_ids": ["GarenQ"],
        })
        assert response.status_code == 404

    def test_invalid_target_build(self):
        response = client.post("/api/combat/calculate", json={
            "attacker": {"champion_id": "Ahri"},
            "target": {"champion_id": "Garen", "item_ids": ["1029", "1029"]},
        })
        assert response.status_code == 400
