"""Tests for GameConfig and load_config."""

import json

import pytest
from pydantic import ValidationError

from combatgame.config import GameConfig, load_config


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.player_max_health == 30
        assert config.starting_gold == 100
        assert config.inventory_slots == 15
        assert config.spawn_weights == [0.5, 0.3, 0.2, 0.0]
        assert config.spawn_decay_step == 0.05
        assert config.victory_heal_ratio == 0.5
        assert config.sell_rate == 0.5

    @pytest.mark.parametrize(
        "weights",
        [[0.5, 0.5], [0.5, 0.3, 0.3, 0.0], [1.1, -0.1, 0.0, 0.0]],
    )
    def test_invalid_spawn_weights(self, weights):
        with pytest.raises(ValidationError):
            GameConfig(spawn_weights=weights)

    def test_invalid_health(self):
        with pytest.raises(ValidationError):
            GameConfig(player_max_health=0)


class TestLoadConfig:
    def test_load_overrides(self, tmp_path):
        path = tmp_path / "balance.json"
        path.write_text(json.dumps({"seed": 9, "starting_gold": 250, "max_turns": 50}))
        config = load_config(path)
        assert (config.seed, config.starting_gold, config.max_turns) == (9, 250, 50)
        assert config.player_max_health == 30

    def test_load_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"sell_rate": 2.0}))
        with pytest.raises(ValidationError):
            load_config(str(path))
