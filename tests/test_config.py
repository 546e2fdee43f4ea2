"""Tests for engine configuration."""

import json
import logging

import pytest

from large_primes.config import DEFAULT_ROUNDS, EngineConfig, load_config
from large_primes.errors import DomainError


class TestEngineConfig:
    """Tests for EngineConfig class."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.rounds == DEFAULT_ROUNDS == 20
        assert config.seed is None
        assert config.level == logging.WARNING

    def test_round_trip_dict(self):
        config = EngineConfig(rounds=40, seed=3, log_level="DEBUG")
        assert EngineConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self):
        config = EngineConfig.from_dict({"rounds": 5, "colour": "blue"})
        assert config.rounds == 5

    def test_log_level_normalized(self):
        assert EngineConfig(log_level="info").validate().log_level == "INFO"

    @pytest.mark.parametrize("fields", [
        {"rounds": 0},
        {"rounds": -1},
        {"rounds": "20"},
        {"rounds": True},
        {"seed": "abc"},
        {"log_level": "LOUD"},
        {"log_level": 10},
    ])
    def test_invalid_values(self, fields):
        with pytest.raises(DomainError):
            EngineConfig.from_dict(fields)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"rounds": 40, "seed": 99}))
        config = load_config(path)
        assert config.rounds == 40
        assert config.seed == 99

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(DomainError):
            load_config(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{rounds: 40")
        with pytest.raises(DomainError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path / "missing.json")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(DomainError, match="UTF-8"):
            load_config(path)
