"""Tests for JSON model configuration."""

import json

import numpy as np
import pytest

from planar_quad.config import ModelConfig, build_model, load_config, save_config
from planar_quad.params import PlanarParams


def test_defaults_match_params():
    cfg = ModelConfig()
    assert cfg.params() == PlanarParams()


def test_save_load_roundtrip(tmp_path):
    cfg = ModelConfig(m=1.2, z0=[0.0, 1.0, 0.0, 0.0, 0.0, 0.0], seed=3, history_capacity=400)
    path = tmp_path / "nested" / "model.json"
    save_config(cfg, path)

    assert json.loads(path.read_text())["m"] == 1.2
    assert load_config(path) == cfg


def test_dict_roundtrip_and_indented_json(tmp_path):
    cfg = ModelConfig(z_goal=[0.0] * 6, history_capacity=10)
    assert ModelConfig.from_dict(cfg.to_dict()) == cfg

    path = tmp_path / "model.json"
    save_config(cfg, path)
    assert path.read_text().startswith("{\n  ")


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="Unknown config keys"):
        ModelConfig.from_dict({"m": 1.0, "mass": 2.0})


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json")


def test_build_model_with_seed_is_reproducible():
    cfg = ModelConfig(seed=11)
    a = build_model(cfg)
    b = build_model(cfg)
    assert np.array_equal(a.get_state(), b.get_state())


def test_build_model_applies_state_goal_and_history():
    cfg = ModelConfig(
        m=1.0, I=1.0, r=1.0, g=9.8,
        z0=[1.0, 1.0, 0.0, 0.0, 0.0, 0.0],
        z_goal=[1.0, 0.0, 0.0, 0.0, 0.0, 0.0],
        history_capacity=2,
    )
    quad = build_model(cfg)
    assert quad.params == PlanarParams(m=1.0, I=1.0, r=1.0, g=9.8)
    assert np.array_equal(quad.get_control_state(), [0.0, 1.0, 0.0, 0.0, 0.0, 0.0])
    assert quad.history.capacity == 2
