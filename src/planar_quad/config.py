"""
Reproducible model configuration.

A ``ModelConfig`` dataclass holds everything needed to rebuild a
``PlanarQuadrotor`` and can be saved to / loaded from a single JSON file.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from planar_quad.logging_setup import logger
from planar_quad.model import PlanarQuadrotor
from planar_quad.params import PlanarParams


@dataclass
class ModelConfig:
    """Physical parameters, initial/goal state, seed and history policy."""

    # Physical parameters
    m: float = PlanarParams.m
    I: float = PlanarParams.I
    r: float = PlanarParams.r
    g: float = PlanarParams.g

    # Initial state; random standard-normal draw if None
    z0: Optional[List[float]] = None
    z_goal: Optional[List[float]] = None

    # Seed for the initial-state draw; fresh entropy if None
    seed: Optional[int] = None

    # Newest-N history window; unbounded if None
    history_capacity: Optional[int] = None

    def params(self) -> PlanarParams:
        return PlanarParams(m=self.m, I=self.I, r=self.r, g=self.g)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Expected a subset of {sorted(known)}")
        return cls(**data)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def save_config(cfg: ModelConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(cfg.to_dict(), f, indent=2)


def load_config(path: str | Path) -> ModelConfig:
    path = Path(path)
    with open(path) as f:
        cfg = ModelConfig.from_dict(json.load(f))
    logger.debug("Loaded model config from {}", path)
    return cfg


def build_model(cfg: ModelConfig) -> PlanarQuadrotor:
    """Construct a PlanarQuadrotor from a config."""
    rng = np.random.default_rng(cfg.seed) if cfg.seed is not None else None
    model = PlanarQuadrotor(
        z0=cfg.z0,
        params=cfg.params(),
        rng=rng,
        history_capacity=cfg.history_capacity,
    )
    if cfg.z_goal is not None:
        model.set_goal(cfg.z_goal)
    return model
