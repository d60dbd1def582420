"""
Planar Quadrotor: nonlinear dynamics, Euler stepping and hover linearization.

A rigid body in a vertical plane actuated by two propeller thrusts.
"""

from planar_quad.params import PlanarParams, default_params
from planar_quad.dynamics import gravity_comp_input, state_derivative, step_euler
from planar_quad.linearization import linearize
from planar_quad.history import TrajectoryHistory
from planar_quad.model import PlanarQuadrotor
from planar_quad.config import ModelConfig, build_model, load_config, save_config

__version__ = "0.1.0"

__all__ = [
    "PlanarParams",
    "default_params",
    "gravity_comp_input",
    "state_derivative",
    "step_euler",
    "linearize",
    "TrajectoryHistory",
    "PlanarQuadrotor",
    "ModelConfig",
    "build_model",
    "load_config",
    "save_config",
]
