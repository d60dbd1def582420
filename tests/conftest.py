"""Shared fixtures; plots render off-screen."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from planar_quad.params import PlanarParams


@pytest.fixture
def params() -> PlanarParams:
    return PlanarParams()


@pytest.fixture
def unit_params() -> PlanarParams:
    """m = I = r = 1, g = 9.8"""
    return PlanarParams(m=1.0, I=1.0, r=1.0, g=9.8)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
