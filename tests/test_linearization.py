"""Tests for the hover linearization."""

import numpy as np
import pytest

from planar_quad.dynamics import gravity_comp_input, state_derivative
from planar_quad.linearization import linearize, numerical_jacobians
from planar_quad.params import PlanarParams


def test_shapes(params):
    A, B = linearize(params)
    assert A.shape == (6, 6)
    assert B.shape == (6, 2)


def test_closed_form_unit_params(unit_params):
    A, B = linearize(unit_params)

    expected_A = np.zeros((6, 6))
    expected_A[0:3, 3:6] = np.eye(3)
    expected_A[3, 2] = -9.8  # -(u_1 + u_2) * cos(0) / m with u_1 + u_2 = m*g
    assert np.allclose(A, expected_A)
    assert A[4, 2] == 0.0

    # Position block of the acceleration rows only couples through theta
    assert np.array_equal(A[3:6, 0:2], np.zeros((3, 2)))

    expected_B = np.array([
        [0.0, 0.0],
        [0.0, 0.0],
        [0.0, 0.0],
        [0.0, 0.0],
        [1.0, 1.0],
        [1.0, -1.0],
    ])
    assert np.allclose(B, expected_B)


def test_input_matrix_uses_r_over_I():
    p = PlanarParams(m=2.0, I=0.5, r=0.25, g=9.81)
    _, B = linearize(p)
    assert B[4] == pytest.approx([0.5, 0.5])
    assert B[5] == pytest.approx([0.5, -0.5])


def test_idempotent(params):
    A1, B1 = linearize(params)
    A2, B2 = linearize(params)
    assert np.array_equal(A1, A2)
    assert np.array_equal(B1, B2)


def test_matches_finite_differences_at_hover(params):
    f = lambda z, u: state_derivative(z, u, params)
    A, B = linearize(params)
    A_num, B_num = numerical_jacobians(f, np.zeros(6), gravity_comp_input(params))
    assert np.allclose(A, A_num, atol=1e-5)
    assert np.allclose(B, B_num, atol=1e-5)


def test_general_operating_point(params):
    z_star = np.array([0.5, -1.0, 0.3, 0.2, 0.1, -0.4])
    u_star = np.array([2.0, 3.0])
    f = lambda z, u: state_derivative(z, u, params)

    A, B = linearize(params, z_star=z_star, u_star=u_star)
    A_num, B_num = numerical_jacobians(f, z_star, u_star)
    assert np.allclose(A, A_num, atol=1e-5)
    assert np.allclose(B, B_num, atol=1e-5)


def test_bad_operating_point_rejected(params):
    with pytest.raises(ValueError, match="z_star"):
        linearize(params, z_star=np.zeros(4))
    with pytest.raises(ValueError, match="u_star"):
        linearize(params, u_star=np.zeros(3))
