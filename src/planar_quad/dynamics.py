"""
Planar quadrotor rigid body dynamics.

Implements the continuous-time dynamics and forward Euler integration.
See http://underactuated.mit.edu/acrobot.html#section3 (3.3.1).
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from planar_quad.params import PlanarParams
from planar_quad.types import INPUT_DIM, STATE_DIM, as_vector


def gravity_comp_input(params: PlanarParams) -> NDArray[np.float64]:
    """
    Thrust pair that exactly cancels gravity with zero net torque.

    Args:
        params: System parameters

    Returns:
        Input [m*g/2, m*g/2], shape (2,)
    """
    return np.full(INPUT_DIM, params.m * params.g / 2)


def state_derivative(
    z: ArrayLike,
    u: ArrayLike,
    params: PlanarParams,
) -> NDArray[np.float64]:
    """
    Compute the time derivative of the state.

    Dynamics:
        [x, y, theta]_dot = [x_dot, y_dot, theta_dot]
        x_dotdot     = -(u_1 + u_2) * sin(theta) / m
        y_dotdot     =  (u_1 + u_2) * cos(theta) / m - g
        theta_dotdot =  r * (u_1 - u_2) / I

    Args:
        z: Current state, shape (6,)
        u: Propeller thrusts, shape (2,)
        params: System parameters

    Returns:
        State derivative z_dot, shape (6,)
    """
    z = as_vector(z, STATE_DIM, "z")
    u = as_vector(u, INPUT_DIM, "u")

    m, I, r, g = params.m, params.I, params.r, params.g
    theta = z[2]
    u_1, u_2 = u

    z_dot = np.empty(STATE_DIM)
    z_dot[0:3] = z[3:6]

    # Total thrust projected through the attitude, gravity on y only
    z_dot[3] = -(u_1 + u_2) * np.sin(theta) / m
    z_dot[4] = (u_1 + u_2) * np.cos(theta) / m - g
    # Differential thrust gives the torque about the center of mass
    z_dot[5] = r * (u_1 - u_2) / I

    return z_dot


def step_euler(
    z: NDArray[np.float64],
    z_dot: NDArray[np.float64],
    dt: float,
) -> NDArray[np.float64]:
    """
    Forward Euler integration step.

    Args:
        z: Current state, shape (6,)
        z_dot: State derivative evaluated at z, shape (6,)
        dt: Time step [s], finite and positive

    Returns:
        Next state z + dt * z_dot, shape (6,)
    """
    return z + check_dt(dt) * z_dot


def check_dt(dt: float) -> float:
    """Validate a time step; no clamping is applied."""
    dt = float(dt)
    if not np.isfinite(dt) or dt <= 0.0:
        raise ValueError(f"dt must be a finite positive number, got {dt}")
    return dt


if __name__ == "__main__":
    """Quick tests for dynamics module."""
    print("Running dynamics tests...")

    params = PlanarParams()

    # Test 1: Hover equilibrium
    z_dot = state_derivative(np.zeros(6), gravity_comp_input(params), params)
    assert np.allclose(z_dot, 0.0, atol=1e-12), f"Hover z_dot should be zero, got {z_dot}"
    print("  [PASS] Hover equilibrium")

    # Test 2: Free fall (zero thrust)
    z_dot = state_derivative(np.zeros(6), np.zeros(2), params)
    assert np.allclose(z_dot[3:], [0.0, -params.g, 0.0]), "Zero thrust should give free fall"
    print("  [PASS] Free fall")

    # Test 3: Differential thrust spins the body
    z_dot = state_derivative(np.zeros(6), np.array([1.0, 0.0]), params)
    assert z_dot[5] > 0.0, "Left-heavy thrust should give positive theta_dotdot"
    print("  [PASS] Differential thrust torque")

    print("\nAll dynamics tests passed!")
