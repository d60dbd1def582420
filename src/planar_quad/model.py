"""
Planar quadrotor model.

Owns the state, the latched control input, a goal state and the trajectory
history, and steps the nonlinear dynamics with forward Euler.

Per-step pipeline of ``update(u, dt)``:
    1. Latch input u
    2. Evaluate z_dot = f(z, u)
    3. Euler step z <- z + dt * z_dot
    4. Append (x, y, theta) to history

A single stepping loop is expected to drive each instance; there is no
internal locking.
"""

from typing import Optional, Tuple

import numpy as np
from matplotlib.figure import Figure
from numpy.typing import ArrayLike, NDArray

from planar_quad.dynamics import check_dt, gravity_comp_input, state_derivative, step_euler
from planar_quad.history import TrajectoryHistory
from planar_quad.linearization import linearize
from planar_quad.logging_setup import logger
from planar_quad.params import PlanarParams, default_params
from planar_quad.plots import plot_history
from planar_quad.types import (
    INPUT_DIM,
    STATE_DIM,
    as_vector,
    random_state,
    zero_input,
    zero_state,
)


class PlanarQuadrotor:
    """
    Planar quadrotor rigid body with two propellers.

    Attributes:
        z: State [x, y, theta, x_dot, y_dot, theta_dot], shape (6,)
        z_dot: Most recently evaluated state derivative, shape (6,)
        input: Latched propeller thrusts [u_1, u_2], shape (2,)
        z_goal: Goal state, shape (6,)
        params: Physical parameters (immutable)
        history: (x, y, theta) sample per completed step
    """

    def __init__(
        self,
        z0: Optional[ArrayLike] = None,
        params: Optional[PlanarParams] = None,
        rng: Optional[np.random.Generator] = None,
        history_capacity: Optional[int] = None,
    ) -> None:
        """
        Create a quadrotor.

        Args:
            z0: Initial state, shape (6,); drawn from a standard normal
                per component if None
            params: Physical parameters (default: default_params())
            rng: Random source for the initial state draw (default: fresh
                entropy-seeded generator)
            history_capacity: Keep only the newest N history samples;
                None keeps all of them
        """
        self.params = params if params is not None else default_params()

        if z0 is None:
            self.z = random_state(rng)
        else:
            self.z = as_vector(z0, STATE_DIM, "z0")

        self.z_dot = zero_state()
        self.input = zero_input()
        self.z_goal = zero_state()
        self.history = TrajectoryHistory(history_capacity)

        logger.debug("PlanarQuadrotor created: z0={}, {}", self.z, self.history)

    # ---- Goal and queries ---------------------------------------------------

    def set_goal(self, z_goal: ArrayLike) -> None:
        """Store the goal state used by get_control_state()."""
        self.z_goal = as_vector(z_goal, STATE_DIM, "z_goal")
        logger.debug("Goal set to {}", self.z_goal)

    def get_state(self) -> NDArray[np.float64]:
        """Snapshot of the current state, shape (6,)."""
        return self.z.copy()

    def get_control_state(self) -> NDArray[np.float64]:
        """
        Regulation error z - z_goal, shape (6,).

        The goal is the zero state until set_goal() is called.
        """
        return self.z - self.z_goal

    def gravity_comp_input(self) -> NDArray[np.float64]:
        """Hover thrust pair [m*g/2, m*g/2], shape (2,)."""
        return gravity_comp_input(self.params)

    def linearize(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Jacobians (A, B) about hover at the origin.

        The operating point is fixed (zero state, gravity-compensating
        input), so repeated calls return identical matrices.
        """
        return linearize(self.params)

    # ---- Stepping -----------------------------------------------------------

    def set_input(self, u: ArrayLike) -> None:
        """Latch the propeller thrusts used by subsequent steps."""
        self.input = as_vector(u, INPUT_DIM, "u")

    def calc_time_derivatives(self) -> NDArray[np.float64]:
        """Evaluate z_dot from the current state and latched input."""
        self.z_dot = state_derivative(self.z, self.input, self.params)
        return self.z_dot.copy()

    def do_update_state(self, dt: float) -> None:
        """Euler step using the most recently evaluated z_dot."""
        self.z = step_euler(self.z, self.z_dot, dt)

    def update_history(self) -> None:
        """Append the current (x, y, theta) to the history."""
        self.history.record_state(self.z)

    def update(
        self,
        u: Optional[ArrayLike] = None,
        dt: Optional[float] = None,
    ) -> NDArray[np.float64]:
        """
        Advance the model by one time step.

        ``update(u, dt)`` latches u first; ``update(dt=dt)`` reuses the
        latched input.  Arguments are validated before anything is changed.

        Args:
            u: Propeller thrusts, shape (2,); None reuses the latched input
            dt: Time step [s], finite and positive

        Returns:
            New state, shape (6,)
        """
        if dt is None:
            raise TypeError("update() requires dt, e.g. update(u, dt) or update(dt=dt)")
        dt = check_dt(dt)
        if u is not None:
            self.set_input(u)
        self.calc_time_derivatives()
        self.do_update_state(dt)
        self.update_history()
        return self.z.copy()

    def step(self, dt: float) -> NDArray[np.float64]:
        """Advance by dt with the latched input."""
        return self.update(dt=dt)

    # ---- History ------------------------------------------------------------

    def plot_history(self, show: bool = True) -> Figure:
        """Render the trajectory history as an (x, y, theta) 3D curve."""
        return plot_history(self.history, title="Planar Quadrotor History", show=show)

    def __repr__(self) -> str:
        return (
            f"PlanarQuadrotor(z={np.array2string(self.z, precision=3)}, "
            f"input={np.array2string(self.input, precision=3)}, "
            f"steps={len(self.history)})"
        )
