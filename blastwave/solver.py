"""Steady-state solver for the oblique shock problem with classical RK4."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace

import numpy as np

from blastwave.conditions import new_bc2, new_ic
from blastwave.derivatives import dx_n, dx_p, dy_n, dy_p
from blastwave.flux import split_lf

_MIN_POINTS = 5
_INITIAL_REFERENCE = 111.0


@dataclass(frozen=True)
class SolverConfig:
    """Grid, time step and convergence settings."""

    nx: int = 65
    ny: int = 65
    dt: float = 0.0005
    gamma: float = 1.4
    tolerance: float = 1e-4
    steps_per_sweep: int = 50
    x_length: float = 2.0
    y_length: float = 1.1
    fill: tuple[float, float, float, float] = (1.861755, -0.1956783, 1.262002, 0.9907762)
    """Starting value of ``(u, v, rho, p)`` before the initial condition is applied."""

    def __post_init__(self):
        if self.nx < _MIN_POINTS or self.ny < _MIN_POINTS:
            raise ValueError(f"grid needs at least {_MIN_POINTS} points in each direction")
        if self.steps_per_sweep < 1:
            raise ValueError("steps_per_sweep must be positive")
        if self.dt <= 0:
            raise ValueError("dt must be positive")

    @property
    def dx(self) -> float:
        return self.x_length / (self.nx - 1)

    @property
    def dy(self) -> float:
        return self.y_length / (self.ny - 1)


@dataclass(frozen=True)
class FlowState:
    """Primitive fields together with the tracked conserved quantities."""

    rho: np.ndarray
    u: np.ndarray
    v: np.ndarray
    p: np.ndarray
    momentum_x: np.ndarray
    momentum_y: np.ndarray
    total_energy: np.ndarray
    gamma: float = 1.4

    def energy(self) -> np.ndarray:
        """Total energy per volume computed from the primitive fields."""
        return self.p / (self.gamma - 1) + 0.5 * self.rho * (self.u**2 + self.v**2)


def make_grid(config):
    """Return the ``x`` and ``y`` node coordinates."""
    return (
        np.linspace(0.0, config.x_length, config.nx),
        np.linspace(0.0, config.y_length, config.ny),
    )


def initial_state(config, x, y):
    """Build the starting state from the initial condition."""
    shape = (len(y), len(x))
    filled = [np.full(shape, value) for value in config.fill]
    u, v, rho, p = new_ic(*filled, x, y)
    state = FlowState(rho, u, v, p, rho * u, rho * v, np.zeros(shape), config.gamma)
    return replace(state, total_energy=state.energy())


def residual(state, config):
    """Time increments of ``(rho, rho*u, rho*v, E)`` over one step ``dt``."""
    fluxes = split_lf(state.rho, state.p, state.u, state.v, state.total_energy)
    return tuple(
        -(dx_p(fp, config.dx) + dx_n(fn, config.dx) + dy_p(gp, config.dy) + dy_n(gn, config.dy))
        * config.dt
        for fp, fn, gp, gn in zip(fluxes.fp, fluxes.fn, fluxes.gp, fluxes.gn)
    )


def _from_conserved(rho, momentum_x, momentum_y, energy, gamma, x, y):
    u = momentum_x / rho
    v = momentum_y / rho
    p = (gamma - 1) * (energy - 0.5 * rho * (u**2 + v**2))
    u, v, rho, p = new_bc2(u, v, rho, p, x, y)
    return FlowState(rho, u, v, p, momentum_x, momentum_y, energy, gamma)


def _stage(base, increments, factor, gamma, x, y):
    conserved = (q + k * factor for q, k in zip(base, increments))
    return _from_conserved(*conserved, gamma, x, y)


def rk4_step(state, config, x, y):
    """Advance ``state`` by one fourth-order Runge-Kutta step."""
    gamma = config.gamma
    base = (state.rho, state.momentum_x, state.momentum_y, state.total_energy)

    k1 = residual(state, config)
    k2 = residual(_stage(base, k1, 0.5, gamma, x, y), config)
    k3 = residual(_stage(base, k2, 0.5, gamma, x, y), config)
    k4 = residual(_stage(base, k3, 1.0, gamma, x, y), config)

    combined = (
        q + (a + 2 * b + 2 * c + d) / 6 for q, a, b, c, d in zip(base, k1, k2, k3, k4)
    )
    advanced = _from_conserved(*combined, gamma, x, y)
    return replace(advanced, total_energy=advanced.energy())


def solve(config=None, max_sweeps=None):
    """Iterate towards steady state, yielding ``(iteration, tolerance, state)`` per sweep.

    A sweep is ``config.steps_per_sweep`` RK4 steps; the tolerance is the
    largest change in total energy over the last step. Iteration stops once
    the tolerance is no longer above ``config.tolerance`` or after
    ``max_sweeps`` sweeps.
    """
    config = config or SolverConfig()
    if max_sweeps is not None and max_sweeps < 1:
        raise ValueError("max_sweeps must be positive")

    x, y = make_grid(config)
    state = initial_state(config, x, y)
    old = np.full_like(state.total_energy, _INITIAL_REFERENCE)
    tolerance = float("inf")
    iteration = 1
    sweeps = 0

    while tolerance > config.tolerance:
        if max_sweeps is not None and sweeps >= max_sweeps:
            return
        for _ in range(config.steps_per_sweep):
            state = rk4_step(state, config, x, y)
            tolerance = float(np.max(np.abs(state.total_energy - old)))
            old = state.total_energy
        iteration += 1
        sweeps += 1
        yield iteration, tolerance, state


def main(argv=None):
    """Run the solver and report the tolerance after each sweep."""
    defaults = SolverConfig()
    parser = argparse.ArgumentParser(description="Oblique shock reflection steady-state solver.")
    parser.add_argument("--nx", type=int, default=defaults.nx, help="points along x")
    parser.add_argument("--ny", type=int, default=defaults.ny, help="points along y")
    parser.add_argument("--dt", type=float, default=defaults.dt, help="time step")
    parser.add_argument("--steps", type=int, default=defaults.steps_per_sweep,
                        help="RK4 steps per reported sweep")
    parser.add_argument("--tolerance", type=float, default=defaults.tolerance,
                        help="convergence threshold on the energy change")
    parser.add_argument("--max-sweeps", type=int, default=None,
                        help="stop after this many sweeps")
    args = parser.parse_args(argv)

    try:
        config = SolverConfig(
            nx=args.nx,
            ny=args.ny,
            dt=args.dt,
            steps_per_sweep=args.steps,
            tolerance=args.tolerance,
        )
        for iteration, tolerance, _ in solve(config, args.max_sweeps):
            print(f"Iteration {iteration}, Tolerance: {tolerance:g}", flush=True)
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())