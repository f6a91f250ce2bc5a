# blastwave

`blastwave` solves the two-dimensional compressible Euler equations for an
oblique shock reflecting in a rectangular channel. It marches the flow in
pseudo-time until it reaches a steady state.

The method has these parts:

- Lax–Friedrichs flux-vector splitting of the convective fluxes
  (`blastwave.flux.split_lf`).
- A fifth-order compact WENO-type scheme for the derivatives of the split
  fluxes. `blastwave.nov5.nov_5` is the left-biased form for positive fluxes
  and `blastwave.nov5.nov_5_n` the right-biased form for negative fluxes.
  `blastwave.derivatives.dx_p`, `dx_n`, `dy_p` and `dy_n` apply them along
  the rows (x) and columns (y) of a 2-D field.
- The classical four-stage Runge–Kutta scheme (`blastwave.solver.rk4_step`).

The default grid (`blastwave.solver.SolverConfig`) has 65 × 65 points and
covers `x ∈ [0, 2]` and `y ∈ [0, 1.1]`. The time step is `0.0005` and the
ratio of specific heats is `γ = 1.4`.

The upstream state is `blastwave.conditions.FREESTREAM`:

| u | v | ρ | p |
|---|---|---|---|
| 2 | 0 | 1 | 5/7 |

The state behind the incident shock is `blastwave.conditions.POST_SHOCK`:

| u | v | ρ | p |
|---|---|---|---|
| 1.861754751 | −0.195678309 | 1.262002269 | 0.990776211 |

`blastwave.conditions.new_ic` places the upstream state ahead of the shock
line and the shocked state behind it. `blastwave.conditions.new_bc2` sets the
last row (from the fourth column on) to the shocked state. It sets the first
three columns by the same rule as the initial condition. Both functions return
new `(u, v, rho, p)` arrays and leave their inputs unchanged.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Command line

```
blastwave
```

The solver runs sweeps of Runge–Kutta steps. After each sweep it prints a
line such as `Iteration 2, Tolerance: 0.0123`. The tolerance is the largest
change of total energy over the last step. The solver stops once the
tolerance is no longer above the threshold.

Options:

| Option | Default | Meaning |
|---|---|---|
| `--nx` | 65 | points along x |
| `--ny` | 65 | points along y |
| `--dt` | 0.0005 | time step |
| `--steps` | 50 | Runge–Kutta steps per sweep |
| `--tolerance` | 1e-4 | convergence threshold on the energy change |
| `--max-sweeps` | none | stop after this many sweeps |

Invalid settings are reported as usage errors. Examples are fewer than 5
points in a direction, or a time step or step count that is not positive.

## Library use

```python
from blastwave.solver import SolverConfig, make_grid, initial_state, rk4_step, solve

config = SolverConfig(nx=33, ny=33)
x, y = make_grid(config)
state = initial_state(config, x, y)

state = rk4_step(state, config, x, y)
print(state.energy().max())

for iteration, tolerance, state in solve(config, max_sweeps=2):
    print(iteration, tolerance)
print(state.rho.shape)
```

`solve(config=None, max_sweeps=None)` is a generator. After each sweep it
yields `(iteration, tolerance, state)`. `FlowState` holds the primitive fields
`rho`, `u`, `v` and `p`, and the conserved fields `momentum_x`, `momentum_y`
and `total_energy`. `residual(state, config)` gives the increments of
`(rho, rho*u, rho*v, E)` over one time step.

The building blocks can also be called on their own:

```python
import numpy as np
from blastwave.nov5 import nov_5
from blastwave.derivatives import dx_p
from blastwave.flux import split_lf

f = np.sin(np.linspace(0.0, 1.0, 32))
df = nov_5(f, 1.0 / 31)

field = np.outer(np.ones(8), f)
dfdx = dx_p(field, 1.0 / 31)
```

The 1-D schemes need at least 5 points. `split_lf(r, p, u, v, E)` returns a
frozen `SplitFluxes` with these members:

- `fp`, `fn`, `gp` and `gn`: four arrays each, one for each conserved quantity.
- `a` and `b`: the global wave speeds in x and y.

## What it does not do

The solver keeps its results in memory only. It does not write solution
files or plots, and it has no checkpoint or restart.

## Tests

```
pytest
```