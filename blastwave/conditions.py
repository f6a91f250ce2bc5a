"""Initial and boundary conditions for the oblique shock reflection problem.

Every function returns new ``(u, v, rho, p)`` arrays and leaves its inputs
untouched. Fields are indexed ``[j, i]`` with ``j`` along ``y`` and ``i``
along ``x``.
"""

from __future__ import annotations

import math

import numpy as np

FREESTREAM = (2.0, 0.0, 1.0, 5.0 / 7.0)
"""Upstream state as ``(u, v, rho, p)``."""

POST_SHOCK = (1.861754751, -0.195678309, 1.262002269, 0.990776211)
"""State behind the incident shock as ``(u, v, rho, p)``."""

_IC_SLOPE = -math.tan(35.24091734 * math.pi / 180.0)
_BC_SLOPE = -0.706492454614085
_LEFT_COLUMNS = 3


def _prepare(u, v, rho, p, x, y):
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.ndim != 1 or y.ndim != 1:
        raise ValueError("grid coordinates must be one-dimensional")
    expected = (y.size, x.size)
    fields = [np.asarray(field, dtype=float) for field in (u, v, rho, p)]
    for field in fields:
        if field.shape != expected:
            raise ValueError(f"field shape {field.shape} does not match grid {expected}")
    return fields, x, y


def new_ic(u, v, rho, p, x, y):
    """Fill the domain with freestream gas ahead of the shock and shocked gas behind."""
    _, x, y = _prepare(u, v, rho, p, x, y)
    upstream = (x[np.newaxis, :] - 1) < (y[:, np.newaxis] / _IC_SLOPE)
    return tuple(
        np.where(upstream, ahead, behind) for ahead, behind in zip(FREESTREAM, POST_SHOCK)
    )


def new_bc2(u, v, rho, p, x, y):
    """Impose the last-row and left-column boundary states."""
    fields, x, y = _prepare(u, v, rho, p, x, y)
    if x.size < _LEFT_COLUMNS:
        raise ValueError(f"at least {_LEFT_COLUMNS} x points are required, got {x.size}")
    out = [field.copy() for field in fields]

    for field, value in zip(out, POST_SHOCK):
        field[-1, _LEFT_COLUMNS:] = value

    upstream = (x[np.newaxis, :_LEFT_COLUMNS] - 1) < (y[:, np.newaxis] / _BC_SLOPE)
    for field, ahead, behind in zip(out, FREESTREAM, POST_SHOCK):
        field[:, :_LEFT_COLUMNS] = np.where(upstream, ahead, behind)

    return tuple(out)