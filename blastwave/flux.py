"""Lax-Friedrichs flux-vector splitting for the 2-D Euler equations."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

GAMMA = 1.4
"""Ratio of specific heats used for the sound speed in the splitting."""


@dataclass(frozen=True)
class SplitFluxes:
    """Positive and negative parts of the x-fluxes (f) and y-fluxes (g).

    Each of ``fp``, ``fn``, ``gp`` and ``gn`` holds four arrays, one per
    conserved quantity: density, x-momentum, y-momentum and total energy.
    ``a`` and ``b`` are the global wave speeds used in x and y.
    """

    fp: tuple[np.ndarray, ...]
    fn: tuple[np.ndarray, ...]
    gp: tuple[np.ndarray, ...]
    gn: tuple[np.ndarray, ...]
    a: float
    b: float


def _fields(*arrays) -> list[np.ndarray]:
    fields = [np.asarray(array, dtype=float) for array in arrays]
    shapes = {field.shape for field in fields}
    if len(shapes) != 1:
        raise ValueError(f"all fields must share one shape, got {sorted(shapes)}")
    (shape,) = shapes
    if len(shape) != 2:
        raise ValueError(f"expected two-dimensional fields, got shape {shape}")
    return fields


def split_lf(r, p, u, v, E):
    """Split the Euler fluxes of the given primitive state and energy."""
    r, p, u, v, E = _fields(r, p, u, v, E)

    c = np.sqrt(np.maximum(GAMMA * p / r, 0.0))
    a = float(np.max(np.abs(u + c)))
    b = float(np.max(np.abs(v + c)))

    ru = r * u
    rv = r * v
    ruv = ru * v
    f = (ru, r * u**2 + p, ruv, (E + p) * u)
    g = (rv, ruv, r * v**2 + p, (E + p) * v)
    q = (r, ru, rv, E)

    return SplitFluxes(
        fp=tuple((fk + a * qk) / 2 for fk, qk in zip(f, q)),
        fn=tuple((fk - a * qk) / 2 for fk, qk in zip(f, q)),
        gp=tuple((gk + b * qk) / 2 for gk, qk in zip(g, q)),
        gn=tuple((gk - b * qk) / 2 for gk, qk in zip(g, q)),
        a=a,
        b=b,
    )