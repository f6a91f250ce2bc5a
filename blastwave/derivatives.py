"""Directional derivatives of 2-D fields built from the 1-D compact schemes.

Rows run along x and columns along y. The ``_p`` operators use the
left-biased scheme for positive fluxes, the ``_n`` ones the right-biased
scheme for negative fluxes.
"""

from __future__ import annotations

import numpy as np

from blastwave.nov5 import nov_5, nov_5_n


def _as_field(u) -> np.ndarray:
    field = np.asarray(u, dtype=float)
    if field.ndim != 2:
        raise ValueError(f"expected a two-dimensional array, got shape {field.shape}")
    return field


def _along_rows(scheme, u, h) -> np.ndarray:
    field = _as_field(u)
    return np.vstack([scheme(row, h) for row in field])


def _along_columns(scheme, u, h) -> np.ndarray:
    field = _as_field(u)
    return np.column_stack([scheme(column, h) for column in field.T])


def dx_p(u, h):
    """x-derivative of ``u`` (along each row), left-biased."""
    return _along_rows(nov_5, u, h)


def dx_n(u, h):
    """x-derivative of ``u`` (along each row), right-biased."""
    return _along_rows(nov_5_n, u, h)


def dy_p(u, h):
    """y-derivative of ``u`` (along each column), left-biased."""
    return _along_columns(nov_5, u, h)


def dy_n(u, h):
    """y-derivative of ``u`` (along each column), right-biased."""
    return _along_columns(nov_5_n, u, h)