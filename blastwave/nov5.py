"""Fifth-order nonlinear compact WENO-type derivative operators on a 1-D stencil.

``nov_5`` is the positive-flux (left-biased) variant and ``nov_5_n`` the
negative-flux (right-biased) variant. Both reconstruct interface values by
solving a tridiagonal-like compact system, then difference them.
"""

from __future__ import annotations

import numpy as np

YITA = 1e-10
"""Small constant keeping the nonlinear weights finite."""

_MIN_POINTS = 5

# One-sided fifth-order interface reconstructions used at the ends of the line.
_OUTER = np.array([137.0, -163.0, 137.0, -63.0, 12.0]) / 60.0
_NEAR = np.array([12.0, 77.0, -43.0, 17.0, -3.0]) / 60.0
_INNER = np.array([-3.0, 27.0, 47.0, -13.0, 2.0]) / 60.0

_C0 = 13.0 / 12.0
_TWO_THIRDS = 0.66666666666666666666667
_ONE_EIGHTEENTH = 0.05555555555555556
_FOUR_NINTHS = 0.44444444444444444
_TWO_NINTHS = 0.222222222222222
_TWENTYFIVE_EIGHTEENTHS = 1.38888888888889


def _as_line(f) -> np.ndarray:
    values = np.asarray(f, dtype=float)
    if values.ndim != 1:
        raise ValueError(f"expected a one-dimensional array, got shape {values.shape}")
    if values.size < _MIN_POINTS:
        raise ValueError(
            f"at least {_MIN_POINTS} points are required, got {values.size}"
        )
    return values


def _weights(is0, is1, is2, g0, g1, g2):
    gamma0 = g0 / (YITA + is0)
    gamma1 = g1 / (YITA + is1)
    gamma2 = g2 / (YITA + is2)
    total = gamma0 + gamma1 + gamma2
    return gamma0 / total, gamma1 / total, gamma2 / total


def _differentiate(system: np.ndarray, rhs: np.ndarray, h: float) -> np.ndarray:
    # Minimum-norm least-squares solve, which also copes with a singular system.
    interfaces = np.linalg.lstsq(system, rhs, rcond=None)[0]
    return np.diff(interfaces) / h


def nov_5(f, h):
    """Derivative of ``f`` with grid spacing ``h`` using the left-biased scheme."""
    f = _as_line(f)
    n = f.size
    de = np.zeros(n + 1)
    a = np.zeros((n + 1, n + 1))

    de[0] = _OUTER @ f[:5]
    de[1] = _NEAR @ f[:5]
    de[2] = _INNER @ f[:5]
    a[0, 0] = a[1, 1] = a[2, 2] = 1.0

    j = np.arange(2, n - 2)
    if j.size:
        fm2, fm1, f0, fp1, fp2 = f[j - 2], f[j - 1], f[j], f[j + 1], f[j + 2]
        is0 = _C0 * (fm2 - 2 * fm1 + f0) ** 2 + 0.25 * (fm2 - 4 * fm1 + 3 * f0) ** 2
        is1 = _C0 * (fm1 - 2 * f0 + fp1) ** 2 + 0.25 * (fm1 - fp1) ** 2
        is2 = _C0 * (f0 - 2 * fp1 + fp2) ** 2 + 0.25 * (3 * f0 - 4 * fp1 + fp2) ** 2
        w0, w1, w2 = _weights(is0, is1, is2, _ONE_EIGHTEENTH, _FOUR_NINTHS, 0.5)

        de[j + 1] = (
            0.5 * w0 * fm1
            + (2.5 * w0 + 1.25 * w1 + _TWO_NINTHS * w2) * f0
            + (0.25 * w1 + _TWENTYFIVE_EIGHTEENTHS * w2) * fp1
            + (_ONE_EIGHTEENTH * w2) * fp2
        )
        a[j + 1, j] = 2.0 * w0 + 0.5 * w1
        a[j + 1, j + 1] = 1.0
        a[j + 1, j + 2] = _TWO_THIRDS * w2

    tail = f[n - 5:]
    de[n - 1] = _NEAR[::-1] @ tail
    de[n] = _OUTER[::-1] @ tail
    a[n - 1, n - 1] = 1.0
    a[n, n] = 1.0

    return _differentiate(a, de, h)


def nov_5_n(f, h):
    """Derivative of ``f`` with grid spacing ``h`` using the right-biased scheme."""
    f = _as_line(f)
    n = f.size
    de = np.zeros(n + 1)
    a = np.zeros((n + 1, n + 1))

    de[0] = _OUTER @ f[:5]
    de[1] = _NEAR @ f[:5]
    a[0, 0] = a[1, 1] = 1.0

    j = np.arange(1, n - 3)
    if j.size:
        fm1, f0, fp1, fp2, fp3 = f[j - 1], f[j], f[j + 1], f[j + 2], f[j + 3]
        is0 = _C0 * (fm1 - 2 * f0 + fp1) ** 2 + 0.25 * (fm1 - 4 * f0 + 3 * fp1) ** 2
        is1 = _C0 * (f0 - 2 * fp1 + fp2) ** 2 + 0.25 * (f0 - fp2) ** 2
        is2 = _C0 * (fp1 - 2 * fp2 + fp3) ** 2 + 0.25 * (3 * fp1 - 4 * fp2 + fp3) ** 2
        w0, w1, w2 = _weights(is0, is1, is2, 0.5, _FOUR_NINTHS, _ONE_EIGHTEENTH)

        de[j + 1] = (
            (_ONE_EIGHTEENTH * w0) * fm1
            + (_TWENTYFIVE_EIGHTEENTHS * w0 + 0.25 * w1) * f0
            + (_TWO_NINTHS * w0 + 1.25 * w1 + 2.5 * w2) * fp1
            + (0.5 * w2) * fp2
        )
        a[j + 1, j] = _TWO_THIRDS * w0
        a[j + 1, j + 1] = 1.0
        a[j + 1, j + 2] = 0.5 * w1 + 2.0 * w2

    tail = f[n - 5:]
    de[n - 2] = _INNER[::-1] @ tail
    de[n - 1] = _NEAR[::-1] @ tail
    de[n] = _OUTER[::-1] @ tail
    a[n - 2, n - 2] = 1.0
    a[n - 1, n - 1] = 1.0
    a[n, n] = 1.0

    return _differentiate(a, de, h)