"""
Find a zero of a scalar function using the Newton-Raphson method.  This
is provided mainly as a point of comparison for `brent_root`: it needs a
derivative and a single starting point rather than a bracket, and
converges quadratically near a simple root but has no guarantee of
convergence at all.

Optionally all trial points can be clipped to lie within a bounded
interval.  This may help in the situation where the given function is
not well defined outside the given interval.
"""
from __future__ import annotations

import math
import operator
import warnings
from collections.abc import Callable

from pybrent.solve.result import ErrorKind, RootResult


# Written October 2026.

# ----------------------------------------------------------------------

def newton_root(func: Callable[..., float], fprime: Callable[..., float],
                x0: float, *, func_args=(), tol: float = 1e-6,
                maxits: int = 100, bounds: tuple[float, float] = None,
                disp: bool = False, verbose: bool = False) -> RootResult:
    r"""
    Approximate solution of :math:`f(x) = 0` by iterating :math:`x' = x
    - f(x) / f'(x)` from `x0`.

    Examples
    --------
    >>> res = newton_root(lambda x: x**2 - 4, lambda x: 2 * x, 1.5)
    >>> res.flag.name, round(res.root, 6)
    ('SUCCESS', 2.0)

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    fprime : Callable[[float, ...], float]
        Derivative of `func`, taking the same arguments.
    x0 : float
        Starting point.
    func_args : optional
        Extra arguments passed to `func` and `fprime`.
    tol : float, default = 1e-6
        Stop when :math:`|f(x)| < tol`.
    maxits : int, default = 100
        Maximum number of iterations.
    bounds : (float, float), optional
        If given, each new `x` is clipped to lie within this interval.
        Order is not important.  Use +/- ``math.inf`` for one-sided
        bounds.
    disp : bool, default = False
        If True, raise `SolverError` on failure.  Otherwise a zero
        derivative produces a ``RuntimeWarning``.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    RootResult
        Unlike `brent_root`, a failed result still carries the last `x`
        reached as `root` (flag ``ZERO_DERIVATIVE`` or
        ``MAX_ITERATIONS``).  `x_a` and `x_b` are not used.

    Raises
    ------
    ValueError
        Invalid `tol`, `maxits` or starting point outside `bounds`.
    SolverError
        If ``disp=True`` and the solve fails.
    """
    if not tol > 0:  # Also catches NaN.
        raise ValueError(f"tol must be positive (got {tol}).")

    maxits = operator.index(maxits)
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")

    if bounds is not None:
        x_min, x_max = min(bounds), max(bounds)
        if not (x_min <= x0 <= x_max):
            raise ValueError("Starting point cannot be outside boundary.")
    else:
        x_min, x_max = -math.inf, math.inf

    def finish(x, flag, its):
        res = RootResult(x, flag, its=its, fevals=fevals)
        if verbose:
            print(f"... {flag.name}: root = {x}, its = {its}, "
                  f"fevals = {fevals}")
        if disp:
            res.raise_for_flag('newton_root')
        elif flag == ErrorKind.ZERO_DERIVATIVE:
            warnings.warn(f"Derivative was zero at x = {x}.",
                          RuntimeWarning)
        return res

    if verbose:
        print(f"Newton-Raphson Method:")

    x, fevals = 1.0 * x0, 0
    for it in range(maxits):
        fx = func(x, *func_args)
        fevals += 1
        if abs(fx) < tol:
            return finish(x, ErrorKind.SUCCESS, it)

        dfx = fprime(x, *func_args)
        fevals += 1
        if dfx == 0:
            return finish(x, ErrorKind.ZERO_DERIVATIVE, it)

        x = min(max(x - fx / dfx, x_min), x_max)

        if verbose:
            print(f"... Iteration {it + 1}: x = {x}, f = {fx}, "
                  f"f' = {dfx}")

    return finish(x, ErrorKind.MAX_ITERATIONS, maxits)
