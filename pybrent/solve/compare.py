from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import perf_counter

import numpy as np
from scipy.optimize import brentq

from pybrent.solve.brent import brent_root
from pybrent.solve.newton import newton_root
from pybrent.solve.result import ErrorKind, RootResult


# Written October 2026.

# ======================================================================

@dataclass(frozen=True)
class SolverComparison:
    """
    One row of a `compare_solvers` table.

    Attributes
    ----------
    method : str
        Name of the solver.
    result : RootResult
        Result of the last run.
    time : float
        Median wall time of a single run (seconds).
    """
    method: str
    result: RootResult
    time: float

    def __str__(self):
        res = self.result
        return (f"{self.method:<14s} {res.flag.name:<16s} "
                f"root = {res.root:<20.15g} its = {res.its:>4d}  "
                f"fevals = {res.fevals:>4d}  time = {self.time:.3e} s")


# ----------------------------------------------------------------------

def _scipy_brentq(func, x_a, x_b, func_args, tol, maxits) -> RootResult:
    # Map SciPy's exception / flag outputs onto our own result type.
    try:
        root, info = brentq(func, x_a, x_b, args=tuple(func_args),
                            xtol=tol, maxiter=maxits, full_output=True,
                            disp=False)
    except ValueError:
        return RootResult.failed(ErrorKind.NOT_BRACKETED, fevals=2,
                                 x_a=x_a, x_b=x_b)

    if not info.converged:
        return RootResult.failed(ErrorKind.MAX_ITERATIONS,
                                 its=info.iterations,
                                 fevals=info.function_calls)
    return RootResult(root, ErrorKind.SUCCESS, its=info.iterations,
                      fevals=info.function_calls)


def compare_solvers(func: Callable[..., float], x_a: float, x_b: float, *,
                    fprime: Callable[..., float] = None, x0: float = None,
                    func_args=(), tol: float = 1e-6, maxits: int = 100,
                    num_times: int = 1) -> list[SolverComparison]:
    """
    Solve the same problem with each available method and compare the
    results, iteration counts and execution times.

    The methods used are:

        - ``'brent'``: `brent_root` with the textbook update.
        - ``'brent-legacy'``: `brent_root` with ``legacy=True``.
        - ``'newton'``: `newton_root`, only if `fprime` is given.
        - ``'scipy-brentq'``: SciPy's `brentq` as a reference.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    x_a, x_b : float
        Bracket used by the bracketing methods.
    fprime : Callable[[float, ...], float], optional
        Derivative of `func`.  Required for ``'newton'``.
    x0 : float, optional
        Newton starting point.  Defaults to the bracket midpoint.
    func_args : optional
        Extra arguments passed to `func` (and `fprime`).
    tol : float, default = 1e-6
        Convergence tolerance passed to all methods.  Note that SciPy
        uses this as an `x` tolerance only.
    maxits : int, default = 100
        Iteration limit passed to all methods.
    num_times : int, default = 1
        The number of times to run each method.  The median time of a
        single run is reported.

    Returns
    -------
    list[SolverComparison]
        One entry per method, in the order listed above.
    """
    if num_times < 1:
        raise ValueError("num_times must be greater than 0.")

    methods = {
        'brent': lambda: brent_root(func, x_a, x_b, func_args=func_args,
                                    tol=tol, maxits=maxits),
        'brent-legacy': lambda: brent_root(func, x_a, x_b,
                                           func_args=func_args, tol=tol,
                                           maxits=maxits, legacy=True)}

    if fprime is not None:
        x_start = 0.5 * (x_a + x_b) if x0 is None else x0
        methods['newton'] = lambda: newton_root(
            func, fprime, x_start, func_args=func_args, tol=tol,
            maxits=maxits)

    methods['scipy-brentq'] = lambda: _scipy_brentq(
        func, x_a, x_b, func_args, tol, maxits)

    # Call perf_counter() twice every pass so that only the solve itself
    # is timed.
    rows = []
    for name, run in methods.items():
        times = np.empty(num_times)
        for i in range(num_times):
            t_start = perf_counter()
            res = run()
            times[i] = perf_counter() - t_start

        rows.append(SolverComparison(name, res, float(np.median(times))))

    return rows
