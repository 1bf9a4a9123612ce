"""
Find a zero of a scalar function bracketed by an interval using Brent's
method.  Each step is either an inverse quadratic interpolation, a
secant step or a bisection.  Interpolated steps are only accepted when
they make sufficient progress, so convergence is never slower than
bisection but is typically superlinear for smooth functions.

The algorithm is split into small pure step functions that take the
current `BrentState` (or plain scalars) and return new values; the
solver loop in `brent_root` strings these together.
"""
from __future__ import annotations

import math
import operator
from collections.abc import Callable
from dataclasses import dataclass, replace

from pybrent.solve.result import ErrorKind, RootResult


# Written October 2026.

# ======================================================================

@dataclass(frozen=True)
class BrentState:
    """
    Working points carried between iterations.

    At the end of every iteration `fa` and `fb` have strictly opposite
    sign and ``abs(fa) >= abs(fb)``, i.e. `b` is the best estimate and
    `a` is the contrapoint.

    Attributes
    ----------
    a, b : float
        Current bracket.
    c : float
        Previous value of `b` (the third interpolation point).
    d : float
        Value of `c` before that; only used by the step-size test.
    fa, fb, fc : float
        Function values at `a`, `b`, `c`.
    mflag : bool
        True if the previous step was a bisection.
    """
    a: float
    b: float
    c: float
    d: float
    fa: float
    fb: float
    fc: float
    mflag: bool = True


# ----------------------------------------------------------------------

def is_bracketed(fa: float, fb: float) -> bool:
    """
    Returns True if `fa` and `fb` have strictly opposite sign.  An
    endpoint value of exactly zero (or ``NaN``) does not count as a
    bracket.
    """
    return fa * fb < 0


def order_best(state: BrentState) -> BrentState:
    """
    Swap `a` and `b` (and their function values) if required so that
    ``abs(fa) >= abs(fb)``.
    """
    if abs(state.fa) < abs(state.fb):
        return replace(state, a=state.b, b=state.a,
                       fa=state.fb, fb=state.fa)
    return state


def next_estimate(a: float, b: float, c: float,
                  fa: float, fb: float, fc: float) -> float:
    r"""
    Compute the next candidate root using inverse quadratic
    interpolation if `fa`, `fb` and `fc` are all different, otherwise
    using the secant method through `a` and `b`.

    The interpolation uses the ratios :math:`R = f_b/f_c`, :math:`S =
    f_b/f_a` and :math:`T = f_a/f_c`, giving :math:`s = b + P/Q` with:

        - :math:`P = S(T(R - T)(c - b) - (1 - R)(b - a))`
        - :math:`Q = (T - 1)(R - 1)(S - 1)`

    Returns
    -------
    float
        Candidate `s`.  This is ``NaN`` if the selected formula has a
        zero denominator.
    """
    if fa != fb and fa != fc and fb != fc and fa != 0 and fc != 0:
        r, s, t = fb / fc, fb / fa, fa / fc
        p = s * (t * (r - t) * (c - b) - (1 - r) * (b - a))
        q = (t - 1) * (r - 1) * (s - 1)
        if q == 0:
            return math.nan
        return b + p / q

    if fb == fa:
        return math.nan
    return b - fb * (b - a) / (fb - fa)


def reject_step(s: float, a: float, b: float, c: float, d: float,
                mflag: bool, legacy: bool = False) -> bool:
    """
    Returns True if candidate `s` should be discarded in favour of a
    bisection step.  This happens if any of the following hold:

        1. `s` is not between ``(3a + b)/4`` and `b`.
        2. The last step was a bisection and ``|s - b| >= |b - c|/2``.
        3. The last step was not a bisection and ``|s - b| >= |c - d|/2``.
        4. `s` is not finite.

    Parameters
    ----------
    s : float
        Candidate from `next_estimate`.
    a, b, c, d : float
        Current working points (see `BrentState`).
    mflag : bool
        True if the previous step was a bisection.
    legacy : bool, default = False
        If True, condition 1 is the one-sided test ``s < (3a + b)/4 or
        s > b``.  This is the same as the default when ``a < b`` but
        always rejects `s` when ``a > b``.
    """
    if not math.isfinite(s):
        return True

    bound = (3 * a + b) / 4
    if legacy:
        outside = s < bound or s > b
    else:
        outside = not (min(bound, b) < s < max(bound, b))

    if outside:
        return True
    if mflag:
        return abs(s - b) >= abs(b - c) / 2
    return abs(s - b) >= abs(c - d) / 2


def update_bracket(state: BrentState, s: float, fs: float) -> BrentState:
    """
    Replace whichever of `a` or `b` keeps the sign change: if ``fa * fs
    < 0`` the root lies between `a` and `s` so `b` is replaced,
    otherwise `a` is replaced.
    """
    if state.fa * fs < 0:
        return replace(state, b=s, fb=fs)
    return replace(state, a=s, fa=fs)


def has_converged(a: float, b: float, fs: float, tol: float) -> bool:
    """
    True if both the bracket width and ``|f(s)|`` are below `tol`, or if
    `s` is an exact zero.
    """
    return (abs(b - a) < tol and abs(fs) < tol) or fs == 0.0


# ======================================================================

def brent_root(func: Callable[..., float], x_a: float, x_b: float, *,
               func_args=(), tol: float = 1e-6, maxits: int = 100,
               legacy: bool = False, disp: bool = False,
               verbose: bool = False) -> RootResult:
    r"""
    Approximate solution of :math:`f(x) = 0` on the interval :math:`x
    \in [x_a, x_b]` using Brent's method.  ``func(x_a)`` and
    ``func(x_b)`` must have strictly opposite sign.

    Examples
    --------
    >>> res = brent_root(lambda x: x**2 - 4, 0.0, 3.0)
    >>> res.flag.name, round(res.root, 6)
    ('SUCCESS', 2.0)
    >>> brent_root(lambda x: x**2 - 4, 3.0, 4.0).flag.name
    'NOT_BRACKETED'

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.  Any auxiliary data
        can be captured in a closure or supplied using `func_args`.
    x_a, x_b : float
        Each end of the search interval, in any order.
    func_args : optional
        Extra arguments passed to `func`, i.e. ``func(x, *func_args)``.
    tol : float, default = 1e-6
        Stop when both the bracket width and :math:`|f(s)|` are less
        than `tol`, where `s` is the latest estimate.
    maxits : int, default = 100
        Maximum number of iterations.
    legacy : bool, default = False
        If False, the textbook update is used where each iteration
        moves the previous `b` into `c` and the previous `c` into `d`.
        If True, an older variant is used where `c` stays
        at its starting value, `d` stays at zero, ``f(c)`` is
        re-evaluated each iteration and the interpolation window is
        one-sided (see `reject_step`).  This is kept for compatibility
        only: `a` can become stuck while small interpolation steps
        creep towards the root from one side, so the bracket never
        closes and the solve ends with ``MAX_ITERATIONS`` (e.g. for
        flat or multiple roots in a wide bracket).
    disp : bool, default = False
        If True, raise `SolverError` on failure instead of returning a
        flagged result.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    RootResult
        On success `root` is the latest estimate `s` and `flag` is
        ``ErrorKind.SUCCESS``.  On failure `root` is ``NaN`` and `flag`
        is ``NOT_BRACKETED`` or ``MAX_ITERATIONS``.

    Raises
    ------
    ValueError
        Invalid `tol` or `maxits`.
    SolverError
        If ``disp=True`` and the solve fails.
    """
    if not tol > 0:  # Also catches NaN.
        raise ValueError(f"tol must be positive (got {tol}).")

    maxits = operator.index(maxits)
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")

    def f(x):
        return func(x, *func_args)

    def finish(res: RootResult) -> RootResult:
        if verbose:
            print(f"... {res.flag.name}: root = {res.root}, "
                  f"its = {res.its}, fevals = {res.fevals}")
        if disp:
            res.raise_for_flag('brent_root')
        return res

    if verbose:
        print(f"Brent's Method" + (" (Legacy):" if legacy else ":"))

    fa, fb = f(x_a), f(x_b)
    fevals = 2
    if not is_bracketed(fa, fb):
        return finish(RootResult.failed(ErrorKind.NOT_BRACKETED, its=0,
                                        fevals=fevals, x_a=x_a, x_b=x_b))

    # Best estimate in b; the third point starts at the contrapoint.
    if abs(fa) < abs(fb):
        x_a, x_b, fa, fb = x_b, x_a, fb, fa
    st = BrentState(a=x_a, b=x_b, c=x_a, d=0.0, fa=fa, fb=fb, fc=fa)

    for it in range(1, maxits + 1):
        if legacy:
            st = replace(st, fc=f(st.c))
            fevals += 1

        s = next_estimate(st.a, st.b, st.c, st.fa, st.fb, st.fc)
        bisect = reject_step(s, st.a, st.b, st.c, st.d, st.mflag,
                             legacy=legacy)
        if bisect:
            s = (st.a + st.b) / 2

        fs = f(s)
        fevals += 1

        if verbose:
            print(f"... Iteration {it}: x = [{st.a}, {s}, {st.b}], "
                  f"f = [{st.fa}, {fs}, {st.fb}] "
                  + ("(bisection)" if bisect else "(interpolation)"))

        st = replace(st, mflag=bisect)
        if not legacy:
            st = replace(st, d=st.c, c=st.b, fc=st.fb)

        st = order_best(update_bracket(st, s, fs))

        if has_converged(st.a, st.b, fs, tol):
            return finish(RootResult(s, ErrorKind.SUCCESS, its=it,
                                     fevals=fevals, x_a=st.a, x_b=st.b))

    return finish(RootResult.failed(ErrorKind.MAX_ITERATIONS, its=maxits,
                                    fevals=fevals, x_a=st.a, x_b=st.b))


# ----------------------------------------------------------------------

def solve(f: Callable[[float], float], a: float, b: float, tol: float,
          max_iter: int) -> tuple[float, ErrorKind]:
    """
    Find a root of `f` bracketed by `a` and `b` using Brent's method
    with default settings.  This is a thin wrapper around `brent_root`.

    Returns
    -------
    root, flag : float, ErrorKind
        `root` is ``NaN`` unless ``flag == ErrorKind.SUCCESS``.
    """
    res = brent_root(f, a, b, tol=tol, maxits=max_iter)
    return res.root, res.flag
