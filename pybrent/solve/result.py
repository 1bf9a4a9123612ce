from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from pybrent.solve.exception import SolverError


# Written October 2026.

# ======================================================================

class ErrorKind(IntEnum):
    """
    Status codes returned by the root solvers.  The numeric values are
    stable and ``SUCCESS`` is zero, so a flag can be tested directly for
    truth to detect a failure.
    """
    SUCCESS = 0
    NOT_BRACKETED = 1
    MAX_ITERATIONS = 2
    ZERO_DERIVATIVE = 3  # Newton only.


_DETAILS = {
    ErrorKind.NOT_BRACKETED: "f(x_a) and f(x_b) must have opposite sign.",
    ErrorKind.MAX_ITERATIONS: "Reached maxits.",
    ErrorKind.ZERO_DERIVATIVE: "Derivative was zero.",
}


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class RootResult:
    """
    Outcome of a single root solve.  Exactly one of a converged root or
    a failure flag is meaningful; always check `flag` (or `converged`)
    before using `root`.

    Attributes
    ----------
    root : float
        Converged root.  For bracketing solvers this is ``NaN`` on
        failure.
    flag : ErrorKind
        ``ErrorKind.SUCCESS`` or the reason for failure.
    its : int
        Number of iterations completed.
    fevals : int
        Number of function evaluations.
    x_a, x_b : float, optional
        Final bracket, where the solver maintains one.
    """
    root: float
    flag: ErrorKind
    its: int = 0
    fevals: int = 0
    x_a: float = None
    x_b: float = None

    @property
    def converged(self) -> bool:
        return self.flag == ErrorKind.SUCCESS

    @property
    def details(self) -> str | None:
        """Text description of the failure, or None if converged."""
        return _DETAILS.get(self.flag)

    def raise_for_flag(self, method: str = 'solver') -> RootResult:
        """
        Raise `SolverError` if this result is a failure, otherwise
        return the result unchanged (allowing chaining).

        Parameters
        ----------
        method : str, default = 'solver'
            Name used in the error message.
        """
        if self.converged:
            return self
        raise SolverError(f"{method}() failed to converge:",
                          flag=self.flag, details=self.details,
                          x_a=self.x_a, x_b=self.x_b, its=self.its,
                          fevals=self.fevals)

    @classmethod
    def failed(cls, flag: ErrorKind, **kwargs) -> RootResult:
        """Failed result with a ``NaN`` root."""
        return cls(math.nan, flag, **kwargs)
