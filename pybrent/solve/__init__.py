"""
====================================
Solvers (:mod:`pybrent.solve`)
====================================

.. currentmodule:: pybrent.solve

Functions for finding a root of a scalar function inside a bracketing
interval using Brent's method, along with Newton's method and SciPy's
`brentq` for comparison.

Functions
---------

.. autosummary::
    :toctree:

    brent_root
    compare_solvers
    newton_root
    solve

Step Functions
--------------

.. autosummary::
    :toctree:

    has_converged
    is_bracketed
    next_estimate
    order_best
    reject_step
    update_bracket

Classes
-------

.. autosummary::
    :toctree:

    BrentState
    ErrorKind
    RootResult
    SolverComparison

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .exception import SolverError
from .result import ErrorKind, RootResult
from .brent import (BrentState, brent_root, has_converged, is_bracketed,
                    next_estimate, order_best, reject_step, solve,
                    update_bracket)
from .newton import newton_root
from .compare import SolverComparison, compare_solvers
