from __future__ import annotations

from enum import Enum


# Written October 2026.

# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a root solver fails to converge or
    cannot start, and the caller has asked for failures to be raised
    (``disp=True``) instead of returned as a flagged result.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used, e.g. the final bracket
    `x_a`, `x_b` or the counts `its` and `fevals`.
    """

    def __init__(self, *args, flag: Enum = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : ErrorKind, default = None
            Status code giving the reason for the failure.  This is
            never ``ErrorKind.SUCCESS``.
        details : str, default = None
            Additional text relating to the specific type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is None:
                continue
            if isinstance(v, Enum):
                v = v.name
            error_str += f"\n{k} -> {v}"
        return error_str
