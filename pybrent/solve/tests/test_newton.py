import warnings
from unittest import TestCase

from .scalar_tst_functions import d_quadratic, quadratic, shifted_square


# ======================================================================

class TestNewtonRoot(TestCase):
    def test_newton_root(self):
        from pybrent.solve import ErrorKind, newton_root

        # Check normal operation.
        res = newton_root(quadratic, d_quadratic, 1.5)
        self.assertEqual(res.flag, ErrorKind.SUCCESS)
        self.assertLess(abs(res.root - 2.0), 1e-6)
        self.assertEqual(res.fevals, 2 * res.its + 1)
        self.assertIsNone(res.x_a)

        # Extra arguments go to both functions.
        res = newton_root(shifted_square, lambda x, a: 2 * x, 1.0,
                          func_args=(9.0,))
        self.assertLess(abs(res.root - 3.0), 1e-6)

    def test_zero_derivative(self):
        from pybrent.solve import ErrorKind, SolverError, newton_root

        with self.assertWarns(RuntimeWarning):
            res = newton_root(quadratic, d_quadratic, 0.0)
        self.assertEqual(res.flag, ErrorKind.ZERO_DERIVATIVE)
        self.assertEqual(res.root, 0.0)

        with self.assertRaises(SolverError) as cm:
            with warnings.catch_warnings():
                warnings.simplefilter('error')
                newton_root(quadratic, d_quadratic, 0.0, disp=True)
        self.assertEqual(cm.exception.flag, ErrorKind.ZERO_DERIVATIVE)

    def test_max_iterations(self):
        from pybrent.solve import ErrorKind, SolverError, newton_root

        # Failure keeps the last x, unlike brent_root.
        res = newton_root(quadratic, d_quadratic, 1000.0, maxits=2)
        self.assertEqual(res.flag, ErrorKind.MAX_ITERATIONS)
        self.assertEqual(res.its, 2)
        self.assertGreater(res.root, 2.0)

        with self.assertRaises(SolverError):
            newton_root(quadratic, d_quadratic, 1000.0, maxits=2,
                        disp=True)

    def test_bounds(self):
        from pybrent.solve import ErrorKind, newton_root

        calls = []

        def f(x):
            calls.append(x)
            return quadratic(x)

        # The first step from 0.1 would go to 20.05; it is clipped to 10.
        res = newton_root(f, d_quadratic, 0.1, bounds=(10.0, 0.0))
        self.assertEqual(res.flag, ErrorKind.SUCCESS)
        self.assertLess(abs(res.root - 2.0), 1e-6)
        self.assertEqual(calls[1], 10.0)
        self.assertLessEqual(max(calls), 10.0)

        with self.assertRaises(ValueError):
            newton_root(quadratic, d_quadratic, 11.0, bounds=(0.0, 10.0))

    def test_invalid_parameters(self):
        from pybrent.solve import newton_root

        with self.assertRaises(ValueError):
            newton_root(quadratic, d_quadratic, 1.5, tol=-1.0)
        with self.assertRaises(ValueError):
            newton_root(quadratic, d_quadratic, 1.5, tol=float('nan'))
        with self.assertRaises(ValueError):
            newton_root(quadratic, d_quadratic, 1.5, maxits=0)
