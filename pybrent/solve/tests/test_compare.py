from unittest import TestCase

from .scalar_tst_functions import d_quadratic, quadratic


# ======================================================================

class TestCompareSolvers(TestCase):
    def test_compare_solvers(self):
        from pybrent.solve import ErrorKind, compare_solvers

        rows = compare_solvers(quadratic, 0.0, 3.0, fprime=d_quadratic,
                               x0=1.5, tol=1e-8, num_times=3)
        self.assertEqual([row.method for row in rows],
                         ['brent', 'brent-legacy', 'newton',
                          'scipy-brentq'])
        for row in rows:
            with self.subTest(method=row.method):
                self.assertEqual(row.result.flag, ErrorKind.SUCCESS)
                self.assertLess(abs(row.result.root - 2.0), 1e-6)
                self.assertGreaterEqual(row.time, 0.0)
                self.assertIn(row.method, str(row))

    def test_without_derivative(self):
        from pybrent.solve import compare_solvers

        rows = compare_solvers(quadratic, 0.0, 3.0)
        self.assertEqual([row.method for row in rows],
                         ['brent', 'brent-legacy', 'scipy-brentq'])

    def test_failures(self):
        from pybrent.solve import ErrorKind, compare_solvers

        rows = compare_solvers(quadratic, 3.0, 4.0)
        for row in rows:
            with self.subTest(method=row.method):
                self.assertEqual(row.result.flag, ErrorKind.NOT_BRACKETED)
                self.assertIn('NOT_BRACKETED', str(row))

        rows = {row.method: row for row in
                compare_solvers(quadratic, 0.0, 3.0, maxits=10)}
        self.assertTrue(rows['brent'].result.converged)
        self.assertEqual(rows['brent-legacy'].result.flag,
                         ErrorKind.MAX_ITERATIONS)

        with self.assertRaises(ValueError):
            compare_solvers(quadratic, 0.0, 3.0, num_times=0)
