#!usr/bin/env python3

# Examples of finding roots of scalar functions using Brent's method,
# compared with Newton's method and SciPy.

import math

from pybrent.solve import brent_root, compare_solvers


def quadratic(x):
    return x * x - 4


def d_quadratic(x):
    return 2 * x


def shifted_square(x, a):
    """Function with a user-defined parameter."""
    return x * x - a


def sign(x):
    """Discontinuous; interpolation is useless so bisection takes over."""
    return -1.0 if x < 0 else (1.0 if x > 0 else 0.0)


problems = [
    ("x^2 - 4", quadratic, 0.0, 3.0, ()),
    ("sin(x)", math.sin, 3.0, 4.0, ()),
    ("exp(x) - 2", lambda x: math.exp(x) - 2, 0.0, 1.0, ()),
    ("x^3 - x - 2", lambda x: x ** 3 - x - 2, 1.0, 2.0, ()),
    ("tan(x)", math.tan, 3.0, 3.2, ()),
    ("x^2 - a, a = 9", shifted_square, 1.0, 4.0, (9.0,)),
    ("sign(x)", sign, -1.0, 1.0, ()),
    ("(x - 1)^3", lambda x: (x - 1) ** 3, 0.0, 2.0, ()),
    ("x^2 - 4 (no bracket)", quadratic, 3.0, 4.0, ()),
]

for name, f, x_a, x_b, args in problems:
    new = brent_root(f, x_a, x_b, func_args=args)
    old = brent_root(f, x_a, x_b, func_args=args, legacy=True)
    print(f"{name:<22s} [{x_a}, {x_b}]: {new.flag.name:<14s} "
          f"root = {new.root:.10f}, its = {new.its} (legacy: {old.its})")

# Show every step for a single problem.
print()
brent_root(quadratic, 0.0, 3.0, verbose=True)

# Timing comparison.
print()
for row in compare_solvers(quadratic, 0.0, 3.0, fprime=d_quadratic,
                           x0=1.5, num_times=1000):
    print(row)
