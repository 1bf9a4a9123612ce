import math


# ======================================================================

# Scalar test functions and known roots.  Functions taking a second
# argument are used with `func_args`.

def quadratic(x):
    return x * x - 4


def d_quadratic(x):
    return 2 * x


def cubic(x):
    return x * x * x - x - 2


def shifted_square(x, a):
    return x * x - a


def sign(x):
    return -1.0 if x < 0 else (1.0 if x > 0 else 0.0)


def triple_root(x):
    return (x - 1) ** 3


def exp_minus_two(x):
    return math.exp(x) - 2


# (name, func, x_a, x_b, exact root)
BRACKETED_CASES = [
    ('quadratic', quadratic, 0.0, 3.0, 2.0),
    ('sin', math.sin, 3.0, 4.0, math.pi),
    ('exp', exp_minus_two, 0.0, 1.0, math.log(2)),
    ('cubic', cubic, 1.0, 2.0, 1.5213797068045676),
    ('tan', math.tan, 3.0, 3.2, math.pi),
    ('narrow', quadratic, 1.99, 2.01, 2.0),
    ('wide', quadratic, 1.0, 1000.0, 2.0),
    ('reversed', quadratic, 3.0, 0.0, 2.0),
    ('triple_root', triple_root, 0.0, 2.0, 1.0),
    ('sign', sign, -1.0, 1.0, 0.0),
]
