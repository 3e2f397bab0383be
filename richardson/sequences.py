"""
A few sequences with known limits. They compute at the active mpmath.mp
precision, which extrapolate_from_function sets for them.
"""
import mpmath

def reciprocal(n):
    return 1 / mpmath.mpf(n)

def one_plus_reciprocal(n):
    return 1 + 1 / mpmath.mpf(n)

# 4 * (1 - 1/3 + 1/5 - 1/7 + ...) truncated to the first n terms. Converges to
# pi with an error of order 1/n.
def leibniz_pi(n):
    terms = (
        (1 if i % 2 == 0 else -1) / mpmath.mpf(2 * i + 1)
        for i in range(n)
    )
    return 4 * mpmath.fsum(terms)
