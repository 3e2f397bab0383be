import mpmath

from richardson.sequences import *

def test_reciprocal():
    assert reciprocal(4) == mpmath.mpf('0.25')
    assert one_plus_reciprocal(8) == mpmath.mpf('1.125')

def test_reciprocal_uses_active_precision():
    with mpmath.workprec(200):
        x = reciprocal(3)
    assert x != mpmath.mpf(1) / 3
    with mpmath.workprec(200):
        assert x == mpmath.mpf(1) / 3

def test_leibniz_pi_partial_sums():
    assert leibniz_pi(0) == 0
    assert leibniz_pi(1) == 4
    with mpmath.workprec(100):
        assert mpmath.almosteq(leibniz_pi(3), 4 * (1 - mpmath.mpf(1) / 3 + mpmath.mpf(1) / 5))

def test_leibniz_pi_error_is_first_order():
    with mpmath.workprec(100):
        for n in [100, 200, 400]:
            err = mpmath.pi - leibniz_pi(n)
            # pi - 4 S_n = 1/n - 1/(4 n^3) + ... for even n
            assert abs(err * n - 1) < mpmath.mpf(1) / n ** 2
