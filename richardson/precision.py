"""
Working precision contexts for the extrapolation.

mpmath values carry no precision of their own; the precision lives in the
context that performs the arithmetic. Each extrapolation gets its own
context so that concurrent calls at different precisions never touch the
shared mpmath.mp context.
"""
import mpmath
from mpmath.ctx_mp import MPContext

from richardson.cfg import check_precision

def working_context(prec):
    """
    A fresh MPContext running at prec bits. Every extrapolation builds its own,
    which costs a context setup per call, so that no two calls share mutable
    precision state.
    """
    ctx = MPContext()
    ctx.prec = check_precision(prec)
    return ctx

def to_working(ctx, value):
    # Rounds to ctx.prec. Values with fewer bits are taken exactly.
    return ctx.mpf(value)

def export(value):
    # Hand back a plain mpmath.mpf holding exactly the computed bits instead
    # of a value tied to the private working context.
    return mpmath.mp.make_mpf(value._mpf_)
