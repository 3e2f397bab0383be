"""
Richardson extrapolation of sequences sampled at doubling indices.

Given samples a_n, a_2n, a_4n, ..., a_(2^k)n of a sequence whose error
behaves like c1/m + c2/m^2 + ... in the sampled index m, the recurrence

    A_(j+1)(m) = (2^j A_j(2m) - A_j(m)) / (2^j - 1)

cancels one order of the error per sweep. After k sweeps the last sample
holds the estimate of the limit.

The samples must actually follow such an expansion. Nothing here checks
convergence: a sequence without one gives a meaningless number.
"""
import mpmath

from richardson.cfg import make_config, sample_indices, INDEX_BITS
from richardson.precision import working_context, to_working, export

def _sweep(ctx, samples):
    end = len(samples)
    mult = ctx.mpf(1)
    for n in range(1, end):
        mult = mult * 2
        denom = 1 / (mult - 1)
        # High to low: samples[i - 1] is still unswept when samples[i] reads it.
        for i in range(end - 1, n - 1, -1):
            samples[i] = (samples[i] * mult - samples[i - 1]) * denom
    return samples[end - 1]

def extrapolate_inplace(samples, prec = None):
    """
    Extrapolate the limit of samples[i] = a_(2^i)n using samples as the
    scratch space of the tableau.

    The list is consumed: every entry is rounded to the working precision and
    then overwritten during the sweep, so calling this twice on the same list
    gives a stale answer. Use extrapolate() to keep the caller's list intact.

    prec is the working precision in bits, defaulting to mpmath.mp.prec.
    """
    if len(samples) == 0:
        raise ValueError("cannot extrapolate from an empty sequence of samples")
    cfg = make_config(prec)
    ctx = working_context(cfg.prec)
    for i in range(len(samples)):
        samples[i] = to_working(ctx, samples[i])
    return export(_sweep(ctx, samples))

def extrapolate(samples, prec = None):
    """
    Extrapolate the limit of a sequence from samples a_n, a_2n, ..., a_(2^k)n,
    with samples[i] = a_(2^i)n. The caller's samples are copied, not modified.

    Samples are rounded to prec bits on entry, and prec defaults to
    mpmath.mp.prec. A single sample therefore comes back unchanged only when
    prec is at least the number of bits it was made with; a 64 bit sample
    extrapolated at the default 53 bits comes back rounded.
    """
    return extrapolate_inplace(list(samples), prec)

def extrapolate_from_function(n_samples, start_index, f, prec = None,
        index_bits = INDEX_BITS):
    """
    Sample f at start_index, 2 * start_index, ..., 2^(n_samples - 1) *
    start_index and extrapolate the limit of the sequence.

    f takes an integer index and returns the corresponding term. It is called
    once per index, in increasing order, while mpmath.mp runs at the working
    precision, so a sequence written with mpmath.mpf computes at that
    precision. That precision change is process wide for the duration of the
    sampling.
    """
    cfg = make_config(prec, index_bits)
    indices = sample_indices(n_samples, start_index, cfg.index_bits)
    with mpmath.workprec(cfg.prec):
        samples = [f(idx) for idx in indices]
    return extrapolate_inplace(samples, cfg.prec)

def richardson_tableau(samples, prec = None):
    """
    The full triangular tableau. Row m holds the k + 1 - m values left after m
    sweeps; the last row is the single extrapolated value.
    """
    if len(samples) == 0:
        raise ValueError("cannot extrapolate from an empty sequence of samples")
    cfg = make_config(prec)
    ctx = working_context(cfg.prec)

    last_level = [to_working(ctx, s) for s in samples]
    levels = [last_level]
    mult = ctx.mpf(1)
    for m in range(1, len(samples)):
        mult = mult * 2
        denom = 1 / (mult - 1)
        this_level = []
        for i in range(len(last_level) - 1):
            low = last_level[i]
            high = last_level[i + 1]
            this_level.append((high * mult - low) * denom)
        levels.append(this_level)
        last_level = this_level
    return [[export(v) for v in level] for level in levels]
