import numbers

import attr
import mpmath

DEFAULT_PRECISION = 64

# Width of the unsigned integer used to index a sequence. Doubling the start
# index n_samples - 1 times has to stay below 2 ** INDEX_BITS.
INDEX_BITS = 32

@attr.s
class ExtrapolationConfig:
    prec = attr.ib()
    index_bits = attr.ib(default = INDEX_BITS)

def _is_int(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)

def check_precision(prec):
    if not _is_int(prec):
        raise ValueError("precision must be an integer number of bits, got " + repr(prec))
    if prec <= 0:
        raise ValueError("precision must be a positive integer, got " + str(prec))
    return int(prec)

def make_config(prec = None, index_bits = INDEX_BITS):
    if prec is None:
        prec = mpmath.mp.prec
    if not _is_int(index_bits) or index_bits <= 0:
        raise ValueError("index_bits must be a positive integer, got " + repr(index_bits))
    return ExtrapolationConfig(
        prec = check_precision(prec),
        index_bits = int(index_bits)
    )

def check_sample_count(n_samples, start_index = 1, index_bits = INDEX_BITS):
    """
    Fail fast on sample counts that have no extrapolation or whose largest
    sample index, start_index * 2 ** (n_samples - 1), does not fit in an
    index_bits wide unsigned integer. The largest index is never built, so a
    huge count is rejected without allocating it.
    """
    if not _is_int(n_samples):
        raise ValueError("number of samples must be an integer, got " + repr(n_samples))
    if not _is_int(start_index):
        raise ValueError("start index must be an integer, got " + repr(start_index))
    if n_samples < 1:
        raise ValueError(
            "number of samples must be at least 1, got " + str(n_samples)
        )
    if start_index < 0:
        raise ValueError(
            "start index must be nonnegative, got " + str(start_index)
        )
    if start_index and int(start_index).bit_length() + n_samples - 1 > index_bits:
        raise ValueError(
            "%d samples from start index %d overflow a %d bit index"
            % (n_samples, start_index, index_bits)
        )

def sample_indices(n_samples, start_index, index_bits = INDEX_BITS):
    check_sample_count(n_samples, start_index, index_bits)
    return [start_index << i for i in range(n_samples)]
