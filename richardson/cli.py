"""
Command line Richardson extrapolation of samples stored in a text file.

The file holds k + 1 whitespace separated decimal numbers, the samples
a_n, a_2n, a_4n, ..., a_(2^k)n in that order.
"""
import argparse
import logging

import mpmath
from mpmath.libmp import prec_to_dps

import richardson.util.logging as rich_log
from richardson.cfg import DEFAULT_PRECISION, INDEX_BITS, check_precision, check_sample_count
from richardson.limit import extrapolate_inplace
from richardson.precision import working_context, to_working, export
from richardson.util.timer import Timer

logger = logging.getLogger(__name__)

def read_samples(filename, prec):
    with open(filename) as f:
        tokens = f.read().split()
    ctx = working_context(prec)
    return [export(to_working(ctx, t)) for t in tokens]

def build_parser():
    parser = argparse.ArgumentParser(
        prog = 'richardson',
        description = 'Richardson extrapolate the limit of a sequence from the '
            'samples a_n, a_2n, a_4n, ... a_(2^k)n stored one per line in a file.'
    )
    parser.add_argument('filename', help = 'file with the k+1 samples')
    parser.add_argument(
        '-p', '--precision', type = int, default = None,
        help = 'number of significant bits used for the extrapolation '
            '(default %d)' % DEFAULT_PRECISION
    )
    parser.add_argument(
        '--quiet', action = 'store_true', help = 'hide info and debug logging'
    )
    return parser

def fmt(value, prec):
    return mpmath.nstr(value, prec_to_dps(prec))

def run(filename, prec):
    samples = read_samples(filename, prec)
    check_sample_count(len(samples), 1, INDEX_BITS)

    print("Found %d samples:" % len(samples))
    for s in samples:
        print(fmt(s, prec))

    t = Timer(logger = logger)
    result = extrapolate_inplace(samples, prec)
    t.report("extrapolating %d samples at %d bits" % (len(samples), prec))

    print("Extrapolation: " + fmt(result, prec))
    return result

def main(argv = None):
    args = build_parser().parse_args(argv)
    if args.quiet:
        rich_log.set_quiet('richardson')

    prec = args.precision
    if prec is None:
        logger.info("Using default precision of %d" % DEFAULT_PRECISION)
        prec = DEFAULT_PRECISION

    try:
        prec = check_precision(prec)
        run(args.filename, prec)
    except (OSError, ValueError) as e:
        print("Error: " + str(e))
        return 1
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
