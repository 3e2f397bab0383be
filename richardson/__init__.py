from richardson.util.logging import setup_root_logger
logger = setup_root_logger(__name__)

from richardson.cfg import DEFAULT_PRECISION, INDEX_BITS, make_config
from richardson.limit import (
    extrapolate,
    extrapolate_inplace,
    extrapolate_from_function,
    richardson_tableau)
