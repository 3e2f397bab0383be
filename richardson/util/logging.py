import logging
import sys

def get_caller_logger():
    mod_name = sys._getframe(2).f_globals['__name__']
    return logging.getLogger(mod_name)

def setup_root_logger(log_name):
    L = logging.getLogger(log_name)
    L.setLevel(logging.DEBUG)
    # Re-importing the package must not stack handlers.
    if any(getattr(h, '_richardson_handler', False) for h in L.handlers):
        return L
    ch = logging.StreamHandler(sys.stdout)
    ch._richardson_handler = True
    ch.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "[%(relativeCreated)d:%(levelname)s:%(name)s]\n    %(message)s",
        datefmt='%j:%H:%M:%S'
    )
    ch.setFormatter(formatter)
    L.addHandler(ch)
    return L

def set_quiet(log_name, quiet = True):
    logging.getLogger(log_name).setLevel(logging.WARNING if quiet else logging.DEBUG)
