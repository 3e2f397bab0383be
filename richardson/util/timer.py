import time

import richardson.util.logging as rich_log

class Timer(object):
    def __init__(self, tabs = 0, silent = False, prefix = "", logger = None):
        self.tabs = tabs
        self.silent = silent
        self.start = time.time()
        self.prefix = prefix
        self.logger = logger
        if self.logger is None:
            self.logger = rich_log.get_caller_logger()

    def restart(self):
        self.start = time.time()

    def elapsed(self):
        return time.time() - self.start

    def report(self, name, should_restart = True):
        if not self.silent:
            text = '    ' * self.tabs
            if self.prefix != "":
                text += self.prefix + ' -- '
            text += name + " took "
            text += str(self.elapsed())
            self.logger.debug(text)
        if should_restart:
            self.restart()
