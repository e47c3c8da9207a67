import logging
import sys


class _StreamProxy:
    """
    Resolve the stream at write time, so replacing sys.stdout or
    sys.stderr (pytest's capsys, for one) redirects the handler too
    """

    def __init__(self, name):
        self.name = name

    def write(self, data):
        return getattr(sys, self.name).write(data)

    def flush(self):
        getattr(sys, self.name).flush()


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


# Set up logging and handlers: progress to stdout, problems to stderr
logger = logging.getLogger('etw_msi_cleanup')
logger.setLevel(logging.INFO)
logger.propagate = False

if not logger.handlers:
    formatter = logging.Formatter('%(message)s')

    out_handler = logging.StreamHandler(_StreamProxy('stdout'))
    out_handler.setFormatter(formatter)
    out_handler.addFilter(_BelowWarning())
    logger.addHandler(out_handler)

    err_handler = logging.StreamHandler(_StreamProxy('stderr'))
    err_handler.setFormatter(formatter)
    err_handler.setLevel(logging.WARNING)
    logger.addHandler(err_handler)


def pad(depth):
    """Indentation for an output line at the given nesting depth"""

    return '  ' * depth
