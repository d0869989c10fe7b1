import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s — %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "vizshape", verbose: bool = False):
    """
    Console logger for entry points (CLI, notebooks).

    The analyzer modules only log through ``logging.getLogger(__name__)``
    and never attach handlers; attaching one here to the package logger
    is what makes their DEBUG lines visible.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if logger.handlers:
        return logger

    # stderr keeps stdout clean for JSON output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
