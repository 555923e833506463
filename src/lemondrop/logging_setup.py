import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s.%(msecs)03dZ %(levelname)s %(name)s: %(message)s"

# Handlers added by configure_logging, so a second call can replace them.
_installed_handlers: List[logging.Handler] = []


class _UTCFormatter(logging.Formatter):
    converter = time.gmtime


def configure_logging(level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Attach stdout (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers it installed before.
    """
    log = logging.getLogger("lemondrop")
    log.setLevel(level)
    fmt = _UTCFormatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    while _installed_handlers:
        handler = _installed_handlers.pop()
        log.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(fmt)
        log.addHandler(handler)
        _installed_handlers.append(handler)
    return log
