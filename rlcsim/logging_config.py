"""
Logging configuration for the 'rlcsim' namespace.

The package only emits records (derived quantities at DEBUG, rejected inputs
at WARNING); handlers are attached here, by the application or example script.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s.%(msecs)03d %(levelname)-7s [%(name)s] %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.WARNING,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (stderr) and optional file handlers to the 'rlcsim' logger.

    Args:
        level: Logging level as an int or a name such as "DEBUG". The default
            WARNING only reports rejected circuit/sampling inputs; DEBUG adds
            alpha, omega0, zeta and the regime for every recomputation.
        log_file: Optional path; the file is overwritten on each call.

    Returns:
        The configured 'rlcsim' logger.

    Raises:
        ValueError: unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level '{level}'.")
        level = resolved

    logger = logging.getLogger("rlcsim")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("rlcsim logging at %s", logging.getLevelName(level))
    return logger
