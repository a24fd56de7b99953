"""
Logging setup for terraform-profile.

Log records go to stderr so that stdout only carries command output.
Default level is WARNING; each ``-v`` on the command line lowers it one step.
"""

import logging
import sys

LOGGER_NAME = "terraform_profile"

_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]

def setup_logging(verbosity: int = 0) -> logging.Logger:
    level = _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False  # avoid duplicate logs

    # Clear existing handlers if any (idempotent setup)
    if logger.handlers:
        for h in list(logger.handlers):
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
