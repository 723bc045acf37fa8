# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


# Level names accepted by the --log-level option and the log_level config
LOG_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')

LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'


def _as_level(level):
    if isinstance(level, str):
        if level not in LOG_LEVEL_NAMES:
            raise ValueError("Unknown log level %r, expected one of %r" % (
                level, LOG_LEVEL_NAMES))
        return getattr(logging, level)
    return level


def init_logging(level=logging.INFO, stream=None):
    """Sets up logging for jsondiffpatch entry points.

    Call this in all entry points (if __name__ == "__main__"),
    never on import of the library. Records are written to `stream`,
    or stderr if not given. `level` may be a number or a level name.
    """
    logging.basicConfig(format=LOG_FORMAT, level=_as_level(level), stream=stream)
    logging.captureWarnings(True)


def set_jsondiffpatch_log_level(level, set_main=True):
    """Set a log level (number or name) for jsondiffpatch loggers"""
    level = _as_level(level)
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('jsondiffpatch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
