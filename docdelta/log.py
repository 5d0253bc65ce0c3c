# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DocDeltaError(Exception):
    pass


class ModifierFormatError(DocDeltaError, ValueError):
    pass


class InvalidArgument(DocDeltaError, TypeError):
    pass


class MissingComparisonTarget(DocDeltaError, LookupError):
    """No previous document could be resolved to diff against."""
    pass


class MissingSetter(DocDeltaError, ValueError):
    """A diff exists, but there is nothing to persist it with."""
    pass


class ConsistencyViolation(DocDeltaError, AssertionError):
    """The updated document does not equal the desired document."""
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for docdelta entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all docdelta loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_docdelta_log_level(level, set_main=True):
    """Set a log level for docdelta loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('docdelta')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
