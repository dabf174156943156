# Logging helpers for qos_overrides.

import logging
import sys
import threading

_LOGGER_NAME = 'qos_overrides'

_once_logged = set()
_lock = threading.Lock()


def _get_logger():
    return logging.getLogger(_LOGGER_NAME)


def _caller_id():
    frame = sys._getframe(1)
    while frame and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        frame = sys._getframe(1)
    return (frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name)


def _format_msg(msg, args):
    return str(msg) % args if args else str(msg)


def logdebug(msg, *args):
    logger = _get_logger()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(_format_msg(msg, args))


def loginfo(msg, *args):
    _get_logger().info(_format_msg(msg, args))


def logwarn(msg, *args):
    _get_logger().warning(_format_msg(msg, args))


def logwarn_once(msg, *args):
    """Log a warning only once per call site."""
    caller = _caller_id()
    with _lock:
        if caller in _once_logged:
            return
        _once_logged.add(caller)
    logwarn(msg, *args)
