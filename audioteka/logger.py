# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import os
import sys
import inspect
import logging
from logging import Formatter, StreamHandler
from logging.handlers import RotatingFileHandler


ACCESS_FORMATTER = Formatter("%(message)s")

FORMATTER = Formatter("[%(asctime)s] %(levelname)5s {%(name)s:%(lineno)d} %(message)s")
DEFAULT_LOG_LEVEL = logging.INFO
LOG_TO_STDERR = '/dev/stderr'
LOG_TO_STDOUT = '/dev/stdout'

logging.addLevelName(logging.WARNING, "WARN")
logging.addLevelName(logging.CRITICAL, "CRIT")


class _Logger(logging.Logger):

    def error_or_exception(self, message, stacklevel=2, *args, **kwargs):
        # stack traces only when somebody is actually debugging
        if self.getEffectiveLevel() <= logging.DEBUG:
            self.exception(message, stacklevel=stacklevel, *args, **kwargs)
        else:
            self.error(message, stacklevel=stacklevel, *args, **kwargs)


def get(name=None):
    return logging.getLogger(name)


def create():
    parent_frame = inspect.stack(0)[1]
    if hasattr(parent_frame, 'frame'):
        parent_frame = parent_frame.frame
    else:
        parent_frame = parent_frame[0]
    parent_module = inspect.getmodule(parent_frame)
    return get(parent_module.__name__)


def get_level_name(level):
    return logging.getLevelName(level)


def get_level(level_name):
    """Translate a level name (``"debug"``, ``"INFO"``...) or number into a logging level."""
    if isinstance(level_name, int):
        return level_name
    level = logging.getLevelName(str(level_name).strip().upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def is_valid_logfile(file_path):
    if file_path == LOG_TO_STDERR or file_path == LOG_TO_STDOUT:
        return True
    if not file_path:
        return True
    if os.path.isdir(file_path):
        return False
    log_dir = os.path.dirname(file_path)
    return (not log_dir) or os.path.isdir(log_dir)


def setup(log_file, log_level=None):
    """
    Configure the logging output.
    May be called multiple times.
    """
    log_level = log_level or DEFAULT_LOG_LEVEL
    logging.setLoggerClass(_Logger)
    logging.getLogger(__package__).setLevel(log_level)

    r = logging.root
    if log_level >= logging.INFO or os.environ.get('FLASK_DEBUG'):
        # avoid spamming the log with debug messages from libraries
        r.setLevel(log_level)

    if not log_file or log_file == LOG_TO_STDERR:
        file_handler = StreamHandler(sys.stderr)
        file_handler.baseFilename = LOG_TO_STDERR
    elif log_file == LOG_TO_STDOUT:
        file_handler = StreamHandler(sys.stdout)
        file_handler.baseFilename = LOG_TO_STDOUT
    else:
        if not is_valid_logfile(log_file):
            log_file = LOG_TO_STDERR
            file_handler = StreamHandler(sys.stderr)
            file_handler.baseFilename = LOG_TO_STDERR
        else:
            try:
                file_handler = RotatingFileHandler(log_file, maxBytes=100000, backupCount=2, encoding='utf-8')
            except (IOError, PermissionError):
                log_file = LOG_TO_STDERR
                file_handler = StreamHandler(sys.stderr)
                file_handler.baseFilename = LOG_TO_STDERR

    if r.handlers and len(r.handlers) == 1:
        existing = r.handlers[0]
        if getattr(existing, 'baseFilename', None) == file_handler.baseFilename:
            return log_file

    file_handler.setFormatter(FORMATTER)

    for h in list(r.handlers):
        r.removeHandler(h)
        h.close()
    r.addHandler(file_handler)
    logging.captureWarnings(True)
    return log_file


def create_access_log(log_file, log_name, formatter):
    """
    One-time configuration for the web server's access log.
    """
    access_log = logging.getLogger(log_name)
    access_log.propagate = False
    access_log.setLevel(logging.INFO)

    if not log_file or log_file in (LOG_TO_STDERR, LOG_TO_STDOUT):
        stream = sys.stdout if log_file == LOG_TO_STDOUT else sys.stderr
        file_handler = StreamHandler(stream)
    else:
        try:
            file_handler = RotatingFileHandler(log_file, maxBytes=50000, backupCount=2, encoding='utf-8')
        except (IOError, PermissionError):
            file_handler = StreamHandler(sys.stderr)

    file_handler.setFormatter(formatter)
    access_log.handlers = [file_handler]
    return access_log


# default configuration, before application settings are applied
setup(LOG_TO_STDERR, logging.DEBUG if os.environ.get('FLASK_DEBUG') else DEFAULT_LOG_LEVEL)
