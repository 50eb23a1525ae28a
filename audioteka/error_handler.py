# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

from flask import jsonify
from werkzeug.exceptions import HTTPException, default_exceptions

from . import logger


log = logger.create()


def error_http(error):
    return jsonify({"error": error.name}), error.code


def internal_error(error):
    if isinstance(error, HTTPException) and error.code != 500:
        return error_http(error)
    log.error_or_exception("Search error: {}".format(getattr(error, "original_exception", None) or error))
    return jsonify({"error": "Internal server error"}), 500


def init_errorhandler(app):
    # http error handling
    for ex in default_exceptions:
        if ex < 500:
            app.register_error_handler(ex, error_http)
        elif ex == 500:
            app.register_error_handler(ex, internal_error)

    # anything else escaping a view, e.g. while serializing the response
    app.register_error_handler(Exception, internal_error)
