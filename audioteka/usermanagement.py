# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import hmac

from flask import current_app, jsonify, make_response, request

from . import logger


log = logger.create()


def _unauthorized():
    return make_response(jsonify({"error": "Unauthorized"}), 401)


def authorization_required():
    """Reject requests without an Authorization header before any route runs.

    Audiobookshelf always sends the key configured for the provider. The
    header is compared only when ``AUDIOTEKA_API_KEY`` is set.
    """
    # CORS preflight requests never carry credentials
    if request.method == "OPTIONS":
        return None

    api_key = request.headers.get("Authorization", "").strip()
    if not api_key:
        log.debug("Request to %s without Authorization header from %s", request.path, request.remote_addr)
        return _unauthorized()

    expected = current_app.config["PROVIDER_CONFIG"].api_key
    if expected and not hmac.compare_digest(api_key.encode("utf-8"), expected.encode("utf-8")):
        log.warning('Invalid Authorization header for %s from IP-address: %s', request.path, request.remote_addr)
        return _unauthorized()
    return None


def add_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Authorization, Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    return response
