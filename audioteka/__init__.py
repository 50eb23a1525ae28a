# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

__package__ = "audioteka"

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from . import logger
from .config import ProviderConfig

log = logger.create()

PROVIDER_EXTENSION = "audioteka_provider"


def create_app(config=None, provider=None):
    """Build the Flask application.

    ``config`` defaults to the settings found in the environment, ``provider``
    to an Audioteka provider built from ``config``.
    """
    from .error_handler import init_errorhandler
    from .metadata_provider.audioteka import Audioteka
    from .search_metadata import meta
    from .usermanagement import add_cors_headers, authorization_required

    config = config or ProviderConfig.from_env()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.json.ensure_ascii = False
    app.config["PROVIDER_CONFIG"] = config

    # Fix for running behind reverse proxy (e.g. nginx, apache, caddy, ...)
    app.wsgi_app = ProxyFix(app.wsgi_app,
                            x_for=config.trusted_proxy_count,
                            x_proto=config.trusted_proxy_count,
                            x_host=config.trusted_proxy_count,
                            x_prefix=config.trusted_proxy_count)

    app.extensions[PROVIDER_EXTENSION] = provider or Audioteka(config)

    app.before_request(authorization_required)
    app.after_request(add_cors_headers)
    init_errorhandler(app)
    app.register_blueprint(meta)

    log.info('Audioteka provider ready, language: %s, add link to description: %s',
             config.language, config.add_link_to_description)
    return app
