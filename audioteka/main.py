# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

# must run before requests and concurrent.futures are imported
from gevent import monkey
monkey.patch_all()

import sys

from . import create_app, logger
from .cli import CliParameter
from .config import ProviderConfig
from .server import WebServer


log = logger.create()


def main(argv=None):
    cli_param = CliParameter()
    cli_param.init(argv)

    try:
        config = ProviderConfig.from_env().with_cli(cli_param)
    except ValueError as ex:
        print("*** Invalid configuration: {} ***".format(ex))
        sys.exit(2)

    logger.setup(config.log_file, config.log_level)
    log.info("Log level set to %s", logger.get_level_name(config.log_level))

    app = create_app(config)
    web_server = WebServer()
    web_server.init_app(app, config)

    log.info('Audioteka provider listening on port %s, language: %s, add link to description: %s',
             config.port, config.language, config.add_link_to_description)
    success = web_server.start()
    sys.exit(0 if success else 1)
