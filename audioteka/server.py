# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import signal

from gevent.pool import Pool
from gevent.pywsgi import WSGIServer

from . import PROVIDER_EXTENSION, logger
from .gevent_wsgi import AccessLogHandler


log = logger.create()


class WebServer(object):

    def __init__(self):
        signal.signal(signal.SIGINT, self._killServer)
        signal.signal(signal.SIGTERM, self._killServer)

        self.wsgiserver = None
        self.access_logger = None
        self.app = None
        self.listen_address = None
        self.listen_port = None

    def init_app(self, application, config):
        self.app = application
        self.listen_address = config.host
        self.listen_port = config.port
        self.access_logger = logger.create_access_log(config.log_file, "gevent.access", logger.ACCESS_FORMATTER)

    def _start_gevent(self):
        log.info('Starting Gevent server on %s:%s', self.listen_address, self.listen_port)
        self.wsgiserver = WSGIServer((self.listen_address, self.listen_port), self.app,
                                     log=self.access_logger, handler_class=AccessLogHandler,
                                     error_log=log, spawn=Pool())
        self.wsgiserver.serve_forever()

    def start(self):
        try:
            self._start_gevent()
        except Exception as ex:
            log.error("Error starting server: %s", ex)
            self.stop()
            return False
        finally:
            self.wsgiserver = None
        return True

    def _killServer(self, __, ___):
        self.stop()

    def stop(self):
        if self.wsgiserver:
            log.info("webserver stop")
            self.wsgiserver.close()
        provider = self.app.extensions.get(PROVIDER_EXTENSION) if self.app else None
        if provider is not None:
            provider.close()
