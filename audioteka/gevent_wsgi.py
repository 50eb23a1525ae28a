# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

from datetime import datetime
from gevent.pywsgi import WSGIHandler


def client_address_of(environ, fallback):
    """First hop of X-Forwarded-For, then X-Real-IP, then the socket peer."""
    forwarded = environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    real_ip = environ.get('HTTP_X_REAL_IP')
    if real_ip:
        return real_ip.strip()
    return fallback[0] if isinstance(fallback, tuple) else fallback


class AccessLogHandler(WSGIHandler):

    def format_request(self):
        now = datetime.now().replace(microsecond=0)
        length = self.response_length or '-'
        if self.time_finish:
            delta = '%.6f' % (self.time_finish - self.time_start)
        else:
            delta = '-'
        client_address = client_address_of(self.environ or {}, self.client_address)
        # _orig_status is the native string version, status the encoded fallback
        status = (self._orig_status or self.status or '000').split()[0]
        return '%s - - [%s] "%s" %s %s %s' % (
            client_address or '-',
            now,
            self.requestline or '',
            status,
            length,
            delta)
