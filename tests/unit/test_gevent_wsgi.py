# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Unit tests for the client address used in the access log
"""

import pytest

from audioteka.gevent_wsgi import client_address_of


@pytest.mark.unit
class TestClientAddress:

    def test_forwarded_for_first_hop(self):
        environ = {"HTTP_X_FORWARDED_FOR": "203.0.113.7, 10.0.0.2"}
        assert client_address_of(environ, ("10.0.0.1", 5555)) == "203.0.113.7"

    def test_real_ip(self):
        environ = {"HTTP_X_REAL_IP": " 198.51.100.4 "}
        assert client_address_of(environ, ("10.0.0.1", 5555)) == "198.51.100.4"

    def test_peer(self):
        assert client_address_of({}, ("10.0.0.1", 5555)) == "10.0.0.1"
        assert client_address_of({}, "unix-socket") == "unix-socket"
