#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Smoke Tests for serving several searches at once

The gevent server has to interleave requests: one slow search must not hold
back the next one. gevent's monkey patching cannot be undone, so the server
runs in a child interpreter started the same way the provider is started.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this file as smoke tests
pytestmark = pytest.mark.smoke

# Get project root (3 levels up from this file)
project_root = Path(__file__).parent.parent.parent

SERVER_SCRIPT = '''
import audioteka.main

import time

import gevent
import requests
from gevent.pool import Pool
from gevent.pywsgi import WSGIServer

from audioteka import create_app
from audioteka.config import ProviderConfig
from audioteka.metadata_provider.audioteka import Audioteka
from audioteka.services.Metadata import MetaRecord


class SlowAudioteka(Audioteka):
    """Every detail page takes a second to arrive."""

    def locate(self, query, author=None):
        return [MetaRecord(id=query, title=query, authors=["Autor"],
                           url="https://audioteka.com/pl/audiobook/" + query,
                           source=self.source_info)]

    def parse_detail_page(self, match):
        time.sleep(1)
        return match


config = ProviderConfig()
app = create_app(config, provider=SlowAudioteka(config))
server = WSGIServer(("127.0.0.1", 0), app, spawn=Pool(), log=None)
server.start()
url = "http://127.0.0.1:%d/search" % server.server_port

started = time.monotonic()
jobs = [gevent.spawn(requests.get, url, params={"query": name},
                     headers={"Authorization": "key"}, timeout=10)
        for name in ("first", "second", "third")]
gevent.joinall(jobs, raise_error=True)
elapsed = time.monotonic() - started
server.stop()

assert [job.value.status_code for job in jobs] == [200, 200, 200]
assert [job.value.json()["matches"][0]["title"] for job in jobs] == ["first", "second", "third"]
print("%.3f" % elapsed)
'''


class TestConcurrentSearches:
    """Test that searches do not queue behind each other"""

    def test_entry_point_patches_blocking_io(self):
        """Importing the entry point switches sockets and threads to gevent"""
        result = subprocess.run(
            [sys.executable, "-c",
             "import audioteka.main, gevent.monkey as m; "
             "print(m.is_module_patched('socket') and m.is_module_patched('threading'))"],
            cwd=project_root, env={**os.environ, "PYTHONPATH": str(project_root)},
            capture_output=True, text=True, timeout=60,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "True"

    def test_slow_searches_run_side_by_side(self):
        """Three searches of one second each finish in about one second"""
        result = subprocess.run(
            [sys.executable, "-c", SERVER_SCRIPT],
            cwd=project_root,
            env={**os.environ, "PYTHONPATH": str(project_root), "NO_PROXY": "127.0.0.1,localhost"},
            capture_output=True, text=True, timeout=60,
        )
        assert result.returncode == 0, result.stderr

        elapsed = float(result.stdout.strip().splitlines()[-1])
        assert elapsed < 2.5
