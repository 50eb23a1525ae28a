# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

STABLE_VERSION = '1.2.0'

BROWSER_USER_AGENT = ('Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
                      '(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36')

CATALOG_ID = "audioteka"
CATALOG_NAME = "Audioteka"
CATALOG_BASE_URL = "https://audioteka.com"

DEFAULT_LANGUAGE = "pl"
DEFAULT_PORT = 3001
DEFAULT_HOST = "0.0.0.0"

# Upper bound for the detail page worker pool
MAX_THREADS = 10
DEFAULT_MAX_RESULTS = 20
DEFAULT_REQUEST_TIMEOUT = 10
DEFAULT_DETAIL_TIMEOUT = 30

# Ratings on the catalog are 0-5 stars
RATING_MAX = 5.0

BACKLINK_TEXT = "Audioteka link"

TRUE_VALUES = ('1', 'true', 'yes', 'on')
