# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

from .main import main

main()
