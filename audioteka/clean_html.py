# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import re
from html import escape
from typing import Optional

from .constants import BACKLINK_TEXT


def _element_pattern(tag):
    # <tag ...> up to the first </tag>, including any markup in between
    return re.compile(
        r"<{0}\b[^<]*(?:(?!</{0}\s*>)<[^<]*)*</{0}\s*>".format(tag),
        re.IGNORECASE,
    )


UNSAFE_ELEMENTS = [_element_pattern("script"), _element_pattern("iframe")]


def clean_string(unsafe_text: Optional[str]) -> Optional[str]:
    """Remove script and iframe elements, leaving the rest of the markup untouched."""
    if unsafe_text is None:
        return None
    safe_text = unsafe_text
    # removing an element can join its neighbours into a new one
    while True:
        previous = safe_text
        for pattern in UNSAFE_ELEMENTS:
            safe_text = pattern.sub("", safe_text)
        if safe_text == previous:
            return safe_text


def backlink(url: str) -> str:
    return '<a href="{}">{}</a>'.format(escape(url, quote=True), BACKLINK_TEXT)


def build_description(description_html: Optional[str], url: str, add_link: bool) -> Optional[str]:
    """Sanitize a description and optionally prefix it with a link back to the detail page."""
    description = clean_string(description_html)
    if description is None:
        return None
    if add_link:
        return "{}<br><br>{}".format(backlink(url), description)
    return description
