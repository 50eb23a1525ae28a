# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Unit tests for the description sanitizer in audioteka/clean_html.py
"""

import pytest

from audioteka.clean_html import backlink, build_description, clean_string

URL = "https://audioteka.com/pl/audiobook/wiedzmin-ostatnie-zyczenie"


@pytest.mark.unit
class TestCleanString:
    """Test removal of script and iframe elements"""

    def test_plain_markup_untouched(self):
        html = '<p>Geralt <strong>z Rivii</strong></p><ul><li>tom 1</li></ul>'
        assert clean_string(html) == html

    def test_script_removed(self):
        html = '<p>a</p><script>alert("x")</script><p>b</p>'
        assert clean_string(html) == "<p>a</p><p>b</p>"

    def test_multiline_and_attributes(self):
        html = (
            '<p>a</p><SCRIPT type="text/javascript">\n'
            'var x = "<b>";\n'
            '</SCRIPT><iframe src="https://example.com/embed"\n'
            '  width="100"><p>fallback</p>\n</iframe><p>b</p>'
        )
        assert clean_string(html) == "<p>a</p><p>b</p>"

    def test_every_occurrence_removed(self):
        html = "<script>1</script>x<iframe></iframe>y<script>2</script>z"
        assert clean_string(html) == "xyz"

    def test_closing_tag_with_whitespace(self):
        html = "<p>a</p><script>alert(1)</script ><p>b</p><iframe src=\"v\"></iframe\t><p>c</p>"
        assert clean_string(html) == "<p>a</p><p>b</p><p>c</p>"

    def test_fragments_joined_by_removal(self):
        """Removing an inner element must not leave a new element behind"""
        html = "<p>a</p><scr<script>x</script>ipt>alert(1)</script><p>b</p>"
        result = clean_string(html)
        assert "<script" not in result.lower()
        assert result == "<p>a</p><p>b</p>"

    def test_idempotent(self):
        html = '<div><script>a()</script><p>tekst</p><iframe src="v"></iframe></div>'
        once = clean_string(html)
        assert clean_string(once) == once

    def test_none(self):
        assert clean_string(None) is None


@pytest.mark.unit
class TestBuildDescription:
    """Test description assembly with and without the backlink"""

    def test_backlink_prepended(self):
        result = build_description("<p>Opis</p>", URL, True)
        assert result == f'<a href="{URL}">Audioteka link</a><br><br><p>Opis</p>'

    def test_backlink_disabled(self):
        assert build_description("<p>Opis</p>", URL, False) == "<p>Opis</p>"

    def test_sanitized_after_backlink(self):
        result = build_description("<script>x()</script><p>Opis</p>", URL, True)
        assert result.startswith(backlink(URL))
        assert "<script" not in result

    def test_missing_description(self):
        assert build_description(None, URL, True) is None

    def test_backlink_escapes_url(self):
        assert backlink('https://x/"a"&b') == '<a href="https://x/&quot;a&quot;&amp;b">Audioteka link</a>'
