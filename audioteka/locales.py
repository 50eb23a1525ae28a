# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

"""
Per-locale vocabulary of the Audioteka catalog.

Each catalog region has its own search endpoint and labels the rows of the
detail page table in its own language. Everything that differs between the
regions lives in one ``LocaleProfile`` so the scraping code stays the same
for all of them.
"""

import dataclasses


@dataclasses.dataclass(frozen=True)
class RowLabels:
    narrator: str
    duration: str
    publisher: str
    type: str
    genres: str


@dataclasses.dataclass(frozen=True)
class LocaleProfile:
    code: str
    search_url: str
    accept_language: str
    language_name: str
    labels: RowLabels
    # Prefixes of the unit words used for hours in duration strings
    hour_units: tuple[str, ...]

    def language_codes(self) -> list[str]:
        return [self.accept_language]


# English unit words are accepted in every region
_ENGLISH_HOUR_UNITS = ("hour", "hr")


LOCALES = {
    "pl": LocaleProfile(
        code="pl",
        search_url="https://audioteka.com/pl/szukaj",
        accept_language="pl-PL",
        language_name="polish",
        labels=RowLabels(
            narrator="Głosy",
            duration="Długość",
            publisher="Wydawca",
            type="Typ",
            genres="Kategoria",
        ),
        hour_units=("godz", "h") + _ENGLISH_HOUR_UNITS,
    ),
    "cz": LocaleProfile(
        code="cz",
        search_url="https://audioteka.com/cz/vyhledavani",
        accept_language="cs-CZ",
        language_name="czech",
        labels=RowLabels(
            narrator="Interpret",
            duration="Délka",
            publisher="Vydavatel",
            type="Typ",
            genres="Kategorie",
        ),
        hour_units=("hod", "h") + _ENGLISH_HOUR_UNITS,
    ),
}


def get_locale_profile(code: str) -> LocaleProfile:
    """Return the profile for a locale code, raising ``ValueError`` for unsupported ones."""
    try:
        return LOCALES[(code or "").strip().lower()]
    except KeyError:
        raise ValueError(
            "Unsupported language '{}', expected one of: {}".format(code, ", ".join(sorted(LOCALES)))
        ) from None
