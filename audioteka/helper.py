# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import re
from typing import Iterable, Optional

from . import logger
from .constants import RATING_MAX

log = logger.create()

# Optional "<int> <unit>" (hours) followed by a mandatory "<int> <unit>" (minutes)
DURATION_RE = re.compile(r"^(?:(\d+)\s+([^\d\s]+))?\s*(?:(\d+)\s+([^\d\s]+))$")


def clean_cover_url(url: Optional[str]) -> Optional[str]:
    """Strip the query string from a cover URL, the catalog appends resize parameters to it."""
    if url:
        return url.split("?")[0]
    return url


def parse_rating(text: Optional[str]) -> Optional[float]:
    """Parse a star rating label, returns None for missing, non-numeric or out of range values."""
    if not text:
        return None
    match = re.match(r"\s*(\d+(?:[.,]\d+)?)", text)
    if not match:
        return None
    rating = float(match.group(1).replace(",", "."))
    if rating <= 0 or rating > RATING_MAX:
        return None
    return rating


def _to_int(value: Optional[str]) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _is_hour_unit(unit: str, hour_units: Iterable[str]) -> bool:
    unit = unit.lower()
    return any(unit.startswith(prefix) for prefix in hour_units)


def parse_duration(duration_str: Optional[str], hour_units: Iterable[str] = ()) -> Optional[int]:
    """Convert a duration like ``"3 godz. 45 min."`` into total minutes.

    The hour segment is optional, the minute segment is not. A string holding
    only an hour figure (``"2 godziny"``) therefore does not parse and yields
    ``None`` just like any other string that does not match, never ``0``.
    """
    if not duration_str:
        return None
    duration_str = duration_str.strip()

    match = DURATION_RE.match(duration_str)
    if match and match.group(1) is None and _is_hour_unit(match.group(4), hour_units):
        match = None
    if not match:
        if duration_str:
            log.warning('Could not parse duration string: "%s"', duration_str)
        return None

    hours = _to_int(match.group(1)) if match.group(1) else 0
    minutes = _to_int(match.group(3))
    duration = hours * 60 + minutes
    log.debug('Parsed duration in minutes for "%s": %d', duration_str, duration)
    return duration
