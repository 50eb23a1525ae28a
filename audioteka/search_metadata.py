# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import json
import logging

from flask import Blueprint, current_app, jsonify, make_response, request

from . import PROVIDER_EXTENSION, logger
from .services.Metadata import MetaRecord


meta = Blueprint("metadata", __name__)

log = logger.create()


def _published_year(published_date):
    if not published_date:
        return None
    year = str(published_date)[:4]
    return year if year.isdigit() else None


def format_match(record: MetaRecord) -> dict:
    """Map a record onto the match object of the Audiobookshelf custom provider API.

    Missing values and empty strings are left out, empty lists are kept.
    """
    identifiers = record.identifiers or {}
    match = {
        "title": record.title,
        "subtitle": record.subtitle or None,
        "author": ", ".join(record.authors),
        "narrator": record.narrator or None,
        "publisher": record.publisher or None,
        "publishedYear": _published_year(record.publishedDate),
        "description": record.description or None,
        "cover": record.cover or None,
        "isbn": identifiers.get("isbn") or None,
        "asin": identifiers.get("asin") or None,
        "genres": record.genres,
        "tags": record.tags,
        # no sequence numbers on Audioteka
        "series": [{"series": name} for name in record.series] if record.series is not None else None,
        "language": record.languages[0] if record.languages else None,
        "duration": record.duration,
    }
    return {key: value for key, value in match.items() if value is not None}


@meta.route("/search", methods=["GET"])
def metadata_search():
    query = request.args.get("query")
    author = request.args.get("author")
    log.debug("Received search request: %s", request.args.to_dict())

    if not query:
        return make_response(jsonify({"error": "Query parameter is required"}), 400)

    provider = current_app.extensions[PROVIDER_EXTENSION]
    records = provider.search(query, author)
    log.info('Found %d matches for "%s"', len(records), query)

    data = {"matches": [format_match(record) for record in records]}
    if log.isEnabledFor(logging.DEBUG):
        log.debug("Sending response: %s", json.dumps(data, ensure_ascii=False, indent=2))
    return make_response(jsonify(data))
