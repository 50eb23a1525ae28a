# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import dataclasses
from typing import List, Optional
from urllib.parse import quote, urljoin

from bs4 import BeautifulSoup, Tag

from audioteka import constants, logger
from audioteka.clean_html import build_description
from audioteka.helper import clean_cover_url, parse_duration, parse_rating
from audioteka.services.Metadata import MetaRecord, MetaSourceInfo, Metadata

log = logger.create()


class Audioteka(Metadata):
    __name__ = constants.CATALOG_NAME
    __id__ = constants.CATALOG_ID
    DESCRIPTION = constants.CATALOG_NAME
    META_URL = constants.CATALOG_BASE_URL

    # search results page
    CARD_SELECTOR = ".adtk-item.teaser_teaser__FDajW"
    CARD_TITLE = ".teaser_title__hDeCG"
    CARD_LINK = ".teaser_link__fxVFQ"
    CARD_AUTHOR = ".teaser_author__LWTRi"
    CARD_COVER = ".teaser_coverImage__YMrBt"
    CARD_RATING = ".teaser-footer_rating__TeVOA"

    # detail page
    DETAIL_COVER = ".product-top_cover__Pth8B"
    DETAIL_RATING = ".StarIcon__Label-sc-6cf2a375-2"
    DETAIL_DESCRIPTION = ".description_description__6gcfq"
    DETAIL_COLLECTIONS = ".collections_list__09q3I li a"

    def language_codes(self) -> list[str]:
        return self.config.locale.language_codes()

    @property
    def source_info(self) -> MetaSourceInfo:
        return MetaSourceInfo(
            id=self.__id__,
            description=self.DESCRIPTION,
            link=self.META_URL,
        )

    def search_url(self, query: str) -> str:
        return "{}?phrase={}".format(self.config.locale.search_url, quote(query, safe="!~*'()"))

    def search(self, query: str, author: Optional[str] = None) -> List[MetaRecord]:
        matches = self.locate(query, author)
        if len(matches) > self.config.max_results:
            log.debug("Keeping the first %d of %d search results", self.config.max_results, len(matches))
            matches = matches[: self.config.max_results]
        return self.get_detail_records(matches)

    # ------------------------------------------------------------------
    # search results
    # ------------------------------------------------------------------

    def locate(self, query: str, author: Optional[str] = None) -> List[MetaRecord]:
        """Fetch the search results page and return the matches found on it.

        Never raises: a page that cannot be fetched or parsed yields no matches.
        """
        log.info('Searching for: "%s" by "%s"', query, author or "")
        url = self.search_url(query)
        log.debug("Search URL: %s", url)
        try:
            soup = self.get(url)
            if soup is None:
                return []
            return self.parse_search_results(soup)
        except Exception as ex:
            log.error_or_exception(ex)
            return []

    def parse_search_results(self, soup: BeautifulSoup) -> List[MetaRecord]:
        cards = soup.select(self.CARD_SELECTOR)
        log.info("Number of books found: %d", len(cards))
        matches = []
        for card in cards:
            match = self._parse_card(card)
            if match is not None:
                matches.append(match)
        return matches

    def _parse_card(self, card: Tag) -> Optional[MetaRecord]:
        title = _text(card.select_one(self.CARD_TITLE))
        link = card.select_one(self.CARD_LINK)
        href = link.get("href") if link is not None else None
        author = _text(card.select_one(self.CARD_AUTHOR))
        if not title or not href or not author:
            log.debug("Skipping incomplete search result: title=%r href=%r author=%r", title, href, author)
            return None

        url = urljoin(self.META_URL, href)
        cover = card.select_one(self.CARD_COVER)
        return MetaRecord(
            id=card.get("data-item-id") or url.rstrip("/").split("/")[-1],
            title=title,
            authors=[author],
            url=url,
            source=self.source_info,
            cover=clean_cover_url(cover.get("src")) if cover is not None else None,
            rating=parse_rating(_text(card.select_one(self.CARD_RATING))),
        )

    # ------------------------------------------------------------------
    # detail page
    # ------------------------------------------------------------------

    def parse_detail_page(self, match: MetaRecord) -> MetaRecord:
        log.debug("Fetching full metadata for: %s", match.title)
        try:
            soup = self.get(match.url)
            if soup is None:
                return match
            return self.parse_detail(soup, match)
        except Exception as ex:
            log.error_or_exception("Error fetching full metadata for {}: {}".format(match.title, ex))
            return match

    def parse_detail(self, soup: BeautifulSoup, match: MetaRecord) -> MetaRecord:
        labels = self.config.locale.labels

        duration_text = _text(self._row_value(soup, labels.duration))
        log.debug('Extracted duration string for %s: "%s"', match.title, duration_text)

        return dataclasses.replace(
            match,
            cover=self.parse_cover(soup, match.cover),
            narrator=", ".join(self._row_anchor_texts(soup, labels.narrator)),
            duration=parse_duration(duration_text, self.config.locale.hour_units),
            publisher=self._row_anchor_text(soup, labels.publisher),
            description=self.parse_description(soup, match.url),
            type=_text(self._row_value(soup, labels.type)) or None,
            genres=self._row_anchor_texts(soup, labels.genres),
            series=[],
            tags=self.parse_tags(soup),
            rating=parse_rating(_text(soup.select_one(self.DETAIL_RATING))),
            languages=[self.config.locale.language_name],
            identifiers={self.__id__: match.id},
        )

    @staticmethod
    def _row_value(soup: BeautifulSoup, label: str) -> Optional[Tag]:
        """Return the value cell of the table row labelled ``label``."""
        for row in soup.find_all("tr"):
            cells = row.find_all(["th", "td"], recursive=False)
            if not cells or label not in cells[0].get_text():
                continue
            if cells[-1].name == "td":
                return cells[-1]
        return None

    def _row_anchor_texts(self, soup: BeautifulSoup, label: str) -> List[str]:
        cell = self._row_value(soup, label)
        if cell is None:
            return []
        return [text for text in (_text(a) for a in cell.find_all("a")) if text]

    def _row_anchor_text(self, soup: BeautifulSoup, label: str) -> Optional[str]:
        cell = self._row_value(soup, label)
        if cell is None:
            return None
        return "".join(a.get_text() for a in cell.find_all("a")).strip() or None

    def parse_tags(self, soup: BeautifulSoup) -> List[str]:
        return [text for text in (_text(a) for a in soup.select(self.DETAIL_COLLECTIONS)) if text]

    def parse_description(self, soup: BeautifulSoup, url: str) -> Optional[str]:
        container = soup.select_one(self.DETAIL_DESCRIPTION)
        if container is None:
            log.debug("No description found on %s", url)
            return None
        return build_description(container.decode_contents(), url, self.config.add_link_to_description)

    def parse_cover(self, soup: BeautifulSoup, fallback: Optional[str]) -> Optional[str]:
        cover = soup.select_one(self.DETAIL_COVER)
        src = cover.get("src") if cover is not None else None
        return clean_cover_url(src or fallback)


def _text(tag: Optional[Tag]) -> str:
    if tag is None:
        return ""
    return tag.get_text().strip()
