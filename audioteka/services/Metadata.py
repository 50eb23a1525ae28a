# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import abc
import concurrent.futures
import dataclasses
from typing import Iterable

import requests
from bs4 import BeautifulSoup as BS

from .. import constants, logger
from ..config import ProviderConfig

log = logger.create()


@dataclasses.dataclass
class MetaSourceInfo:
    id: str
    description: str
    link: str


@dataclasses.dataclass
class MetaRecord:
    """A book as found on a metadata source.

    Straight out of the search results only the leading fields are set, the
    rest stays ``None`` until the detail page has been merged in.
    """

    id: str
    title: str
    authors: list[str]
    url: str
    source: MetaSourceInfo
    cover: str | None = None
    rating: float | None = None
    subtitle: str | None = None
    description: str | None = None
    narrator: str | None = None
    duration: int | None = None
    publisher: str | None = None
    publishedDate: str | None = None
    type: str | None = None
    genres: list[str] | None = None
    tags: list[str] | None = None
    series: list[str] | None = None
    languages: list[str] | None = None
    identifiers: dict[str, str] = dataclasses.field(default_factory=dict)


class Metadata:
    """Abstract base class for metadata sources.

    Attributes:
        __name__ (str): Human-readable name of the metadata source.
        __id__ (str): Unique identifier for the metadata source.
        config (ProviderConfig): Process settings the source was created with.
        headers (dict): HTTP headers to use for requests.
        session (requests.Session): HTTP session for making requests.
    """

    __name__ = "Generic"
    __id__ = "generic"

    def __init__(self, config: ProviderConfig | None = None):
        self.config = config or ProviderConfig()
        self._thread_pool = concurrent.futures.ThreadPoolExecutor(
            max_workers=min(constants.MAX_THREADS, self.config.max_results)
        )

        # Headers are defined in the constructor because they depend on the configured locale.
        self.headers = {
            "User-Agent": constants.BROWSER_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
            "Accept-Language": self.accept_language_header(),
        }

        # Each instance gets its own session, a class level one would be shared by every provider.
        self.session = requests.Session()
        self.session.headers.update(self.headers)

    def accept_language_header(self) -> str:
        """Return the Accept-Language header value for this metadata source.

        The order of the codes returned by language_codes() is their priority.

        Returns:
            str: Accept-Language header value.
        """
        return ",".join(
            [
                f"{lang};q={1 - i * 0.1:.1f}" if i else lang
                for i, lang in enumerate(self.language_codes())
            ]
        )

    def language_codes(self) -> list[str]:
        """Return the list of language codes for this metadata source.

        Returns:
            list[str]: List of language codes.
        """
        return ["en-US", "en"]

    @abc.abstractmethod
    def search(self, query: str, author: str | None = None) -> list[MetaRecord]:
        """Search this metadata provider and return fully detailed records.

        Args:
            query (str): The search query.
            author (str, optional): Author hint supplied by the caller.

        Returns:
            list[MetaRecord]: Matching records, empty on failure or no results.
        """
        return []

    @abc.abstractmethod
    def parse_detail_page(self, match: MetaRecord) -> MetaRecord:
        """Merge the fields of the match's detail page into the match.

        Args:
            match (MetaRecord): Record built from the search results.

        Returns:
            MetaRecord: The detailed record, or ``match`` itself on failure.
        """
        return match

    def get_raw(self, url: str, timeout: int | None = None, **kwargs) -> bytes | None:
        """Get a URL and return the raw response.

        Args:
            url (str): The URL to fetch.
            timeout (int, optional): Request timeout in seconds. Defaults to the configured timeout.
            **kwargs: Additional keyword arguments passed directly to `requests.get()`.
        Returns:
            bytes | None: Raw response bytes or None on failure.
        """
        try:
            r = self.session.get(url, timeout=timeout or self.config.request_timeout, **kwargs)
            r.raise_for_status()
            return r.content
        except Exception as ex:
            log.error_or_exception(ex)
            return None

    def get(self, url: str, timeout: int | None = None, **kwargs) -> BS | None:
        """Get a URL and return the parsed BeautifulSoup object.

        Args:
            url (str): The URL to fetch.
            timeout (int, optional): Request timeout in seconds.
            **kwargs: Additional keyword arguments passed directly to `requests.get()`.

        Returns:
            BS | None: Parsed BeautifulSoup object or None on failure.
        """
        r = self.get_raw(url, timeout=timeout, **kwargs)
        if r is None:
            return None
        return self.make_soup(r)

    @staticmethod
    def make_soup(markup: bytes | str) -> BS:
        if isinstance(markup, bytes):
            markup = markup.decode("utf-8", errors="replace")
        # lxml is faster, fall back to html.parser if needed
        try:
            return BS(markup, "lxml")
        except Exception:
            return BS(markup, "html.parser")

    def get_detail_records(self, matches: Iterable[MetaRecord]) -> list[MetaRecord]:
        """Fetch the detail pages of all matches in parallel.

        Every match yields exactly one record, in the order of ``matches``. A
        match whose detail page failed or did not finish within the configured
        timeout is returned as it came from the search results.

        Args:
            matches (Iterable[MetaRecord]): Records built from the search results.

        Returns:
            list[MetaRecord]: Detailed records.
        """
        matches_list = list(matches)
        if len(matches_list) == 0:
            return []

        futures = [
            self._thread_pool.submit(self.parse_detail_page, match)
            for match in matches_list
        ]
        done, not_done = concurrent.futures.wait(futures, timeout=self.config.detail_timeout)
        if not_done:
            log.warning(
                f"Timeout while fetching detail pages from {self.__name__}, "
                f"{len(not_done)} of {len(futures)} left without details"
            )
            for future in not_done:
                future.cancel()

        records = []
        for match, future in zip(matches_list, futures):
            if future not in done:
                records.append(match)
                continue
            try:
                records.append(future.result())
            except Exception as ex:
                log.error_or_exception(ex)
                records.append(match)
        return records

    def close(self):
        """Release the session and the worker threads."""
        if self.session:
            try:
                self.session.close()
            finally:
                self.session = None
        self._thread_pool.shutdown(wait=False, cancel_futures=True)
