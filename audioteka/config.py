# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import dataclasses
import logging
import os
from typing import Mapping, Optional

from . import constants, logger
from .locales import LocaleProfile, get_locale_profile


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    value = environ.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in constants.TRUE_VALUES


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    value = environ.get(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError("{} must be an integer, got '{}'".format(key, value)) from None


@dataclasses.dataclass(frozen=True)
class ProviderConfig:
    """Process wide settings, built once at start-up and handed to the app and the provider."""

    language: str = constants.DEFAULT_LANGUAGE
    add_link_to_description: bool = True
    port: int = constants.DEFAULT_PORT
    host: str = constants.DEFAULT_HOST
    api_key: Optional[str] = None
    max_results: int = constants.DEFAULT_MAX_RESULTS
    request_timeout: int = constants.DEFAULT_REQUEST_TIMEOUT
    detail_timeout: int = constants.DEFAULT_DETAIL_TIMEOUT
    log_level: int = logger.DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    trusted_proxy_count: int = 1

    def __post_init__(self):
        # fail at start-up rather than on the first request
        get_locale_profile(self.language)
        if self.max_results < 1:
            raise ValueError("MAX_RESULTS must be at least 1")

    @property
    def locale(self) -> LocaleProfile:
        return get_locale_profile(self.language)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProviderConfig":
        environ = os.environ if environ is None else environ
        return cls(
            language=(environ.get("LANGUAGE") or "").strip().lower() or constants.DEFAULT_LANGUAGE,
            add_link_to_description=_env_bool(environ, "ADD_AUDIOTEKA_LINK_TO_DESCRIPTION", True),
            port=_env_int(environ, "PORT", constants.DEFAULT_PORT),
            host=environ.get("HOST") or constants.DEFAULT_HOST,
            api_key=environ.get("AUDIOTEKA_API_KEY") or None,
            max_results=_env_int(environ, "MAX_RESULTS", constants.DEFAULT_MAX_RESULTS),
            request_timeout=_env_int(environ, "REQUEST_TIMEOUT", constants.DEFAULT_REQUEST_TIMEOUT),
            detail_timeout=_env_int(environ, "DETAIL_TIMEOUT", constants.DEFAULT_DETAIL_TIMEOUT),
            log_level=logger.get_level(environ.get("LOG_LEVEL") or logger.DEFAULT_LOG_LEVEL),
            log_file=environ.get("LOG_FILE") or None,
            trusted_proxy_count=_env_int(environ, "TRUSTED_PROXY_COUNT", 1),
        )

    def with_cli(self, cli_param) -> "ProviderConfig":
        """Return a copy with the command line flags applied on top of the environment."""
        changes = {}
        if cli_param.port:
            changes["port"] = cli_param.port
        if cli_param.host:
            changes["host"] = cli_param.host
        if cli_param.language:
            changes["language"] = cli_param.language
        if cli_param.logpath:
            changes["log_file"] = cli_param.logpath
        if cli_param.debug:
            changes["log_level"] = logging.DEBUG
        if cli_param.no_link:
            changes["add_link_to_description"] = False
        return dataclasses.replace(self, **changes)
