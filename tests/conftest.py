# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

"""
Shared pytest fixtures and configuration for the provider tests.

This module contains common fixtures that are automatically available
to all tests without needing to import them explicitly.

Nothing in here touches the network: providers are built with a real
``requests.Session`` whose ``get`` is replaced per test where needed.
"""

import pytest
from unittest.mock import MagicMock

from audioteka import create_app
from audioteka.config import ProviderConfig
from audioteka.metadata_provider.audioteka import Audioteka


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def pl_config():
    """Default settings, Polish catalog with the backlink enabled."""
    return ProviderConfig(language="pl", add_link_to_description=True, detail_timeout=5)


@pytest.fixture
def cz_config():
    """Czech catalog without the backlink."""
    return ProviderConfig(language="cz", add_link_to_description=False, detail_timeout=5)


# ============================================================================
# Provider Fixtures
# ============================================================================

@pytest.fixture
def pl_provider(pl_config):
    provider = Audioteka(pl_config)
    yield provider
    provider.close()


@pytest.fixture
def cz_provider(cz_config):
    provider = Audioteka(cz_config)
    yield provider
    provider.close()


@pytest.fixture
def mock_provider():
    """A stand-in provider recording calls instead of fetching pages."""
    provider = MagicMock(spec=Audioteka)
    provider.search.return_value = []
    return provider


# ============================================================================
# Flask Fixtures
# ============================================================================

@pytest.fixture
def app(pl_config, mock_provider):
    application = create_app(pl_config, provider=mock_provider)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": "abs-provider-key"}
