"""Shared test fixtures."""

from __future__ import annotations

import pytest

from cssforge.config.settings import get_settings
from cssforge.selector.facade import CssSelectorBuilder


@pytest.fixture()
def builder() -> CssSelectorBuilder:
    """A selector facade instance."""
    return CssSelectorBuilder()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached; reset between tests so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
