"""Pytest fixtures shared by the tagmarshal test suite."""

import pytest

from src.tagmarshal import Encoder
from src.tagmarshal.tags import field_descriptors
from tests.test_utils import IGNORE_TAG_WITH_VALUE, TARGET_CUSTOM_TAG


# ============================================================================
# ENCODER FIXTURES
# ============================================================================


@pytest.fixture
def encoder():
    """
    Encoder reading the "custom" tag and ignoring fields tagged "-".

    Returns:
        Encoder instance
    """
    return Encoder(TARGET_CUSTOM_TAG, IGNORE_TAG_WITH_VALUE)


@pytest.fixture
def json_encoder():
    """Encoder reading the "json" tag."""
    return Encoder("json", IGNORE_TAG_WITH_VALUE)


# ============================================================================
# CACHE ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def clear_descriptor_cache():
    """Drop cached descriptor tables so per-test dataclasses do not accumulate."""
    yield
    field_descriptors.cache_clear()
