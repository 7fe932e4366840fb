"""Shared pytest fixtures."""

import os
from collections.abc import Iterator

# Use litellm's bundled model cost map instead of fetching it over the network
# at import time; the background fetch can deadlock test module imports.
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

import pytest  # noqa: E402
import structlog  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_structlog_config() -> Iterator[None]:
    """Keep global structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
