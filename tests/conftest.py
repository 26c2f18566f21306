from __future__ import annotations

from typing import Iterator

import pytest

from services.pipeline import build_default_pipeline
from settings import get_settings


@pytest.fixture(autouse=True)
def _clear_factories() -> Iterator[None]:
    get_settings.cache_clear()
    build_default_pipeline.cache_clear()
    yield
    build_default_pipeline.cache_clear()
    get_settings.cache_clear()
