# tests/conftest.py
from __future__ import annotations

from typing import List

import pytest

from http_errors.core.factory import ErrorFactory
from http_errors.core.registry import get_type_registry


@pytest.fixture
def registry():
    return get_type_registry()


@pytest.fixture
def deprecations() -> List[str]:
    """Messages received by the factory's deprecation sink"""
    return []


@pytest.fixture
def factory(registry, deprecations) -> ErrorFactory:
    # Fresh pool per test so pooled instances never leak between tests
    return ErrorFactory(registry=registry, deprecation_sink=deprecations.append)
