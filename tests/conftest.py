"""Shared pytest fixtures for adoclet tests.

Provides common fixtures for mocking engine components.
"""

from pathlib import Path

import pytest

from adoclet.engine import Container
from adoclet.engine.mocks import MockEngine, MockTemplateProvider


@pytest.fixture
def mock_engine() -> MockEngine:
    """Fixture that sets up and tears down a mock engine via Container.

    Yields:
        MockEngine instance wrapping block output in <p> and inline in <span>
    """
    engine = MockEngine()
    Container.set_engine(engine)
    yield engine
    Container.reset()


@pytest.fixture
def mock_templates() -> MockTemplateProvider:
    """Fixture that sets up and tears down a mock template provider via Container.

    Yields:
        MockTemplateProvider handing out a fixed path
    """
    provider = MockTemplateProvider(path=Path("/tmp/adoclet-test-templates"))
    Container.set_template_provider(provider)
    yield provider
    Container.reset()


@pytest.fixture
def failing_templates() -> MockTemplateProvider:
    """Fixture that provides a template provider that always fails.

    Yields:
        MockTemplateProvider reporting an error and returning an absent result
    """
    provider = MockTemplateProvider(fail=True)
    Container.set_template_provider(provider)
    yield provider
    Container.reset()
