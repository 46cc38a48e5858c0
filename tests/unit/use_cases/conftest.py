from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.fixtures.builders import FakeClock


@pytest.fixture
def connection():
    """Connection manager double: ensure_connection is awaited, reset is not"""
    manager = MagicMock()
    manager.ensure_connection = AsyncMock(return_value=MagicMock())
    return manager


@pytest.fixture
def clock():
    return FakeClock()
