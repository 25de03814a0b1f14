"""
CLI 테스트 픽스처
"""

import pytest

from adapters.mock.exchange_client import MockExchangeAdapter


@pytest.fixture
def adapter() -> MockExchangeAdapter:
    """CLI 명령에 주입할 Mock 어댑터"""
    return MockExchangeAdapter()
