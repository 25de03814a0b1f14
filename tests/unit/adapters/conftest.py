"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

from collections.abc import Callable

import httpx
import pytest

from adapters.mintme.rest_client import MintMeRestClient
from adapters.mock.exchange_client import MockExchangeAdapter
from adapters.models import OrderRequest
from core.config.loader import Credentials, MintMeConfig
from core.types import OrderAction


BASE_URL = "https://mintme.test/dev/api/v2"

Handler = Callable[[httpx.Request], httpx.Response]


# -------------------------------------------------------------------------
# 설정 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def credentials() -> Credentials:
    """테스트용 자격 증명"""
    return Credentials(api_id="test_public_id", api_key="test_private_key")


@pytest.fixture
def config(credentials: Credentials) -> MintMeConfig:
    """자격 증명이 포함된 설정"""
    return MintMeConfig(
        public_url=BASE_URL,
        private_url=BASE_URL,
        credentials=credentials,
    )


@pytest.fixture
def public_config() -> MintMeConfig:
    """자격 증명이 없는 설정"""
    return MintMeConfig(public_url=BASE_URL, private_url=BASE_URL)


@pytest.fixture
def make_client(config: MintMeConfig) -> Callable[..., MintMeRestClient]:
    """MockTransport 기반 클라이언트 생성 함수

    사용 예:
        client = make_client(lambda request: httpx.Response(200, json={}))
    """

    def _make(handler: Handler, config_override: MintMeConfig | None = None) -> MintMeRestClient:
        return MintMeRestClient(
            config_override or config,
            transport=httpx.MockTransport(handler),
        )

    return _make


# -------------------------------------------------------------------------
# 공통 데이터 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def limit_order_request() -> OrderRequest:
    """지정가 매수 주문"""
    return OrderRequest(
        base="LAGX",
        quote="MINTME",
        amount="12.33",
        action=OrderAction.BUY,
        price="5",
    )


@pytest.fixture
def market_order_request() -> OrderRequest:
    """시장가 매도 주문"""
    return OrderRequest(
        base="LAGX",
        quote="MINTME",
        amount="10",
        action=OrderAction.SELL,
        market_price=True,
    )


@pytest.fixture
def mock_adapter() -> MockExchangeAdapter:
    """Mock 어댑터"""
    return MockExchangeAdapter()
