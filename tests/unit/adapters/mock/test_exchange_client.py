"""
Mock 어댑터 테스트
"""

from decimal import Decimal

import pytest

from adapters.mintme.errors import RemoteError
from adapters.mock.exchange_client import (
    RESULT_INSUFFICIENT_BALANCE,
    RESULT_SUCCESS,
    MockExchangeAdapter,
)
from adapters.models import OrderRequest
from core.types import OrderAction


class TestMockOrders:
    """Mock 주문 테스트"""

    @pytest.mark.asyncio
    async def test_insufficient_balance_result(
        self,
        mock_adapter: MockExchangeAdapter,
        limit_order_request: OrderRequest,
    ) -> None:
        """잔고 부족은 업무 에러 본문 반환"""
        result = await mock_adapter.create_order(limit_order_request)

        assert result == {"result": RESULT_INSUFFICIENT_BALANCE, "message": "Insufficient Balance"}
        assert mock_adapter.state.active_orders == []

    @pytest.mark.asyncio
    async def test_create_order_success(
        self,
        mock_adapter: MockExchangeAdapter,
        limit_order_request: OrderRequest,
    ) -> None:
        """잔고 충분하면 미체결 주문 생성 및 잔고 차감"""
        mock_adapter.set_balance("MINTME", Decimal("100"))

        result = await mock_adapter.create_order(limit_order_request)

        assert result["result"] == RESULT_SUCCESS
        assert result["orderId"] == 1
        # 12.33 * 5 = 61.65
        assert mock_adapter.state.balances["MINTME"] == Decimal("38.35")
        active = await mock_adapter.fetch_active_orders()
        assert [o["id"] for o in active] == [1]

    @pytest.mark.asyncio
    async def test_sell_uses_base_balance(
        self,
        mock_adapter: MockExchangeAdapter,
        market_order_request: OrderRequest,
    ) -> None:
        mock_adapter.set_balance("LAGX", Decimal("10"))

        result = await mock_adapter.create_order(market_order_request)

        assert result["result"] == RESULT_SUCCESS
        assert mock_adapter.state.balances["LAGX"] == Decimal("0")

    @pytest.mark.asyncio
    async def test_market_buy_uses_last_price(self, mock_adapter: MockExchangeAdapter) -> None:
        request = OrderRequest(
            base="LAGX",
            quote="MINTME",
            amount="2",
            action=OrderAction.BUY,
            market_price=True,
        )
        mock_adapter.set_last_price("LAGX/MINTME", Decimal("3"))
        mock_adapter.set_balance("MINTME", Decimal("5"))

        result = await mock_adapter.create_order(request)

        assert result["result"] == RESULT_INSUFFICIENT_BALANCE

    @pytest.mark.asyncio
    async def test_market_buy_without_last_price(self, mock_adapter: MockExchangeAdapter) -> None:
        """현재가를 모르는 시장가 매수는 잔고와 무관하게 잔고 부족"""
        request = OrderRequest(
            base="LAGX",
            quote="MINTME",
            amount="2",
            action=OrderAction.BUY,
            market_price=True,
        )
        mock_adapter.set_balance("MINTME", Decimal("1000000"))

        result = await mock_adapter.create_order(request)

        assert result == {"result": RESULT_INSUFFICIENT_BALANCE, "message": "Insufficient Balance"}
        assert mock_adapter.state.balances["MINTME"] == Decimal("1000000")
        assert mock_adapter.state.active_orders == []

    @pytest.mark.asyncio
    async def test_simulate_fill_moves_order(
        self,
        mock_adapter: MockExchangeAdapter,
        limit_order_request: OrderRequest,
    ) -> None:
        mock_adapter.set_balance("MINTME", Decimal("1000"))
        result = await mock_adapter.create_order(limit_order_request)

        filled = mock_adapter.simulate_fill(result["orderId"])

        assert filled is not None
        assert filled["status"] == "finished"
        assert await mock_adapter.fetch_active_orders() == []
        assert len(await mock_adapter.fetch_finished_orders()) == 1

    def test_simulate_fill_unknown(self, mock_adapter: MockExchangeAdapter) -> None:
        assert mock_adapter.simulate_fill(999) is None


class TestMockListing:
    """Mock 목록 조회 테스트"""

    @pytest.mark.asyncio
    async def test_pagination_and_idempotency(
        self,
        mock_adapter: MockExchangeAdapter,
        limit_order_request: OrderRequest,
    ) -> None:
        mock_adapter.set_balance("MINTME", Decimal("1000"))
        for _ in range(3):
            await mock_adapter.create_order(limit_order_request)

        first = await mock_adapter.fetch_active_orders(1, 1)
        second = await mock_adapter.fetch_active_orders(1, 1)

        assert first == second
        assert [o["id"] for o in first] == [2]

    @pytest.mark.asyncio
    async def test_invalid_pagination(self, mock_adapter: MockExchangeAdapter) -> None:
        with pytest.raises(ValueError):
            await mock_adapter.fetch_finished_orders(-1, 10)

    @pytest.mark.asyncio
    async def test_fetch_assets(self, mock_adapter: MockExchangeAdapter) -> None:
        assets = await mock_adapter.fetch_assets()

        assert "MINTME" in assets

    @pytest.mark.asyncio
    async def test_fail_next_request(self, mock_adapter: MockExchangeAdapter) -> None:
        """다음 요청 1회만 실패"""
        mock_adapter.set_fail_next_request(500)

        with pytest.raises(RemoteError) as exc_info:
            await mock_adapter.fetch_assets()

        assert exc_info.value.status_code == 500
        assert await mock_adapter.fetch_assets()

    @pytest.mark.asyncio
    async def test_load_markets(self, mock_adapter: MockExchangeAdapter) -> None:
        markets = await mock_adapter.load_markets()

        assert len(markets) == 6
        assert mock_adapter.markets is markets
