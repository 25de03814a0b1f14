"""
Mock 거래소 어댑터

테스트용 메모리 기반 어댑터.
IExchangeAdapter Protocol 준수.
응답 형태는 MintMe API 응답을 흉내냄.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from adapters.mintme.errors import RemoteError
from adapters.mintme.markets import load_market_catalog
from adapters.mintme.rest_client import validate_page
from adapters.models import MarketDescriptor, OrderRequest
from core.types import OrderAction


# MintMe 주문 결과 코드
RESULT_SUCCESS = 1
RESULT_INSUFFICIENT_BALANCE = 3


@dataclass
class MockState:
    """Mock 상태 (메모리 내 저장)"""

    # 자산 목록 (asset -> 자산 정보)
    assets: dict[str, dict[str, Any]] = field(default_factory=dict)

    # 잔고 (asset -> 사용 가능 수량)
    balances: dict[str, Decimal] = field(default_factory=dict)

    # 시장가 주문 계산용 현재가 (symbol -> price)
    last_prices: dict[str, Decimal] = field(default_factory=dict)

    active_orders: list[dict[str, Any]] = field(default_factory=list)
    finished_orders: list[dict[str, Any]] = field(default_factory=list)

    # 시뮬레이션 옵션
    fail_next_status: int | None = None

    order_counter: int = 0


class MockExchangeAdapter:
    """Mock 어댑터

    IExchangeAdapter Protocol 구현.
    메모리 내 상태 관리로 테스트 시나리오 지원.

    사용 예시:
    ```python
    adapter = MockExchangeAdapter()
    adapter.set_balance("MINTME", Decimal("100"))

    result = await adapter.create_order(request)
    adapter.simulate_fill(result["orderId"])
    ```
    """

    id = "mock"
    name = "Mock"

    def __init__(self, state: MockState | None = None):
        self.state = state or MockState()
        self.markets: dict[str, MarketDescriptor] = {}

        if not self.state.assets:
            self.state.assets = {
                "MINTME": {"type_of_token": "coin", "maker_fee": "0.002", "taker_fee": "0.002"},
                "BTC": {"type_of_token": "coin", "maker_fee": "0.002", "taker_fee": "0.002"},
                "ETH": {"type_of_token": "coin", "maker_fee": "0.002", "taker_fee": "0.002"},
            }

    # -------------------------------------------------------------------------
    # 상태 조작 메서드 (테스트용)
    # -------------------------------------------------------------------------

    def set_balance(self, asset: str, amount: Decimal) -> None:
        """잔고 설정"""
        self.state.balances[asset] = amount

    def set_last_price(self, symbol: str, price: Decimal) -> None:
        """현재가 설정 (시장가 주문용)"""
        self.state.last_prices[symbol] = price

    def set_fail_next_request(self, status_code: int = 500) -> None:
        """다음 요청을 빈 본문 에러 응답으로 실패시킴"""
        self.state.fail_next_status = status_code

    def simulate_fill(self, order_id: int) -> dict[str, Any] | None:
        """미체결 주문을 완료 목록으로 이동"""
        for index, order in enumerate(self.state.active_orders):
            if order["id"] == order_id:
                filled = {**self.state.active_orders.pop(index), "status": "finished"}
                self.state.finished_orders.append(filled)
                return filled
        return None

    def _check_failure(self) -> None:
        status = self.state.fail_next_status
        if status is not None:
            self.state.fail_next_status = None
            raise RemoteError(status, "Mock error")

    def _required_balance(self, request: OrderRequest) -> tuple[str, Decimal | None]:
        """주문에 필요한 자산과 수량 (현재가 모르는 시장가 매수는 None)"""
        amount = Decimal(request.amount)
        if request.action == OrderAction.SELL:
            return request.base, amount

        if request.market_price:
            price = self.state.last_prices.get(request.symbol)
            if price is None:
                return request.quote, None
        else:
            price = Decimal(request.price)
        return request.quote, amount * price + Decimal(request.donation_amount)

    # -------------------------------------------------------------------------
    # IExchangeAdapter
    # -------------------------------------------------------------------------

    async def load_markets(self, reload: bool = False) -> dict[str, MarketDescriptor]:
        """마켓 카탈로그 로드"""
        if reload or not self.markets:
            self.markets = load_market_catalog()
        return self.markets

    async def fetch_assets(self) -> Any:
        """자산 목록 조회"""
        self._check_failure()
        return {name: dict(info) for name, info in self.state.assets.items()}

    async def create_order(self, request: OrderRequest) -> Any:
        """주문 생성 (잔고 부족 시 업무 에러 본문 반환)"""
        self._check_failure()

        asset, required = self._required_balance(request)
        available = self.state.balances.get(asset, Decimal("0"))
        if required is None or available < required:
            return {"result": RESULT_INSUFFICIENT_BALANCE, "message": "Insufficient Balance"}

        self.state.balances[asset] = available - required
        self.state.order_counter += 1
        order_id = self.state.order_counter

        self.state.active_orders.append(
            {
                "id": order_id,
                "base": request.base,
                "quote": request.quote,
                "action": request.action.value,
                "price": request.price,
                "amount": request.amount,
                "status": "active",
                "created_at": datetime.now(timezone.utc).isoformat(),
            }
        )
        return {"result": RESULT_SUCCESS, "orderId": order_id, "message": "Order Created"}

    async def fetch_active_orders(self, offset: int = 0, limit: int = 100) -> Any:
        """미체결 주문 목록 조회"""
        validate_page(offset, limit)
        self._check_failure()
        return [dict(o) for o in self.state.active_orders[offset:offset + limit]]

    async def fetch_finished_orders(self, offset: int = 0, limit: int = 100) -> Any:
        """완료된 주문 목록 조회"""
        validate_page(offset, limit)
        self._check_failure()
        return [dict(o) for o in self.state.finished_orders[offset:offset + limit]]

    async def close(self) -> None:
        """리소스 정리 (없음)"""
        pass
