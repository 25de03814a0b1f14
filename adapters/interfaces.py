"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Any, Protocol, runtime_checkable

from adapters.models import MarketDescriptor, OrderRequest


@runtime_checkable
class IExchangeAdapter(Protocol):
    """거래소 어댑터 인터페이스

    일반적인 거래 연산을 거래소별 HTTP 호출로 변환.
    호출당 정확히 한 번의 요청/응답만 수행.
    응답 본문(자산/주문 목록)은 해석하지 않고 그대로 반환.
    """

    markets: dict[str, MarketDescriptor]

    # -------------------------------------------------------------------------
    # 마켓 카탈로그
    # -------------------------------------------------------------------------

    async def load_markets(self, reload: bool = False) -> dict[str, MarketDescriptor]:
        """마켓 카탈로그 로드

        Args:
            reload: True면 이미 로드된 카탈로그도 다시 생성

        Returns:
            심볼 → MarketDescriptor 매핑
        """
        ...

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    async def fetch_assets(self) -> Any:
        """자산 목록 조회 (인증 불필요)"""
        ...

    async def fetch_active_orders(self, offset: int = 0, limit: int = 100) -> Any:
        """미체결 주문 목록 조회

        Args:
            offset: 페이지 시작 위치 (0 이상)
            limit: 조회 개수 (1 이상)
        """
        ...

    async def fetch_finished_orders(self, offset: int = 0, limit: int = 100) -> Any:
        """완료된 주문 목록 조회

        Args:
            offset: 페이지 시작 위치 (0 이상)
            limit: 조회 개수 (1 이상)
        """
        ...

    # -------------------------------------------------------------------------
    # 주문 실행
    # -------------------------------------------------------------------------

    async def create_order(self, request: OrderRequest) -> Any:
        """주문 생성

        거래소가 구조화된 에러 본문으로 응답한 경우(잔고 부족 등)
        예외가 아닌 일반 결과로 반환.

        Args:
            request: 주문 요청 정보
        """
        ...

    async def close(self) -> None:
        """리소스 정리"""
        ...
