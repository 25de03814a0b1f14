"""
MintMe REST API 어댑터

MintMe API v2와 통신하는 어댑터.
IExchangeAdapter Protocol 준수.

응답 처리 정책 (인증 API):
- 2xx: JSON 본문 반환
- 2xx 이외 + JSON 에러 본문: 본문을 일반 결과로 반환
  (MintMe는 잔고 부족 등 업무 에러를 구조화된 본문으로 전달)
- 2xx 이외 + 빈 본문/해석 불가 본문: RemoteError
- 응답 없음: TransportError

재시도, 백오프, Rate Limit 처리는 하지 않음.
"""

import logging
from typing import Any

import httpx

from adapters.mintme.errors import (
    MissingCredentialsError,
    RemoteError,
    TransportError,
    UnknownMarketError,
)
from adapters.mintme.markets import load_market_catalog
from adapters.models import MarketDescriptor, OrderRequest
from core.config.loader import MintMeConfig
from core.constants import AuthHeaders, Defaults, MintMeEndpoints

logger = logging.getLogger(__name__)


def validate_page(offset: int, limit: int) -> None:
    """페이지네이션 파라미터 검증

    Raises:
        ValueError: offset < 0 또는 limit < 1
    """
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        raise ValueError(f"offset must be a non-negative integer, got: {offset!r}")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got: {limit!r}")


class MintMeRestClient:
    """MintMe REST API 어댑터

    IExchangeAdapter Protocol 구현.
    호출마다 HTTP 요청 한 번을 수행하고 응답을 그대로 반환.

    Args:
        config: 어댑터 설정 (None이면 기본 URL, 자격 증명 없음)
        transport: httpx 전송 계층 (테스트에서 MockTransport 주입용)

    사용 예시:
    ```python
    config = load_config()
    async with MintMeRestClient(config) as client:
        assets = await client.fetch_assets()
        result = await client.create_order(request)
    ```
    """

    id = Defaults.EXCHANGE_ID
    name = Defaults.EXCHANGE_NAME

    def __init__(
        self,
        config: MintMeConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or MintMeConfig()
        self.public_url = self.config.public_url.rstrip("/")
        self.private_url = self.config.private_url.rstrip("/")
        self.timeout = self.config.timeout

        self.markets: dict[str, MarketDescriptor] = {}

        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "MintMeRestClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # 요청 처리
    # -------------------------------------------------------------------------

    def _auth_headers(self, operation: str) -> dict[str, str]:
        """인증 헤더 생성

        Raises:
            MissingCredentialsError: 자격 증명이 설정되지 않은 경우
        """
        if not self.config.has_credentials:
            raise MissingCredentialsError(operation)
        credentials = self.config.credentials
        return {
            AuthHeaders.API_ID: credentials.api_id,
            AuthHeaders.API_KEY: credentials.api_key,
        }

    async def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """HTTP 요청 한 번 전송

        Raises:
            TransportError: 응답을 받지 못한 경우
        """
        client = await self._get_client()
        try:
            return await client.request(
                method,
                url,
                params=params,
                json=body,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.error(
                "MintMe request failed",
                extra={"method": method, "url": url, "error": str(e)},
            )
            raise TransportError(f"MintMe request failed: {e}", url=url) from e

    def _handle_private_response(self, response: httpx.Response, path: str) -> Any:
        """인증 API 응답 처리

        Returns:
            JSON 본문 (성공 또는 업무 에러)

        Raises:
            RemoteError: 2xx 이외 응답에 해석 가능한 본문이 없는 경우
        """
        if response.is_success:
            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise RemoteError(
                    response.status_code,
                    "Invalid JSON response",
                    response.text,
                ) from e

        if response.content:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            if payload is not None:
                logger.warning(
                    f"MintMe business error: {response.status_code}",
                    extra={"path": path, "payload": payload},
                )
                return payload

        logger.error(
            f"MintMe API error: {response.status_code} {response.reason_phrase}",
            extra={"path": path},
        )
        raise RemoteError(response.status_code, response.reason_phrase, response.text)

    # -------------------------------------------------------------------------
    # 마켓 카탈로그
    # -------------------------------------------------------------------------

    async def load_markets(self, reload: bool = False) -> dict[str, MarketDescriptor]:
        """마켓 카탈로그 로드 (고정 6개 거래쌍, 네트워크 호출 없음)

        Args:
            reload: True면 이미 로드된 카탈로그도 다시 생성

        Returns:
            심볼 → MarketDescriptor 매핑
        """
        if reload or not self.markets:
            self.markets = load_market_catalog()
        return self.markets

    def market(self, symbol: str) -> MarketDescriptor:
        """심볼로 마켓 조회 (대소문자 구분)

        load_markets() 이후에만 유효.

        Raises:
            UnknownMarketError: 카탈로그에 없는 심볼
        """
        try:
            return self.markets[symbol]
        except KeyError:
            raise UnknownMarketError(symbol) from None

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def fetch_assets(self) -> Any:
        """전체 자산 목록 조회

        Returns:
            API 응답 JSON (자산 이름 → 자산 정보)

        Raises:
            RemoteError: HTTP 200 이외 응답
            TransportError: 응답 없음
        """
        url = f"{self.public_url}{MintMeEndpoints.ASSETS}"
        response = await self._send("GET", url)

        if response.status_code != 200:
            logger.error(
                f"MintMe API error: {response.status_code} {response.reason_phrase}",
                extra={"path": MintMeEndpoints.ASSETS},
            )
            raise RemoteError(
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(200, "Invalid JSON response", response.text) from e

    # -------------------------------------------------------------------------
    # Private API
    # -------------------------------------------------------------------------

    async def create_order(self, request: OrderRequest) -> Any:
        """주문 생성

        잔고 부족 등 업무 에러는 예외 없이 응답 본문 그대로 반환.
        예: {"result": 3, "message": "Insufficient Balance"}

        Args:
            request: 주문 요청 정보

        Returns:
            API 응답 JSON

        Raises:
            MissingCredentialsError: 자격 증명 없음
            RemoteError: 2xx 이외 응답 + 빈 본문
            TransportError: 응답 없음
        """
        headers = self._auth_headers("create_order")
        url = f"{self.private_url}{MintMeEndpoints.ORDERS}"

        logger.info(
            f"주문 생성 요청: {request.action.value} {request.amount} {request.symbol}",
            extra={"market_price": request.market_price, "price": request.price},
        )

        response = await self._send(
            "POST",
            url,
            body=request.to_payload(),
            headers=headers,
        )
        return self._handle_private_response(response, MintMeEndpoints.ORDERS)

    async def fetch_active_orders(
        self,
        offset: int = Defaults.ORDERS_OFFSET,
        limit: int = Defaults.ORDERS_LIMIT,
    ) -> Any:
        """미체결 주문 목록 조회

        Args:
            offset: 페이지 시작 위치 (0 이상)
            limit: 조회 개수 (1 이상)

        Returns:
            API 응답 JSON
        """
        return await self._fetch_orders(
            "fetch_active_orders",
            MintMeEndpoints.ACTIVE_ORDERS,
            offset,
            limit,
        )

    async def fetch_finished_orders(
        self,
        offset: int = Defaults.ORDERS_OFFSET,
        limit: int = Defaults.ORDERS_LIMIT,
    ) -> Any:
        """완료된 주문 목록 조회

        Args:
            offset: 페이지 시작 위치 (0 이상)
            limit: 조회 개수 (1 이상)

        Returns:
            API 응답 JSON
        """
        return await self._fetch_orders(
            "fetch_finished_orders",
            MintMeEndpoints.FINISHED_ORDERS,
            offset,
            limit,
        )

    async def _fetch_orders(
        self,
        operation: str,
        path: str,
        offset: int,
        limit: int,
    ) -> Any:
        validate_page(offset, limit)
        headers = self._auth_headers(operation)

        response = await self._send(
            "GET",
            f"{self.private_url}{path}",
            params={"offset": offset, "limit": limit},
            headers=headers,
        )
        return self._handle_private_response(response, path)
