"""
MintMe 어댑터 예외

- TransportError: 응답을 받지 못함 (연결 실패, 타임아웃 등)
- RemoteError: 2xx가 아닌 응답 + 해석 가능한 에러 본문 없음
- MissingCredentialsError: 자격 증명 없이 인증 API 호출
- UnknownMarketError: 카탈로그에 없는 심볼 조회

거래소가 JSON 에러 본문으로 응답한 경우(잔고 부족 등)는
예외가 아니라 일반 결과로 반환됨.
"""


class MintMeError(Exception):
    """MintMe 어댑터 에러 기본 클래스"""

    pass


class TransportError(MintMeError):
    """요청이 서버에 도달하지 못했거나 응답을 받지 못함"""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)


class RemoteError(MintMeError):
    """MintMe API 에러 응답

    Attributes:
        status_code: HTTP 상태 코드
        reason: HTTP 상태 문구
        body: 응답 본문 원문 (비어 있을 수 있음)
    """

    def __init__(self, status_code: int, reason: str, body: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"MintMe API error: {status_code} {reason}")


class MissingCredentialsError(MintMeError):
    """인증이 필요한 API를 자격 증명 없이 호출"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires API credentials")


class UnknownMarketError(MintMeError, KeyError):
    """카탈로그에 없는 마켓 심볼"""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown market symbol: {symbol}")

    def __str__(self) -> str:
        return f"Unknown market symbol: {self.symbol}"
