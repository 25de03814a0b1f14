"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class MintMeEndpoints:
    """MintMe API 엔드포인트 (고정값)

    공식 문서: https://mintme.com/docs/api
    """

    PUBLIC_URL: str = "https://www.mintme.com/dev/api/v2"
    PRIVATE_URL: str = "https://www.mintme.com/dev/api/v2"
    WWW_URL: str = "https://www.mintme.com"

    # Public
    ASSETS: str = "/open/assets"

    # Private (X-API-ID / X-API-KEY 헤더 필요)
    ORDERS: str = "/auth/user/orders"
    ACTIVE_ORDERS: str = "/auth/user/orders/active"
    FINISHED_ORDERS: str = "/auth/user/orders/finished"


class AuthHeaders:
    """인증 헤더 이름"""

    API_ID: str = "X-API-ID"
    API_KEY: str = "X-API-KEY"


class EnvVars:
    """자격 증명 환경 변수 이름"""

    PUBLIC_KEY: str = "PUB_API_KEY"
    PRIVATE_KEY: str = "PRIV_API_KEY"


class Defaults:
    """기본값 상수"""

    EXCHANGE_ID: str = "mintme"
    EXCHANGE_NAME: str = "MintMe"

    TIMEOUT_SEC: float = 30.0

    # 주문 목록 페이지네이션
    ORDERS_OFFSET: int = 0
    ORDERS_LIMIT: int = 100

    # 자산 목록 출력 개수 (CLI)
    ASSETS_DISPLAY: int = 10

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"
