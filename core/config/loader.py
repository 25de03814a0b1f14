"""
설정 로더

환경 변수 또는 secrets.yaml에서 MintMe API 자격 증명을 로드하고
어댑터 설정(MintMeConfig)을 생성
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, EnvVars, MintMeEndpoints, Paths

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


@dataclass(frozen=True)
class Credentials:
    """MintMe API 자격 증명

    생성 시점에 값 존재 여부를 검증.
    빈 값을 그대로 헤더로 전송하지 않기 위함.

    Attributes:
        api_id: 공개 키 ID (X-API-ID 헤더)
        api_key: 비밀 키 (X-API-KEY 헤더)
    """

    api_id: str
    api_key: str

    def __post_init__(self) -> None:
        if not self.api_id or not self.api_id.strip():
            raise ValueError("api_id must not be empty")
        if not self.api_key or not self.api_key.strip():
            raise ValueError("api_key must not be empty")

    def __repr__(self) -> str:
        # 비밀 키는 로그/트레이스백에 노출하지 않음
        return f"Credentials(api_id={self.api_id!r}, api_key='***')"


@dataclass(frozen=True)
class MintMeConfig:
    """MintMe 어댑터 설정

    Attributes:
        public_url: Public API 베이스 URL
        private_url: Private(인증) API 베이스 URL
        credentials: API 자격 증명 (None이면 public 호출만 가능)
        timeout: HTTP 요청 타임아웃 (초)
    """

    public_url: str = MintMeEndpoints.PUBLIC_URL
    private_url: str = MintMeEndpoints.PRIVATE_URL
    credentials: Credentials | None = None
    timeout: float = Defaults.TIMEOUT_SEC

    @property
    def has_credentials(self) -> bool:
        """자격 증명 보유 여부"""
        return self.credentials is not None


def load_credentials_from_env(
    environ: Mapping[str, str] | None = None,
) -> Credentials:
    """환경 변수에서 자격 증명 로드

    Args:
        environ: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        Credentials 인스턴스

    Raises:
        ConfigLoadError: PUB_API_KEY 또는 PRIV_API_KEY가 없는 경우
    """
    if environ is None:
        environ = os.environ

    api_id = environ.get(EnvVars.PUBLIC_KEY, "")
    api_key = environ.get(EnvVars.PRIVATE_KEY, "")

    missing = [
        name
        for name, value in ((EnvVars.PUBLIC_KEY, api_id), (EnvVars.PRIVATE_KEY, api_key))
        if not value.strip()
    ]
    if missing:
        raise ConfigLoadError(
            f"환경 변수가 설정되지 않았습니다: {', '.join(missing)}"
        )

    return Credentials(api_id=api_id, api_key=api_key)


def _read_mintme_section(path: Path) -> dict[str, Any]:
    """secrets.yaml의 mintme 섹션 읽기

    Raises:
        ConfigLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    if not path.exists():
        raise ConfigLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise ConfigLoadError("secrets.yaml이 비어 있습니다")

    section = data.get("mintme") if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ConfigLoadError("secrets.yaml에 'mintme' 설정이 없습니다")

    return section


def load_credentials_from_file(path: Path | None = None) -> Credentials:
    """secrets.yaml 파일에서 자격 증명 로드

    파일 형식:
    ```yaml
    mintme:
      api_id: "..."
      api_key: "..."
    ```

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Credentials 인스턴스

    Raises:
        ConfigLoadError: 파일이 없거나 키가 누락/공백인 경우
    """
    section = _read_mintme_section(path or Paths.SECRETS_FILE)

    api_id = section.get("api_id")
    api_key = section.get("api_key")

    if not api_id:
        raise ConfigLoadError("secrets.yaml의 mintme 섹션에 'api_id'가 없습니다")
    if not api_key:
        raise ConfigLoadError("secrets.yaml의 mintme 섹션에 'api_key'가 없습니다")

    try:
        return Credentials(api_id=str(api_id), api_key=str(api_key))
    except ValueError as e:
        raise ConfigLoadError(f"secrets.yaml의 mintme 자격 증명이 잘못되었습니다: {e}") from e


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    require_credentials: bool = True,
) -> MintMeConfig:
    """MintMe 어댑터 설정 로드

    자격 증명 우선순위: 환경 변수 → secrets.yaml.
    secrets.yaml이 있으면 public_url, private_url, timeout 재정의 가능.

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)
        environ: 환경 변수 매핑 (None이면 os.environ)
        require_credentials: False면 자격 증명 없이 public 전용 설정 반환

    Returns:
        MintMeConfig 인스턴스

    Raises:
        ConfigLoadError: 자격 증명을 찾을 수 없는 경우 (require_credentials=True),
            timeout 값이 잘못된 경우
    """
    path = path or Paths.SECRETS_FILE

    # mintme 섹션이 없어도 환경 변수 자격 증명과 기본 URL로 동작
    section: dict[str, Any] = {}
    if path.exists():
        try:
            section = _read_mintme_section(path)
        except ConfigLoadError as e:
            logger.warning(f"secrets.yaml 설정 무시: {e}")

    credentials: Credentials | None
    try:
        credentials = load_credentials_from_env(environ)
    except ConfigLoadError as env_error:
        try:
            credentials = load_credentials_from_file(path)
        except ConfigLoadError as file_error:
            if require_credentials:
                raise ConfigLoadError(
                    f"MintMe 자격 증명을 찾을 수 없습니다. {env_error}; {file_error}"
                ) from file_error
            credentials = None

    timeout = section.get("timeout", Defaults.TIMEOUT_SEC)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"secrets.yaml의 timeout 값이 잘못되었습니다: {timeout!r}") from e
    if not timeout > 0:
        raise ConfigLoadError(f"secrets.yaml의 timeout은 양수여야 합니다: {timeout!r}")

    return MintMeConfig(
        public_url=section.get("public_url", MintMeEndpoints.PUBLIC_URL),
        private_url=section.get("private_url", MintMeEndpoints.PRIVATE_URL),
        credentials=credentials,
        timeout=timeout,
    )
