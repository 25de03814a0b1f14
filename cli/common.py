"""
CLI 공통 유틸리티

설정 로드, 어댑터 생성, 결과 출력, 최상위 에러 처리.
"""

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any, TextIO

from adapters.interfaces import IExchangeAdapter
from adapters.mintme.errors import MintMeError
from adapters.mintme.rest_client import MintMeRestClient
from core.config.loader import ConfigLoadError, load_config
from core.logging import setup_logging

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40


def print_json(payload: Any, out: TextIO | None = None) -> None:
    """API 응답 원문 출력"""
    out = out or sys.stdout
    print("\nAPI Response:", file=out)
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str), file=out)


def run_with_adapter(
    process_name: str,
    command: Callable[[IExchangeAdapter], Awaitable[int]],
    require_credentials: bool = True,
) -> int:
    """어댑터를 생성하여 명령 실행

    설정 로드 실패 또는 MintMeError 발생 시 메시지를 남기고 1 반환.
    재시도하지 않음.

    Args:
        process_name: 로그 파일 이름
        command: 어댑터를 받아 종료 코드를 반환하는 코루틴 함수
        require_credentials: 자격 증명 필수 여부

    Returns:
        프로세스 종료 코드
    """
    setup_logging(process_name)

    try:
        config = load_config(require_credentials=require_credentials)
    except ConfigLoadError as e:
        logger.error(f"설정 로드 실패: {e}")
        return 1

    async def _run() -> int:
        async with MintMeRestClient(config) as adapter:
            return await command(adapter)

    try:
        return asyncio.run(_run())
    except MintMeError as e:
        logger.error(f"{process_name} 실패: {e}")
        return 1
