"""
주문 생성 CLI

사용 예:
    python -m cli.place_order --base=LAGX --quote=MINTME --price=5 --amount=12.33 --action=buy
    python -m cli.place_order --base=LAGX --quote=MINTME --amount=10 --action=sell --market
"""

import argparse
import logging
import sys
from decimal import Decimal
from typing import Any, TextIO

from adapters.interfaces import IExchangeAdapter
from adapters.models import OrderRequest
from cli.common import SEPARATOR, print_json, run_with_adapter
from core.types import OrderAction

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m cli.place_order",
        description="MintMe 주문 생성",
    )
    parser.add_argument("--base", required=True, help="기준 자산 (예: LAGX)")
    parser.add_argument("--quote", required=True, help="호가 자산 (예: MINTME)")
    parser.add_argument("--amount", required=True, help="주문 수량")
    parser.add_argument(
        "--action",
        required=True,
        type=str.lower,
        choices=[a.value for a in OrderAction],
        help="주문 방향 (buy 또는 sell)",
    )
    parser.add_argument("--price", help="단가 (--market 사용 시 불필요)")
    parser.add_argument("--donation", default="0", help="기부 금액 (기본: 0)")
    parser.add_argument(
        "--market",
        action="store_true",
        help="시장가 주문 (가격 지정 없음)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """인자 파싱

    지정가 주문에 --price가 없으면 사용법 출력 후 종료 (exit 2).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.market and not args.price:
        parser.error("--price is required when not using market price")
    return args


def build_request(args: argparse.Namespace) -> OrderRequest:
    """CLI 인자로 주문 요청 생성

    Raises:
        ValueError: 숫자 형식 오류 등
    """
    return OrderRequest(
        base=args.base,
        quote=args.quote,
        amount=args.amount,
        action=OrderAction.parse(args.action),
        price=args.price or "0",
        market_price=args.market,
        donation_amount=args.donation,
    )


def print_order_result(result: Any, out: TextIO | None = None) -> None:
    """주문 결과 요약 출력"""
    out = out or sys.stdout
    if not result:
        print("No response received from the API", file=out)
        return

    print("\nOrder Result:", file=out)
    print(SEPARATOR, file=out)
    if isinstance(result, dict):
        print(f"Result Code: {result.get('result', 'N/A')}", file=out)
        print(f"Order ID: {result.get('orderId') or 'None'}", file=out)
        if result.get("message"):
            print(f"Message: {result['message']}", file=out)
    print(SEPARATOR, file=out)
    print_json(result, out)


async def check_market_limits(adapter: IExchangeAdapter, request: OrderRequest) -> list[str]:
    """카탈로그 거래쌍이면 정밀도/제한 위반 확인

    카탈로그는 실제 거래소 상태와 다를 수 있으므로 경고만 남기고 주문은 전송.
    카탈로그에 없는 거래쌍은 검사하지 않음.
    """
    markets = await adapter.load_markets()
    market = markets.get(request.symbol)
    if market is None:
        return []

    price = None if request.market_price else Decimal(request.price)
    violations = market.limit_violations(Decimal(request.amount), price)
    for violation in violations:
        logger.warning(f"{request.symbol}: {violation}")
    return violations


async def place_order(
    adapter: IExchangeAdapter,
    request: OrderRequest,
    out: TextIO | None = None,
) -> int:
    """주문 전송 후 결과 출력"""
    out = out or sys.stdout
    price = "MARKET PRICE" if request.market_price else f"{request.price} {request.quote}"

    print("Order Details:", file=out)
    print(f"- Type: {request.action.value.upper()}", file=out)
    print(f"- Pair: {request.symbol}", file=out)
    print(f"- Price: {price}", file=out)
    print(f"- Amount: {request.amount} {request.base}", file=out)
    print(f"- Donation: {request.donation_amount}", file=out)

    for violation in await check_market_limits(adapter, request):
        print(f"Warning: {violation}", file=out)

    result = await adapter.create_order(request)
    print_order_result(result, out)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        request = build_request(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        build_parser().print_usage(sys.stderr)
        return 1

    return run_with_adapter(
        "place_order",
        lambda adapter: place_order(adapter, request),
    )


if __name__ == "__main__":
    sys.exit(main())
