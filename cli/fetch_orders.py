"""
주문 목록 조회 CLI

사용 예:
    python -m cli.fetch_orders --offset=0 --limit=20
    python -m cli.fetch_orders --finished
"""

import argparse
import sys
from typing import Any, TextIO

from adapters.interfaces import IExchangeAdapter
from cli.common import SEPARATOR, print_json, run_with_adapter
from core.constants import Defaults


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m cli.fetch_orders",
        description="MintMe 주문 목록 조회",
    )
    parser.add_argument(
        "--offset",
        type=_non_negative_int,
        default=Defaults.ORDERS_OFFSET,
        help=f"페이지 시작 위치 (기본: {Defaults.ORDERS_OFFSET})",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=Defaults.ORDERS_LIMIT,
        help=f"최대 조회 개수 (기본: {Defaults.ORDERS_LIMIT})",
    )
    parser.add_argument(
        "--finished",
        action="store_true",
        help="미체결 대신 완료된 주문 조회",
    )
    return parser


def _extract_orders(result: Any) -> list[Any]:
    """응답에서 주문 목록 추출 (리스트 또는 {"orders": [...]} 형태)"""
    if isinstance(result, list):
        return result
    if isinstance(result, dict) and isinstance(result.get("orders"), list):
        return result["orders"]
    return []


def print_orders(result: Any, out: TextIO | None = None) -> None:
    """주문 목록 요약 출력"""
    out = out or sys.stdout
    if result is None:
        print("No response received from the API", file=out)
        return

    orders = _extract_orders(result)

    print("\nFetch Result:", file=out)
    print(SEPARATOR, file=out)
    if isinstance(result, dict):
        print(f"Result Code: {result.get('result') or 'N/A'}", file=out)
    print(f"Total Orders: {len(orders)}", file=out)
    if isinstance(result, dict) and result.get("message"):
        print(f"Message: {result['message']}", file=out)
    print(SEPARATOR, file=out)

    if not orders:
        print("No orders found or returned", file=out)
    else:
        print("\nOrders Summary:", file=out)
        for index, order in enumerate(orders, start=1):
            order = order if isinstance(order, dict) else {}
            print(f"\nOrder #{index}:", file=out)
            print(f"- Order ID: {order.get('id', 'N/A')}", file=out)
            print(f"- Pair: {order.get('base', 'N/A')}/{order.get('quote', 'N/A')}", file=out)
            print(f"- Type: {order.get('action', 'N/A')}", file=out)
            print(f"- Price: {order.get('price', 'N/A')} {order.get('quote', '')}", file=out)
            print(f"- Amount: {order.get('amount', 'N/A')} {order.get('base', '')}", file=out)
            print(f"- Status: {order.get('status', 'N/A')}", file=out)
            print(f"- Created: {order.get('created_at', 'N/A')}", file=out)

    print_json(result, out)


async def fetch_orders(
    adapter: IExchangeAdapter,
    offset: int,
    limit: int,
    finished: bool = False,
    out: TextIO | None = None,
) -> int:
    """주문 목록 조회 후 출력"""
    out = out or sys.stdout
    kind = "finished" if finished else "active"
    print(f"Fetching {kind} orders (offset={offset}, limit={limit})", file=out)

    if finished:
        result = await adapter.fetch_finished_orders(offset, limit)
    else:
        result = await adapter.fetch_active_orders(offset, limit)

    print_orders(result, out)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return run_with_adapter(
        "fetch_orders",
        lambda adapter: fetch_orders(adapter, args.offset, args.limit, args.finished),
    )


if __name__ == "__main__":
    sys.exit(main())
