"""
자산 목록 조회 CLI (인증 불필요)

사용 예:
    python -m cli.fetch_assets --show=20
"""

import argparse
import sys
from typing import Any, TextIO

from adapters.interfaces import IExchangeAdapter
from cli.common import run_with_adapter
from core.constants import Defaults


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m cli.fetch_assets",
        description="MintMe 자산 목록 조회",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=Defaults.ASSETS_DISPLAY,
        help=f"출력할 자산 개수 (기본: {Defaults.ASSETS_DISPLAY})",
    )
    return parser


def _cell(data: Any, key: str, width: int) -> str:
    value = data.get(key) if isinstance(data, dict) else None
    return str(value if value else "N/A").ljust(width)


def print_assets(assets: Any, show: int, markets: list[str], out: TextIO | None = None) -> None:
    """자산 목록을 표 형태로 출력"""
    out = out or sys.stdout
    if not isinstance(assets, dict):
        print(f"Unexpected assets response: {assets!r}", file=out)
        return

    entries = list(assets.items())[:show]

    print("\n| Asset Name             | Type | Maker Fee | Taker Fee | Min Withdraw |", file=out)
    print("|------------------------|------|-----------|-----------|--------------|", file=out)
    for name, data in entries:
        print(
            f"| {str(name or 'Unknown').ljust(22)} "
            f"| {_cell(data, 'type_of_token', 4)} "
            f"| {_cell(data, 'maker_fee', 9)} "
            f"| {_cell(data, 'taker_fee', 9)} "
            f"| {_cell(data, 'min_withdraw', 12)} |",
            file=out,
        )
    print(f"\nShowing {len(entries)} of {len(assets)} available assets", file=out)

    print("\nAvailable markets:", file=out)
    print(", ".join(markets), file=out)


async def fetch_assets(adapter: IExchangeAdapter, show: int, out: TextIO | None = None) -> int:
    markets = await adapter.load_markets()
    assets = await adapter.fetch_assets()
    print_assets(assets, show, list(markets), out)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return run_with_adapter(
        "fetch_assets",
        lambda adapter: fetch_assets(adapter, args.show),
        require_credentials=False,
    )


if __name__ == "__main__":
    sys.exit(main())
