"""
cli/place_order.py 테스트
"""

import io
from decimal import Decimal
from unittest.mock import patch

import pytest

from adapters.mock.exchange_client import MockExchangeAdapter
from cli.place_order import build_request, check_market_limits, main, parse_args, place_order
from core.types import OrderAction


LIMIT_ARGS = [
    "--base=LAGX",
    "--quote=MINTME",
    "--price=5",
    "--amount=12.33",
    "--action=BUY",
]


class TestParseArgs:
    """인자 파싱 테스트"""

    def test_limit_order(self) -> None:
        args = parse_args(LIMIT_ARGS)

        assert args.base == "LAGX"
        assert args.action == "buy"
        assert args.donation == "0"
        assert args.market is False

    def test_market_order_without_price(self) -> None:
        args = parse_args(["--base=A", "--quote=B", "--amount=1", "--action=sell", "--market"])

        assert args.market is True
        assert args.price is None

    def test_missing_required_exits_nonzero(self, capsys: pytest.CaptureFixture) -> None:
        """필수 인자 누락 시 사용법 출력 후 비정상 종료"""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--base=LAGX"])

        assert exc_info.value.code != 0
        assert "usage" in capsys.readouterr().err

    def test_limit_without_price_exits_nonzero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--base=A", "--quote=B", "--amount=1", "--action=buy"])

        assert exc_info.value.code != 0

    def test_invalid_action_exits_nonzero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--base=A", "--quote=B", "--amount=1", "--action=hold", "--price=1"])

        assert exc_info.value.code != 0

    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--help"])

        assert exc_info.value.code == 0


class TestBuildRequest:
    def test_limit_request(self) -> None:
        request = build_request(parse_args(LIMIT_ARGS + ["--donation=0.5"]))

        assert request.action is OrderAction.BUY
        assert request.price == "5"
        assert request.donation_amount == "0.5"
        assert request.market_price is False

    def test_invalid_amount(self) -> None:
        args = parse_args(["--base=A", "--quote=B", "--amount=abc", "--action=buy", "--price=1"])

        with pytest.raises(ValueError):
            build_request(args)


class TestPlaceOrder:
    """place_order 실행 테스트"""

    @pytest.mark.asyncio
    async def test_prints_business_error(self, adapter: MockExchangeAdapter) -> None:
        """잔고 부족 결과를 정상 출력"""
        out = io.StringIO()
        request = build_request(parse_args(LIMIT_ARGS))

        code = await place_order(adapter, request, out)

        output = out.getvalue()
        assert code == 0
        assert "Result Code: 3" in output
        assert "Message: Insufficient Balance" in output
        assert "- Pair: LAGX/MINTME" in output

    @pytest.mark.asyncio
    async def test_prints_order_id(self, adapter: MockExchangeAdapter) -> None:
        adapter.set_balance("MINTME", Decimal("100"))
        out = io.StringIO()
        request = build_request(parse_args(LIMIT_ARGS))

        await place_order(adapter, request, out)

        assert "Order ID: 1" in out.getvalue()

    @pytest.mark.asyncio
    async def test_market_price_label(self, adapter: MockExchangeAdapter) -> None:
        out = io.StringIO()
        request = build_request(
            parse_args(["--base=A", "--quote=B", "--amount=1", "--action=sell", "--market"])
        )

        await place_order(adapter, request, out)

        assert "- Price: MARKET PRICE" in out.getvalue()

    @pytest.mark.asyncio
    async def test_catalog_limit_warning(self, adapter: MockExchangeAdapter) -> None:
        """카탈로그 정밀도 위반은 경고 출력 후 주문 전송"""
        adapter.set_balance("USD", Decimal("1000"))
        out = io.StringIO()
        request = build_request(
            parse_args(["--base=BTC", "--quote=USD", "--price=100.123", "--amount=1", "--action=buy"])
        )

        code = await place_order(adapter, request, out)

        output = out.getvalue()
        assert code == 0
        assert "Warning: price 100.123 exceeds precision 2" in output
        assert "Order ID: 1" in output

    @pytest.mark.asyncio
    async def test_no_warning_outside_catalog(self, adapter: MockExchangeAdapter) -> None:
        """카탈로그에 없는 거래쌍은 검사하지 않음"""
        out = io.StringIO()
        request = build_request(
            parse_args(["--base=LAGX", "--quote=MINTME", "--price=0.123456789", "--amount=1", "--action=buy"])
        )

        await place_order(adapter, request, out)

        assert "Warning:" not in out.getvalue()


class TestCheckMarketLimits:
    @pytest.mark.asyncio
    async def test_returns_violations(self, adapter: MockExchangeAdapter) -> None:
        request = build_request(
            parse_args(["--base=MINTME", "--quote=BTC", "--price=0.001", "--amount=0.00001", "--action=sell"])
        )

        violations = await check_market_limits(adapter, request)

        assert any(v.startswith("amount 0.00001 outside limits") for v in violations)
        assert any(v.startswith("cost") for v in violations)

    @pytest.mark.asyncio
    async def test_market_order_checks_amount_only(self, adapter: MockExchangeAdapter) -> None:
        request = build_request(
            parse_args(["--base=BTC", "--quote=USD", "--amount=1", "--action=sell", "--market"])
        )

        assert await check_market_limits(adapter, request) == []


class TestMain:
    def test_invalid_amount_returns_one(self) -> None:
        """숫자 형식 오류는 종료 코드 1"""
        with patch("cli.place_order.run_with_adapter") as mock_run:
            code = main(["--base=A", "--quote=B", "--amount=x", "--action=buy", "--price=1"])

        assert code == 1
        mock_run.assert_not_called()

    @pytest.mark.parametrize("amount", ["NaN", "sNaN", "Infinity"])
    def test_non_finite_amount_returns_one(self, amount: str) -> None:
        """NaN/Infinity 수량은 종료 코드 1"""
        with patch("cli.place_order.run_with_adapter") as mock_run:
            code = main(["--base=A", "--quote=B", f"--amount={amount}", "--action=buy", "--price=1"])

        assert code == 1
        mock_run.assert_not_called()

    def test_runs_with_adapter(self) -> None:
        with patch("cli.place_order.run_with_adapter", return_value=0) as mock_run:
            code = main(LIMIT_ARGS)

        assert code == 0
        assert mock_run.call_args.args[0] == "place_order"
