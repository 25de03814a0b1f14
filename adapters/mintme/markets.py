"""
MintMe 마켓 카탈로그

거래 가능한 6개 거래쌍의 고정 메타데이터.
네트워크 호출 없이 항상 동일한 결과를 반환하며,
실제 거래소 상태와 일치한다는 보장은 없음.
"""

from decimal import Decimal

from adapters.models import MarketDescriptor, MarketLimits, MinMax


# (base, quote, amount_precision, price_precision)
_PAIRS: tuple[tuple[str, str, int, int], ...] = (
    ("BTC", "WETH", 8, 8),
    ("ETH", "WETH", 8, 8),
    ("MINTME", "BTC", 8, 8),
    ("MINTME", "ETH", 8, 8),
    ("BTC", "USD", 8, 2),
    ("ETH", "USD", 8, 2),
)

MIN_AMOUNT = Decimal("0.0001")
MIN_COST = Decimal("0.0001")
FIAT_MIN_COST = Decimal("0.01")
DEFAULT_FEE = Decimal("0.002")

FIAT_QUOTES = frozenset({"USD"})

MARKET_SYMBOLS: tuple[str, ...] = tuple(f"{b}/{q}" for b, q, _, _ in _PAIRS)


def _build_descriptor(
    base: str,
    quote: str,
    amount_precision: int,
    price_precision: int,
) -> MarketDescriptor:
    """거래쌍 하나의 MarketDescriptor 생성"""
    min_price = Decimal(1).scaleb(-price_precision)
    min_cost = FIAT_MIN_COST if quote in FIAT_QUOTES else MIN_COST

    return MarketDescriptor(
        symbol=f"{base}/{quote}",
        id=f"{base.lower()}-{quote.lower()}",
        base=base,
        quote=quote,
        base_id=base.lower(),
        quote_id=quote.lower(),
        amount_precision=amount_precision,
        price_precision=price_precision,
        limits=MarketLimits(
            amount=MinMax(min=MIN_AMOUNT),
            price=MinMax(min=min_price),
            cost=MinMax(min=min_cost),
        ),
        active=True,
        maker_fee=DEFAULT_FEE,
        taker_fee=DEFAULT_FEE,
    )


def load_market_catalog() -> dict[str, MarketDescriptor]:
    """마켓 카탈로그 생성

    Returns:
        심볼 → MarketDescriptor 매핑 (호출마다 새 dict)
    """
    return {
        f"{base}/{quote}": _build_descriptor(base, quote, amount_prec, price_prec)
        for base, quote, amount_prec, price_prec in _PAIRS
    }
