"""
어댑터 공통 데이터 모델

마켓 메타데이터와 주문 요청 모델.
금액/가격은 API 전송 형식에 맞춰 문자열 decimal로 보관하고,
생성 시점에 Decimal 파싱 가능 여부를 검증.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from core.types import OrderAction


@dataclass(frozen=True)
class MinMax:
    """최소/최대 범위 (None은 제한 없음)"""

    min: Decimal | None = None
    max: Decimal | None = None

    def contains(self, value: Decimal) -> bool:
        """범위 포함 여부"""
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclass(frozen=True)
class MarketLimits:
    """거래 제한

    Attributes:
        amount: 주문 수량 범위
        price: 주문 가격 범위
        cost: 주문 금액(수량 * 가격) 범위
    """

    amount: MinMax = field(default_factory=MinMax)
    price: MinMax = field(default_factory=MinMax)
    cost: MinMax = field(default_factory=MinMax)


@dataclass(frozen=True)
class MarketDescriptor:
    """마켓(거래쌍) 정보

    Attributes:
        symbol: 통합 심볼 (예: BTC/USD)
        id: 거래소 마켓 ID (예: btc-usd)
        base: 기준 자산 (예: BTC)
        quote: 호가 자산 (예: USD)
        base_id: 거래소 기준 자산 ID
        quote_id: 거래소 호가 자산 ID
        amount_precision: 수량 소수점 자리수
        price_precision: 가격 소수점 자리수
        limits: 거래 제한
        active: 거래 가능 여부
        maker_fee: Maker 수수료율
        taker_fee: Taker 수수료율
    """

    symbol: str
    id: str
    base: str
    quote: str
    base_id: str
    quote_id: str
    amount_precision: int
    price_precision: int
    limits: MarketLimits = field(default_factory=MarketLimits)
    active: bool = True
    maker_fee: Decimal = Decimal("0.002")
    taker_fee: Decimal = Decimal("0.002")

    @property
    def amount_step(self) -> Decimal:
        """수량 최소 단위"""
        return Decimal(1).scaleb(-self.amount_precision)

    @property
    def price_step(self) -> Decimal:
        """가격 최소 단위"""
        return Decimal(1).scaleb(-self.price_precision)

    def limit_violations(self, amount: Decimal, price: Decimal | None = None) -> list[str]:
        """카탈로그 정밀도/제한 위반 목록

        Args:
            amount: 주문 수량
            price: 단가 (None이면 시장가, 가격/금액 검사 생략)

        Returns:
            위반 내용 (없으면 빈 리스트)
        """
        violations: list[str] = []

        if amount % self.amount_step != 0:
            violations.append(f"amount {amount} exceeds precision {self.amount_precision}")
        if not self.limits.amount.contains(amount):
            violations.append(f"amount {amount} outside limits {self.limits.amount}")

        if price is not None:
            if price % self.price_step != 0:
                violations.append(f"price {price} exceeds precision {self.price_precision}")
            if not self.limits.price.contains(price):
                violations.append(f"price {price} outside limits {self.limits.price}")
            cost = amount * price
            if not self.limits.cost.contains(cost):
                violations.append(f"cost {cost} outside limits {self.limits.cost}")

        return violations


def _require_decimal(name: str, value: str) -> Decimal:
    try:
        number = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a decimal string, got: {value!r}") from e
    # NaN/Infinity는 비교 연산에서 InvalidOperation 발생
    if not number.is_finite():
        raise ValueError(f"{name} must be a finite decimal, got: {value!r}")
    return number


@dataclass(frozen=True)
class OrderRequest:
    """주문 요청

    Attributes:
        base: 기준 자산 (예: LAGX)
        quote: 호가 자산 (예: MINTME)
        amount: 주문 수량 (문자열 decimal)
        action: 주문 방향 (buy/sell)
        price: 지정가 (문자열 decimal, 시장가 주문이면 무시)
        market_price: 시장가 주문 여부
        donation_amount: 기부 금액 (문자열 decimal)

    Raises:
        ValueError: 필수 값 누락, 숫자 형식 오류, 지정가 주문에 가격 없음
    """

    base: str
    quote: str
    amount: str
    action: OrderAction
    price: str = "0"
    market_price: bool = False
    donation_amount: str = "0"

    def __post_init__(self) -> None:
        # frozen 이므로 object.__setattr__ 사용
        object.__setattr__(self, "action", OrderAction.parse(self.action))

        for name in ("base", "quote", "amount"):
            if not str(getattr(self, name) or "").strip():
                raise ValueError(f"{name} is required")

        amount = _require_decimal("amount", self.amount)
        if amount <= 0:
            raise ValueError(f"amount must be positive, got: {self.amount!r}")

        _require_decimal("donation_amount", self.donation_amount)

        if not self.market_price:
            if not str(self.price or "").strip():
                raise ValueError("price is required when not using market price")
            if _require_decimal("price", self.price) <= 0:
                raise ValueError("price is required when not using market price")
        else:
            _require_decimal("price", self.price or "0")

    @property
    def symbol(self) -> str:
        """통합 심볼 (BASE/QUOTE)"""
        return f"{self.base}/{self.quote}"

    def to_payload(self) -> dict[str, Any]:
        """API 요청 본문 생성"""
        return {
            "base": self.base,
            "quote": self.quote,
            "priceInput": self.price or "0",
            "amountInput": self.amount,
            "donationAmount": self.donation_amount,
            "marketPrice": self.market_price,
            "action": self.action.value,
        }
