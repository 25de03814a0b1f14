"""
타입 정의 모듈

모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class OrderAction(str, Enum):
    """주문 방향 (MintMe API는 소문자 사용)"""

    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value: "str | OrderAction") -> "OrderAction":
        """문자열 또는 Enum을 OrderAction으로 변환 (대소문자 무관)

        Raises:
            ValueError: buy/sell 이외의 값
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(
                f'Action must be either "buy" or "sell", got: {value!r}'
            ) from e
