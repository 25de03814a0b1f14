"""
어댑터 레이어

외부 거래소 API와의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import IExchangeAdapter
from adapters.models import (
    MarketDescriptor,
    MarketLimits,
    MinMax,
    OrderRequest,
)

__all__ = [
    # Interfaces
    "IExchangeAdapter",
    # Models
    "MarketDescriptor",
    "MarketLimits",
    "MinMax",
    "OrderRequest",
]
