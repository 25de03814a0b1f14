"""
MintMe 어댑터 패키지

MintMe REST API 어댑터, 마켓 카탈로그, 예외 제공.
"""

from adapters.mintme.errors import (
    MintMeError,
    MissingCredentialsError,
    RemoteError,
    TransportError,
    UnknownMarketError,
)
from adapters.mintme.markets import MARKET_SYMBOLS, load_market_catalog
from adapters.mintme.rest_client import MintMeRestClient

__all__ = [
    "MintMeRestClient",
    "load_market_catalog",
    "MARKET_SYMBOLS",
    # Errors
    "MintMeError",
    "TransportError",
    "RemoteError",
    "MissingCredentialsError",
    "UnknownMarketError",
]
