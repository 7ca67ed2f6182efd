"""Python client for the GMGN DEX routing API."""

from .errors import (
    APIError,
    DecodeError,
    ErrorCategory,
    GmgnError,
    GmgnTimeoutError,
    HTTPStatusError,
    ParamsEncodingError,
    RequestBuildError,
    TransportError,
)
from .logging_config import setup_logging
from .providers import AsyncGmgnProvider, GmgnProvider, exact_in, exact_out, gas_price, slippage
from .types import (
    Envelope,
    ExactInOutData,
    ExactInParams,
    ExactOutParams,
    GasPriceData,
    Route,
    SlippageData,
    SlippageParams,
    Step,
    Volatilities,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "DecodeError",
    "ErrorCategory",
    "GmgnError",
    "GmgnTimeoutError",
    "HTTPStatusError",
    "ParamsEncodingError",
    "RequestBuildError",
    "TransportError",
    "setup_logging",
    "AsyncGmgnProvider",
    "GmgnProvider",
    "exact_in",
    "exact_out",
    "gas_price",
    "slippage",
    "Envelope",
    "ExactInOutData",
    "ExactInParams",
    "ExactOutParams",
    "GasPriceData",
    "Route",
    "SlippageData",
    "SlippageParams",
    "Step",
    "Volatilities",
]
