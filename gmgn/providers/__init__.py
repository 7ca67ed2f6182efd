from .gmgn import AsyncGmgnProvider, GmgnProvider, exact_in, exact_out, gas_price, slippage
from .transport import build_request, decode_response, encode_body, encode_query, send, send_async

__all__ = [
    "AsyncGmgnProvider",
    "GmgnProvider",
    "exact_in",
    "exact_out",
    "gas_price",
    "slippage",
    "build_request",
    "decode_response",
    "encode_body",
    "encode_query",
    "send",
    "send_async",
]
