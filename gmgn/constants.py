"""Fixed origin and endpoint paths of the GMGN API."""

from __future__ import annotations

BASE_URL = "https://gmgn.ai/"

EXACT_IN_PATH = "defi/router/v1/tx/available_routes_exact_in"
EXACT_OUT_PATH = "defi/router/v1/tx/available_routes_exact_out"
SLIPPAGE_PATH = "api/v1/recommend_slippage"
GAS_PRICE_PATH = "defi/quotation/v1/chains"


def gas_price_path(network: str) -> str:
    return f"{GAS_PRICE_PATH}/{network}/gas_price"


__all__ = [
    "BASE_URL",
    "EXACT_IN_PATH",
    "EXACT_OUT_PATH",
    "SLIPPAGE_PATH",
    "GAS_PRICE_PATH",
    "gas_price_path",
]
