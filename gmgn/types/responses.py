"""Typed payloads returned inside the GMGN response envelope."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

# Several route fields are a single value for v2-style routes and a list for
# v3/multi-hop routes. They are decoded as-is and normalised on read.
Scalar = Union[int, float, str]
ScalarOrList = Union[Scalar, List[Scalar], None]

_RESPONSE_CONFIG = dict(extra="ignore", coerce_numbers_to_str=True)


def as_list(value: ScalarOrList) -> List[Scalar]:
    """Return the list view of a scalar-or-list field."""
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


class Step(BaseModel):
    id: int = Field(description="Position of this step within the route")
    type: str = Field(description="Operation type, e.g. 'swap'")
    tool: str = Field(description="Protocol used, e.g. 'uniswapv2'")

    model_config = _RESPONSE_CONFIG


class Volatilities(BaseModel):
    token_in: float = Field(default=0, description="5-minute price volatility % of the input token")
    token_out: float = Field(default=0, description="5-minute price volatility % of the output token")
    is_fomo: bool = Field(default=False, description="High-attention (FOMO) indicator")

    model_config = _RESPONSE_CONFIG


class Route(BaseModel):
    chain_id: int = Field(description="Chain ID, e.g. 56 for BSC")
    to: str = Field(default="", description="Contract the swap transaction is sent to")
    amount_in: str = Field(description="Input amount in smallest unit")
    amount_in2: Optional[str] = Field(default=None, description="Secondary input amount for composite swaps")
    amount_out: str = Field(description="Expected output amount in smallest unit")
    input_token_address: str = Field(description="Input token contract address")
    output_token_address: str = Field(description="Output token contract address")
    type: str = Field(description="Route type: v0, v2, v3, v2-v2, v2-v3, v3-v2")

    path: ScalarOrList = Field(default=None, description="Token path, single address or list")
    path_bytes: Optional[str] = Field(default=None, description="Encoded path for V3 multi-hop swaps")
    pool_address: ScalarOrList = Field(default=None, description="Pool address(es) used by the route")
    factory_address: ScalarOrList = Field(default=None, description="DEX factory address(es)")
    fee: ScalarOrList = Field(default=None, description="Pool fee(s); tiered for V3")

    steps: List[Step] = Field(default_factory=list, description="Ordered execution steps")

    token_in_usd_price: Optional[str] = Field(default=None, description="Input token USD price")
    amount_in_usd: Optional[str] = Field(default=None, description="Input amount in USD")
    token_out_usd_price: Optional[str] = Field(default=None, description="Output token USD price")
    amount_out_usd: Optional[str] = Field(default=None, description="Output amount in USD")
    value: Optional[str] = Field(default=None, description="Native value attached to the transaction")
    price_impact: Optional[str] = Field(default=None, description="Price impact percentage")
    gas_limit: Optional[str] = Field(default=None, description="Estimated gas limit")
    from_address: Optional[str] = Field(default=None, description="Wallet that will execute the swap")

    model_config = _RESPONSE_CONFIG

    @property
    def path_list(self) -> List[Scalar]:
        return as_list(self.path)

    @property
    def pool_addresses(self) -> List[Scalar]:
        return as_list(self.pool_address)

    @property
    def factory_addresses(self) -> List[Scalar]:
        return as_list(self.factory_address)

    @property
    def fees(self) -> List[Scalar]:
        return as_list(self.fee)

    @property
    def is_multi_hop(self) -> bool:
        return len(self.steps) > 1 or bool(self.path_bytes)


class ExactInOutData(BaseModel):
    routes: List[Route] = Field(default_factory=list, description="Candidate swap routes")
    volatilities: Volatilities = Field(default_factory=Volatilities, description="Price volatility of both tokens")

    model_config = _RESPONSE_CONFIG

    @property
    def best_route(self) -> Optional[Route]:
        """First route as ranked by the server."""
        return self.routes[0] if self.routes else None


class SlippageData(BaseModel):
    recommend_slippage: str = Field(description="Recommended slippage, e.g. '1' for 1%")
    display_slippage: str = Field(description="Slippage value to show to users")
    has_tax: bool = Field(default=False, description="Whether the token has a transfer tax")

    model_config = _RESPONSE_CONFIG


class GasPriceData(BaseModel):
    last_block: int = Field(description="Most recent block number")
    average: str = Field(description="Average gas price in wei")
    high: str = Field(description="High gas price in wei")
    low: str = Field(description="Low gas price in wei")
    suggest_base_fee: str = Field(description="Suggested base fee")
    eth_usd_price: str = Field(description="Native token price in USD")
    high_prio_fee: str = Field(description="High priority fee")
    average_prio_fee: str = Field(description="Average priority fee")
    low_prio_fee: str = Field(description="Low priority fee")

    model_config = _RESPONSE_CONFIG
