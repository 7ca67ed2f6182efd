from typing import Optional

from pydantic import BaseModel, Field


class ExactInParams(BaseModel):
    token_in_chain: str = Field(description="Network code like eth/bsc/arb for the input token")
    token_out_chain: str = Field(description="Network code like eth/bsc/arb for the output token")
    token_in_address: str = Field(description="Contract address of the token swapped from")
    token_out_address: str = Field(description="Contract address of the token swapped to")
    from_address: str = Field(description="Wallet address that will execute the swap")
    in_amount: str = Field(description="Input amount in the token's smallest unit")
    src: Optional[str] = Field(default=None, description="Route source, gmgn or swapx (server default gmgn)")

    model_config = dict(frozen=True, extra="forbid")


class ExactOutParams(BaseModel):
    token_in_chain: str = Field(description="Network code like eth/bsc/arb for the input token")
    token_out_chain: str = Field(description="Network code like eth/bsc/arb for the output token")
    token_in_address: str = Field(description="Contract address of the token swapped from")
    token_out_address: str = Field(description="Contract address of the token swapped to")
    out_amount: str = Field(description="Desired output amount in the token's smallest unit")
    src: Optional[str] = Field(default=None, description="Route source, gmgn or swapx (server default gmgn)")

    model_config = dict(frozen=True, extra="forbid")


class SlippageParams(BaseModel):
    token_address: str = Field(description="Contract address of the output token")
    token_in_address: Optional[str] = Field(
        default=None,
        description="Input token address; helps with slippage accumulation between two non-native tokens",
    )

    model_config = dict(frozen=True, extra="forbid")
