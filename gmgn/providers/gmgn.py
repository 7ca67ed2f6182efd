"""Clients for GMGN's public router, slippage and gas-price endpoints."""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from ..config import settings
from ..constants import EXACT_IN_PATH, EXACT_OUT_PATH, SLIPPAGE_PATH, gas_price_path
from ..types.requests import ExactInParams, ExactOutParams, SlippageParams
from ..types.responses import ExactInOutData, GasPriceData, SlippageData
from .transport import send, send_async


class _GmgnProviderBase:
    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        configured = base_url or settings.normalized_base_url
        self.base_url = configured.rstrip("/") + "/"
        self.timeout_s = timeout_s or settings.request_timeout_seconds
        self.headers = dict(headers or {})


class GmgnProvider(_GmgnProviderBase):
    """Blocking wrapper around https://gmgn.ai endpoints.

    Every method performs exactly one request through a fresh ``httpx.Client``.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(base_url=base_url, timeout_s=timeout_s, headers=headers)
        self.transport = transport

    def _get(self, path: str, params, response_model):
        return send(
            "GET",
            path,
            params,
            response_model,
            base_url=self.base_url,
            timeout_s=self.timeout_s,
            transport=self.transport,
            headers=self.headers,
        )

    def exact_in(self, params: ExactInParams) -> ExactInOutData:
        """Available swap routes for a fixed input amount."""
        return self._get(EXACT_IN_PATH, params, ExactInOutData)

    def exact_out(self, params: ExactOutParams) -> ExactInOutData:
        """Available swap routes for a fixed output amount."""
        return self._get(EXACT_OUT_PATH, params, ExactInOutData)

    def slippage(self, params: SlippageParams) -> SlippageData:
        """Recommended slippage for swapping into ``params.token_address``."""
        return self._get(SLIPPAGE_PATH, params, SlippageData)

    def gas_price(self, network: str) -> GasPriceData:
        """Gas price snapshot for a network code such as ``eth`` or ``bsc``."""
        return self._get(gas_price_path(network), None, GasPriceData)


class AsyncGmgnProvider(_GmgnProviderBase):
    """Async variant of ``GmgnProvider`` built on ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(base_url=base_url, timeout_s=timeout_s, headers=headers)
        self.transport = transport

    async def _get(self, path: str, params, response_model):
        return await send_async(
            "GET",
            path,
            params,
            response_model,
            base_url=self.base_url,
            timeout_s=self.timeout_s,
            transport=self.transport,
            headers=self.headers,
        )

    async def exact_in(self, params: ExactInParams) -> ExactInOutData:
        return await self._get(EXACT_IN_PATH, params, ExactInOutData)

    async def exact_out(self, params: ExactOutParams) -> ExactInOutData:
        return await self._get(EXACT_OUT_PATH, params, ExactInOutData)

    async def slippage(self, params: SlippageParams) -> SlippageData:
        return await self._get(SLIPPAGE_PATH, params, SlippageData)

    async def gas_price(self, network: str) -> GasPriceData:
        return await self._get(gas_price_path(network), None, GasPriceData)


def exact_in(params: ExactInParams) -> ExactInOutData:
    return GmgnProvider().exact_in(params)


def exact_out(params: ExactOutParams) -> ExactInOutData:
    return GmgnProvider().exact_out(params)


def slippage(params: SlippageParams) -> SlippageData:
    return GmgnProvider().slippage(params)


def gas_price(network: str) -> GasPriceData:
    return GmgnProvider().gas_price(network)
