import copy
import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, List

import httpx
import pytest

ROUTE_V2: Dict[str, Any] = {
    "chain_id": 56,
    "to": "0x1de460f363AF910f51726DEf188F9004276Bf4bc",
    "amount_in": "1000000000000000000",
    "amount_out": "183920381928374652",
    "input_token_address": "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c",
    "output_token_address": "0x924fa68a0FC644485b8df8AbfA0A41C2e7744444",
    "type": "v2",
    "path": ["0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c", "0x924fa68a0FC644485b8df8AbfA0A41C2e7744444"],
    "pool_address": "0x8f4a5d3c1b9e0a7d6c5b4a3f2e1d0c9b8a7f6e5d",
    "factory_address": "0xcA143Ce32Fe78f1f7019d7d551a6402fC5350c73",
    "fee": "25",
    "steps": [{"id": 1, "type": "swap", "tool": "pancakeswapv2"}],
    "token_in_usd_price": "598.12",
    "amount_in_usd": "598.12",
    "value": "1000000000000000000",
    "price_impact": "0.12",
    "gas_limit": "250000",
}

ROUTE_V3_MULTIHOP: Dict[str, Any] = {
    "chain_id": 56,
    "to": "0x1de460f363AF910f51726DEf188F9004276Bf4bc",
    "amount_in": "1000000000000000000",
    "amount_out": "183000000000000000",
    "input_token_address": "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c",
    "output_token_address": "0x924fa68a0FC644485b8df8AbfA0A41C2e7744444",
    "type": "v3-v2",
    "path": "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c",
    "path_bytes": "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c0001f4",
    "pool_address": ["0xpoolA", "0xpoolB"],
    "factory_address": ["0xfactoryV3", "0xfactoryV2"],
    "fee": [500, 2500],
    "steps": [
        {"id": 1, "type": "swap", "tool": "pancakeswapv3"},
        {"id": 2, "type": "swap", "tool": "pancakeswapv2"},
    ],
    "value": "1000000000000000000",
}

ROUTES_PAYLOAD: Dict[str, Any] = {
    "routes": [ROUTE_V2, ROUTE_V3_MULTIHOP],
    "volatilities": {"token_in": 1, "token_out": 7, "is_fomo": True},
}

SLIPPAGE_PAYLOAD: Dict[str, Any] = {
    "recommend_slippage": "1",
    "display_slippage": "1.5",
    "has_tax": False,
}

GAS_PRICE_PAYLOAD: Dict[str, Any] = {
    "last_block": 44820311,
    "average": "1000000000",
    "high": "1500000000",
    "low": "1000000000",
    "suggest_base_fee": "0",
    "eth_usd_price": "598.12",
    "high_prio_fee": "1000000000",
    "average_prio_fee": "1000000000",
    "low_prio_fee": "1000000000",
}


def envelope(data: Any, code: int = 0, msg: str = "success") -> Dict[str, Any]:
    return {"code": code, "msg": msg, "data": data}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def reply_with():
    """Build a recording transport that answers every request the same way."""

    def _factory(payload: Any = None, status_code: int = 200, **response_kwargs: Any) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if payload is not None:
                return httpx.Response(status_code, json=payload)
            return httpx.Response(status_code, **response_kwargs)

        return RecordingTransport(handler)

    return _factory


@pytest.fixture
def make_envelope():
    return envelope


@pytest.fixture
def routes_payload() -> Dict[str, Any]:
    return copy.deepcopy(ROUTES_PAYLOAD)


@pytest.fixture
def slippage_payload() -> Dict[str, Any]:
    return dict(SLIPPAGE_PAYLOAD)


@pytest.fixture
def gas_price_payload() -> Dict[str, Any]:
    return dict(GAS_PRICE_PAYLOAD)


class _SlowBodyHandler(BaseHTTPRequestHandler):
    """Sends headers at once, then the body one byte at a time."""

    body = json.dumps({"code": 0, "msg": "", "data": {"padding": "x" * 24}}).encode()
    delay_s = 0.25

    def do_GET(self):
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(self.body)))
        self.end_headers()
        try:
            for index in range(len(self.body)):
                self.wfile.write(self.body[index:index + 1])
                self.wfile.flush()
                time.sleep(self.delay_s)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format, *args):
        pass


@pytest.fixture
def slow_body_server(monkeypatch):
    """Base URL of a local server that drips its response body."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
    server = ThreadingHTTPServer(("127.0.0.1", 0), _SlowBodyHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}/"
    finally:
        server.shutdown()
        server.server_close()
