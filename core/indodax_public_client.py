from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from core.config import get_settings
from core.schemas.market import Depth, Pair, ServerTime, Ticker, TickerResponse, Trade

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IndodaxPublicClientError(Exception):
    pass


class IndodaxStatusError(IndodaxPublicClientError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"unable to fetch data. status code: {status_code}")
        self.status_code = status_code


class IndodaxDecodeError(IndodaxPublicClientError):
    def __init__(self, kind: str, reason: Exception) -> None:
        super().__init__(str(reason))
        self.kind = kind


class IndodaxAPIError(IndodaxPublicClientError):
    pass


_SERVER_TIME = TypeAdapter(ServerTime)
_PAIRS = TypeAdapter(list[Pair])
_TICKER = TypeAdapter(TickerResponse)
_TRADES = TypeAdapter(list[Trade])
_DEPTH = TypeAdapter(Depth)


class IndodaxPublicClient:
    """Blocking client for the public ``/api`` endpoints of Indodax.

    Every call is a single GET. Anything other than HTTP 200 raises
    :class:`IndodaxStatusError` before the body is looked at; transport
    failures propagate as :class:`httpx.HTTPError`.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = get_settings()
        if base_url is None:
            base_url = str(settings.indodax_base_url)
        if timeout is None:
            timeout = settings.request_timeout_seconds
        self._client = httpx.Client(base_url=base_url, timeout=timeout)

    def _fetch(self, endpoint: str, kind: str) -> Any:
        logger.debug("GET %s", endpoint)
        response = self._client.get(endpoint)
        if response.status_code != 200:
            raise IndodaxStatusError(response.status_code)
        try:
            # keep fractional numbers as their wire text
            data = response.json(parse_float=str)
        except ValueError as exc:
            raise IndodaxDecodeError(kind, exc) from exc
        if isinstance(data, dict) and "error" in data:
            raise IndodaxAPIError(data.get("error_description") or data["error"])
        return data

    def _decode(self, adapter: TypeAdapter[T], data: Any, kind: str) -> T:
        try:
            return adapter.validate_python(data)
        except ValidationError as exc:
            raise IndodaxDecodeError(kind, exc) from exc

    def get_server_time(self) -> ServerTime:
        data = self._fetch("/api/server_time", "server time")
        return self._decode(_SERVER_TIME, data, "server time")

    def get_pairs(self) -> list[Pair]:
        data = self._fetch("/api/pairs", "pairs")
        return self._decode(_PAIRS, data, "pairs")

    def get_ticker(self, pair: str) -> Ticker:
        data = self._fetch(f"/api/ticker/{pair}", "ticker")
        return self._decode(_TICKER, data, "ticker").ticker

    def get_trades(self, pair: str) -> list[Trade]:
        data = self._fetch(f"/api/trades/{pair}", "trades")
        return self._decode(_TRADES, data, "trades")

    def get_depth(self, pair: str) -> Depth:
        data = self._fetch(f"/api/depth/{pair}", "depth")
        return self._decode(_DEPTH, data, "depth")

    def close(self) -> None:
        self._client.close()


public_client = IndodaxPublicClient()
