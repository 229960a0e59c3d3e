from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# 9999-12-31 23:59:59 UTC, the last second a datetime can hold
MAX_UNIX_SECONDS = 253_402_300_799


def _check_unix_seconds(seconds: int) -> None:
    if not 0 <= seconds <= MAX_UNIX_SECONDS:
        raise ValueError(f"timestamp {seconds} is outside the representable range")


class MarketModel(BaseModel):
    # prices and amounts stay as the exchange formats them
    model_config = ConfigDict(coerce_numbers_to_str=True)


class ServerTime(MarketModel):
    server_time: int
    timezone: str

    @field_validator("server_time")
    @classmethod
    def _representable(cls, value: int) -> int:
        _check_unix_seconds(value // 1000)
        return value


class Pair(MarketModel):
    id: str
    symbol: str
    base_currency: str
    description: str


class Ticker(MarketModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="allow")

    __pydantic_extra__: dict[str, str]

    high: str
    low: str
    last: str
    buy: str
    sell: str
    server_time: int

    @property
    def volumes(self) -> dict[str, str]:
        """Volume fields keyed by upper-cased currency, in wire order.

        Indodax names them after the pair, e.g. ``vol_btc`` and ``vol_idr``.
        """
        extra = self.model_extra or {}
        return {
            key[len("vol_"):].upper(): value
            for key, value in extra.items()
            if key.startswith("vol_")
        }


class TickerResponse(MarketModel):
    ticker: Ticker


class Trade(MarketModel):
    tid: str
    date: int
    type: str
    price: str
    amount: str

    @field_validator("date")
    @classmethod
    def _representable(cls, value: int) -> int:
        _check_unix_seconds(value)
        return value


class DepthLevel(MarketModel):
    price: str
    amount: str

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ValueError(f"expected [price, amount], got {len(value)} items")
            return {"price": value[0], "amount": value[1]}
        return value


class Depth(MarketModel):
    buy: list[DepthLevel] = []
    sell: list[DepthLevel] = []
