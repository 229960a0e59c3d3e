from __future__ import annotations

import logging
from typing import Callable, TypeVar

import httpx

from console.session import Session
from console.utils.colors import error, header, success
from console.utils.formatting import format_price, format_server_time, format_unix_seconds
from console.utils.messages import (
    FETCH_FAILED_TEMPLATE,
    PARSE_FAILED_TEMPLATE,
    PRICE_PARSE_FAILED_TEMPLATE,
)
from core.indodax_public_client import IndodaxDecodeError, IndodaxPublicClientError
from core.schemas.market import DepthLevel

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _print_error(message: str) -> None:
    print(f"[{error('!')}] {message}")


def _request(command: str, fetch: Callable[[], T]) -> T | None:
    """Run one fetch, reporting any failure. ``None`` means abandon the command."""
    try:
        return fetch()
    except httpx.HTTPError as exc:
        message = FETCH_FAILED_TEMPLATE.format(error=exc)
    except IndodaxDecodeError as exc:
        message = PARSE_FAILED_TEMPLATE.format(kind=exc.kind, error=exc)
    except IndodaxPublicClientError as exc:
        message = str(exc)
    logger.info("Command failed", extra={"command": command, "reason": message})
    _print_error(message)
    return None


def cmd_servertime(session: Session) -> None:
    server_time = _request("servertime", session.client.get_server_time)
    if server_time is None:
        return
    formatted = format_server_time(server_time.server_time)
    print(f"[{success('+')}] Server Time: {formatted} {server_time.timezone}")


def cmd_pairs(session: Session) -> None:
    pairs = _request("pairs", session.client.get_pairs)
    if pairs is None:
        return
    for pair in pairs:
        print(f"[{success('+')}] ID: {pair.id}")
        print(f"[{header('-')}] Symbol: {pair.symbol}")
        print(f"[{header('-')}] Base Currency: {pair.base_currency}")
        print(f"[{header('-')}] Description: {pair.description}\n")


def cmd_ticker(session: Session) -> None:
    symbol = session.ask_symbol()
    ticker = _request("ticker", lambda: session.client.get_ticker(symbol))
    if ticker is None:
        return
    print(f"[{success('+')}] Last Price: {ticker.last}")
    print(f"[{header('-')}] High: {ticker.high}")
    print(f"[{header('-')}] Low: {ticker.low}")
    for currency, volume in ticker.volumes.items():
        print(f"[{header('-')}] Volume in {currency}: {volume}")
    print(f"[{header('-')}] Buy: {ticker.buy}")
    print(f"[{header('-')}] Sell: {ticker.sell}\n")


def cmd_trades(session: Session) -> None:
    symbol = session.ask_symbol()
    trades = _request("trades", lambda: session.client.get_trades(symbol))
    if trades is None:
        return
    for trade in trades:
        print(f"[{success('+')}] Trade ID: {trade.tid}")
        print(f"[{header('-')}] Date: {format_unix_seconds(trade.date)}")
        print(f"[{header('-')}] Type: {trade.type}")
        print(f"[{header('-')}] Price: {trade.price}")
        print(f"[{header('-')}] Amount: {trade.amount}\n")


def _print_levels(levels: list[DepthLevel]) -> None:
    for level in levels:
        try:
            price = format_price(level.price)
        except ValueError as exc:
            _print_error(PRICE_PARSE_FAILED_TEMPLATE.format(error=exc))
            continue
        print(f"[{success('+')}] Price: {price}, Amount: {level.amount}")


def cmd_depth(session: Session) -> None:
    symbol = session.ask_symbol()
    depth = _request("depth", lambda: session.client.get_depth(symbol))
    if depth is None:
        return
    print(header("[Buy Orders]"))
    _print_levels(depth.buy)
    print(header("\n[Sell Orders]"))
    _print_levels(depth.sell)
