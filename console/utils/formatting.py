from __future__ import annotations

import re

import pendulum

TIME_FORMAT = "YYYY-MM-DD HH:mm:ss"

_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def format_unix_seconds(seconds: int) -> str:
    return pendulum.from_timestamp(seconds, tz="UTC").format(TIME_FORMAT)


def format_server_time(milliseconds: int) -> str:
    """Render an epoch-millisecond server timestamp as UTC, dropping the millis."""
    return format_unix_seconds(milliseconds // 1000)


def format_price(price: str) -> str:
    """Two-decimal rendering of a price string.

    Only plain decimal notation is accepted; anything else (padding, digit
    separators, ``inf``) raises ValueError.
    """
    if not _DECIMAL.fullmatch(price):
        raise ValueError(f"invalid price {price!r}")
    return f"{float(price):.2f}"
