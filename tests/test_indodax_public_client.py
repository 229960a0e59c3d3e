import httpx
import pytest

respx = pytest.importorskip("respx")
from httpx import Response

from core.indodax_public_client import (
    IndodaxAPIError,
    IndodaxDecodeError,
    IndodaxPublicClient,
    IndodaxStatusError,
)

BASE = "https://indodax.com"


@pytest.fixture
def client():
    client = IndodaxPublicClient(base_url=BASE)
    yield client
    client.close()


@respx.mock
def test_server_time_decoded(client):
    route = respx.get(f"{BASE}/api/server_time").mock(
        return_value=Response(200, json={"server_time": 1700000000000, "timezone": "UTC"})
    )
    result = client.get_server_time()
    assert route.called
    assert result.server_time == 1700000000000
    assert result.timezone == "UTC"


@pytest.mark.parametrize("status", [201, 204, 301, 404, 500, 503])
@respx.mock
def test_non_200_raises_without_decoding(client, status):
    respx.get(f"{BASE}/api/pairs").mock(return_value=Response(status, content=b"<html>nope"))
    with pytest.raises(IndodaxStatusError) as excinfo:
        client.get_pairs()
    assert excinfo.value.status_code == status
    assert str(excinfo.value) == f"unable to fetch data. status code: {status}"


@respx.mock
def test_symbol_is_appended_to_path(client):
    route = respx.get(f"{BASE}/api/trades/ethidr").mock(return_value=Response(200, json=[]))
    assert client.get_trades("ethidr") == []
    assert route.calls[0].request.url.path == "/api/trades/ethidr"


@respx.mock
def test_ticker_unwraps_payload(client):
    respx.get(f"{BASE}/api/ticker/btcidr").mock(
        return_value=Response(
            200,
            json={
                "ticker": {
                    "high": "1000",
                    "low": "900",
                    "vol_btc": "1.5",
                    "vol_idr": "1425000",
                    "last": "950",
                    "buy": "949",
                    "sell": "951",
                    "server_time": 1700000000,
                }
            },
        )
    )
    ticker = client.get_ticker("btcidr")
    assert ticker.last == "950"
    assert ticker.volumes == {"BTC": "1.5", "IDR": "1425000"}


@respx.mock
def test_invalid_json_is_decode_error(client):
    respx.get(f"{BASE}/api/depth/btcidr").mock(return_value=Response(200, content=b"{not json"))
    with pytest.raises(IndodaxDecodeError) as excinfo:
        client.get_depth("btcidr")
    assert excinfo.value.kind == "depth"


@respx.mock
def test_wrong_shape_is_decode_error(client):
    respx.get(f"{BASE}/api/server_time").mock(return_value=Response(200, json=[1, 2, 3]))
    with pytest.raises(IndodaxDecodeError) as excinfo:
        client.get_server_time()
    assert excinfo.value.kind == "server time"


@respx.mock
def test_error_body_raises_api_error(client):
    respx.get(f"{BASE}/api/ticker/nope").mock(
        return_value=Response(
            200, json={"error": "invalid_pair", "error_description": "Invalid Pair"}
        )
    )
    with pytest.raises(IndodaxAPIError, match="Invalid Pair"):
        client.get_ticker("nope")


@respx.mock
def test_transport_error_propagates(client):
    respx.get(f"{BASE}/api/pairs").mock(side_effect=httpx.ConnectError("connection refused"))
    with pytest.raises(httpx.HTTPError):
        client.get_pairs()


@respx.mock
def test_fractional_numbers_keep_wire_text(client):
    body = (
        b'{"ticker": {"high": 1000.50, "low": "900", "vol_btc": 0.00001,'
        b' "vol_idr": 15, "last": "950", "buy": "949", "sell": "951",'
        b' "server_time": 1700000000}}'
    )
    respx.get(f"{BASE}/api/ticker/btcidr").mock(return_value=Response(200, content=body))
    ticker = client.get_ticker("btcidr")
    assert ticker.high == "1000.50"
    assert ticker.volumes == {"BTC": "0.00001", "IDR": "15"}


@respx.mock
def test_millisecond_trade_date_is_decode_error(client):
    respx.get(f"{BASE}/api/trades/btcidr").mock(
        return_value=Response(
            200,
            json=[{"tid": "1", "date": "1700000000000", "type": "buy", "price": "1", "amount": "1"}],
        )
    )
    with pytest.raises(IndodaxDecodeError) as excinfo:
        client.get_trades("btcidr")
    assert excinfo.value.kind == "trades"
