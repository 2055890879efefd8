import aiohttp
import pytest

from dydx_client import DydxApiError, Market, MarketStatisticDay, Public

HOST = "https://api.example.com"


def _mock_session(mocker, status=200, payload=None, text=""):
    mock_session = mocker.MagicMock(spec=aiohttp.ClientSession)
    mock_resp = mocker.MagicMock()
    mock_resp.status = status
    mock_resp.json = mocker.AsyncMock(return_value=payload)
    mock_resp.text = mocker.AsyncMock(return_value=text)

    cm = mocker.MagicMock()
    cm.__aenter__ = mocker.AsyncMock(return_value=mock_resp)
    cm.__aexit__ = mocker.AsyncMock(return_value=None)
    mock_session.request.return_value = cm
    return mock_session


def _called_url(session):
    args, _ = session.request.call_args
    assert args[0] == "GET"
    return args[1]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, kwargs, expected",
    [
        ("does_user_exist_with_address", {"ethereum_address": "0xabc"}, "users/exists?ethereumAddress=0xabc"),
        ("does_user_exist_with_username", {"username": "alice"}, "usernames?username=alice"),
        ("get_markets", {}, "markets"),
        ("get_markets", {"market": "ETH-USD"}, "markets?market=ETH-USD"),
        ("get_order_book", {"market": "BTC-USD"}, "orderbook/BTC-USD"),
        ("get_stats", {"market": "BTC-USD"}, "stats/BTC-USD"),
        ("get_stats", {"market": "BTC-USD", "days": 7}, "stats/BTC-USD?days=7"),
        ("get_trades", {"market": "BTC-USD"}, "trades/BTC-USD"),
        (
            "get_trades",
            {"market": "BTC-USD", "starting_before_or_at": "2021-01-01T00:00:00.000Z"},
            "trades/BTC-USD?startingBeforeOrAt=2021-01-01T00%3A00%3A00.000Z",
        ),
        ("get_historical_funding", {"market": "LINK-USD"}, "historical-funding/LINK-USD"),
        (
            "get_historical_funding",
            {"market": "LINK-USD", "effective_before_or_at": "2021-01-01"},
            "historical-funding/LINK-USD?effectiveBeforeOrAt=2021-01-01",
        ),
    ],
)
async def test_request_paths(mocker, method, kwargs, expected):
    session = _mock_session(mocker, payload={"ok": True})
    client = Public(HOST, session=session)

    data = await getattr(client, method)(**kwargs)

    assert data == {"ok": True}
    assert _called_url(session) == f"{HOST}/v3/{expected}"
    session.request.assert_called_once()


@pytest.mark.asyncio
async def test_enums_render_as_values(mocker):
    session = _mock_session(mocker, payload={"markets": {}})
    client = Public(HOST, session=session)

    await client.get_stats(Market.ETH_USD, days=MarketStatisticDay.THIRTY)

    assert _called_url(session) == f"{HOST}/v3/stats/ETH-USD?days=30"


@pytest.mark.asyncio
async def test_get_requests_are_unauthenticated(mocker):
    session = _mock_session(mocker, payload={"orderbook": {"bids": [], "asks": []}})
    client = Public(HOST, session=session)

    data = await client.get_order_book("BTC-USD")

    assert data == {"orderbook": {"bids": [], "asks": []}}
    _, kwargs = session.request.call_args
    assert kwargs["headers"] is None
    assert kwargs["json"] is None


@pytest.mark.asyncio
async def test_trailing_slash_in_host_is_ignored(mocker):
    session = _mock_session(mocker, payload={})
    client = Public(HOST + "/", session=session)

    await client.get_markets()

    assert _called_url(session) == f"{HOST}/v3/markets"


@pytest.mark.asyncio
async def test_error_status_raises_with_json_body(mocker):
    session = _mock_session(mocker, status=404, text='{"errors": [{"msg": "Market not found"}]}')
    client = Public(HOST, session=session)

    with pytest.raises(DydxApiError) as excinfo:
        await client.get_order_book("NOPE-USD")

    assert excinfo.value.status == 404
    assert excinfo.value.body == {"errors": [{"msg": "Market not found"}]}
    assert excinfo.value.url == f"{HOST}/v3/orderbook/NOPE-USD"
    session.request.assert_called_once()


@pytest.mark.asyncio
async def test_error_status_keeps_plain_text_body(mocker):
    session = _mock_session(mocker, status=503, text="Service Unavailable")
    client = Public(HOST, session=session)

    with pytest.raises(DydxApiError) as excinfo:
        await client.get_markets()

    assert excinfo.value.status == 503
    assert excinfo.value.body == "Service Unavailable"
    # no retry
    assert session.request.call_count == 1


@pytest.mark.asyncio
async def test_transport_errors_propagate(mocker):
    session = mocker.MagicMock(spec=aiohttp.ClientSession)
    session.request.side_effect = aiohttp.ClientConnectionError("boom")
    client = Public(HOST, session=session)

    with pytest.raises(aiohttp.ClientConnectionError):
        await client.get_markets()


@pytest.mark.asyncio
async def test_close_leaves_injected_session_open(mocker):
    session = _mock_session(mocker)
    session.close = mocker.AsyncMock()
    client = Public(HOST, session=session)

    await client.close()

    session.close.assert_not_called()


@pytest.mark.asyncio
async def test_success_body_decoded_regardless_of_content_type(mocker):
    session = _mock_session(mocker, payload={"markets": {}})
    client = Public(HOST, session=session)

    await client.get_markets()

    resp = session.request.return_value.__aenter__.return_value
    resp.json.assert_awaited_once_with(content_type=None)
