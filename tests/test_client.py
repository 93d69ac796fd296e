"""Tests for RoliClient transport behaviour shared by all endpoints."""

import logging

import httpx
import pytest

from fakes import BASE_URL, FakeRolimons
from roli import CreateTradeAdParams, RoliClient
from roli.utils.config import DEFAULT_USER_AGENT
from roli.utils.exceptions import (
    ConfigurationError,
    CooldownNotExpiredError,
    InternalServerError,
    MalformedResponseError,
    NetworkError,
    TooManyRequestsError,
    UnidentifiedStatusCodeError,
)

EMPTY_GAMES = {"success": True, "game_count": 0, "games": {}}


@pytest.mark.asyncio
async def test_non_json_body_is_malformed(make_client):
    client = make_client(FakeRolimons(content=b"<html>Cloudflare</html>"))

    with pytest.raises(MalformedResponseError) as exc_info:
        await client.games.games_list()

    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_unexpected_status_is_unidentified(make_client):
    client = make_client(FakeRolimons(status_code=418, json=EMPTY_GAMES))

    with pytest.raises(UnidentifiedStatusCodeError) as exc_info:
        await client.games.games_list()

    assert exc_info.value.status_code == 418
    assert not exc_info.value.retryable


@pytest.mark.asyncio
async def test_timeout_is_network_error(make_client):
    fake = FakeRolimons(exc=httpx.ReadTimeout("timed out"))
    client = make_client(fake)

    with pytest.raises(NetworkError) as exc_info:
        await client.market_activity.recent_sales()

    assert exc_info.value.retryable
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
    assert fake.calls == 1


@pytest.mark.asyncio
async def test_sends_default_user_agent(make_client):
    fake = FakeRolimons(json=EMPTY_GAMES)
    client = make_client(fake)

    await client.games.games_list()

    assert fake.last_request.headers["User-Agent"] == DEFAULT_USER_AGENT
    assert "Cookie" not in fake.last_request.headers


@pytest.mark.asyncio
async def test_sends_custom_user_agent(make_client):
    fake = FakeRolimons(json=EMPTY_GAMES)
    client = make_client(fake, user_agent="roli-tests/1.0")

    await client.games.games_list()

    assert fake.last_request.headers["User-Agent"] == "roli-tests/1.0"


def test_endpoint_status_table_takes_priority():
    assert isinstance(RoliClient.status_error(429), TooManyRequestsError)
    assert isinstance(RoliClient.status_error(500), InternalServerError)
    assert isinstance(
        RoliClient.status_error(429, {429: CooldownNotExpiredError}),
        CooldownNotExpiredError,
    )
    assert isinstance(RoliClient.status_error(502), UnidentifiedStatusCodeError)


@pytest.mark.asyncio
async def test_close_leaves_borrowed_http_client_open():
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(FakeRolimons(json=EMPTY_GAMES))
    )
    try:
        async with RoliClient(http_client=http_client, base_url=BASE_URL) as client:
            await client.games.games_list()

        assert not http_client.is_closed
    finally:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_context_manager_closes_owned_http_client():
    async with RoliClient(base_url=BASE_URL) as client:
        http_client = client._http_client
        assert http_client is not None

    assert http_client.is_closed
    assert client._http_client is None


def test_repr_hides_verification_token():
    client = RoliClient(roli_verification="super-secret", base_url=BASE_URL)

    assert "super-secret" not in repr(client)
    assert "has_roli_verification=True" in repr(client)


@pytest.mark.asyncio
async def test_falls_back_to_environment(monkeypatch, make_client):
    monkeypatch.setenv("ROLI_ROLI_VERIFICATION", "env-token")
    monkeypatch.setenv("ROLI_BASE_URL", f"{BASE_URL}/")
    fake = FakeRolimons(status_code=201)
    client = make_client(fake, base_url=None)

    assert client.has_roli_verification
    assert client.base_url == BASE_URL

    await client.trade_ads.create_trade_ad(
        CreateTradeAdParams(
            player_id=1, offer_item_ids=[1028606], request_tags=["any"]
        )
    )

    assert str(fake.last_request.url) == f"{BASE_URL}/tradeapi/create"
    assert fake.last_request.headers["Cookie"] == "_RoliVerification=env-token"


def test_explicit_token_overrides_environment(monkeypatch):
    monkeypatch.setenv("ROLI_ROLI_VERIFICATION", "env-token")

    client = RoliClient(roli_verification="explicit")

    assert client.auth_headers() == {"Cookie": "_RoliVerification=explicit"}


def test_without_token_has_no_verification():
    assert not RoliClient().has_roli_verification


def test_invalid_environment_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("ROLI_REQUEST_TIMEOUT", "-1")

    with pytest.raises(ConfigurationError):
        RoliClient()


@pytest.mark.asyncio
async def test_malformed_response_is_logged(make_client, caplog):
    payload = {"success": True, "game_count": 1, "games": {"1": ["only name"]}}
    client = make_client(FakeRolimons(json=payload))

    with caplog.at_level(logging.WARNING, logger="roli"):
        with pytest.raises(MalformedResponseError):
            await client.games.games_list()

    assert any(
        record.name == "roli.client" and "GamesListResponse" in record.getMessage()
        for record in caplog.records
    )
