"""Tests for the deals activity endpoint."""

import pytest

from fakes import BASE_URL, FakeRolimons
from roli import PriceUpdate, RapUpdate
from roli.utils.exceptions import MalformedResponseError, RequestUnsuccessfulError


@pytest.mark.asyncio
async def test_deals_activity_splits_price_and_rap_updates(make_client):
    payload = {
        "success": True,
        "activities": [
            [1679978364, 0, "1533893", 14900],
            [1679978370, 1, 1028606, "1372"],
        ],
    }
    fake = FakeRolimons(json=payload)
    client = make_client(fake)

    activities = await client.deals.deals_activity()

    assert activities == [
        PriceUpdate(timestamp=1679978364, item_id=1533893, price=14900),
        RapUpdate(timestamp=1679978370, item_id=1028606, rap=1372),
    ]
    assert fake.calls == 1
    assert str(fake.last_request.url) == f"{BASE_URL}/api/activity2"


@pytest.mark.asyncio
async def test_deals_activity_unknown_kind_is_malformed(make_client):
    payload = {"success": True, "activities": [[1679978364, 7, 1533893, 14900]]}
    client = make_client(FakeRolimons(json=payload))

    with pytest.raises(MalformedResponseError):
        await client.deals.deals_activity()


@pytest.mark.asyncio
async def test_deals_activity_unsuccessful_body(make_client):
    client = make_client(FakeRolimons(json={"success": False, "activities": []}))

    with pytest.raises(RequestUnsuccessfulError) as exc_info:
        await client.deals.deals_activity()

    assert exc_info.value.code is None
    assert not exc_info.value.retryable
