"""Tests for the recent sales endpoint and sale price calculation."""

import pytest
from pydantic import ValidationError

from fakes import BASE_URL, FakeRolimons
from roli import Sale
from roli.models import calculate_sale_price
from roli.utils.exceptions import MalformedResponseError


def test_calculate_sale_price():
    assert calculate_sale_price(4272, 4314) == 4692


def test_calculate_sale_price_without_previous_rap():
    assert calculate_sale_price(None, 1500) == 1500
    assert calculate_sale_price(0, 1500) == 1500


def test_calculate_sale_price_below_rap():
    assert calculate_sale_price(1000, 950) == 500


@pytest.mark.asyncio
async def test_recent_sales(make_client):
    payload = {
        "success": True,
        "activities": [
            [1679978239, 1, 327318670, 4272, 4314, 4991002],
            [1679978240, "1", "1028606", -1, 1500, 4991003],
        ],
        "activities_count": 2,
    }
    fake = FakeRolimons(json=payload)
    client = make_client(fake)

    sales = await client.market_activity.recent_sales()

    assert sales == [
        Sale(
            item_id=327318670,
            old_rap=4272,
            new_rap=4314,
            sale_id=4991002,
            timestamp=1679978239,
        ),
        Sale(
            item_id=1028606,
            old_rap=None,
            new_rap=1500,
            sale_id=4991003,
            timestamp=1679978240,
        ),
    ]
    assert [sale.sale_price for sale in sales] == [4692, 1500]
    assert fake.calls == 1
    assert str(fake.last_request.url) == f"{BASE_URL}/api/activity"


def test_sale_price_is_serialized():
    sale = Sale(
        item_id=327318670, old_rap=4272, new_rap=4314, sale_id=1, timestamp=2
    )

    assert sale.model_dump()["sale_price"] == 4692


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "activity",
    [
        [1679978239, 2, 327318670, 4272, 4314, 4991002],
        [1679978239, 1, 327318670, 4272, 4314],
        [1679978239, 1, 327318670, "n/a", 4314, 4991002],
        [1679978239, 1, 327318670, 1000, 500, 4991002],
    ],
    ids=["not-a-sale", "short-array", "bad-rap", "negative-sale-price"],
)
async def test_recent_sales_rejects_bad_activity(make_client, activity):
    payload = {"success": True, "activities": [activity], "activities_count": 1}
    client = make_client(FakeRolimons(json=payload))

    with pytest.raises(MalformedResponseError):
        await client.market_activity.recent_sales()


def test_sale_with_negative_price_is_rejected():
    with pytest.raises(ValidationError):
        Sale(item_id=327318670, old_rap=1000, new_rap=500, sale_id=1, timestamp=2)
