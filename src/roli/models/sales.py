"""Rolimons market activity (recent sales) models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, computed_field, model_validator

from .base import ResponseEnvelope, RoliModel, code_to_int, unpack_codes

SALE_ACTIVITY = 1

_SALE_FIELDS = (
    "timestamp",
    "activity_type",
    "item_id",
    "old_rap",
    "new_rap",
    "sale_id",
)


def calculate_sale_price(old_rap: int | None, new_rap: int) -> int:
    """Work out the price an item sold for from its RAP change.

    RAP moves 10% of the way towards each sale price, so
    ``new = old + (price - old) / 10``. An item without a previous RAP
    takes the sale price as its first RAP.
    """
    if not old_rap:
        return new_rap
    return 10 * (new_rap - old_rap) + old_rap


class Sale(RoliModel):
    """The sale of a limited item.

    Wire form: ``[timestamp, 1, item_id, old_rap, new_rap, sale_id]``.
    A negative old RAP means the item had none before the sale. A RAP drop
    that would imply a negative sale price is rejected.
    """

    item_id: int = Field(..., ge=0, description="Roblox asset id of the item")
    old_rap: int | None = Field(None, ge=0, description="RAP before the sale")
    new_rap: int = Field(..., ge=0, description="RAP after the sale")
    sale_id: int = Field(
        ..., description="Rolimons sale id, used in /itemsale/{sale_id}"
    )
    timestamp: int = Field(..., description="Unix time the sale was detected")

    @computed_field  # type: ignore[misc]
    @property
    def sale_price(self) -> int:
        """Price the item sold for."""
        return calculate_sale_price(self.old_rap, self.new_rap)

    @model_validator(mode="before")
    @classmethod
    def _from_codes(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data

        values = unpack_codes(data, _SALE_FIELDS)
        activity_type = code_to_int(values.pop("activity_type"))
        if activity_type != SALE_ACTIVITY:
            raise ValueError(f"expected sale activity type 1, got {activity_type}")
        old_rap = code_to_int(values["old_rap"])
        values["old_rap"] = old_rap if old_rap >= 0 else None
        return values

    @model_validator(mode="after")
    def _check_sale_price(self) -> Sale:
        if self.sale_price < 0:
            raise ValueError(
                f"RAP change {self.old_rap} -> {self.new_rap} implies a negative "
                f"sale price ({self.sale_price})"
            )
        return self


class RecentSalesResponse(ResponseEnvelope):
    """Raw response of ``/api/activity``."""

    activities: list[Sale]
    activities_count: int | None = None
