"""Form schema for the Stock screen."""

from datetime import date
from typing import Any

from exportdesk.application.schemas.base import (
    EntityFormModel,
    PositiveFloat,
    PositiveInt,
    RequiredText,
    date_only,
    iso_date,
)
from exportdesk.domain.entities import FormMode


class StockForm(EntityFormModel):
    stock_type: RequiredText
    material_type: RequiredText
    quantity: PositiveInt
    price: PositiveFloat
    purchase_date: date
    release_date: date | None = None

    field_messages = {
        "stockType": "Stock type is required",
        "materialType": "Material type is required",
        "quantity": "Valid quantity is required",
        "price": "Valid price is required",
        "purchaseDate": "Purchase date is required",
    }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        values["purchaseDate"] = date_only(record.get("purchaseDate"))
        values["releaseDate"] = date_only(record.get("releaseDate"))
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        return {
            "stockType": self.stock_type,
            "materialType": self.material_type,
            "quantity": self.quantity,
            "price": self.price,
            "purchaseDate": iso_date(self.purchase_date),
            "releaseDate": iso_date(self.release_date),
        }
