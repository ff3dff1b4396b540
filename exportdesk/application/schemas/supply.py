"""Form schema for the Supply screen."""

from typing import Any

from pydantic import Field

from exportdesk.application.schemas.base import (
    EntityFormModel,
    PositiveInt,
    RequiredText,
    ref,
    ref_id,
)
from exportdesk.domain.entities import FormMode
from exportdesk.domain.entities.enums import SupplyCategory, SupplyStatus, SupplyUnit


class SupplyForm(EntityFormModel):
    item_name: RequiredText
    supplier_name: RequiredText
    supplier_contact: str = ""
    category: SupplyCategory = SupplyCategory.GENERAL
    status: SupplyStatus = SupplyStatus.PENDING
    description: str = ""
    unit: SupplyUnit | None = None
    quantity: PositiveInt
    unit_price: float = Field(ge=0)
    minimum_quantity: int = Field(0, ge=0)
    branch_id: int

    field_messages = {
        "itemName": "Item name is required",
        "supplierName": "Supplier name is required",
        "quantity": "Quantity must be greater than 0",
        "unitPrice": "Unit price must be 0 or greater",
        "minimumQuantity": "Minimum quantity must be 0 or greater",
        "branchId": "Branch selection is required",
    }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        values["branchId"] = ref_id(record.get("branch"))
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True, mode="json", exclude={"branch_id"})
        payload["branch"] = ref(self.branch_id)
        return payload
