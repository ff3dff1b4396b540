"""Form schema for the Order screen."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from pydantic import model_validator

from exportdesk.application.schemas.base import (
    EmailText,
    EntityFormModel,
    PositiveFloat,
    PositiveInt,
    RequiredText,
    date_only,
    ref,
    ref_id,
    start_of_day,
)
from exportdesk.domain.entities import FormMode
from exportdesk.domain.entities.enums import (
    OrderPriority,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)


def order_total(quantity: Any, unit_price: Any) -> float:
    """quantity × unit price, rounded to cents; unparsable inputs count as 0."""
    try:
        amount = Decimal(str(quantity or 0)) * Decimal(str(unit_price or 0))
    except InvalidOperation:
        return 0.0
    return float(amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class OrderForm(EntityFormModel):
    """Create/edit form for a customer order.

    ``totalAmount`` is derived from quantity and unit price; whatever the
    caller put in it is replaced before the order is sent.
    """

    order_number: RequiredText
    customer_name: RequiredText
    customer_email: EmailText | None = None
    customer_phone: str = ""
    customer_address: str = ""
    product_name: RequiredText
    product_category: str = ""
    product_description: str = ""
    quantity: PositiveInt
    unit_price: PositiveFloat
    total_amount: float = 0.0
    status: OrderStatus = OrderStatus.PENDING
    priority: OrderPriority = OrderPriority.MEDIUM
    expected_delivery_date: date | None = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: PaymentMethod | None = None
    notes: str = ""
    specifications: str = ""
    branch_id: int | None = None

    field_messages = {
        "orderNumber": "Order number is required",
        "customerName": "Customer name is required",
        "customerEmail": "Customer email is invalid",
        "productName": "Product name is required",
        "quantity": "Quantity must be greater than 0",
        "unitPrice": "Unit price must be greater than 0",
    }

    @model_validator(mode="after")
    def _compute_total(self) -> "OrderForm":
        self.total_amount = order_total(self.quantity, self.unit_price)
        return self

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        values["expectedDeliveryDate"] = date_only(record.get("expectedDeliveryDate"))
        values["branchId"] = ref_id(record.get("branch"))
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        payload = self.model_dump(
            by_alias=True,
            mode="json",
            exclude={"branch_id", "expected_delivery_date"},
        )
        payload["branch"] = ref(self.branch_id)
        payload["expectedDeliveryDate"] = start_of_day(self.expected_delivery_date)
        return payload
