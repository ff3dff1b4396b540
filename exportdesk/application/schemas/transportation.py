"""Form schema for the Transportation (vehicle) screen."""

from typing import Any

from pydantic import Field

from exportdesk.application.schemas.base import EntityFormModel, RequiredText
from exportdesk.domain.entities import FormMode
from exportdesk.domain.entities.enums import VehicleType


class TransportationForm(EntityFormModel):
    vehicle_type: VehicleType
    vehicle_number: RequiredText
    driver_name: RequiredText
    driver_contact: str = ""
    capacity: float | None = Field(None, gt=0)
    description: str = ""
    maintenance_details: str = ""
    is_active: bool = True

    field_messages = {
        "vehicleType": "Vehicle type is required",
        "vehicleNumber": "Vehicle number is required",
        "driverName": "Driver name is required",
        "capacity": "Capacity must be greater than 0",
    }

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True, mode="json")
        for key in ("driverContact", "description", "maintenanceDetails"):
            payload[key] = payload[key].strip()
        return payload
