"""Form schema for the Employee screen."""

from datetime import date
from typing import Any

from exportdesk.application.schemas.base import (
    EntityFormModel,
    RequiredText,
    date_only,
    iso_date,
    ref,
    ref_id,
)
from exportdesk.domain.entities import FormMode
from exportdesk.domain.entities.enums import Gender


class EmployeeForm(EntityFormModel):
    first_name: RequiredText
    last_name: RequiredText
    date_of_birth: date
    gender: Gender = Gender.MALE
    contact_information: RequiredText
    department_id: int | None = None

    field_messages = {
        "firstName": "First name is required",
        "lastName": "Last name is required",
        "dateOfBirth": "Date of birth is required",
        "contactInformation": "Contact information is required",
    }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        values["dateOfBirth"] = date_only(record.get("dateOfBirth"))
        values["departmentId"] = ref_id(record.get("department"))
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "dateOfBirth": iso_date(self.date_of_birth),
            "gender": self.gender,
            "contactInformation": self.contact_information,
            "department": ref(self.department_id),
        }
