"""Form schema for the Agreement screen."""

from datetime import date
from typing import Any

from pydantic import model_validator

from exportdesk.application.schemas.base import (
    EmailText,
    EntityFormModel,
    PositiveFloat,
    RequiredText,
    date_only,
    iso_date,
    ref,
    ref_id,
)
from exportdesk.domain.entities import FormMode
from exportdesk.domain.entities.enums import (
    AgreementPriority,
    AgreementStatus,
    AgreementType,
)


class AgreementForm(EntityFormModel):
    title: RequiredText
    agreement_type: AgreementType
    client_name: RequiredText
    client_contact: str = ""
    client_email: EmailText | None = None
    description: str = ""
    contract_value: PositiveFloat
    start_date: date
    end_date: date
    status: AgreementStatus = AgreementStatus.DRAFT
    terms: str = ""
    deliverables: str = ""
    payment_terms: str = ""
    is_active: bool = True
    document_path: str = ""
    priority: AgreementPriority = AgreementPriority.MEDIUM
    branch_id: int | None = None
    assigned_manager_id: int | None = None

    field_messages = {
        "title": "Title is required",
        "agreementType": "Agreement type is required",
        "clientName": "Client name is required",
        "clientEmail": "Client email is invalid",
        "contractValue": "Contract value must be greater than 0",
        "startDate": "Start date is required",
        "endDate": "End date is required",
    }

    @model_validator(mode="after")
    def _check_period(self) -> "AgreementForm":
        if self.end_date < self.start_date:
            raise ValueError("End date must not be before start date")
        return self

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        values["startDate"] = date_only(record.get("startDate"))
        values["endDate"] = date_only(record.get("endDate"))
        values["branchId"] = ref_id(record.get("branch"))
        values["assignedManagerId"] = ref_id(record.get("assignedManager"))
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        payload = self.model_dump(
            by_alias=True,
            mode="json",
            exclude={"branch_id", "assigned_manager_id", "start_date", "end_date"},
        )
        payload["startDate"] = iso_date(self.start_date)
        payload["endDate"] = iso_date(self.end_date)
        payload["branch"] = ref(self.branch_id)
        payload["assignedManager"] = ref(self.assigned_manager_id)
        return payload
