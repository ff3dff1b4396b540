"""Form schema for the Department screen."""

from typing import Any

from pydantic import Field

from exportdesk.application.schemas.base import EntityFormModel, RequiredText, ref, ref_id
from exportdesk.domain.entities import FormMode


class DepartmentForm(EntityFormModel):
    name: RequiredText
    description: str = ""
    branch_id: int
    budget: float = Field(0.0, ge=0)

    field_messages = {
        "name": "Department name is required",
        "branchId": "Branch selection is required",
        "budget": "Budget must be 0 or greater",
    }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        values["branchId"] = ref_id(record.get("branch"))
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "branch": ref(self.branch_id),
            "budget": self.budget,
        }
