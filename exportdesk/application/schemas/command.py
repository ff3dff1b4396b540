"""Form schema for the Command screen."""

from datetime import datetime
from typing import Any

from exportdesk.application.schemas.base import (
    EntityFormModel,
    RequiredText,
    iso_datetime,
    ref,
    ref_id,
)
from exportdesk.domain.entities import FormMode
from exportdesk.domain.entities.enums import CommandPriority, CommandStatus, CommandType


class CommandForm(EntityFormModel):
    """Create/edit form for an instruction issued to a user.

    ``issuedBy`` is not part of the form; the list controller stamps it from
    the session user.
    """

    title: RequiredText
    description: str = ""
    type: CommandType = CommandType.GENERAL_INSTRUCTION
    priority: CommandPriority = CommandPriority.MEDIUM
    status: CommandStatus = CommandStatus.PENDING
    due_date: datetime | None = None
    assigned_to: int | None = None
    notes: str = ""

    field_messages = {
        "title": "Title is required",
        "type": "Command type is required",
        "dueDate": "Due date is invalid",
    }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        due = record.get("dueDate")
        values["dueDate"] = str(due)[:16] if due else ""
        values["assignedTo"] = ref_id(record.get("assignedTo"))
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        payload = self.model_dump(
            by_alias=True, mode="json", exclude={"due_date", "assigned_to"}
        )
        payload["dueDate"] = iso_datetime(self.due_date)
        payload["assignedTo"] = ref(self.assigned_to)
        return payload
