"""Form schema for the User screen."""

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from exportdesk.application.schemas.base import EmailText, EntityFormModel, RequiredText
from exportdesk.domain.entities import FormMode
from exportdesk.domain.entities.enums import UserRole

MIN_PASSWORD_LENGTH = 6


class UserForm(EntityFormModel):
    """Create/edit form for a user account.

    The password is mandatory when creating and optional when editing; an
    empty password on edit leaves the stored one untouched.
    """

    first_name: RequiredText
    last_name: RequiredText
    email: EmailText
    password: str = Field("", validate_default=True)
    phone: RequiredText
    address: str = ""
    role: UserRole = UserRole.BUYER
    branch_id: int | None = None
    is_active: bool = True

    field_messages = {
        "firstName": "First name is required",
        "lastName": "Last name is required",
        "email": "Valid email is required",
        "phone": "Phone number is required",
        "role": "Role is required",
    }

    @field_validator("password")
    @classmethod
    def _password_rules(cls, value: str, info: ValidationInfo) -> str:
        mode = (info.context or {}).get("mode", FormMode.CREATE)
        if mode == FormMode.EDIT:
            return value
        if not value.strip():
            raise ValueError("Password is required")
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        return value

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        values = super().from_record(record)
        values["password"] = ""
        branch = record.get("branch")
        if isinstance(branch, dict) and branch.get("id") is not None:
            values["branchId"] = branch["id"]
        return values

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True, mode="json")
        if self.branch_id is None:
            payload.pop("branchId")
        if mode == FormMode.EDIT and not self.password:
            payload.pop("password")
        return payload
