"""Form schema for the Branch screen."""

from typing import Any

from exportdesk.application.schemas.base import EmailText, EntityFormModel, RequiredText
from exportdesk.domain.entities import FormMode


class BranchForm(EntityFormModel):
    """Create/edit form for a branch."""

    name: RequiredText
    address: RequiredText
    phone: RequiredText
    email: EmailText
    manager: RequiredText
    description: str = ""
    is_active: bool = True

    field_messages = {
        "name": "Branch name is required",
        "address": "Address is required",
        "phone": "Phone number is required",
        "email": "Valid email is required",
        "manager": "Manager name is required",
    }

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        # location/contactDetails are the backend's older names for address/phone
        return {
            "name": self.name,
            "location": self.address,
            "contactDetails": self.phone,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
            "manager": self.manager,
            "description": self.description,
            "isActive": self.is_active,
        }
