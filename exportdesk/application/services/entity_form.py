"""Entity form: create/edit form state bound to one entity's form schema."""

import logging
from typing import Any

from pydantic import ValidationError

from exportdesk.application.schemas import EntityFormModel
from exportdesk.application.services.list_controller import EntityListController
from exportdesk.domain.entities import FormMode, OperationResult
from exportdesk.domain.exceptions import FormValidationError

logger = logging.getLogger(__name__)


class EntityForm:
    """Controlled form values for one record, in create or edit mode.

    Validation is synchronous and local. A failed submission keeps the values
    and leaves the form open so the user can correct and resubmit; a
    successful one closes the form and resets it to defaults.
    """

    def __init__(
        self,
        form_model: type[EntityFormModel],
        *,
        record: dict[str, Any] | None = None,
    ):
        self._form_model = form_model
        self.mode = FormMode.CREATE
        self.record_id: int | None = None
        self.values: dict[str, Any] = form_model.defaults()
        self.errors: dict[str, str] = {}
        self.is_open = False
        if record is not None:
            self.open_edit(record)

    def open_create(self) -> None:
        self.reset()
        self.is_open = True

    def open_edit(self, record: dict[str, Any]) -> None:
        self.mode = FormMode.EDIT
        self.record_id = record.get("id")
        self.values = self._form_model.from_record(record)
        self.errors = {}
        self.is_open = True

    def set_field(self, name: str, value: Any) -> None:
        self.values[name] = value
        self.errors.pop(name, None)

    def update_fields(self, values: dict[str, Any]) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    def reset(self) -> None:
        self.mode = FormMode.CREATE
        self.record_id = None
        self.values = self._form_model.defaults()
        self.errors = {}

    def close(self) -> None:
        self.reset()
        self.is_open = False

    def validate(self) -> EntityFormModel:
        """Build the form schema from the current values.

        Raises:
            FormValidationError: with one message per failing field.
        """
        try:
            model = self._form_model.model_validate(
                self.values, context={"mode": self.mode}
            )
        except ValidationError as exc:
            self.errors = self._collect_errors(exc)
            raise FormValidationError(self.errors) from None
        self.errors = {}
        return model

    async def submit(self, controller: EntityListController) -> OperationResult:
        """Validate, then create or update through ``controller`` by mode."""
        try:
            model = self.validate()
        except FormValidationError as exc:
            logger.debug("Form for %s rejected: %s", controller.definition.name, exc)
            return OperationResult(ok=False, message=str(exc))

        if self.mode == FormMode.EDIT and self.record_id is not None:
            result = await controller.update(self.record_id, model)
        else:
            result = await controller.create(model)

        if result.ok:
            self.close()
        return result

    def _collect_errors(self, exc: ValidationError) -> dict[str, str]:
        errors: dict[str, str] = {}
        for error in exc.errors():
            loc = error.get("loc") or ()
            field = str(loc[0]) if loc else "__all__"
            message = error.get("msg", "Invalid value")
            if field != "__all__":
                message = self._form_model.message_for(field, _clean(message))
            else:
                message = _clean(message)
            errors.setdefault(field, message)
        return errors


def _clean(message: str) -> str:
    """Strip pydantic's ``Value error, `` prefix from custom validator messages."""
    return message.removeprefix("Value error, ")
