"""Shared base for entity form schemas.

Form values are keyed by the backend's camelCase field names, exactly as a
record arrives from the API, so a record can pre-populate a form without a
translation table. Blank inputs count as "not provided": a required field left
empty fails validation, an optional one falls back to its default.
"""

from datetime import date, datetime
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

from exportdesk.domain.entities import FormMode

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
EmailText = Annotated[
    str, StringConstraints(strip_whitespace=True, pattern=r"\S+@\S+\.\S+")
]
PositiveInt = Annotated[int, Field(gt=0)]
PositiveFloat = Annotated[float, Field(gt=0)]

# Time of day appended to date-only inputs for date-time fields.
START_OF_DAY = "T00:00:00"


def ref(record_id: int | None) -> dict[str, int] | None:
    """Wire shape of a foreign-key reference."""
    if record_id is None:
        return None
    return {"id": int(record_id)}


def ref_id(value: Any) -> int | str:
    """Read a foreign-key id back out of a nested reference object."""
    if isinstance(value, dict):
        return value.get("id") or ""
    return value or ""


def date_only(value: Any) -> str:
    """``2024-05-01T10:00:00`` → ``2024-05-01`` for date inputs."""
    if not value:
        return ""
    return str(value).split("T")[0]


def iso_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def start_of_day(value: date | None) -> str | None:
    """Date-only input → ISO date-time at a fixed time of day."""
    if value is None:
        return None
    return f"{value.isoformat()}{START_OF_DAY}"


def iso_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class EntityFormModel(BaseModel):
    """Base schema for one entity's create/edit form.

    Subclasses declare fields with their validation rules, friendly messages in
    ``field_messages`` and the wire mapping in ``to_payload``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        use_enum_values=True,
        validate_default=True,
    )

    field_messages: ClassVar[dict[str, str]] = {}

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_inputs(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if not (isinstance(value, str) and not value.strip())
                and value is not None
            }
        return data

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        """Form values for create mode."""
        values: dict[str, Any] = {}
        for name, info in cls.model_fields.items():
            alias = info.alias or name
            default = info.get_default(call_default_factory=True)
            if default is None or info.is_required():
                values[alias] = ""
            elif hasattr(default, "value"):
                values[alias] = default.value
            else:
                values[alias] = default
        return values

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> dict[str, Any]:
        """Form values for edit mode, pre-populated from a record."""
        values = cls.defaults()
        for key in values:
            if record.get(key) is not None:
                values[key] = record[key]
        return values

    @classmethod
    def message_for(cls, field_name: str, fallback: str) -> str:
        return cls.field_messages.get(field_name, fallback)

    def to_payload(self, mode: FormMode) -> dict[str, Any]:
        """Wire shape expected by the collection endpoint."""
        return self.model_dump(by_alias=True, mode="json")
