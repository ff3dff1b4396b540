"""Domain entities describing one managed resource (an entity screen).

A ``ResourceDefinition`` is the configuration that turns the generic list
controller into, say, the branch screen: where the collection lives, which
fields the free-text search looks at, which discrete filters exist and which
quick status-change actions the backend exposes.
"""

from dataclasses import dataclass, field
from enum import Enum


class FilterKind(str, Enum):
    """How a discrete filter selection is compared against a record."""

    EQUALS = "equals"
    CONTAINS = "contains"
    FLAG = "flag"
    IN = "in"


class ValuePlacement(str, Enum):
    """Where a quick action sends its value."""

    BODY = "body"
    QUERY = "query"
    NONE = "none"


@dataclass
class FilterDefinition:
    """A discrete filter offered by a screen (status, branch, role, ...)."""

    name: str
    field: str
    kind: FilterKind = FilterKind.EQUALS
    param: str | None = None          # query parameter for server-side search
    options: list[str] = field(default_factory=list)
    true_value: str = "ACTIVE"        # flag filters only
    false_value: str = "INACTIVE"


@dataclass
class ActionDefinition:
    """A single-field state transition exposed as a sub-resource endpoint."""

    name: str
    path: str
    method: str = "PUT"
    placement: ValuePlacement = ValuePlacement.NONE
    value_field: str | None = None    # body key / query parameter name
    options: list[str] = field(default_factory=list)
    success_message: str = ""


@dataclass
class ReferenceDefinition:
    """A reference list loaded alongside a screen for dropdowns and joins."""

    name: str
    resource: str
    filter_field: str | None = None
    filter_values: list[str] = field(default_factory=list)


@dataclass
class ResourceDefinition:
    """Configuration of one entity screen."""

    name: str
    label: str
    plural: str
    path: str
    search_fields: list[str] = field(default_factory=list)
    search_param: str | None = None
    search_param_fields: list[str] = field(default_factory=list)
    search_required: dict[str, str] = field(default_factory=dict)
    server_search: bool = True
    filters: list[FilterDefinition] = field(default_factory=list)
    actions: list[ActionDefinition] = field(default_factory=list)
    references: list[ReferenceDefinition] = field(default_factory=list)
    display: str = "{id}"
    summary_path: str | None = None
    page_size: int | None = None
    delete_prompt: str = ""
    issuer_field: str | None = None

    @property
    def server_covers_search(self) -> bool:
        """True when the server's text parameter matches every search field."""
        return bool(self.search_param) and set(self.search_fields) <= set(
            self.search_param_fields
        )

    def filter(self, name: str) -> FilterDefinition:
        for definition in self.filters:
            if definition.name == name:
                return definition
        raise KeyError(f"{self.name} has no filter '{name}'")

    def action(self, name: str) -> ActionDefinition | None:
        for definition in self.actions:
            if definition.name == name:
                return definition
        return None
