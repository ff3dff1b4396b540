"""Domain entities for list screens: filter state, pages and operation outcomes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Selection value that disables a discrete filter, as offered by the screens.
ALL = "ALL"


class FormMode(str, Enum):
    """The two states a form can be opened in."""

    CREATE = "create"
    EDIT = "edit"


@dataclass
class FilterState:
    """Free-text search plus the current discrete filter selections."""

    search_term: str = ""
    selections: dict[str, str] = field(default_factory=dict)

    def active_selections(self) -> dict[str, str]:
        """Selections that actually restrict the collection."""
        return {
            name: value
            for name, value in self.selections.items()
            if value not in ("", None, ALL)
        }

    def is_empty(self) -> bool:
        return not self.search_term.strip() and not self.active_selections()


@dataclass
class Page:
    """One page of a filtered collection."""

    items: list[dict[str, Any]]
    number: int
    size: int
    total: int
    page_count: int

    @property
    def has_next(self) -> bool:
        return self.number < self.page_count

    @property
    def has_previous(self) -> bool:
        return self.number > 1


@dataclass
class OperationResult:
    """Outcome of one list operation, as reported to the user."""

    ok: bool
    message: str = ""
    record: dict[str, Any] | None = None
    status_code: int | None = None
