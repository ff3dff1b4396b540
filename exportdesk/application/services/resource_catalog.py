"""Resource catalog: parses the entity screen definitions from YAML.

Loaded once at startup; the rest of the application looks resources up by name.
"""

import logging
from importlib import resources as package_resources
from pathlib import Path

import yaml

from exportdesk.domain.entities import (
    ActionDefinition,
    FilterDefinition,
    FilterKind,
    ReferenceDefinition,
    ResourceDefinition,
    ValuePlacement,
)
from exportdesk.domain.exceptions import UnknownResourceError

logger = logging.getLogger(__name__)


def default_catalog_path() -> Path:
    """The ``resources.yaml`` shipped inside the package."""
    return Path(str(package_resources.files("exportdesk") / "resources.yaml"))


class ResourceCatalog:
    """Name → ``ResourceDefinition`` lookup built from a catalog YAML file."""

    def __init__(self, definitions: list[ResourceDefinition] | None = None):
        self._definitions: dict[str, ResourceDefinition] = {
            d.name: d for d in definitions or []
        }

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> "ResourceCatalog":
        """Parse a catalog file; the packaged catalog when ``path`` is empty."""
        catalog_path = Path(path) if path else default_catalog_path()
        data = cls._load_yaml(catalog_path)
        if data is None:
            return cls()

        definitions = [
            cls._build_definition(name, entry or {})
            for name, entry in (data.get("resources") or {}).items()
        ]
        logger.info(
            "Loaded %d resource definitions from %s", len(definitions), catalog_path.name
        )
        return cls(definitions)

    def get(self, name: str) -> ResourceDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownResourceError(name) from None

    def names(self) -> list[str]:
        return list(self._definitions)

    def __iter__(self):
        return iter(self._definitions.values())

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    # ── Parsing ──────────────────────────────────────────────────────

    @staticmethod
    def _build_definition(name: str, entry: dict) -> ResourceDefinition:
        """Map a raw YAML dict to a ResourceDefinition."""
        label = entry.get("label", name.title())
        filters = [
            FilterDefinition(
                name=f["name"],
                field=f.get("field", f["name"]),
                kind=FilterKind(f.get("kind", "equals")),
                param=f.get("param"),
                options=[str(o) for o in f.get("options", [])],
                true_value=f.get("true_value", "ACTIVE"),
                false_value=f.get("false_value", "INACTIVE"),
            )
            for f in entry.get("filters", [])
        ]
        actions = [
            ActionDefinition(
                name=a["name"],
                path=a.get("path", a["name"]),
                method=a.get("method", "PUT").upper(),
                placement=ValuePlacement(a.get("placement", "none")),
                value_field=a.get("field"),
                options=[str(o) for o in a.get("options", [])],
                success_message=a.get(
                    "success_message", f"{label} updated successfully"
                ),
            )
            for a in entry.get("actions", [])
        ]
        references = [
            ReferenceDefinition(
                name=r["name"],
                resource=r.get("resource", r["name"]),
                filter_field=r.get("filter_field"),
                filter_values=[str(v) for v in r.get("filter_values", [])],
            )
            for r in entry.get("references", [])
        ]
        return ResourceDefinition(
            name=name,
            label=label,
            plural=entry.get("plural", f"{label.lower()}s"),
            path=entry.get("path", name).strip("/"),
            search_fields=list(entry.get("search_fields", [])),
            search_param=entry.get("search_param"),
            search_param_fields=list(entry.get("search_param_fields", [])),
            search_required={
                str(k): "" if v is None else str(v)
                for k, v in (entry.get("search_required") or {}).items()
            },
            server_search=entry.get("server_search", True),
            filters=filters,
            actions=actions,
            references=references,
            display=entry.get("display", "{id}"),
            summary_path=entry.get("summary_path"),
            page_size=entry.get("page_size"),
            delete_prompt=entry.get(
                "delete_prompt", f"Are you sure you want to delete this {label.lower()}?"
            ),
            issuer_field=entry.get("issuer_field"),
        )

    @staticmethod
    def _load_yaml(path: Path) -> dict | None:
        """Load and parse a YAML file, returning None on error."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to parse YAML file: %s", path)
            return None
