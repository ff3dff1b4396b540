"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ApiError(Exception):
    """Raised when the operations backend answers with a non-2xx status.

    ``message`` carries the server's error text verbatim (may be empty).
    """

    def __init__(self, status_code: int, message: str, method: str = "", path: str = ""):
        self.status_code = status_code
        self.message = message
        self.method = method
        self.path = path
        super().__init__(f"{method} {path} → {status_code}: {message}".strip())


class ApiTransportError(Exception):
    """Raised when a request to the backend never completed."""

    def __init__(self, method: str, path: str, reason: str):
        self.method = method
        self.path = path
        self.reason = reason
        super().__init__(f"{method} {path} failed: {reason}")


class FormValidationError(Exception):
    """Raised when form values fail client-side validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid form fields: {fields}")


class UnknownResourceError(Exception):
    """Raised when a resource name is not defined in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown resource '{name}'")


class UnknownActionError(Exception):
    """Raised when a quick action is not defined for a resource."""

    def __init__(self, resource: str, action: str):
        self.resource = resource
        self.action = action
        super().__init__(f"Resource '{resource}' has no action '{action}'")


class InvalidActionValueError(Exception):
    """Raised when a quick action value is outside the action's enumeration."""

    def __init__(self, resource: str, action: str, value: object):
        self.resource = resource
        self.action = action
        self.value = value
        super().__init__(f"'{value}' is not a valid value for {resource}.{action}")


class MissingCredentialsError(Exception):
    """Raised when no bearer token can be found at session start."""
