from .resource_gateway import ResourceGateway
from .notifier import Notifier

__all__ = [
    "ResourceGateway",
    "Notifier",
]
