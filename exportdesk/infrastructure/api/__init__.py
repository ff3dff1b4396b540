from .http_gateway import HttpResourceGateway

__all__ = ["HttpResourceGateway"]
