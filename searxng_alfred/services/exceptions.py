"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class SearchServiceError(ServiceError):
    """Raised when the SearXNG instance cannot serve a full search."""
