"""Errors returned by the resource API.

Messages are fixed: details of the underlying store failure are logged, never
returned to callers.
"""


class ResourceServiceError(Exception):
    """Base class for resource API errors."""

    default_message = "Failed to fetch resources"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NotFoundError(ResourceServiceError):
    """The query matched nothing."""

    default_message = "Resource not found"


class InternalError(ResourceServiceError):
    """The store failed to answer the query."""
