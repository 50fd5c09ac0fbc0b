"""Domain-level exceptions.

Adapters raise DefinitionLookupError subclasses to describe why a provider
call failed. The definition service catches them at its boundary and turns
them into a LookupFailure, so they never reach a caller.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class DefinitionLookupError(DomainError):
    """A definition provider call did not produce usable data."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(message)


class NetworkFailureError(DefinitionLookupError):
    """No connectivity or a transport-level error (timeouts included)."""


class HttpStatusError(DefinitionLookupError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, provider: str, status_code: int):
        self.status_code = status_code
        super().__init__(provider, f"HTTP {status_code}")


class MalformedResponseError(DefinitionLookupError):
    """Response body is not JSON or lacks the keys the parser expects."""
