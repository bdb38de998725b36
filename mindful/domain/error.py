"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when a request carries no valid principal."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "modify"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"Not authorized to {action} this {resource}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ContentFlaggedError(DomainError):
    """Raised when moderation rejects user-generated content."""

    def __init__(self, message: str, reason: str | None = None):
        self.reason = reason
        super().__init__(message)


class PersistenceError(DomainError):
    """Base error for failures reported by the backing store."""

    pass


class PersistenceConflictError(PersistenceError):
    """Concurrent modification detected by the store's transaction layer.

    The operation was not applied; the caller may resubmit it.
    """

    pass


class PersistenceUnavailableError(PersistenceError):
    """The backing store could not be reached."""

    pass
