"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when a resource exists but does not accept the operation."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidDirectionError(ValidationError):
    """Raised when a vote direction is neither up nor down."""

    def __init__(self, direction: str):
        self.direction = direction
        super().__init__(f"Invalid vote direction: {direction!r}")


class AlreadySignedError(DomainError):
    """Raised when a user signs a petition they already signed."""

    def __init__(self, petition_id: str, user_id: str):
        super().__init__(f"User {user_id} has already signed petition {petition_id}")


class InvalidTransitionError(DomainError):
    """Raised when a moderation decision does not apply to the current status."""

    def __init__(self, resource: str, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move {resource} from {current} to {requested}")


class TransientError(DomainError):
    """Raised when a write could not be confirmed; the caller may retry."""

    pass


class StoreUnavailableError(DomainError):
    """Raised by repositories when the store times out or drops the connection.

    The outcome of the interrupted write is unknown.
    """

    pass
