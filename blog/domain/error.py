"""Domain layer errors.

Every error raised by the comment core is one of these kinds. Messages are
safe to show to end users.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Malformed or out-of-range input (content, pagination)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is absent or not in a usable state."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the caller is neither the author nor a moderator."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class InvalidStateError(DomainError):
    """Raised when an operation conflicts with the comment tree shape."""

    pass


class TransientError(DomainError):
    """Storage I/O failure; the caller may retry."""

    pass
