"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ContactRequiredError(ValidationError):
    """Raised when a guest inquiry carries no contact handle."""

    def __init__(self) -> None:
        super().__init__("Guest inquiries require an email or phone contact")


class ForbiddenError(DomainError):
    """Raised when an actor may not perform an operation on a resource."""

    def __init__(self, resource: str, resource_id: str, actor_id: str | None):
        self.resource = resource
        self.resource_id = resource_id
        self.actor_id = actor_id
        actor = actor_id or "anonymous"
        super().__init__(f"Actor {actor} is not allowed to modify {resource} {resource_id}")


class InvalidTransitionError(DomainError):
    """Raised when a status change is not allowed from the current state."""

    def __init__(self, resource: str, resource_id: str, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move {resource} {resource_id} from {current} to {target}"
        )


class ConcurrencyConflictError(DomainError):
    """Raised when a record changed between read and conditional write."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} {resource_id} was modified concurrently")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
