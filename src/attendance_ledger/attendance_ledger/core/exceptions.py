class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidInput(ValidationError):
    """Raised when a submission misses the employee selection or the photo."""


class DuplicateEvent(ValidationError):
    """Raised when the same employee already recorded this kind of event today."""


class GeofenceViolation(ValidationError):
    """Raised when the submission point lies outside the office geofence."""

    def __init__(self, distance: float, radius: float):
        self.distance = float(distance)
        self.radius = float(radius)
        super().__init__(f"Geofence error: you are {round(self.distance)}m away (limit {round(self.radius)}m)")


class FaceRejected(DomainError):
    """Raised when the face verifier declines the captured photo."""


class LocationUnavailable(DomainError):
    """Raised when no position could be acquired (permission denied, timeout)."""


class AuthenticationError(DomainError):
    """Raised when the admin PIN is invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""
