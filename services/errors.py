# services/errors.py
"""
Service-layer exceptions. Routers translate these to HTTP status codes.
"""


class ServiceError(ValueError):
     """Base class for business-rule failures."""


class NotFoundError(ServiceError):
     pass


class PermissionDeniedError(ServiceError):
     pass


class ConflictError(ServiceError):
     """Duplicate record or an illegal status transition."""


class ValidationFailure(ServiceError):
     """Input rejected before anything is written."""


class PasswordMismatchError(ValidationFailure):
     def __init__(self, message: str = "Passwords do not match"):
          super().__init__(message)
