# routers/__init__.py
from fastapi import HTTPException, status

from services.errors import (
     ConflictError,
     NotFoundError,
     PermissionDeniedError,
     ServiceError,
     ValidationFailure,
)

_STATUS_BY_ERROR = (
     (NotFoundError, status.HTTP_404_NOT_FOUND),
     (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
     (ConflictError, status.HTTP_409_CONFLICT),
     (ValidationFailure, status.HTTP_400_BAD_REQUEST),
)


def http_error(exc: ServiceError) -> HTTPException:
     """Translate a service-layer error into the matching HTTPException."""
     for error_type, status_code in _STATUS_BY_ERROR:
          if isinstance(exc, error_type):
               return HTTPException(status_code=status_code, detail=str(exc))
     return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
