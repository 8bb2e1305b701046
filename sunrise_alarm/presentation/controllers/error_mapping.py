"""Translation of domain errors into HTTP errors."""

from fastapi import HTTPException, status

from sunrise_alarm.domain.entities.errors import (
    AlarmArmError,
    DomainError,
    ForecastNotAvailableError,
    InvalidInputError,
    InvalidResponseError,
    LocationPermissionDeniedError,
    LocationUnavailableError,
    NetworkError,
    StorageError,
)

_STATUS_BY_ERROR = (
    (InvalidInputError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ForecastNotAvailableError, status.HTTP_409_CONFLICT),
    (NetworkError, status.HTTP_502_BAD_GATEWAY),
    (InvalidResponseError, status.HTTP_502_BAD_GATEWAY),
    (AlarmArmError, status.HTTP_502_BAD_GATEWAY),
    (LocationPermissionDeniedError, status.HTTP_502_BAD_GATEWAY),
    (LocationUnavailableError, status.HTTP_502_BAD_GATEWAY),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def to_http_exception(error: DomainError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
