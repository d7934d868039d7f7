from fastapi import HTTPException, status


class NotFoundError(ValueError):
    """Raised when a record does not exist within the current team."""


class ConflictError(ValueError):
    """Raised when a write would collide with existing state."""


def to_http_exception(exc: ValueError) -> HTTPException:
    """Map service-layer errors onto HTTP status codes."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
