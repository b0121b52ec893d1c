"""
Error Translation
=================

Maps domain error kinds to HTTP status codes.
"""
import logging

from fastapi import HTTPException, status

from kudos.domain.exceptions import ErrorKind, KudosError

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    ErrorKind.UNAUTHORIZED_ROLE: status.HTTP_403_FORBIDDEN,
    ErrorKind.UNAUTHORIZED_ACCESS: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE: status.HTTP_409_CONFLICT,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: KudosError) -> HTTPException:
    """Build the HTTPException for a domain error."""
    status_code = ERROR_STATUS_CODES.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unexpected failure: %s", error.message)
    return HTTPException(status_code=status_code, detail=error.message)
