"""HTTP translation of domain errors."""

from fastapi import HTTPException, status

from thirdlogin.domain.error import (
    DomainError,
    EmptyCodeError,
    IdentityProviderError,
    MissingAuthcodeError,
    StoreUnavailableError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error raised to a route into an HTTP error.

    Args:
        error: Domain error that escaped a use case

    Returns:
        HTTPException carrying the matching status code
    """
    if isinstance(error, (EmptyCodeError, MissingAuthcodeError)):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, IdentityProviderError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, StoreUnavailableError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login service temporarily unavailable",
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
