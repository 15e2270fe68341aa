"""Authorize redirect use case."""

import logfire
from pydantic import BaseModel

from thirdlogin.domain.error import MissingAuthcodeError
from thirdlogin.domain.service import IdentityService


class AuthorizeRequest(BaseModel):
    """Request for the provider authorization redirect."""

    authcode: str


class AuthorizeResponse(BaseModel):
    """Provider URL to redirect the browser to."""

    authorization_url: str


class AuthorizeUseCase:
    """Use case for sending the browser to the identity provider."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize authorize use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: AuthorizeRequest) -> AuthorizeResponse:
        """Build the authorization URL carrying the authcode as ``state``.

        Args:
            request: Authorize request

        Returns:
            Authorization URL

        Raises:
            MissingAuthcodeError: If no authcode was given
            ProviderExchangeError: If the provider has no redirect step
        """
        if not request.authcode:
            raise MissingAuthcodeError("authcode is required")

        url = self.identity_service.authorization_url(request.authcode)
        logfire.info(
            "Authorization redirect built",
            provider=self.identity_service.identity_provider.kind.value,
        )
        return AuthorizeResponse(authorization_url=url)
