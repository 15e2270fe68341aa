"""Begin handshake use case."""

from pydantic import BaseModel

from thirdlogin.domain.service import HandshakeService


class BeginHandshakeResponse(BaseModel):
    """Authcode the client polls with and passes through the provider."""

    authcode: str


class BeginHandshakeUseCase:
    """Use case for starting a login handshake."""

    def __init__(self, handshake_service: HandshakeService) -> None:
        """Initialize begin handshake use case.

        Args:
            handshake_service: Handshake domain service
        """
        self.handshake_service = handshake_service

    async def execute(self) -> BeginHandshakeResponse:
        """Start a handshake in the pending state.

        Returns:
            Response carrying the new authcode

        Raises:
            StoreUnavailableError: If the handshake cannot be stored
        """
        authcode = await self.handshake_service.begin()
        return BeginHandshakeResponse(authcode=authcode)
