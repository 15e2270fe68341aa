"""Poll handshake use case."""

from pydantic import BaseModel

from thirdlogin.domain.model import LoginResult
from thirdlogin.domain.service import HandshakeService
from thirdlogin.domain.value import HandshakeStatus


class PollHandshakeRequest(BaseModel):
    """Poll request."""

    authcode: str


class PollHandshakeResponse(BaseModel):
    """Current handshake state, with the login result once succeeded."""

    status: HandshakeStatus
    result: LoginResult | None = None


class PollHandshakeUseCase:
    """Use case for polling a login handshake."""

    def __init__(self, handshake_service: HandshakeService) -> None:
        """Initialize poll handshake use case.

        Args:
            handshake_service: Handshake domain service
        """
        self.handshake_service = handshake_service

    async def execute(self, request: PollHandshakeRequest) -> PollHandshakeResponse:
        """Read, and consume if terminal, the handshake for an authcode.

        Args:
            request: Poll request

        Returns:
            Handshake status and result

        Raises:
            StoreUnavailableError: If the handshake cannot be read
        """
        poll = await self.handshake_service.poll(request.authcode)
        return PollHandshakeResponse(status=poll.status, result=poll.result)
