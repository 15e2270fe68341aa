"""Unit tests for the begin, authorize and poll use cases."""

from dishka import AsyncContainer
import pytest

from thirdlogin.application.usecase.handshake import (
    AuthorizeRequest,
    AuthorizeUseCase,
    BeginHandshakeUseCase,
    PollHandshakeRequest,
    PollHandshakeUseCase,
)
from thirdlogin.domain.error import MissingAuthcodeError
from thirdlogin.domain.value import HandshakeStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestBeginAndPoll:
    """Tests for BeginHandshakeUseCase and PollHandshakeUseCase."""

    @pytest.mark.asyncio
    async def test_begun_handshake_polls_pending(self, unit_env: AsyncContainer):
        begin = await unit_env.get(BeginHandshakeUseCase)
        poll = await unit_env.get(PollHandshakeUseCase)

        begun = await begin.execute()
        response = await poll.execute(PollHandshakeRequest(authcode=begun.authcode))

        assert response.status == HandshakeStatus.PENDING
        assert response.result is None

    @pytest.mark.asyncio
    async def test_unknown_authcode_not_found(self, unit_env: AsyncContainer):
        poll = await unit_env.get(PollHandshakeUseCase)

        response = await poll.execute(PollHandshakeRequest(authcode="nope"))

        assert response.status == HandshakeStatus.NOT_FOUND


class TestAuthorize:
    """Tests for AuthorizeUseCase."""

    @pytest.mark.asyncio
    async def test_authorize_builds_provider_url(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(AuthorizeUseCase)

        response = await use_case.execute(AuthorizeRequest(authcode="authcode-1"))

        assert "state=authcode-1" in response.authorization_url

    @pytest.mark.asyncio
    async def test_authorize_requires_authcode(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(AuthorizeUseCase)

        with pytest.raises(MissingAuthcodeError):
            await use_case.execute(AuthorizeRequest(authcode=""))
