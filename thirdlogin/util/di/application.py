"""Application layer DI providers."""

from dishka import Scope, provide

from thirdlogin.application.usecase.handshake import (
    AuthorizeUseCase,
    BeginHandshakeUseCase,
    PollHandshakeUseCase,
    ThirdLoginUseCase,
)
from thirdlogin.config import AvatarSettings
from thirdlogin.domain.service import (
    AccountService,
    HandshakeService,
    IdentityService,
    ProvisioningService,
    SessionService,
)
from thirdlogin.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_begin_handshake_use_case(
        self, handshake_service: HandshakeService
    ) -> BeginHandshakeUseCase:
        """Provide begin handshake use case."""
        return BeginHandshakeUseCase(handshake_service=handshake_service)

    @provide(scope=Scope.REQUEST)
    def get_authorize_use_case(
        self, identity_service: IdentityService
    ) -> AuthorizeUseCase:
        """Provide authorize redirect use case."""
        return AuthorizeUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_poll_handshake_use_case(
        self, handshake_service: HandshakeService
    ) -> PollHandshakeUseCase:
        """Provide poll handshake use case."""
        return PollHandshakeUseCase(handshake_service=handshake_service)

    @provide(scope=Scope.REQUEST)
    def get_third_login_use_case(
        self,
        handshake_service: HandshakeService,
        identity_service: IdentityService,
        account_service: AccountService,
        provisioning_service: ProvisioningService,
        session_service: SessionService,
        avatar_settings: AvatarSettings,
    ) -> ThirdLoginUseCase:
        """Provide third-party login use case."""
        return ThirdLoginUseCase(
            handshake_service=handshake_service,
            identity_service=identity_service,
            account_service=account_service,
            provisioning_service=provisioning_service,
            session_service=session_service,
            avatar_settings=avatar_settings,
        )
