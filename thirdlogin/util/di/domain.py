"""Domain layer DI providers."""

from dishka import Scope, provide

from thirdlogin.config import AuthSettings, AvatarSettings, HandshakeSettings, PushSettings
from thirdlogin.domain.repository import (
    AccountRepository,
    KeyValueStore,
    LinkedIdentityRepository,
    TransactionFactory,
)
from thirdlogin.domain.service import (
    AccountService,
    AvatarService,
    FileStorage,
    HandshakeService,
    IdentityProvider,
    IdentityService,
    JWTService,
    NotificationService,
    ProvisioningService,
    PushClient,
    SessionService,
)
from thirdlogin.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_handshake_service(
        self, store: KeyValueStore, settings: HandshakeSettings
    ) -> HandshakeService:
        """Provide handshake domain service."""
        return HandshakeService(store=store, settings=settings)

    @provide
    def get_identity_service(
        self, identity_provider: IdentityProvider
    ) -> IdentityService:
        """Provide identity resolution domain service."""
        return IdentityService(identity_provider=identity_provider)

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        linked_identity_repository: LinkedIdentityRepository,
    ) -> AccountService:
        """Provide account lookup domain service."""
        return AccountService(
            account_repository=account_repository,
            linked_identity_repository=linked_identity_repository,
        )

    @provide
    def get_avatar_service(
        self, file_storage: FileStorage, settings: AvatarSettings
    ) -> AvatarService:
        """Provide avatar enrichment domain service."""
        return AvatarService(file_storage=file_storage, settings=settings)

    @provide
    def get_provisioning_service(
        self, transactions: TransactionFactory, avatar_service: AvatarService
    ) -> ProvisioningService:
        """Provide account provisioning domain service."""
        return ProvisioningService(
            transactions=transactions, avatar_service=avatar_service
        )

    @provide
    def get_notification_service(
        self, push_client: PushClient, store: KeyValueStore, settings: PushSettings
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            push_client=push_client, store=store, settings=settings
        )

    @provide
    def get_session_service(
        self, jwt_service: JWTService, notification_service: NotificationService
    ) -> SessionService:
        """Provide session issuance domain service."""
        return SessionService(
            jwt_service=jwt_service, notification_service=notification_service
        )
