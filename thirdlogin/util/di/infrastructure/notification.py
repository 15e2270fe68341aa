"""Notification infrastructure providers."""

from dishka import Scope, provide

from thirdlogin.adapter.push import HttpPushClient
from thirdlogin.config import PushSettings
from thirdlogin.domain.service import PushClient
from thirdlogin.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider using the push webhook."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_push_client(self, settings: PushSettings) -> PushClient:
        """Provide push webhook client."""
        return HttpPushClient(settings)
