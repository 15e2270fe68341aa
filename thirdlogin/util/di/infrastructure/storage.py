"""File storage infrastructure providers."""

from dishka import Scope, provide

from thirdlogin.adapter.filestore import HttpFileStorage
from thirdlogin.config import Settings
from thirdlogin.domain.service import FileStorage
from thirdlogin.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using the file service."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_storage(self, settings: Settings) -> FileStorage:
        """Provide file service client."""
        return HttpFileStorage(
            base_url=settings.file_service.base_url,
            timeout=settings.avatar.timeout_seconds,
        )
