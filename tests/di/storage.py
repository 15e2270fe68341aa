"""Mock storage providers for testing."""

from dishka import Scope, provide

from thirdlogin.adapter.filestore import InMemoryFileStorage
from thirdlogin.domain.service import FileStorage
from thirdlogin.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider using in-memory file storage."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorage:
        """Provide in-memory file storage."""
        return InMemoryFileStorage()
