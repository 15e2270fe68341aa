"""LinkedIdentity repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from thirdlogin.domain.error import DuplicateRecordError, RepositoryError
from thirdlogin.domain.model import LinkedIdentity
from thirdlogin.domain.repository import LinkedIdentityRepository
from thirdlogin.domain.value import IdentityProviderKind
from thirdlogin.persistence.mappers import (
    linked_identity_to_dict,
    row_to_linked_identity,
)
from thirdlogin.persistence.tables import linked_identities_table


class PostgresLinkedIdentityRepository(LinkedIdentityRepository):
    """PostgreSQL implementation of LinkedIdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_login(
        self, provider: IdentityProviderKind, login: str
    ) -> Optional[LinkedIdentity]:
        """Get the linked identity for a provider login.

        Args:
            provider: Identity provider
            login: Stable login on that provider

        Returns:
            LinkedIdentity if found, None otherwise
        """
        stmt = select(linked_identities_table).where(
            and_(
                linked_identities_table.c.provider == provider.value,
                linked_identities_table.c.login == login,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_linked_identity(dict(row))

    async def insert(self, identity: LinkedIdentity) -> LinkedIdentity:
        """Insert a linked identity.

        Args:
            identity: LinkedIdentity to insert

        Returns:
            Inserted LinkedIdentity

        Raises:
            DuplicateRecordError: If ``(provider, login)`` is already linked
            RepositoryError: If the insert fails
        """
        stmt = linked_identities_table.insert().values(
            **linked_identity_to_dict(identity)
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateRecordError(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e
        return identity
