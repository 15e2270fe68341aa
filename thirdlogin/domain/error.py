"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class StoreUnavailableError(DomainError):
    """Raised when the handoff cache cannot be read or written."""

    pass


class IdentityProviderError(DomainError):
    """Base error for external identity provider failures."""

    pass


class ProviderExchangeError(IdentityProviderError):
    """Raised when the authorization code cannot be exchanged for a token."""

    pass


class ProviderProfileError(IdentityProviderError):
    """Raised when the provider profile cannot be fetched or parsed."""

    pass


class ProvisioningError(DomainError):
    """Base error for failures while provisioning a new account.

    Whenever one of these is raised, neither the linked identity nor the
    account exists afterwards.
    """

    pass


class LinkedRecordInsertError(ProvisioningError):
    """Raised when the linked identity row cannot be inserted."""

    pass


class LinkedIdentityConflictError(LinkedRecordInsertError):
    """Raised when another login already linked the same external identity."""

    def __init__(self, provider: str, login: str):
        self.provider = provider
        self.login = login
        super().__init__(f"External identity already linked: {provider}:{login}")


class AccountCreationError(ProvisioningError):
    """Raised when the account or its initialization rows cannot be created."""

    pass


class CommitError(ProvisioningError):
    """Raised when the provisioning transaction fails to commit."""

    pass


class AccountDestroyedError(DomainError):
    """Raised when a session is requested for a destroyed account."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account has been destroyed: {account_id}")


class EmptyCodeError(DomainError):
    """Raised when the provider callback carries no authorization code."""

    pass


class MissingAuthcodeError(DomainError):
    """Raised when the provider callback carries no authcode state."""

    pass


class RepositoryError(DomainError):
    """Raised by repositories when the underlying store rejects a write."""

    pass


class DuplicateRecordError(RepositoryError):
    """Raised by repositories when a uniqueness constraint is violated."""

    pass
