"""Base class for domain services."""


class Service:
    """Base class for login handshake domain services.

    A service holds only the collaborators injected at construction (stores,
    repositories, provider clients) and no per-login state.
    """

    pass
