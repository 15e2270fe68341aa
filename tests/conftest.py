"""Test configuration and fixtures."""

from thirdlogin.domain.value import ExternalProfile, IdentityProviderKind


def make_profile(
    login: str = "octocat",
    name: str = "The Octocat",
    avatar_url: str | None = "https://gitee.com/assets/octocat.png",
    provider: IdentityProviderKind = IdentityProviderKind.GITEE,
) -> ExternalProfile:
    """Helper function to build external profiles for tests.

    Args:
        login: Stable external login
        name: Provider display name
        avatar_url: Provider avatar URL
        provider: Identity provider

    Returns:
        ExternalProfile value object
    """
    return ExternalProfile(
        provider=provider,
        login=login,
        name=name,
        avatar_url=avatar_url,
        email=f"{login}@example.com",
    )
