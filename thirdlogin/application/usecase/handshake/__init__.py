"""Login handshake use cases."""

from .authorize import AuthorizeRequest, AuthorizeResponse, AuthorizeUseCase
from .begin_handshake import BeginHandshakeResponse, BeginHandshakeUseCase
from .login import ThirdLoginRequest, ThirdLoginResponse, ThirdLoginUseCase
from .poll_handshake import (
    PollHandshakeRequest,
    PollHandshakeResponse,
    PollHandshakeUseCase,
)

__all__ = [
    "AuthorizeRequest",
    "AuthorizeResponse",
    "AuthorizeUseCase",
    "BeginHandshakeResponse",
    "BeginHandshakeUseCase",
    "PollHandshakeRequest",
    "PollHandshakeResponse",
    "PollHandshakeUseCase",
    "ThirdLoginRequest",
    "ThirdLoginResponse",
    "ThirdLoginUseCase",
]
