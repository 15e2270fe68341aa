"""Third-party login handshake routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from thirdlogin.application.usecase.handshake import (
    AuthorizeRequest,
    AuthorizeUseCase,
    BeginHandshakeResponse,
    BeginHandshakeUseCase,
    PollHandshakeRequest,
    PollHandshakeUseCase,
    ThirdLoginRequest,
    ThirdLoginUseCase,
)
from thirdlogin.domain.error import DomainError
from thirdlogin.domain.model import LoginResult
from thirdlogin.domain.value import HandshakeStatus
from thirdlogin.interface.api.client_ip import client_ip
from thirdlogin.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/user/thirdlogin", tags=["thirdlogin"], route_class=DishkaRoute
)

# Wire codes of the status endpoint
STATUS_CODES = {
    HandshakeStatus.PENDING: 0,
    HandshakeStatus.SUCCEEDED: 1,
    HandshakeStatus.FAILED: 2,
}

# Shown in the provider window once the callback has run; the client app
# picks the outcome up by polling.
CALLBACK_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Login</title></head>
<body><p>{message}</p></body>
</html>
"""


class HandshakeStatusResponse(BaseModel):
    """Status endpoint response."""

    status: int
    result: LoginResult | None = None


@router.get("/authcode", response_model=BeginHandshakeResponse)
async def begin_handshake(
    use_case: FromDishka[BeginHandshakeUseCase],
) -> BeginHandshakeResponse:
    """Start a login handshake.

    Returns:
        Authcode to poll ``/status`` with and to pass to ``/authorize``

    Example:
        GET /user/thirdlogin/authcode

        Response:
        {"authcode": "5d0c6d0f0ad94b0c9b5f8f3e0fe6a4a1"}
    """
    try:
        return await use_case.execute()
    except DomainError as e:
        logger.error(f"Failed to begin handshake: {e}")
        raise to_http_exception(e)


@router.get("/authorize")
async def authorize(
    use_case: FromDishka[AuthorizeUseCase],
    authcode: str = "",
) -> RedirectResponse:
    """Redirect the browser to the identity provider.

    Args:
        use_case: Authorize use case from DI
        authcode: Authcode from ``/authcode``, carried as OAuth ``state``

    Returns:
        HTTP 302 redirect to the provider authorization page
    """
    try:
        response = await use_case.execute(AuthorizeRequest(authcode=authcode))
    except DomainError as e:
        logger.warning(f"Authorization redirect refused: {e}")
        raise to_http_exception(e)

    return RedirectResponse(
        url=response.authorization_url, status_code=status.HTTP_302_FOUND
    )


@router.get("/callback", response_class=HTMLResponse)
async def callback(
    request: Request,
    use_case: FromDishka[ThirdLoginUseCase],
    code: str = "",
    token: str = "",
    state: str = "",
) -> HTMLResponse:
    """Handle the identity provider callback.

    The login outcome is delivered to the client through ``/status``; this
    page is only what the provider window ends up showing.

    Args:
        request: Incoming request, for the client address
        use_case: Third-party login use case from DI
        code: Authorization code (Gitee)
        token: Commerce user token, accepted in place of ``code``
        state: Authcode from ``/authcode``

    Returns:
        Placeholder HTML page

    Example:
        GET /user/thirdlogin/callback?code=abc123&state=5d0c6d0f...
    """
    logger.info(f"Third-party login callback received: has_state={bool(state)}")

    try:
        response = await use_case.execute(
            ThirdLoginRequest(
                code=code or token,
                state=state,
                public_ip=client_ip(request),
            )
        )
    except DomainError as e:
        logger.warning(f"Third-party login callback rejected: {e}")
        raise to_http_exception(e)

    if response.status == HandshakeStatus.SUCCEEDED:
        message = "Login succeeded. You can return to the app."
    else:
        message = "Login failed. Please return to the app and try again."

    return HTMLResponse(CALLBACK_PAGE.format(message=message))


@router.get(
    "/status",
    response_model=HandshakeStatusResponse,
    response_model_exclude_none=True,
)
async def handshake_status(
    use_case: FromDishka[PollHandshakeUseCase],
    authcode: str = "",
) -> HandshakeStatusResponse:
    """Poll a login handshake.

    A succeeded or failed outcome is returned once and then removed.

    Args:
        use_case: Poll handshake use case from DI
        authcode: Authcode from ``/authcode``

    Returns:
        ``{"status": 0}`` pending, ``{"status": 1, "result": {...}}``
        succeeded or ``{"status": 2}`` failed

    Raises:
        HTTPException: 404 if the handshake never began or has expired
    """
    try:
        response = await use_case.execute(PollHandshakeRequest(authcode=authcode))
    except DomainError as e:
        logger.error(f"Failed to poll handshake: {e}")
        raise to_http_exception(e)

    if response.status == HandshakeStatus.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Handshake not found or expired",
        )

    return HandshakeStatusResponse(
        status=STATUS_CODES[response.status], result=response.result
    )
