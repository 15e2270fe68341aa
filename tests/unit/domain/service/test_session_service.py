"""Unit tests for SessionService."""

from unittest.mock import patch
from uuid import uuid4

import pytest

from thirdlogin.domain.error import AccountDestroyedError
from thirdlogin.domain.model import Account
from thirdlogin.domain.service import (
    JWTService,
    PushClient,
    SessionService,
    wait_for_notifications,
)
from thirdlogin.domain.value import AccountId, DeviceFlag
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def make_account(**overrides) -> Account:
    fields = {"id": AccountId(uuid4()), "name": "Octocat"}
    fields.update(overrides)
    return Account(**fields)


class TestIssue:
    """Tests for issue method."""

    @pytest.mark.asyncio
    async def test_issue_returns_verifiable_token(self, unit_env):
        """The issued token verifies back to the account."""
        session_service = await unit_env.get(SessionService)
        jwt_service = await unit_env.get(JWTService)
        account = make_account(has_avatar=True)

        result = session_service.issue(
            account, DeviceFlag.WEB, "203.0.113.7", "avatar/3/x.png"
        )

        assert result.uid == str(account.id)
        assert result.name == "Octocat"
        assert result.device_flag == DeviceFlag.WEB
        assert result.has_avatar is True
        assert result.avatar_path == "avatar/3/x.png"

        payload = jwt_service.verify_token(result.token)
        assert payload.uid == str(account.id)
        assert payload.name == "Octocat"
        assert payload.device_flag == int(DeviceFlag.WEB)

    @pytest.mark.asyncio
    async def test_issue_refuses_destroyed_account(self, unit_env):
        """Destroyed accounts never get a session or a notification."""
        session_service = await unit_env.get(SessionService)
        push_client = await unit_env.get(PushClient)
        account = make_account(is_destroyed=True)

        with pytest.raises(AccountDestroyedError) as exc_info:
            session_service.issue(account, DeviceFlag.APP, "203.0.113.7")

        await wait_for_notifications()
        assert exc_info.value.account_id == str(account.id)
        assert push_client.sent == []

    @pytest.mark.asyncio
    async def test_issue_sends_welcome_with_ip(self, unit_env):
        """A login notification mentioning the IP is pushed in the background."""
        session_service = await unit_env.get(SessionService)
        push_client = await unit_env.get(PushClient)
        account = make_account()

        session_service.issue(account, DeviceFlag.APP, "203.0.113.7")
        await wait_for_notifications()

        assert len(push_client.sent) == 1
        uid, content = push_client.sent[0]
        assert uid == str(account.id)
        assert "203.0.113.7" in content

    @pytest.mark.asyncio
    async def test_issue_succeeds_when_push_rejected(self, unit_env):
        """Notification trouble never affects the session."""
        session_service = await unit_env.get(SessionService)
        push_client = await unit_env.get(PushClient)
        push_client.accept = False

        result = session_service.issue(make_account(), DeviceFlag.APP, "")
        await wait_for_notifications()

        assert result.token
        assert len(push_client.sent) == 1

    @pytest.mark.asyncio
    async def test_issue_failure_building_result_sends_no_welcome(self, unit_env):
        """The welcome push is only scheduled once the result exists."""
        session_service = await unit_env.get(SessionService)
        push_client = await unit_env.get(PushClient)

        with patch(
            "thirdlogin.domain.service.session_service.LoginResult",
            side_effect=ValueError("bad result"),
        ):
            with pytest.raises(ValueError):
                session_service.issue(make_account(), DeviceFlag.APP, "203.0.113.7")

        await wait_for_notifications()
        assert push_client.sent == []
