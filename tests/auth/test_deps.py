"""
Tests for authentication dependencies.
Tests api/auth/deps.py
"""
import pytest
from unittest.mock import MagicMock, patch
from fastapi import HTTPException


class TestGetCurrentUser:
    """Tests for get_current_user dependency."""

    @pytest.mark.asyncio
    async def test_get_existing_user(self, test_db_session, test_user, mock_firebase_token):
        with patch('api.auth.deps.verify_firebase_token', return_value=mock_firebase_token):
            from api.auth.deps import get_current_user

            credentials = MagicMock()
            credentials.credentials = "valid-token"

            user = await get_current_user(credentials, test_db_session)

            assert user.id == test_user.id
            assert user.last_login is not None

    @pytest.mark.asyncio
    async def test_create_new_user_on_first_login(self, test_db_session):
        new_user_token = {
            "uid": "brand-new-uid-456",
            "email": "newuser@example.com",
            "email_verified": True,
            "name": "New User",
            "picture": "https://example.com/new-avatar.jpg"
        }

        with patch('api.auth.deps.verify_firebase_token', return_value=new_user_token):
            from api.auth.deps import get_current_user

            credentials = MagicMock()
            credentials.credentials = "new-user-token"

            user = await get_current_user(credentials, test_db_session)

            assert user.id is not None
            assert user.firebase_uid == "brand-new-uid-456"
            assert user.full_name == "New User"
            assert user.is_verified is True
            assert user.is_active is True

    @pytest.mark.asyncio
    async def test_name_falls_back_to_email_prefix(self, test_db_session):
        token = {"uid": "no-name-uid", "email": "jordan@example.com"}

        with patch('api.auth.deps.verify_firebase_token', return_value=token):
            from api.auth.deps import get_current_user

            credentials = MagicMock()
            credentials.credentials = "token"

            user = await get_current_user(credentials, test_db_session)

            assert user.full_name == "jordan"

    @pytest.mark.asyncio
    async def test_missing_email_is_stored_as_null(self, test_db_session):
        with patch('api.auth.deps.verify_firebase_token', return_value={"uid": "phone-only-uid"}):
            from api.auth.deps import get_current_user

            credentials = MagicMock()
            credentials.credentials = "token"

            user = await get_current_user(credentials, test_db_session)

            assert user.email is None
            assert user.full_name == "User"

    @pytest.mark.asyncio
    async def test_raises_401_without_credentials(self, test_db_session):
        from api.auth.deps import get_current_user

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(None, test_db_session)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_raises_401_on_invalid_token(self, test_db_session):
        from firebase_admin.auth import InvalidIdTokenError

        with patch('api.auth.deps.verify_firebase_token') as mock_verify:
            mock_verify.side_effect = InvalidIdTokenError("Invalid", None)

            from api.auth.deps import get_current_user

            credentials = MagicMock()
            credentials.credentials = "invalid-token"

            with pytest.raises(HTTPException) as exc_info:
                await get_current_user(credentials, test_db_session)

            assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_raises_401_on_unexpected_error(self, test_db_session):
        with patch('api.auth.deps.verify_firebase_token', side_effect=RuntimeError("no creds")):
            from api.auth.deps import get_current_user

            credentials = MagicMock()
            credentials.credentials = "token"

            with pytest.raises(HTTPException) as exc_info:
                await get_current_user(credentials, test_db_session)

            assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_raises_401_missing_uid(self, test_db_session):
        with patch('api.auth.deps.verify_firebase_token', return_value={"email": "test@example.com"}):
            from api.auth.deps import get_current_user

            credentials = MagicMock()
            credentials.credentials = "token"

            with pytest.raises(HTTPException) as exc_info:
                await get_current_user(credentials, test_db_session)

            assert exc_info.value.status_code == 401


class TestGetCurrentActiveUser:
    """Tests for get_current_active_user dependency."""

    @pytest.mark.asyncio
    async def test_returns_active_user(self, test_user):
        from api.auth.deps import get_current_active_user

        user = await get_current_active_user(test_user)

        assert user == test_user

    @pytest.mark.asyncio
    async def test_raises_403_for_inactive_user(self, test_user_inactive):
        from api.auth.deps import get_current_active_user

        with pytest.raises(HTTPException) as exc_info:
            await get_current_active_user(test_user_inactive)

        assert exc_info.value.status_code == 403
        assert "deactivated" in exc_info.value.detail


class TestGetClassroomService:

    def test_bound_to_session(self, test_db_session):
        from api.auth.deps import get_classroom_service

        service = get_classroom_service(test_db_session)

        assert service.db is test_db_session
