"""test_auth: TokenAuthResolver 및 JWT 유틸리티 테스트."""

import time

import jwt
import pytest
from unittest.mock import MagicMock

from conftest import ADMIN, MEMBER, InMemoryUserStore
from core.config import settings
from database.errors import StorageError
from dependencies.auth import TokenAuthResolver
from utils.exceptions import InternalError, UnauthenticatedError
from utils.jwt_utils import create_access_token, decode_access_token


def _request(authorization: str | None) -> MagicMock:
    """Authorization 헤더만 가진 Mock Request."""
    request = MagicMock()
    request.headers = {"Authorization": authorization} if authorization else {}
    return request


@pytest.fixture
def resolver(users):
    return TokenAuthResolver(users, settings.SECRET_KEY)


class TestTokenAuthResolver:
    """Bearer 토큰으로 사용자를 확인하는 테스트."""

    @pytest.mark.asyncio
    async def test_resolves_admin(self, resolver):
        token = create_access_token(ADMIN.id, settings.SECRET_KEY)

        user = await resolver.resolve(_request(f"Bearer {token}"))

        assert user == ADMIN
        assert user.administrator is True

    @pytest.mark.asyncio
    async def test_resolves_member(self, resolver):
        token = create_access_token(MEMBER.id, settings.SECRET_KEY)

        user = await resolver.resolve(_request(f"bearer {token}"))

        assert user.administrator is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, "Bearer", "Bearer   ", "Basic dXNlcjpwdw=="])
    async def test_missing_or_malformed_header(self, resolver, header):
        """헤더가 없거나 Bearer 형식이 아니면 401."""
        with pytest.raises(UnauthenticatedError):
            await resolver.resolve(_request(header))

    @pytest.mark.asyncio
    async def test_token_signed_with_other_key(self, resolver):
        token = create_access_token(ADMIN.id, "another-secret-key-that-is-long-enough")

        with pytest.raises(UnauthenticatedError):
            await resolver.resolve(_request(f"Bearer {token}"))

    @pytest.mark.asyncio
    async def test_unknown_user(self, resolver):
        """토큰은 유효하지만 사용자가 없으면 401."""
        token = create_access_token(999, settings.SECRET_KEY)

        with pytest.raises(UnauthenticatedError):
            await resolver.resolve(_request(f"Bearer {token}"))

    @pytest.mark.asyncio
    async def test_user_lookup_storage_error(self):
        """사용자 조회 중 저장소 오류는 InternalError."""
        users = InMemoryUserStore(ADMIN)
        users.fail_with = StorageError("gone away")
        resolver = TokenAuthResolver(users, settings.SECRET_KEY)
        token = create_access_token(ADMIN.id, settings.SECRET_KEY)

        with pytest.raises(InternalError):
            await resolver.resolve(_request(f"Bearer {token}"))


class TestDecodeAccessToken:
    """Access Token 디코딩 테스트."""

    def test_round_trip_user_id(self):
        token = create_access_token(42, settings.SECRET_KEY)
        assert decode_access_token(token, settings.SECRET_KEY) == 42

    def test_expired_token(self):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "1", "iat": now - 120, "exp": now - 60, "type": "access"},
            settings.SECRET_KEY,
            algorithm="HS256",
        )

        with pytest.raises(UnauthenticatedError) as exc_info:
            decode_access_token(token, settings.SECRET_KEY)

        assert exc_info.value.message == "토큰이 만료되었습니다."

    def test_wrong_token_type(self):
        token = jwt.encode(
            {"sub": "1", "type": "refresh"}, settings.SECRET_KEY, algorithm="HS256"
        )

        with pytest.raises(UnauthenticatedError):
            decode_access_token(token, settings.SECRET_KEY)

    def test_non_integer_subject(self):
        token = jwt.encode(
            {"sub": "admin", "type": "access"}, settings.SECRET_KEY, algorithm="HS256"
        )

        with pytest.raises(UnauthenticatedError):
            decode_access_token(token, settings.SECRET_KEY)
