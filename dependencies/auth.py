"""auth: 요청에서 사용자 신원을 확인하는 인증 모듈.

Authorization 헤더의 Bearer 토큰을 검증하여 사용자를 조회합니다.
"""

import logging
from typing import Protocol

from fastapi import Request

from database.errors import StorageError
from models.user_models import User, UserLookup
from utils.exceptions import InternalError, UnauthenticatedError
from utils.jwt_utils import decode_access_token

logger = logging.getLogger("api")


class AuthResolver(Protocol):
    """요청으로부터 사용자 신원을 확인하는 인터페이스."""

    async def resolve(self, request: Request) -> User: ...


def _extract_bearer_token(request: Request) -> str | None:
    """Authorization 헤더에서 Bearer 토큰을 추출합니다."""
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class TokenAuthResolver:
    """JWT Access Token 기반 AuthResolver 구현."""

    def __init__(self, users: UserLookup, secret_key: str):
        self._users = users
        self._secret_key = secret_key

    async def resolve(self, request: Request) -> User:
        """요청의 Bearer 토큰으로 사용자를 확인합니다.

        Args:
            request: FastAPI Request 객체.

        Returns:
            인증된 사용자 객체.

        Raises:
            UnauthenticatedError: 토큰이 없거나 유효하지 않거나, 사용자가 없는 경우.
            InternalError: 사용자 조회 중 저장소 오류가 발생한 경우.
        """
        token = _extract_bearer_token(request)
        if token is None:
            raise UnauthenticatedError()

        user_id = decode_access_token(token, self._secret_key)

        try:
            user = await self._users.get_user_by_id(user_id)
        except StorageError as e:
            logger.exception(f"사용자 조회 실패: user_id={user_id}")
            raise InternalError() from e

        if user is None:
            raise UnauthenticatedError()
        return user
