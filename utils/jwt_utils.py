"""jwt_utils: JWT 생성 및 검증 유틸리티 모듈.

Access Token (HS256 JWT) 발급 및 검증.
"""

from datetime import datetime, timedelta, timezone

import jwt

from utils.exceptions import UnauthenticatedError

_JWT_ALGORITHM = "HS256"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    user_id: int, secret_key: str, expire_minutes: int = 30
) -> str:
    """Access Token을 생성합니다.

    JWT는 암호화되지 않으므로, 식별에 필요한 최소 정보(sub)만 담습니다.
    """
    now = _now_utc()
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=expire_minutes)).timestamp()),
        "type": "access",
    }
    return jwt.encode(payload, secret_key, algorithm=_JWT_ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> int:
    """Access Token을 검증하고 사용자 ID를 반환합니다.

    Raises:
        UnauthenticatedError: 토큰이 만료되었거나 유효하지 않은 경우.
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[_JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise UnauthenticatedError("토큰이 만료되었습니다.")
    except jwt.PyJWTError:
        raise UnauthenticatedError("유효하지 않은 토큰입니다.")

    if payload.get("type") != "access":
        raise UnauthenticatedError("유효하지 않은 토큰입니다.")

    # sub 클레임 존재 및 정수 변환 가능 여부 검증
    try:
        return int(payload["sub"])
    except (KeyError, ValueError, TypeError):
        raise UnauthenticatedError("유효하지 않은 토큰입니다.")
