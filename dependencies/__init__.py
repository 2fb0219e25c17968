"""dependencies: FastAPI 의존성 주입 패키지.

인증 및 요청 컨텍스트 관련 의존성을 제공합니다.
서비스 주입은 dependencies.services 모듈을 직접 import 합니다.
"""

from .auth import AuthResolver, TokenAuthResolver
from .request_context import get_request_timestamp, get_request_time

__all__ = [
    "AuthResolver",
    "TokenAuthResolver",
    "get_request_timestamp",
    "get_request_time",
]
