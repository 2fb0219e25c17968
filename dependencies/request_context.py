# request_context: 요청 컨텍스트 의존성
# RequestLoggingMiddleware가 기록한 요청 시각에 대한 접근을 제공합니다.

from datetime import datetime, timezone
from fastapi import Request

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def get_request_time(request: Request) -> datetime:
    """요청 시각을 반환합니다. 미들웨어가 없으면 현재 UTC 시각."""
    return getattr(request.state, "request_time", None) or datetime.now(timezone.utc)


def get_request_timestamp(request: Request) -> str:
    """요청 시각을 ISO 8601 문자열로 반환합니다."""
    return get_request_time(request).strftime(TIMESTAMP_FORMAT)
