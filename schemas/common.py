"""common: 공통 응답 유틸리티 모듈.

성공/실패 API 응답 본문을 같은 형식으로 생성합니다.
"""

from datetime import datetime, timezone
from typing import Any


def _now_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def create_response(
    code: str,
    message: str,
    data: Any = None,
    timestamp: str | None = None,
) -> dict[str, Any]:
    """표준 API 응답 딕셔너리를 생성합니다.

    Args:
        code: 응답 코드 (예: "CATEGORIES_RETRIEVED").
        message: 사용자에게 표시할 메시지.
        data: 응답 데이터 (목록, 문자열 등; 기본값: 빈 딕셔너리).
        timestamp: 타임스탬프 (기본값: 현재 시간).

    Returns:
        표준 형식의 응답 딕셔너리.
    """
    return {
        "code": code,
        "message": message,
        "data": data if data is not None else {},
        "errors": [],
        "timestamp": timestamp or _now_timestamp(),
    }


def create_error_response(
    status_code: int,
    error: str,
    message: str,
    timestamp: str | None = None,
) -> dict[str, Any]:
    """표준 에러 응답 딕셔너리를 생성합니다.

    Args:
        status_code: HTTP 상태 코드.
        error: 에러 코드 (예: "category_already_exists").
        message: 사용자에게 표시할 메시지.
        timestamp: 타임스탬프 (기본값: 현재 시간).
    """
    timestamp = timestamp or _now_timestamp()
    return {
        "code": status_code,
        "message": message,
        "data": None,
        "errors": [{"error": error, "timestamp": timestamp}],
        "timestamp": timestamp,
    }
