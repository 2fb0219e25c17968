"""exceptions: 서비스 계층 에러 모듈.

서비스가 발생시키는 에러를 HTTP 상태 코드와 에러 코드로 분류합니다.
클라이언트는 메시지 문자열이 아닌 상태 코드와 error 코드로 에러를 구분합니다.

HTTPException(detail={"error", "timestamp"}) 대신 타입 예외를 사용하므로
서비스 호출자가 CategoryExistsError와 InternalError 등을 except 절로 구분할 수 있습니다.
응답 본문은 middleware.exception_handler.service_error_handler가
{"code", "message", "data": null, "errors": [{"error", "timestamp"}], "timestamp"}
형식으로 만들며, 에러 코드는 detail.error가 아닌 errors[0].error에 위치합니다.
"""

from fastapi import status


class ServiceError(Exception):
    """서비스 에러의 기반 클래스.

    Attributes:
        status_code: 응답 HTTP 상태 코드.
        error: 응답 본문의 에러 코드.
        message: 사용자에게 표시할 메시지.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "internal_server_error"
    message: str = "서버 내부 오류가 발생했습니다."

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class UnauthenticatedError(ServiceError):
    """인증 정보가 없거나 유효하지 않습니다."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "unauthorized"
    message = "로그인이 필요합니다."


class ForbiddenError(ServiceError):
    """인증되었으나 관리자 권한이 없습니다."""

    status_code = status.HTTP_403_FORBIDDEN
    error = "forbidden"
    message = "관리자 권한이 필요합니다."


class CategoryExistsError(ServiceError):
    """같은 이름의 카테고리가 이미 존재합니다."""

    status_code = status.HTTP_409_CONFLICT
    error = "category_already_exists"
    message = "이미 존재하는 카테고리입니다."


class InternalError(ServiceError):
    """저장소 또는 인프라 오류. 백엔드 상세 정보는 노출하지 않습니다."""
