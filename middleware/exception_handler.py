"""exception_handler: 예외 처리 핸들러 모듈.

서비스 에러와 처리되지 않은 예외를 일관된 형식의 응답으로 변환합니다.
"""

import uuid
import logging
from logging.handlers import RotatingFileHandler
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from core.config import settings
from dependencies.request_context import get_request_timestamp
from schemas.common import create_error_response
from utils.exceptions import ServiceError


logger = logging.getLogger("api")

# 에러 전용 파일 로거 설정
error_logger = logging.getLogger("api.error")
error_logger.setLevel(logging.ERROR)
error_logger.propagate = False

# RotatingFileHandler: 10MB 단위로 로테이션, 최대 5개 백업 파일
if not error_logger.handlers:
    error_file_handler = RotatingFileHandler(
        settings.ERROR_LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
        delay=True,
    )
    error_file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    error_logger.addHandler(error_file_handler)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """서비스 에러 처리 핸들러.

    에러 종류별로 고유한 상태 코드와 error 코드를 반환합니다.
    InternalError의 원인(저장소 예외)은 응답에 포함하지 않습니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 서비스 에러.

    Returns:
        에러 JSON 응답.
    """
    timestamp = get_request_timestamp(request)
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(
            exc.status_code, exc.error, exc.message, timestamp
        ),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 처리 핸들러.

    모든 예외를 잡아서 일관된 형식의 500 에러 응답을 반환합니다.
    프로덕션 환경(DEBUG=False)에서는 상세 에러 정보를 숨깁니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 예외.

    Returns:
        500 에러 JSON 응답.
    """
    tracking_id = str(uuid.uuid4())
    timestamp = get_request_timestamp(request)

    logger.error(f"[{tracking_id}] Unhandled exception: {exc}")
    error_logger.error(f"[{tracking_id}] Unhandled exception: {exc}", exc_info=exc)

    content = create_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_server_error",
        "서버 내부 오류가 발생했습니다.",
        timestamp,
    )
    content["trackingID"] = tracking_id

    # DEBUG 모드에서만 상세 정보 포함
    if settings.DEBUG:
        content["detail"] = str(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 데이터 유효성 검사 예외 처리 핸들러.

    오류 정보에 바이너리 데이터가 포함된 경우 디코딩 오류를 방지하기 위해
    해당 데이터를 문자열 플레이스홀더로 대체합니다.

    Returns:
        422 Unprocessable Entity 에러 JSON 응답.
    """
    timestamp = get_request_timestamp(request)

    sanitized_errors = []
    for error in exc.errors():
        error_copy = dict(error)
        input_val = error_copy.get("input")
        if isinstance(input_val, bytes):
            error_copy["input"] = f"<binary data: {len(input_val)} bytes>"
        # ctx에 담긴 ValueError 등은 문자열로 변환
        if isinstance(error_copy.get("ctx"), dict):
            error_copy["ctx"] = {k: str(v) for k, v in error_copy["ctx"].items()}
        sanitized_errors.append(error_copy)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": jsonable_encoder(sanitized_errors), "timestamp": timestamp},
    )
