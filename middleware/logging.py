# logging: 요청 컨텍스트/로깅 미들웨어
# 요청 시각을 request.state에 기록하고, 요청/응답을 로그로 남긴다.

import logging
import time
from datetime import datetime, timezone
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    요청 컨텍스트 및 로깅 미들웨어

    request.state.request_time에 요청 UTC 시각을 저장하여 응답 본문의 timestamp를
    요청 단위로 통일하고, 메소드/경로/상태 코드/처리 시간을 기록한다.
    5xx 응답은 WARNING으로 남긴다.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.request_time = datetime.now(timezone.utc)
        start = time.perf_counter()
        logger.info(f"-> {request.method} {request.url.path}")

        response = await call_next(request)

        elapsed = time.perf_counter() - start
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"<- {request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {elapsed:.3f}s",
        )
        return response
