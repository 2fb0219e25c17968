"""middleware: 미들웨어 패키지.

요청 시각 기록 및 요청/응답 로깅 미들웨어를 제공합니다.
"""

from .logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
]
