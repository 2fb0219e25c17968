"""main: FastAPI 애플리케이션의 메인 진입점.

애플리케이션 설정, 미들웨어 구성, 라우터 등록, 예외 핸들러를 설정합니다.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from mangum import Mangum

from routers.category_router import category_router
from middleware import RequestLoggingMiddleware
from middleware.exception_handler import (
    global_exception_handler,
    request_validation_exception_handler,
    service_error_handler,
)
from core.config import settings
from database.connection import Database
from dependencies.auth import TokenAuthResolver
from models.category_models import MySQLCategoryStore
from models.user_models import MySQLUserStore
from services.category_service import CategoryService
from utils.exceptions import ServiceError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리.

    시작 시 데이터베이스 연결 풀을 열고 서비스 객체를 구성하여 app.state에 등록하며,
    종료 시 연결 풀을 닫습니다.
    """
    database = Database(settings)
    await database.connect()

    app.state.database = database
    app.state.category_service = CategoryService(
        store=MySQLCategoryStore(database),
        auth=TokenAuthResolver(MySQLUserStore(database), settings.SECRET_KEY),
    )
    try:
        yield
    finally:
        await database.close()


app = FastAPI(
    title="Torrent Index Category API",
    description="토렌트 인덱스 카테고리 관리 API 서버",
    version="1.0.0",
    lifespan=lifespan,
)

# 요청 시각을 request.state에 기록하고 요청/응답을 로깅함
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(category_router)


@app.get("/health", status_code=200)
async def health_check(request: Request):
    """서버 상태 및 DB 연결 확인."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is not None and await database.test_connection():
        return {"status": "ok", "database": "connected"}
    return {"status": "error", "database": "disconnected"}


app.add_exception_handler(ServiceError, service_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]

# AWS 핸들러 설정
handler = Mangum(app)
