"""database.connection: MySQL 데이터베이스 연결 관리 모듈.

aiomysql 연결 풀을 감싸는 Database 객체를 제공합니다.
풀은 애플리케이션 lifespan에서 생성되어 app.state에 보관되며,
저장소(store) 객체에 생성자 인자로 주입됩니다.
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

import aiomysql

from core.config import Settings

logger = logging.getLogger("api")


class Database:
    """aiomysql 연결 풀의 생명주기를 관리합니다."""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._pool: aiomysql.Pool | None = None

    async def connect(self) -> None:
        """연결 풀을 초기화합니다.

        애플리케이션 시작 시 호출되어야 합니다.
        """
        s = self._settings
        try:
            self._pool = await aiomysql.create_pool(
                host=s.DB_HOST,
                port=s.DB_PORT,
                user=s.DB_USER,
                password=s.DB_PASSWORD,
                db=s.DB_NAME,
                charset="utf8mb4",
                autocommit=True,
                minsize=s.DB_POOL_MIN_SIZE,
                maxsize=s.DB_POOL_MAX_SIZE,
                connect_timeout=s.DB_CONNECT_TIMEOUT,
            )
        except Exception:
            logger.exception(
                f"MySQL 연결 풀 초기화 실패: {s.DB_HOST}:{s.DB_PORT}/{s.DB_NAME}"
            )
            raise
        logger.info(f"MySQL 연결 풀 초기화 완료: {s.DB_HOST}:{s.DB_PORT}/{s.DB_NAME}")

    async def close(self) -> None:
        """연결 풀을 종료합니다.

        애플리케이션 종료 시 호출되어야 합니다.
        """
        if self._pool:
            self._pool.close()
            await self._pool.wait_closed()
            self._pool = None
            logger.info("MySQL 연결 풀 종료")

    @property
    def pool(self) -> aiomysql.Pool:
        """현재 연결 풀을 반환합니다.

        Raises:
            RuntimeError: 연결 풀이 초기화되지 않은 경우.
        """
        if self._pool is None:
            raise RuntimeError("데이터베이스 연결 풀이 초기화되지 않았습니다.")
        return self._pool

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[aiomysql.Connection, None]:
        """데이터베이스 연결을 컨텍스트 매니저로 제공합니다.

        사용 예시:
            async with db.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute("SELECT name FROM category")
                    rows = await cur.fetchall()
        """
        async with self.pool.acquire() as conn:
            yield conn

    @asynccontextmanager
    async def transactional(self) -> AsyncGenerator[aiomysql.Cursor, None]:
        """트랜잭션 범위의 커서를 제공합니다.

        범위 내에서 예외 발생 시 롤백, 정상 종료 시 커밋합니다.
        """
        async with self.pool.acquire() as conn:
            try:
                await conn.begin()
                async with conn.cursor() as cur:
                    yield cur
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def test_connection(self) -> bool:
        """데이터베이스 연결을 테스트합니다.

        Returns:
            연결 성공 여부.
        """
        try:
            async with self.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute("SELECT 1")
                    await cur.fetchone()
                    return True
        except Exception as e:
            logger.warning(f"데이터베이스 연결 테스트 실패: {e}")
            return False
