"""user_models: 사용자 관련 데이터 모델 및 조회 모듈.

인증 결과로 사용되는 User 데이터 클래스와 MySQL 사용자 조회 저장소를 제공합니다.
"""

from dataclasses import dataclass
from typing import Protocol

from database.connection import Database
from database.errors import translate_errors


@dataclass(frozen=True)
class User:
    """사용자 데이터 클래스.

    Attributes:
        id: 사용자 고유 식별자.
        username: 사용자명.
        administrator: 관리자 여부.
    """

    id: int
    username: str
    administrator: bool = False


class UserLookup(Protocol):
    """사용자 ID로 사용자를 조회하는 인터페이스."""

    async def get_user_by_id(self, user_id: int) -> User | None: ...


def _row_to_user(row: tuple) -> User:
    """데이터베이스 행을 User 객체로 변환합니다.

    Args:
        row: (id, username, administrator)
    """
    return User(id=row[0], username=row[1], administrator=bool(row[2]))


class MySQLUserStore:
    """aiomysql 기반 사용자 조회 저장소."""

    def __init__(self, db: Database):
        self._db = db

    async def get_user_by_id(self, user_id: int) -> User | None:
        """ID로 사용자를 조회합니다.

        Returns:
            사용자 객체, 없으면 None.
        """
        with translate_errors("user.get_by_id"):
            async with self._db.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(
                        "SELECT id, username, administrator FROM user WHERE id = %s",
                        (user_id,),
                    )
                    row = await cur.fetchone()
        return _row_to_user(row) if row else None
