"""category_models: 카테고리 관련 데이터 모델 및 저장소 모듈."""

from dataclasses import dataclass
from typing import Protocol

from database.connection import Database
from database.errors import DuplicateEntryError, translate_errors


@dataclass(frozen=True)
class CategoryResponse:
    """카테고리 목록 조회 결과.

    Attributes:
        name: 카테고리 이름.
        num_torrents: 이 카테고리를 참조하는 토렌트 수 (없으면 0).
    """

    name: str
    num_torrents: int


class DuplicateCategoryError(DuplicateEntryError):
    """같은 이름의 카테고리가 이미 존재합니다."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"category already exists: {name}")


class CategoryStore(Protocol):
    """카테고리 저장소 인터페이스.

    구현체는 UNIQUE 제약 위반을 DuplicateCategoryError로,
    그 외 백엔드 오류를 StorageError로 보고해야 합니다.
    """

    async def list_with_torrent_counts(self) -> list[CategoryResponse]: ...

    async def insert(self, name: str) -> None: ...

    async def delete(self, name: str) -> None: ...


def _row_to_category_response(row: tuple) -> CategoryResponse:
    """데이터베이스 행을 CategoryResponse 객체로 변환합니다."""
    return CategoryResponse(name=row[0], num_torrents=int(row[1]))


class MySQLCategoryStore:
    """aiomysql 기반 카테고리 저장소."""

    def __init__(self, db: Database):
        self._db = db

    async def list_with_torrent_counts(self) -> list[CategoryResponse]:
        """모든 카테고리와 카테고리별 토렌트 수를 조회합니다.

        LEFT JOIN을 사용하므로 토렌트가 없는 카테고리도 0으로 포함됩니다.
        """
        with translate_errors("category.list"):
            async with self._db.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(
                        """
                        SELECT c.name, COUNT(t.id) AS num_torrents
                        FROM category c
                        LEFT JOIN torrent t ON t.category_id = c.id
                        GROUP BY c.id, c.name
                        """
                    )
                    rows = await cur.fetchall()
        return [_row_to_category_response(row) for row in rows]

    async def insert(self, name: str) -> None:
        """카테고리를 추가합니다.

        Raises:
            DuplicateCategoryError: 같은 이름이 이미 존재하는 경우.
            StorageError: 그 외 백엔드 오류.
        """
        try:
            with translate_errors("category.insert"):
                async with self._db.connection() as conn:
                    async with conn.cursor() as cur:
                        await cur.execute(
                            "INSERT INTO category (name) VALUES (%s)", (name,)
                        )
        except DuplicateEntryError as e:
            raise DuplicateCategoryError(name) from e.__cause__

    async def delete(self, name: str) -> None:
        """이름이 일치하는 카테고리를 삭제합니다.

        영향받은 행 수는 확인하지 않습니다 (없는 이름도 성공).
        """
        with translate_errors("category.delete"):
            async with self._db.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute("DELETE FROM category WHERE name = %s", (name,))
