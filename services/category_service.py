"""category_service: 카테고리 관련 비즈니스 로직을 처리하는 서비스."""

import logging

from fastapi import Request

from database.errors import StorageError
from dependencies.auth import AuthResolver
from models.category_models import CategoryResponse, CategoryStore, DuplicateCategoryError
from models.user_models import User
from utils.exceptions import CategoryExistsError, ForbiddenError, InternalError

logger = logging.getLogger("api")


class CategoryService:
    """카테고리 목록 조회, 생성, 삭제 서비스.

    요청 간 상태를 보관하지 않으며, 모든 작업은 저장소 왕복 한 번으로 끝납니다.
    생성/삭제는 관리자만 수행할 수 있고, 권한 확인은 저장소 변경보다 먼저 수행됩니다.
    """

    def __init__(self, store: CategoryStore, auth: AuthResolver):
        self._store = store
        self._auth = auth

    async def _require_admin(self, request: Request) -> User:
        """요청자를 확인하고 관리자 여부를 검사합니다.

        Raises:
            UnauthenticatedError: 사용자를 확인할 수 없는 경우.
            ForbiddenError: 관리자가 아닌 경우.
        """
        user = await self._auth.resolve(request)
        if not user.administrator:
            raise ForbiddenError()
        return user

    async def list_categories(self) -> list[CategoryResponse]:
        """카테고리별 토렌트 수와 함께 전체 카테고리를 조회합니다. 인증 불필요."""
        try:
            return await self._store.list_with_torrent_counts()
        except StorageError as e:
            logger.exception("카테고리 목록 조회 실패")
            raise InternalError() from e

    async def create_category(self, request: Request, name: str) -> str:
        """카테고리를 생성합니다 (관리자 전용).

        Returns:
            생성된 카테고리 이름.

        Raises:
            CategoryExistsError: 같은 이름의 카테고리가 이미 존재하는 경우.
            InternalError: 그 외 저장소 오류.
        """
        await self._require_admin(request)

        try:
            await self._store.insert(name)
        except DuplicateCategoryError as e:
            raise CategoryExistsError() from e
        except StorageError as e:
            logger.exception("카테고리 생성 실패")
            raise InternalError() from e

        return name

    async def delete_category(self, request: Request, name: str) -> str:
        """카테고리를 삭제합니다 (관리자 전용).

        존재하지 않는 이름도 성공으로 처리합니다.
        """
        await self._require_admin(request)

        try:
            await self._store.delete(name)
        except StorageError as e:
            logger.exception("카테고리 삭제 실패")
            raise InternalError() from e

        return name
