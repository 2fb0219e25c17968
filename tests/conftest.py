import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Settings 로드 전에 필수 환경 변수 설정 (실제 DB에는 연결하지 않음)
TEST_SECRET_KEY = "test-secret-key-for-category-service-0123456789"
os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_NAME", "torrent_index_test")
os.environ.setdefault("ERROR_LOG_FILE", os.devnull)

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from faker import Faker

from core.config import settings
from database.errors import StorageError
from dependencies.auth import TokenAuthResolver
from dependencies.services import get_category_service
from main import app
from models.category_models import CategoryResponse, DuplicateCategoryError
from models.user_models import User
from services.category_service import CategoryService
from utils.jwt_utils import create_access_token

ADMIN = User(id=1, username="admin", administrator=True)
MEMBER = User(id=2, username="member", administrator=False)


class InMemoryCategoryStore:
    """테스트용 카테고리 저장소.

    categories는 이름 목록, torrents는 토렌트별 카테고리 이름(없으면 None) 목록입니다.
    fail_with가 설정되면 모든 작업이 해당 예외를 발생시킵니다.
    """

    def __init__(self):
        self.categories: list[str] = []
        self.torrents: list[str | None] = []
        self.fail_with: Exception | None = None
        self.writes = 0

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def add_torrents(self, category: str | None, count: int) -> None:
        self.torrents.extend([category] * count)

    async def list_with_torrent_counts(self) -> list[CategoryResponse]:
        self._check_failure()
        return [
            CategoryResponse(name=name, num_torrents=self.torrents.count(name))
            for name in self.categories
        ]

    async def insert(self, name: str) -> None:
        self._check_failure()
        if name in self.categories:
            raise DuplicateCategoryError(name)
        self.categories.append(name)
        self.writes += 1

    async def delete(self, name: str) -> None:
        self._check_failure()
        if name in self.categories:
            self.categories.remove(name)
            # ON DELETE SET NULL
            self.torrents = [None if t == name else t for t in self.torrents]
        self.writes += 1


class InMemoryUserStore:
    """테스트용 사용자 조회 저장소."""

    def __init__(self, *users: User):
        self.users = {user.id: user for user in users}
        self.fail_with: Exception | None = None

    async def get_user_by_id(self, user_id: int) -> User | None:
        if self.fail_with is not None:
            raise self.fail_with
        return self.users.get(user_id)


def bearer(user_id: int) -> dict:
    """Bearer Token 인증 헤더를 반환합니다."""
    token = create_access_token(user_id, settings.SECRET_KEY)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def fake():
    return Faker()


@pytest.fixture
def store():
    return InMemoryCategoryStore()


@pytest.fixture
def users():
    return InMemoryUserStore(ADMIN, MEMBER)


@pytest.fixture
def service(store, users):
    return CategoryService(store, TokenAuthResolver(users, settings.SECRET_KEY))


@pytest_asyncio.fixture
async def client(service):
    """API 테스트를 위한 Async Client (DB 대신 인메모리 저장소 주입)"""
    app.dependency_overrides[get_category_service] = lambda: service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return bearer(ADMIN.id)


@pytest.fixture
def member_headers():
    return bearer(MEMBER.id)


@pytest.fixture
def storage_failure():
    return StorageError("connection refused: db-host:3306")
