"""seed_data.py: 개발용 더미 데이터 생성 스크립트.

사용법:
    source .venv/bin/activate
    python database/seed_data.py

생성되는 데이터:
    - 관리자 1명, 일반 사용자 1명
    - 카테고리 5개
    - 200 torrents (일부는 카테고리 없음)

마지막에 관리자 Access Token을 출력합니다.
"""

import asyncio
import random
from faker import Faker

# 프로젝트 루트를 PYTHONPATH에 추가
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import settings
from database.connection import Database
from utils.jwt_utils import create_access_token

fake = Faker()
Faker.seed(42)  # 재현 가능한 데이터
random.seed(42)

CATEGORIES = ["Movies", "TV", "Music", "Games", "Books"]
NUM_TORRENTS = 200


async def clear_existing_data(db: Database) -> None:
    """기존 데이터 삭제 (개발 환경 전용)."""
    print("Clearing existing data...")
    async with db.transactional() as cur:
        await cur.execute("SET FOREIGN_KEY_CHECKS = 0")
        await cur.execute("TRUNCATE TABLE torrent")
        await cur.execute("TRUNCATE TABLE category")
        await cur.execute("TRUNCATE TABLE user")
        await cur.execute("SET FOREIGN_KEY_CHECKS = 1")


async def seed_users(db: Database) -> int:
    """관리자와 일반 사용자를 생성하고 관리자 ID를 반환합니다."""
    async with db.transactional() as cur:
        await cur.execute(
            "INSERT INTO user (username, administrator) VALUES (%s, 1)", ("admin",)
        )
        admin_id = cur.lastrowid
        await cur.execute(
            "INSERT INTO user (username, administrator) VALUES (%s, 0)", ("member",)
        )
    return admin_id


async def seed_categories(db: Database) -> list[int]:
    """카테고리 생성."""
    category_ids = []
    async with db.transactional() as cur:
        for name in CATEGORIES:
            await cur.execute("INSERT INTO category (name) VALUES (%s)", (name,))
            category_ids.append(cur.lastrowid)
    return category_ids


async def seed_torrents(db: Database, uploader_id: int, category_ids: list[int]) -> None:
    """토렌트 생성. 약 10%는 카테고리 없이 생성합니다."""
    print(f"Seeding {NUM_TORRENTS} torrents...")
    rows = []
    for _ in range(NUM_TORRENTS):
        category_id = random.choice(category_ids) if random.random() > 0.1 else None
        rows.append((uploader_id, category_id, fake.sha1(), fake.sentence(nb_words=4)))

    async with db.transactional() as cur:
        await cur.executemany(
            "INSERT INTO torrent (uploader_id, category_id, info_hash, title) "
            "VALUES (%s, %s, %s, %s)",
            rows,
        )


async def main() -> None:
    db = Database(settings)
    await db.connect()
    try:
        await clear_existing_data(db)
        admin_id = await seed_users(db)
        category_ids = await seed_categories(db)
        await seed_torrents(db, admin_id, category_ids)
    finally:
        await db.close()

    token = create_access_token(
        admin_id, settings.SECRET_KEY, settings.JWT_ACCESS_EXPIRE_MINUTES
    )
    print("Done.")
    print(f"Admin access token: {token}")


if __name__ == "__main__":
    asyncio.run(main())
