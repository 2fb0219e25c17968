"""models: 데이터 클래스 및 저장소 패키지.

카테고리, 사용자 데이터 모델과 MySQL 저장소 구현을 제공합니다.
"""

from .category_models import (
    CategoryResponse,
    CategoryStore,
    DuplicateCategoryError,
    MySQLCategoryStore,
)

from .user_models import (
    User,
    UserLookup,
    MySQLUserStore,
)

__all__ = [
    "CategoryResponse",
    "CategoryStore",
    "DuplicateCategoryError",
    "MySQLCategoryStore",
    "User",
    "UserLookup",
    "MySQLUserStore",
]
