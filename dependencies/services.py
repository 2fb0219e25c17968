"""services: 서비스 객체 의존성 모듈.

lifespan에서 구성되어 app.state에 보관된 서비스를 라우터에 주입합니다.
테스트에서는 app.dependency_overrides로 교체합니다.
"""

from fastapi import Request

from services.category_service import CategoryService


def get_category_service(request: Request) -> CategoryService:
    """애플리케이션에 등록된 CategoryService를 반환합니다."""
    return request.app.state.category_service
