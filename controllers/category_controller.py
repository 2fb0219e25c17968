"""category_controller: 카테고리 관련 컨트롤러 모듈."""

from dataclasses import asdict

from fastapi import Request
from schemas.category_schemas import CategoryDeleteRequest, CategoryRequest
from schemas.common import create_response
from services.category_service import CategoryService
from dependencies.request_context import get_request_timestamp


async def get_categories(request: Request, service: CategoryService) -> dict:
    """카테고리 목록과 카테고리별 토렌트 수를 조회합니다."""
    timestamp = get_request_timestamp(request)

    categories = await service.list_categories()

    return create_response(
        "CATEGORIES_RETRIEVED",
        "카테고리 목록 조회에 성공했습니다.",
        data=[asdict(category) for category in categories],
        timestamp=timestamp,
    )


async def add_category(
    payload: CategoryRequest, request: Request, service: CategoryService
) -> dict:
    """카테고리를 생성합니다 (관리자 전용)."""
    timestamp = get_request_timestamp(request)

    name = await service.create_category(request, payload.name)

    return create_response(
        "CATEGORY_CREATED",
        "카테고리가 생성되었습니다.",
        data=name,
        timestamp=timestamp,
    )


async def delete_category(
    payload: CategoryDeleteRequest, request: Request, service: CategoryService
) -> dict:
    """카테고리를 삭제합니다 (관리자 전용)."""
    timestamp = get_request_timestamp(request)

    name = await service.delete_category(request, payload.name)

    return create_response(
        "CATEGORY_DELETED",
        "카테고리가 삭제되었습니다.",
        data=name,
        timestamp=timestamp,
    )
