"""category_router: 카테고리 관련 라우터 모듈."""

from fastapi import APIRouter, Depends, Request, status
from controllers import category_controller
from dependencies.services import get_category_service
from schemas.category_schemas import CategoryDeleteRequest, CategoryRequest
from services.category_service import CategoryService

category_router = APIRouter(prefix="/category", tags=["category"])


@category_router.get("", status_code=status.HTTP_200_OK)
async def get_categories(
    request: Request,
    service: CategoryService = Depends(get_category_service),
) -> dict:
    """카테고리 목록을 조회합니다. 인증 불필요."""
    return await category_controller.get_categories(request, service)


@category_router.post("", status_code=status.HTTP_200_OK)
async def add_category(
    payload: CategoryRequest,
    request: Request,
    service: CategoryService = Depends(get_category_service),
) -> dict:
    """카테고리를 생성합니다 (관리자 전용)."""
    return await category_controller.add_category(payload, request, service)


@category_router.delete("", status_code=status.HTTP_200_OK)
async def delete_category(
    payload: CategoryDeleteRequest,
    request: Request,
    service: CategoryService = Depends(get_category_service),
) -> dict:
    """카테고리를 삭제합니다 (관리자 전용)."""
    return await category_controller.delete_category(payload, request, service)
