"""category_schemas: 카테고리 관련 Pydantic 모델 모듈."""

from pydantic import BaseModel, Field, field_validator

# category.name 컬럼 길이
CATEGORY_NAME_MAX_LENGTH = 64


class CategoryRequest(BaseModel):
    """카테고리 생성/삭제 요청 모델."""

    name: str = Field(..., description="카테고리 이름 (대소문자 구분)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("카테고리 이름은 비어 있을 수 없습니다.")
        if len(v) > CATEGORY_NAME_MAX_LENGTH:
            raise ValueError(
                f"카테고리 이름은 {CATEGORY_NAME_MAX_LENGTH}자 이하여야 합니다."
            )
        return v


class CategoryDeleteRequest(BaseModel):
    """카테고리 삭제 요청 모델.

    이름을 가공하지 않고 정확히 일치하는 행만 삭제합니다.
    없는 이름(빈 문자열, 너무 긴 이름 포함)도 삭제 성공으로 처리되므로 검증하지 않습니다.
    """

    name: str = Field(..., description="삭제할 카테고리 이름 (정확히 일치)")
