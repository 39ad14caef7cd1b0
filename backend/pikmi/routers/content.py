"""랜딩 콘텐츠 관리 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pikmi.database import get_db
from pikmi.middleware.auth_middleware import get_current_admin
from pikmi.schemas.common import ApiResponse
from pikmi.schemas.landing import ContentCreate, ContentOut, ContentUpdate
from pikmi.services import content_service
from pikmi.services.errors import store_errors
from pikmi.services.session_service import SessionIdentity

router = APIRouter(prefix="/api/admin/content", tags=["content"])


@router.get("", response_model=ApiResponse[List[ContentOut]], response_model_exclude_none=True)
def list_content(
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to fetch content"):
        rows = content_service.list_content(db)
        return ApiResponse(data=[ContentOut.model_validate(row) for row in rows])


@router.post("", response_model=ApiResponse[ContentOut], response_model_exclude_none=True)
def create_content(
    data: ContentCreate,
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to create content"):
        row = content_service.create_content(db, data)
        return ApiResponse(message="Content created successfully", data=ContentOut.model_validate(row))


@router.put("/{content_id}", response_model=ApiResponse[ContentOut], response_model_exclude_none=True)
def update_content(
    content_id: int,
    data: ContentUpdate,
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to update content"):
        row = content_service.update_content(db, content_id, data)
        return ApiResponse(message="Content updated successfully", data=ContentOut.model_validate(row))
