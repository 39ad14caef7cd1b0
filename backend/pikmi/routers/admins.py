"""관리자 계정 관리 API 라우터입니다."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pikmi.database import get_db
from pikmi.middleware.auth_middleware import get_current_admin
from pikmi.schemas.admin import AdminCreate, AdminOut
from pikmi.schemas.common import ApiResponse
from pikmi.services import admin_service
from pikmi.services.errors import store_errors
from pikmi.services.session_service import SessionIdentity

router = APIRouter(prefix="/api/admin", tags=["admins"])


@router.post("/create", response_model=ApiResponse[AdminOut], response_model_exclude_none=True)
def create_admin(
    data: AdminCreate,
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to create admin"):
        admin = admin_service.create_admin(db, data)
        return ApiResponse(message="Admin created successfully", data=AdminOut.model_validate(admin))


@router.get("/admins", response_model=ApiResponse[List[AdminOut]], response_model_exclude_none=True)
def list_admins(
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to fetch admins"):
        rows = admin_service.list_admins(db)
        return ApiResponse(data=[AdminOut.model_validate(row) for row in rows])


@router.delete("/admins/{admin_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_admin(
    admin_id: int,
    db: Session = Depends(get_db),
    current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to delete admin"):
        admin_service.delete_admin(db, admin_id, current_admin)
    return ApiResponse(message="Admin deleted successfully")
