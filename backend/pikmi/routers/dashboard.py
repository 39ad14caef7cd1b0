"""대시보드 집계 API 라우터입니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pikmi.database import get_db
from pikmi.middleware.auth_middleware import get_current_admin
from pikmi.schemas.admin import DashboardStats
from pikmi.schemas.common import ApiResponse
from pikmi.services import admin_service
from pikmi.services.errors import store_errors
from pikmi.services.session_service import SessionIdentity

router = APIRouter(prefix="/api/admin/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=ApiResponse[DashboardStats], response_model_exclude_none=True)
def get_dashboard_stats(
    db: Session = Depends(get_db),
    current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to fetch dashboard statistics"):
        return ApiResponse(data=admin_service.get_dashboard_stats(db, current_admin))
