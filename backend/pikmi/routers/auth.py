"""관리자 인증 API 라우터입니다. 로그인/로그아웃과 현재 세션의 관리자 정보를 제공합니다."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from pikmi.database import get_db
from pikmi.middleware.auth_middleware import (
    clear_session_cookie,
    get_current_admin,
    read_session_id,
    set_session_cookie,
)
from pikmi.schemas.admin import AdminOut, LoginRequest
from pikmi.schemas.common import ApiResponse
from pikmi.services import auth_service, session_service
from pikmi.services.errors import store_errors
from pikmi.services.session_service import SessionIdentity

router = APIRouter(prefix="/api/admin", tags=["auth"])


@router.post("/login", response_model=ApiResponse[None], response_model_exclude_none=True)
def login(data: LoginRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    with store_errors("Login failed"):
        admin = auth_service.authenticate_admin(db, data.username, data.password)
        previous_session_id = read_session_id(request)
        if previous_session_id:
            session_service.destroy_session(db, previous_session_id)
        record = session_service.create_session(db, admin)
        user = AdminOut(id=admin.id, username=admin.username)
    set_session_cookie(response, record.session_id)
    return ApiResponse(message="Login successful", user=user)


@router.post("/logout", response_model=ApiResponse[None], response_model_exclude_none=True)
def logout(request: Request, response: Response, db: Session = Depends(get_db)):
    session_id = read_session_id(request)
    if session_id:
        with store_errors("Logout failed"):
            session_service.destroy_session(db, session_id)
    clear_session_cookie(response)
    return ApiResponse(message="Logout successful")


@router.get("/me", response_model=ApiResponse[None], response_model_exclude_none=True)
def me(db: Session = Depends(get_db), current_admin: SessionIdentity = Depends(get_current_admin)):
    with store_errors("Failed to fetch user information"):
        admin = auth_service.get_admin_identity(db, current_admin.user_id)
        return ApiResponse(user=AdminOut.model_validate(admin))
