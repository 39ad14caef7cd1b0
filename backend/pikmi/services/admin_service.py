"""Admin Service 도메인 서비스 레이어입니다. 관리자 계정 생성/조회/삭제와 대시보드 집계를 담당합니다."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pikmi.database import is_row_id
from pikmi.models.admin import Admin
from pikmi.models.landing import LandingContent
from pikmi.schemas.admin import AdminCreate, DashboardStats
from pikmi.services.auth_service import hash_password
from pikmi.services.errors import ConflictError, NotFoundError, SelfDeleteError, ValidationFailed
from pikmi.services.session_service import SessionIdentity

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3


def _validate_new_admin(data: AdminCreate) -> None:
    if not data.username or not data.password:
        raise ValidationFailed("Username and password are required")
    if len(data.username) < MIN_USERNAME_LENGTH:
        raise ValidationFailed(f"Username must be at least {MIN_USERNAME_LENGTH} characters")
    if len(data.password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailed(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def create_admin(db: Session, data: AdminCreate) -> Admin:
    _validate_new_admin(data)
    if db.query(Admin.id).filter(Admin.username == data.username).first():
        raise ConflictError("Username already exists")

    admin = Admin(username=data.username, password=hash_password(data.password))
    db.add(admin)
    try:
        db.commit()
    except IntegrityError:
        # 동시 생성 요청이 unique 제약에 걸린 경우
        db.rollback()
        raise ConflictError("Username already exists")
    db.refresh(admin)
    logger.info("Admin id=%s (%s) created", admin.id, admin.username)
    return admin


def list_admins(db: Session) -> list[Admin]:
    return db.query(Admin).order_by(Admin.created_at.desc(), Admin.id.desc()).all()


def delete_admin(db: Session, admin_id: int, current: SessionIdentity) -> None:
    if admin_id == current.user_id:
        raise SelfDeleteError("You cannot delete your own account")
    deleted = 0
    if is_row_id(admin_id):
        deleted = db.query(Admin).filter(Admin.id == admin_id).delete()
    if deleted == 0:
        raise NotFoundError("Admin not found")
    db.commit()
    logger.info("Admin id=%s deleted by admin id=%s", admin_id, current.user_id)


def get_dashboard_stats(db: Session, current: SessionIdentity) -> DashboardStats:
    return DashboardStats(
        totalAdmins=db.query(func.count(Admin.id)).scalar() or 0,
        totalContentSections=db.query(func.count(LandingContent.id)).scalar() or 0,
        lastLogin=current.username,
    )
