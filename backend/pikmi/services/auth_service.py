"""Auth Service 도메인 서비스 레이어입니다. 비밀번호 해시/검증과 로그인 규칙을 캡슐화합니다."""

import logging
import secrets

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from pikmi.models.admin import Admin
from pikmi.services.errors import AuthFailed, NotFoundError, ValidationFailed

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid username or password"


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def is_hashed(stored: str) -> bool:
    return pwd_context.identify(stored, required=False) is not None


def verify_password(plain: str, stored: str) -> bool:
    if not stored:
        return False
    if not is_hashed(stored):
        # 해시 도입 이전에 평문으로 저장된 계정
        return secrets.compare_digest(plain.encode("utf-8"), stored.encode("utf-8"))
    return pwd_context.verify(plain, stored)


def needs_rehash(stored: str) -> bool:
    return not is_hashed(stored) or pwd_context.needs_update(stored)


def authenticate_admin(db: Session, username: str | None, password: str | None) -> Admin:
    if not username or not password:
        raise ValidationFailed("Username and password are required")

    admin = db.query(Admin).filter(Admin.username == username).first()
    # 대소문자 무시 collation(MySQL)에서도 정확히 일치하는 계정만 허용한다.
    if not admin or admin.username != username or not verify_password(password, admin.password):
        logger.warning("Failed admin login for username=%r", username)
        raise AuthFailed(INVALID_CREDENTIALS)

    if needs_rehash(admin.password):
        admin.password = hash_password(password)
        db.commit()
        logger.info("Upgraded stored password hash for admin id=%s", admin.id)

    logger.info("Admin id=%s logged in", admin.id)
    return admin


def get_admin_identity(db: Session, user_id: int) -> Admin:
    admin = db.query(Admin).filter(Admin.id == user_id).first()
    if not admin:
        raise NotFoundError("User not found")
    return admin
