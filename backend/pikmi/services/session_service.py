"""관리자 세션 저장소 서비스입니다. 세션은 admin_sessions 테이블에 서버 측으로 보관됩니다."""

import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session

from pikmi.config import settings
from pikmi.models.admin import Admin, AdminSession
from pikmi.utils.time import utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionIdentity:
    session_id: str
    user_id: int
    username: str


def _lifetime() -> timedelta:
    return timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)


def create_session(db: Session, admin: Admin) -> AdminSession:
    now = utcnow()
    record = AdminSession(
        session_id=secrets.token_urlsafe(32),
        user_id=admin.id,
        username=admin.username,
        created_at=now,
        expires_at=now + _lifetime(),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def get_active_session(db: Session, session_id: str) -> Optional[AdminSession]:
    """유효한 세션을 돌려주고 만료 시각을 연장한다. 만료된 세션은 즉시 삭제한다."""
    record = db.query(AdminSession).filter(AdminSession.session_id == session_id).first()
    if not record:
        return None
    now = utcnow()
    if record.expires_at <= now:
        db.delete(record)
        db.commit()
        return None
    record.expires_at = now + _lifetime()
    db.commit()
    return record


def destroy_session(db: Session, session_id: str) -> bool:
    deleted = db.query(AdminSession).filter(AdminSession.session_id == session_id).delete()
    db.commit()
    return deleted > 0


def purge_expired_sessions(db: Session) -> int:
    deleted = db.query(AdminSession).filter(AdminSession.expires_at <= utcnow()).delete()
    db.commit()
    if deleted:
        logger.info("Purged %d expired admin session(s)", deleted)
    return deleted


def to_identity(record: AdminSession) -> SessionIdentity:
    return SessionIdentity(session_id=record.session_id, user_id=record.user_id, username=record.username)
