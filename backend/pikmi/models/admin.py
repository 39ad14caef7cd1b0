"""관리자 계정과 관리자 세션 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, DateTime, Index

from pikmi.database import Base
from pikmi.utils.time import utcnow


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # passlib hash (legacy rows: plaintext)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class AdminSession(Base):
    __tablename__ = "admin_sessions"

    session_id = Column(String(64), primary_key=True)
    # admins FK 없음: 계정 삭제 후에도 세션 행은 만료/로그아웃까지 남는다.
    user_id = Column(Integer, nullable=False)
    username = Column(String(50), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    expires_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("idx_admin_session_expires", "expires_at"),
    )
