"""Content Service 도메인 서비스 레이어입니다. 랜딩 페이지 텍스트 섹션의 조회/생성/수정을 담당합니다."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pikmi.database import is_row_id
from pikmi.models.landing import LandingContent
from pikmi.schemas.landing import ContentCreate, ContentItemOut, ContentUpdate
from pikmi.services.errors import ConflictError, NotFoundError, ValidationFailed
from pikmi.utils.time import utcnow

logger = logging.getLogger(__name__)


def get_content_map(db: Session) -> dict[str, str]:
    """프론트엔드가 바로 쓸 수 있도록 section_key -> content 평면 매핑으로 돌려준다."""
    rows = db.query(LandingContent.section_key, LandingContent.content).all()
    return {section_key: content for section_key, content in rows}


def get_content_by_key(db: Session, key: str) -> ContentItemOut:
    row = db.query(LandingContent).filter(LandingContent.section_key == key).first()
    if not row:
        raise NotFoundError("Content not found")
    return ContentItemOut(key=row.section_key, content=row.content)


def list_content(db: Session) -> list[LandingContent]:
    return db.query(LandingContent).order_by(LandingContent.section_key).all()


def create_content(db: Session, data: ContentCreate) -> LandingContent:
    if not data.section_key or not data.content:
        raise ValidationFailed("Section key and content are required")

    row = LandingContent(section_key=data.section_key, content=data.content)
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Section key already exists")
    db.refresh(row)
    logger.info("Landing content '%s' created (id=%s)", row.section_key, row.id)
    return row


def update_content(db: Session, content_id: int, data: ContentUpdate) -> LandingContent:
    if not data.content:
        raise ValidationFailed("Content is required")

    row = None
    if is_row_id(content_id):
        row = db.query(LandingContent).filter(LandingContent.id == content_id).first()
    if not row:
        raise NotFoundError("Content not found")
    # section_key는 생성 이후 변경하지 않는다.
    row.content = data.content
    row.updated_at = utcnow()
    db.commit()
    db.refresh(row)
    logger.info("Landing content '%s' updated (id=%s)", row.section_key, row.id)
    return row
