"""랜딩 페이지 텍스트 섹션과 이미지 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Index

from pikmi.database import Base
from pikmi.utils.time import utcnow


class LandingContent(Base):
    __tablename__ = "landing_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_key = Column(String(100), unique=True, nullable=False)
    content = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class LandingImage(Base):
    __tablename__ = "landing_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_key = Column(String(100), nullable=False)
    image_url = Column(String(500), nullable=False)
    alt_text = Column(String(255), default="")
    created_at = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_landing_images_section", "section_key", "created_at"),
    )
