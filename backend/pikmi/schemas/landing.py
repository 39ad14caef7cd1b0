"""랜딩 콘텐츠/이미지 요청·응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ContentCreate(BaseModel):
    section_key: Optional[str] = None
    content: Optional[str] = None


class ContentUpdate(BaseModel):
    content: Optional[str] = None


class ContentOut(BaseModel):
    id: int
    section_key: str
    content: str
    updated_at: datetime

    model_config = {"from_attributes": True}


class ContentItemOut(BaseModel):
    key: str
    content: str


class LandingImageOut(BaseModel):
    id: int
    section_key: str
    image_url: str
    alt_text: Optional[str] = ""

    model_config = {"from_attributes": True}


class ImageOut(LandingImageOut):
    created_at: datetime


class ImageCleanupOut(BaseModel):
    dry_run: bool
    referenced_count: int
    existing_count: int
    orphan_count: int
    deleted_count: int
    skipped_recent_count: int
    orphan_urls: list[str]
