"""공개 랜딩 페이지 API 라우터입니다. 인증 없이 콘텐츠와 이미지를 제공합니다."""

from typing import Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pikmi.database import get_db
from pikmi.schemas.common import ApiResponse
from pikmi.schemas.landing import ContentItemOut, LandingImageOut
from pikmi.services import content_service, image_service
from pikmi.services.errors import store_errors

router = APIRouter(prefix="/api/landing", tags=["landing"])


@router.get("/content", response_model=ApiResponse[Dict[str, str]], response_model_exclude_none=True)
def get_landing_content(db: Session = Depends(get_db)):
    with store_errors("Failed to fetch landing page content"):
        return ApiResponse(data=content_service.get_content_map(db))


@router.get("/content/{key}", response_model=ApiResponse[ContentItemOut], response_model_exclude_none=True)
def get_landing_content_by_key(key: str, db: Session = Depends(get_db)):
    with store_errors("Failed to fetch landing page content"):
        return ApiResponse(data=content_service.get_content_by_key(db, key))


@router.get(
    "/images/{section_key}",
    response_model=ApiResponse[List[LandingImageOut]],
    response_model_exclude_none=True,
)
def get_section_images(section_key: str, db: Session = Depends(get_db)):
    with store_errors("Failed to fetch images"):
        rows = image_service.list_section_images(db, section_key)
        return ApiResponse(data=[LandingImageOut.model_validate(row) for row in rows])
