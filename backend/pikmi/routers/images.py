"""랜딩 이미지 관리 API 라우터입니다. 업로드/목록/삭제와 고아 파일 정리를 제공합니다."""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from pikmi.database import get_db
from pikmi.middleware.auth_middleware import get_current_admin
from pikmi.schemas.common import ApiResponse
from pikmi.schemas.landing import ImageCleanupOut, ImageOut
from pikmi.services import image_service
from pikmi.services.errors import store_errors
from pikmi.services.session_service import SessionIdentity

router = APIRouter(prefix="/api/admin/images", tags=["images"])


@router.get("", response_model=ApiResponse[List[ImageOut]], response_model_exclude_none=True)
def list_images(
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to fetch images"):
        rows = image_service.list_images(db)
        return ApiResponse(data=[ImageOut.model_validate(row) for row in rows])


@router.post(
    "/upload",
    response_model=ApiResponse[Union[ImageOut, List[ImageOut]]],
    response_model_exclude_none=True,
)
async def upload_images(
    section_key: Optional[str] = Form(None),
    alt_text: Optional[str] = Form(None),
    image: Optional[List[UploadFile]] = File(None),
    images: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    pending, is_batch = await image_service.collect_upload(section_key, image, images)
    with store_errors("Failed to upload image"):
        rows = image_service.save_images(db, section_key, alt_text, pending)
        saved = [ImageOut.model_validate(row) for row in rows]

    if not is_batch:
        return ApiResponse(message="Image uploaded successfully", data=saved[0])
    return ApiResponse(message=f"{len(saved)} image(s) uploaded successfully", data=saved)


@router.delete("/{image_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_image(
    image_id: int,
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to delete image"):
        image_service.delete_image(db, image_id)
    return ApiResponse(message="Image deleted successfully")


@router.post("/cleanup", response_model=ApiResponse[ImageCleanupOut], response_model_exclude_none=True)
def cleanup_orphan_images(
    dry_run: bool = True,
    db: Session = Depends(get_db),
    _current_admin: SessionIdentity = Depends(get_current_admin),
):
    with store_errors("Failed to clean up images"):
        result = image_service.cleanup_orphan_images(db, dry_run=dry_run)
    return ApiResponse(data=ImageCleanupOut(**result))
