"""Image Service 도메인 서비스 레이어입니다. 랜딩 이미지 업로드/조회/삭제와 고아 파일 정리를 담당합니다."""

import logging
import os
import time
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pikmi.config import settings
from pikmi.database import is_row_id
from pikmi.models.landing import LandingImage
from pikmi.services.errors import NotFoundError, ValidationFailed
from pikmi.utils.helpers import (
    PendingImage,
    generate_stored_name,
    public_url,
    read_image,
    remove_upload,
    write_upload,
)

logger = logging.getLogger(__name__)

SINGLE_FIELD = "image"
BATCH_FIELD = "images"


def list_section_images(db: Session, section_key: str) -> list[LandingImage]:
    return (
        db.query(LandingImage)
        .filter(LandingImage.section_key == section_key)
        .order_by(LandingImage.created_at.desc(), LandingImage.id.desc())
        .all()
    )


def list_images(db: Session) -> list[LandingImage]:
    return db.query(LandingImage).order_by(LandingImage.created_at.desc(), LandingImage.id.desc()).all()


def _present(file: Optional[UploadFile]) -> bool:
    return file is not None and bool(file.filename)


async def collect_upload(
    section_key: Optional[str],
    image: Optional[list[UploadFile]],
    images: Optional[list[UploadFile]],
) -> tuple[list[PendingImage], bool]:
    """요청에서 처리할 파일을 고르고 전부 검증한다. (파일 목록, 배치 여부)를 반환한다."""
    if not section_key:
        raise ValidationFailed("Section key is required")

    single = [f for f in (image or []) if _present(f)]
    if len(single) > 1:
        raise ValidationFailed("Only one file is allowed in the 'image' field")
    if single:
        return [await read_image(single[0], SINGLE_FIELD)], False

    batch = [f for f in (images or []) if _present(f)]
    if not batch:
        raise ValidationFailed("No image file(s) provided")
    if len(batch) > settings.MAX_BATCH_UPLOAD:
        raise ValidationFailed(f"Too many files. Maximum is {settings.MAX_BATCH_UPLOAD}")
    return [await read_image(f, BATCH_FIELD) for f in batch], True


def save_images(
    db: Session,
    section_key: str,
    alt_text: Optional[str],
    pending: list[PendingImage],
) -> list[LandingImage]:
    """파일을 모두 쓴 뒤 행을 한 번에 커밋한다. 실패하면 이미 쓴 파일을 지우고 예외를 다시 던진다."""
    written: list[str] = []
    taken: set[str] = set()
    rows: list[LandingImage] = []
    try:
        for item in pending:
            name = generate_stored_name(item.field, item.ext, taken)
            written.append(write_upload(name, item.content))
            rows.append(LandingImage(section_key=section_key, image_url=public_url(name), alt_text=alt_text or ""))
        db.add_all(rows)
        db.commit()
    except (SQLAlchemyError, OSError):
        db.rollback()
        for path in written:
            try:
                os.remove(path)
            except OSError:
                logger.warning("Could not remove partially uploaded file %s", path)
        raise

    for row in rows:
        db.refresh(row)
    logger.info("Stored %d image(s) for section '%s'", len(rows), section_key)
    return rows


def delete_image(db: Session, image_id: int) -> None:
    row = None
    if is_row_id(image_id):
        row = db.query(LandingImage).filter(LandingImage.id == image_id).first()
    if not row:
        raise NotFoundError("Image not found")

    image_url = row.image_url
    db.delete(row)
    db.commit()

    # 행 삭제 후 파일 삭제. 이미 없는 파일은 무시한다.
    if remove_upload(image_url):
        logger.info("Deleted image id=%s file %s", image_id, image_url)
    else:
        logger.info("Deleted image id=%s; no file on disk for %s", image_id, image_url)


def collect_referenced_image_urls(db: Session) -> set[str]:
    return {row[0] for row in db.query(LandingImage.image_url).all() if row[0]}


def collect_existing_image_urls(grace_seconds: int = 0) -> tuple[set[str], int]:
    """업로드 폴더의 파일 URL과, 유예 시간 안에 쓰여 제외한 파일 수를 돌려준다."""
    root = settings.UPLOAD_DIR
    if not os.path.isdir(root):
        return set(), 0
    cutoff = time.time() - grace_seconds
    urls: set[str] = set()
    skipped = 0
    for name in os.listdir(root):
        path = os.path.join(root, name)
        if not os.path.isfile(path):
            continue
        if os.path.getmtime(path) > cutoff:
            skipped += 1
            continue
        urls.add(public_url(name))
    return urls, skipped


def cleanup_orphan_images(db: Session, dry_run: bool = True) -> dict:
    referenced = collect_referenced_image_urls(db)
    # 파일 쓰기와 행 커밋 사이의 업로드를 지우지 않도록 최근 파일은 건너뛴다.
    existing, skipped_recent = collect_existing_image_urls(settings.ORPHAN_GRACE_SECONDS)
    orphan_urls = sorted(existing - referenced)

    deleted_count = 0
    if not dry_run:
        for url in orphan_urls:
            if remove_upload(url):
                deleted_count += 1
        logger.info("Orphan image cleanup removed %d of %d file(s)", deleted_count, len(orphan_urls))

    return {
        "dry_run": dry_run,
        "referenced_count": len(referenced),
        "existing_count": len(existing),
        "orphan_count": len(orphan_urls),
        "deleted_count": deleted_count,
        "skipped_recent_count": skipped_recent,
        "orphan_urls": orphan_urls,
    }
