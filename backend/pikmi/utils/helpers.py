import os
import secrets
import time
from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile

from pikmi.config import settings
from pikmi.services.errors import ValidationFailed


@dataclass
class PendingImage:
    field: str
    original_name: str
    ext: str
    content: bytes


def original_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lstrip(".")


def file_extension(filename: str) -> str:
    return original_extension(filename).lower()


def _normalized_content_type(file: UploadFile) -> str:
    return (file.content_type or "").split(";", 1)[0].strip().lower()


async def read_image(file: UploadFile, field: str) -> PendingImage:
    """업로드 파일을 메모리로 읽고 형식/크기를 검증한다. 디스크에는 아직 쓰지 않는다."""
    ext = file_extension(file.filename)
    allowed_exts = {e.lower() for e in settings.ALLOWED_IMAGE_EXTENSIONS}
    allowed_types = {t.lower() for t in settings.ALLOWED_IMAGE_CONTENT_TYPES}
    if ext not in allowed_exts or _normalized_content_type(file) not in allowed_types:
        raise ValidationFailed("Only image files are allowed")

    # 한도보다 1바이트만 더 읽어 초과 여부를 판단한다.
    content = await file.read(settings.MAX_UPLOAD_SIZE + 1)
    if len(content) > settings.MAX_UPLOAD_SIZE:
        max_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise ValidationFailed(f"File too large. Maximum size is {max_mb}MB")
    # 검증은 소문자로, 저장 파일명은 원래 확장자 그대로.
    return PendingImage(
        field=field, original_name=file.filename, ext=original_extension(file.filename), content=content
    )


def generate_stored_name(field: str, ext: str, taken: set[str]) -> str:
    # <field>-<epoch ms>-<random><.ext>
    while True:
        name = f"{field}-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}.{ext}"
        if name not in taken and not os.path.exists(os.path.join(settings.UPLOAD_DIR, name)):
            taken.add(name)
            return name


def write_upload(name: str, content: bytes) -> str:
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    path = os.path.join(settings.UPLOAD_DIR, name)
    with open(path, "xb") as f:
        f.write(content)
    return path


def public_url(name: str) -> str:
    return f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{name}"


def upload_path_for(image_url: str) -> Optional[str]:
    """공개 URL을 업로드 디렉터리 안의 실제 경로로 바꾼다. 디렉터리 밖을 가리키면 None."""
    prefix = settings.UPLOAD_URL_PREFIX.rstrip("/") + "/"
    if not image_url or not image_url.startswith(prefix):
        return None
    name = image_url[len(prefix):]
    if not name or name in {".", ".."} or "/" in name or "\\" in name:
        return None
    return os.path.join(settings.UPLOAD_DIR, name)


def remove_upload(image_url: str) -> bool:
    path = upload_path_for(image_url)
    if path is None:
        return False
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True
