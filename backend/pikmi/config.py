"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./pikmi.db"
    SECRET_KEY: str = "change-this-secret-in-production"
    ENVIRONMENT: str = "development"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # Session
    SESSION_COOKIE_NAME: str = "pikmi_session"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60

    # Image upload
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5 MB
    MAX_BATCH_UPLOAD: int = 10
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpeg", "jpg", "png", "gif", "webp"]
    ALLOWED_IMAGE_CONTENT_TYPES: List[str] = [
        "image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp",
    ]
    # 이보다 최근에 쓰인 파일은 업로드 커밋 전일 수 있어 고아 정리에서 제외한다.
    ORPHAN_GRACE_SECONDS: int = 10 * 60

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"

    class Config:
        # 실행 cwd와 무관하게 backend/.env를 로드한다.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
