"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from pikmi.models.admin import Admin, AdminSession
from pikmi.models.landing import LandingContent, LandingImage

__all__ = [
    "Admin", "AdminSession",
    "LandingContent", "LandingImage",
]
