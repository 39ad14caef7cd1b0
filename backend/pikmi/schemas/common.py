"""모든 API 응답이 공유하는 {success, message?, data?, user?} 봉투 스키마입니다."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from pikmi.schemas.admin import AdminOut

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    user: Optional[AdminOut] = None


class HealthResponse(ApiResponse[None]):
    timestamp: str
