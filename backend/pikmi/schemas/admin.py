"""관리자 인증/계정 요청·응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class LoginRequest(BaseModel):
    # 필수 여부는 서비스 레이어에서 검사해 원래의 안내 문구를 유지한다.
    username: Optional[str] = None
    password: Optional[str] = None


class AdminCreate(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminOut(BaseModel):
    id: int
    username: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class DashboardStats(BaseModel):
    totalAdmins: int
    totalContentSections: int
    lastLogin: str
