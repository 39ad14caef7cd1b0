"""FastAPI 애플리케이션 진입점. 미들웨어, 예외 처리, API 라우터, 업로드 정적 파일 서빙을 등록합니다."""

import logging
import os
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from pikmi.config import settings
from pikmi.database import Base, SessionLocal, engine
import pikmi.models  # noqa: F401 - 모델 import로 metadata 등록
from pikmi.routers import admins, auth, content, dashboard, images, landing
from pikmi.schemas.common import HealthResponse
from pikmi.services import session_service
from pikmi.services.errors import ServiceError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


setup_logging()

app = FastAPI(
    title="Pikmi Landing API",
    description="랜딩 페이지 콘텐츠 제공 및 관리자 대시보드 API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,  # 세션 쿠키 허용
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message}, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # 서비스 예외가 아닌 404/405는 일치하는 라우트가 없다는 뜻이다.
    if not isinstance(exc, ServiceError) and exc.status_code in (404, 405):
        return _error(404, "Route not found")
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error(exc.status_code, message, getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(400, "Invalid request")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")


# Register all routers
app.include_router(landing.router)
app.include_router(auth.router)
app.include_router(admins.router)
app.include_router(dashboard.router)
app.include_router(content.router)
app.include_router(images.router)


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        session_service.purge_expired_sessions(db)
    finally:
        db.close()
    logger.info("Landing API started (environment=%s)", settings.ENVIRONMENT)


@app.on_event("shutdown")
def on_shutdown():
    logger.info("Shutting down, closing database pool")
    engine.dispose()


@app.get("/api/health", response_model=HealthResponse, response_model_exclude_none=True)
def health_check():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(message="Server is running", timestamp=timestamp)


class UploadFiles(StaticFiles):
    """업로드 정적 파일. 디렉터리는 요청마다 settings.UPLOAD_DIR에서 다시 읽는다."""

    def __init__(self):
        super().__init__(directory=settings.UPLOAD_DIR, check_dir=False)

    def lookup_path(self, path: str):
        self.all_directories = [settings.UPLOAD_DIR]
        return super().lookup_path(path)


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(settings.UPLOAD_URL_PREFIX, UploadFiles(), name="uploads")
