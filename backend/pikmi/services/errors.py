"""서비스 레이어 예외 분류입니다. 모두 HTTPException이므로 라우터에서 그대로 전파됩니다."""

import logging
from contextlib import contextmanager

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(status_code=self.status_code, detail=message)

    @property
    def message(self) -> str:
        return self.detail


class ValidationFailed(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthFailed(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ConflictError(ServiceError):
    # 중복 키는 400으로 응답한다.
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class SelfDeleteError(ValidationFailed):
    pass


class InternalError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def store_errors(message: str):
    """DB/파일시스템 예외를 로그로 남기고 InternalError(message)로 변환한다."""
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        logger.exception("%s: %s", message, exc)
        raise InternalError(message) from exc
