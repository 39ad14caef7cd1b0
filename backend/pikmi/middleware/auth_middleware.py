from typing import Optional

from fastapi import Depends, Request, Response
from itsdangerous import BadSignature, Signer
from sqlalchemy.orm import Session

from pikmi.config import settings
from pikmi.database import get_db
from pikmi.services import session_service
from pikmi.services.errors import AuthFailed, store_errors
from pikmi.services.session_service import SessionIdentity

UNAUTHORIZED_MESSAGE = "Unauthorized. Please login."


def get_signer() -> Signer:
    return Signer(settings.SECRET_KEY, salt="pikmi-session")


def read_session_id(request: Request) -> Optional[str]:
    cookie = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not cookie:
        return None
    try:
        return get_signer().unsign(cookie).decode("utf-8")
    except BadSignature:
        return None


def set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        get_signer().sign(session_id).decode("utf-8"),
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def get_current_admin(request: Request, db: Session = Depends(get_db)) -> SessionIdentity:
    session_id = read_session_id(request)
    if session_id is None:
        raise AuthFailed(UNAUTHORIZED_MESSAGE)
    with store_errors("Failed to verify session"):
        record = session_service.get_active_session(db, session_id)
    if record is None:
        raise AuthFailed(UNAUTHORIZED_MESSAGE)
    return session_service.to_identity(record)
