from datetime import datetime, timezone


def utcnow() -> datetime:
    # DB 컬럼은 naive UTC로 저장한다.
    return datetime.now(timezone.utc).replace(tzinfo=None)
