import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from pitchside.core.config import settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _credentials_exception(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    """Validate the bearer token issued by the identity service.

    Returns the decoded JWT payload to downstream dependencies. Raises an HTTP 401
    error when the token is missing or invalid.
    """

    if credentials is None or not credentials.scheme or credentials.scheme.lower() != "bearer":
        raise _credentials_exception("Not authenticated")

    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except JWTError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise _credentials_exception("Could not validate credentials") from exc

    return payload


def get_caller_id(payload: dict = Depends(get_current_user)) -> int:
    """Resolve the caller id carried in the token ``sub`` claim."""

    subject = payload.get("sub")
    if subject is None:
        raise _credentials_exception("Token payload missing subject")

    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise _credentials_exception("Could not validate credentials") from exc


def create_access_token(user_id: int, **claims) -> str:
    """Mint a token for ``user_id``; used by seed scripts and tests."""

    payload = {"sub": str(user_id), **claims}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


__all__ = ["get_current_user", "get_caller_id", "create_access_token"]
