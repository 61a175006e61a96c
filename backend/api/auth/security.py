import logging
from uuid import UUID
from jose import jwt, JWTError
from config import settings
from datetime import datetime, timedelta, timezone
from api.auth.schemas import UserToken
from core.errors import Unauthorized, Forbidden
from fastapi import Depends

from fastapi.security import OAuth2PasswordBearer

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)

def create_access_token(user_id: UUID, is_admin: bool = False):
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    payload = {
        "sub": str(user_id),
        "role": "admin" if is_admin else "user",
        "exp": expire
    }

    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def get_current_user(token: str = Depends(oauth2_scheme)) -> UserToken:
    """
    Extract and validate the bearer token, yielding the caller's user id.
    """
    if not token:
        raise Unauthorized("Not authenticated")

    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"Rejected token: {e}")
        raise Unauthorized("Could not validate credentials")

    subject = payload.get("sub")
    try:
        user_id = UUID(subject)
    except (TypeError, ValueError):
        logger.warning(f"Token subject is not a user id: {subject!r}")
        raise Unauthorized("Could not validate credentials")

    return UserToken(user_id=user_id, is_admin=(payload.get("role") == "admin"))

def is_admin(current_user: UserToken = Depends(get_current_user)):
    """
    Dependency to check if the current user is an admin.
    """
    if not current_user.is_admin:
        raise Forbidden("You do not have access to this resource. Only admins can access.")
    return current_user
