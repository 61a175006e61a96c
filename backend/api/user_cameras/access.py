import logging
from uuid import UUID
from fastapi import Depends
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from core.database import get_db
from core.errors import InvalidArgument, InternalError, Unauthorized
from api.auth.schemas import UserToken
from api.auth.security import get_current_user
from api.user_cameras import store

logger = logging.getLogger(__name__)


def check_access(db: Session, user_id: UUID, camera_id_string: str) -> None:
    """
    Checks that user_id has been granted the camera named by camera_id_string.

    Raises:
        InvalidArgument: camera_id_string is not a UUID.
        InternalError: the user's cameras could not be read.
        Unauthorized: the camera is not granted to the user.
    """
    try:
        camera_id = UUID(camera_id_string)
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to parse camera id into UUID: Input was {camera_id_string!r}, error was {e}")
        raise InvalidArgument("Failed to parse camera ID string")

    try:
        owned_cameras = store.cameras_for_user(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to get list of cameras for user {user_id}. The error was {e}")
        raise InternalError("Failed to get list of owned cameras")

    if not any(camera.camera_id == camera_id for camera in owned_cameras):
        raise Unauthorized("User does not have access to camera")


def require_camera_access(camera_id: str, db: Session = Depends(get_db), current_user: UserToken = Depends(get_current_user)) -> UUID:
    """Route dependency authorizing the caller for the {camera_id} path parameter."""
    check_access(db, current_user.user_id, camera_id)
    return UUID(camera_id)
