import logging
from uuid import UUID
from core.database import get_db
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from core.errors import InternalError, NotFound
from models.cameras import Camera as CameraModel
from fastapi import APIRouter, Depends
from api.cameras.schemas import Camera
from api.user_cameras.access import require_camera_access

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/camera", tags=["Cameras"])


@router.get("/{camera_id}", response_model=Camera)
def get_camera(granted_camera_id: UUID = Depends(require_camera_access), db: Session = Depends(get_db)):
    try:
        camera = db.get(CameraModel, granted_camera_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to get camera {granted_camera_id}. The error was {e}")
        raise InternalError("Database failed to get camera")
    if not camera:
        raise NotFound("Camera not found")
    return camera
