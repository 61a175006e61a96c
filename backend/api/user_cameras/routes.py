import logging
from typing import List
from core.database import get_db
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from core.errors import InternalError
from api.auth.schemas import UserToken
from fastapi import APIRouter, Depends, status
from api.auth.security import is_admin, get_current_user
from api.cameras.schemas import Camera
from api.user_cameras import store
from api.user_cameras.schemas import UsersCameraCreate, UsersCameraResponse, UsersCameraUpdate, DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user-cameras", tags=["User Cameras"])
list_router = APIRouter(tags=["User Cameras"])


@list_router.get("/ListCameras", response_model=List[Camera])
def list_cameras(db: Session = Depends(get_db), current_user: UserToken = Depends(get_current_user)):
    """Returns the cameras the caller has been granted."""
    try:
        return store.cameras_for_user(db, current_user.user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to get user's cameras for user ID {current_user.user_id}. The error was {e}")
        raise InternalError("Database failed to get list of cameras")


# admin only routes

@router.get("/", response_model=List[UsersCameraResponse])
def get_all_users_cameras(db: Session = Depends(get_db), current_user: UserToken = Depends(is_admin)):
    try:
        return store.list_all(db)
    except SQLAlchemyError as e:
        logger.error(f"Failed to list users cameras. The error was {e}")
        raise InternalError("Database failed to list users cameras")


@router.get("/{users_cameras_id}", response_model=UsersCameraResponse)
def get_users_camera(users_cameras_id: int, db: Session = Depends(get_db), current_user: UserToken = Depends(is_admin)):
    try:
        return store.get(db, users_cameras_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to get users camera {users_cameras_id}. The error was {e}")
        raise InternalError("Database failed to get users camera")


@router.post("/", response_model=UsersCameraResponse, status_code=status.HTTP_201_CREATED)
def add_camera_to_user(users_camera: UsersCameraCreate, db: Session = Depends(get_db), current_user: UserToken = Depends(is_admin)):
    try:
        return store.insert(db, users_camera.camera_id, users_camera.user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to grant camera {users_camera.camera_id} to user {users_camera.user_id}. The error was {e}")
        raise InternalError("Database failed to add users camera")


@router.put("/{users_cameras_id}", response_model=UsersCameraResponse)
def update_users_camera(users_cameras_id: int, users_camera: UsersCameraUpdate, db: Session = Depends(get_db), current_user: UserToken = Depends(is_admin)):
    try:
        return store.update(db, users_cameras_id, users_camera.camera_id, users_camera.user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to update users camera {users_cameras_id}. The error was {e}")
        raise InternalError("Database failed to update users camera")


@router.delete("/{users_cameras_id}", response_model=DeleteResponse)
def remove_camera_from_user(users_cameras_id: int, db: Session = Depends(get_db), current_user: UserToken = Depends(is_admin)):
    try:
        deleted = store.delete(db, users_cameras_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete users camera {users_cameras_id}. The error was {e}")
        raise InternalError("Database failed to delete users camera")
    return {"deleted": deleted}
