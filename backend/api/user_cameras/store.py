"""
Queries against the users_cameras join table.

Every function takes the session it runs on. Database errors are not caught
here; callers decide how to report them.
"""
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
from core.errors import NotFound
from models.cameras import Camera
from models.user_cameras import UsersCamera


def list_all(db: Session) -> List[UsersCamera]:
    return db.query(UsersCamera).order_by(UsersCamera.users_cameras_id).all()


def get(db: Session, users_cameras_id: int) -> UsersCamera:
    users_camera = db.get(UsersCamera, users_cameras_id)
    if not users_camera:
        raise NotFound("Users camera not found")
    return users_camera


def insert(db: Session, camera_id: UUID, user_id: UUID) -> UsersCamera:
    users_camera = UsersCamera(camera_id=camera_id, user_id=user_id)
    db.add(users_camera)
    db.commit()
    db.refresh(users_camera)
    return users_camera


def update(db: Session, users_cameras_id: int, camera_id: UUID, user_id: UUID) -> UsersCamera:
    users_camera = get(db, users_cameras_id)

    users_camera.camera_id = camera_id
    users_camera.user_id = user_id

    db.commit()
    db.refresh(users_camera)
    return users_camera


def delete(db: Session, users_cameras_id: int) -> int:
    """Returns the number of rows removed; a missing id is not an error."""
    deleted = db.query(UsersCamera).filter(UsersCamera.users_cameras_id == users_cameras_id).delete()
    db.commit()
    return deleted


def cameras_for_user(db: Session, user_id: UUID):
    """Returns (camera_id, name) rows for every camera granted to user_id."""
    return (
        db.query(Camera.camera_id, Camera.name)
        .join(UsersCamera, Camera.camera_id == UsersCamera.camera_id)
        .filter(UsersCamera.user_id == user_id)
        .all()
    )
