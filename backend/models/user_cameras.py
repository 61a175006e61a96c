from sqlalchemy import Column, Integer, ForeignKey, Uuid
from models.base import Base

# No unique constraint on (camera_id, user_id): the same grant may be stored twice.
class UsersCamera(Base):
    __tablename__ = 'users_cameras'

    users_cameras_id = Column(Integer, primary_key=True, autoincrement=True)
    camera_id = Column(Uuid, ForeignKey('cameras.camera_id'), nullable=False, index=True)
    user_id = Column(Uuid, ForeignKey('users.user_id'), nullable=False, index=True)
