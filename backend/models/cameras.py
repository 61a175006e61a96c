import uuid
from models.base import Base
from sqlalchemy import Column, String, Uuid

class Camera(Base):
    __tablename__ = 'cameras'

    camera_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
