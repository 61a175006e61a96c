import uuid
from sqlalchemy import Column, String, Uuid
from models.base import Base

class Users(Base):
    __tablename__ = 'users'

    user_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String, unique=True, index=True, nullable=False)
