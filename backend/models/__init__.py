# models/__init__.py
from .base import Base
from .users import Users
from .cameras import Camera
from .user_cameras import UsersCamera
