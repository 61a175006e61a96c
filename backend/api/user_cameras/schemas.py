from uuid import UUID
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class UsersCameraBase(BaseModel):
    camera_id: UUID
    user_id: UUID

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class UsersCameraCreate(UsersCameraBase):
    pass

class UsersCameraUpdate(UsersCameraBase):
    pass

class UsersCameraResponse(UsersCameraBase):
    users_cameras_id: int

class DeleteResponse(BaseModel):
    deleted: int
