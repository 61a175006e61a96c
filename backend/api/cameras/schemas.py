from uuid import UUID
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class Camera(BaseModel):
    camera_id: UUID
    name: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
