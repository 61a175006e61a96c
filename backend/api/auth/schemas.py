from uuid import UUID
from pydantic import BaseModel

class UserToken(BaseModel):
    """Verified identity of the caller, resolved from the bearer token"""
    user_id: UUID
    is_admin: bool = False
