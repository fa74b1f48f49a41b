"""Domain Entities - Users"""
from pydantic import BaseModel, Field
from typing import Optional


class NewUser(BaseModel):
    """User record before the store assigns an identity"""
    username: str
    password_digest: str = Field(min_length=1)
    fullname: Optional[str] = None

    class Config:
        frozen = True


class User(NewUser):
    """Persisted user"""
    id: str

    class Config:
        from_attributes = True
        frozen = True

    def to_public(self) -> dict:
        """Sanitized representation, never carries the digest"""
        return {"id": self.id, "username": self.username, "fullname": self.fullname}
