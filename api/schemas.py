"""API Schemas - Response DTOs"""
from pydantic import BaseModel
from typing import Optional


class UserResponse(BaseModel):
    """Public user DTO"""
    id: str
    username: str
    fullname: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    """Registration validation failure"""
    code: int = 422
    reason: str = "Validation error"
    message: str
    location: str


class ErrorResponse(BaseModel):
    """Generic error envelope"""
    status: int
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str
