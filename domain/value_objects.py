"""Domain Value Objects"""
from pydantic import BaseModel
from typing import Optional


class FieldSize(BaseModel):
    """Allowed trimmed length of a registration field"""
    min: Optional[int] = None
    max: Optional[int] = None

    class Config:
        frozen = True

    def too_small(self, value: str) -> bool:
        return self.min is not None and len(value.strip()) < self.min

    def too_large(self, value: str) -> bool:
        return self.max is not None and len(value.strip()) > self.max
