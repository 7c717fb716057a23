"""
Pydantic models for the refresh API.
"""
from typing import Optional
from pydantic import BaseModel, Field


class RefreshRequest(BaseModel):
    """Body of POST /refresh"""
    cookie: Optional[str] = None


class RefreshResponse(BaseModel):
    """Successful refresh"""
    success: bool = True
    new_cookie: str = Field(serialization_alias="newCookie")
    length: int
    username: Optional[str] = None
    method: Optional[str] = None
    message: str


class ErrorResponse(BaseModel):
    """Validation or protocol failure"""
    error: str
    details: Optional[str] = None
