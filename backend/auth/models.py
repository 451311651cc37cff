from __future__ import annotations

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    home_address: str = Field(..., min_length=1)
    work_address: str | None = None
    is_worker: bool = False


class LoginRequest(BaseModel):
    username: str
    password: str


class ProfileUpdate(BaseModel):
    username: str | None = Field(default=None, min_length=1, max_length=100)
    home_address: str | None = Field(default=None, min_length=1)
    work_address: str | None = None


class UserOut(BaseModel):
    id: str
    username: str
    home_address: str
    work_address: str | None = None
    is_worker: bool = False
