"""Pydantic schemas for user management endpoints."""

from typing import Optional

from pydantic import BaseModel

from .fields import Email, Name, Password


class UserCreateRequest(BaseModel):
    """Request schema for operator-created users; password is optional."""

    name: Name
    email: Email
    password: Optional[Password] = None


class UserUpdateRequest(BaseModel):
    """Partial update; omitted fields are left untouched."""

    name: Optional[Name] = None
    email: Optional[Email] = None
    password: Optional[Password] = None
