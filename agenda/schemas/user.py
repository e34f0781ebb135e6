from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from agenda.models.enums import AuthType, Role

class UserBase(BaseModel):
    email: EmailStr
    full_name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = Field(default=None, max_length=2048)
    role: Role = Role.coordenador

class UserCreate(UserBase):
    password: str = Field(..., min_length=6, max_length=128)

class UserUpdate(BaseModel):
    full_name: Optional[str] = Field(default=None, max_length=255)
    role: Optional[Role] = None
    active: Optional[bool] = None

class ProfileUpdate(BaseModel):
    """O que o próprio usuário pode mudar no seu perfil."""

    full_name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = Field(default=None, max_length=2048)

    class Config:
        extra = "forbid"

class UserOut(BaseModel):
    id: int
    email: str
    full_name: Optional[str]
    avatar_url: Optional[str] = None
    role: Role
    auth_type: AuthType
    active: bool = True

    class Config:
        from_attributes = True
