from pydantic import BaseModel, EmailStr, Field

from agenda.schemas.user import UserOut

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

class LoginOut(BaseModel):
    user: UserOut
    token: str
    token_type: str = "bearer"

class VerifyOut(BaseModel):
    user: UserOut
