from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional


class UserBase(BaseModel):
    email: EmailStr


class UserLogin(UserBase):
    password: str


# Self-service sign up always creates a "user"; admins are promoted in the database
class UserCreate(UserBase):
    password: str = Field(..., min_length=6)


class UserResponse(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    role: str
    # Capability flag the UI uses to show seller editing controls
    is_admin: bool = False


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


# Claims carried inside the access token
class TokenData(BaseModel):
    email: Optional[str] = None
    role: Optional[str] = None
