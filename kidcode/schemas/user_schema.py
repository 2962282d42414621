from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

# Schema representing the data decoded from a bearer token
class TokenData(BaseModel):
    user_id: int
    email: Optional[str] = None


# Schema for the request body the client sends to /auth/register
class UserRegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72, description="Plain-text password; only its bcrypt hash is stored")
    display_name: str = Field(..., alias="displayName", min_length=1, max_length=255)

    @field_validator("password", "display_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


# Schema for the request body the client sends to /auth/login
class UserLoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# What /register and /login return. The client reads `displayName`.
class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    token_type: str = "bearer"
    display_name: Optional[str] = Field(None, alias="displayName")


# Schema for displaying user information (sending data back to client)
class UserDisplay(BaseModel):
    id: int
    email: EmailStr
    display_name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
