from pydantic import BaseModel, EmailStr
from typing import Optional

from garage_rental.schemas.common import CamelModel


class UserCreate(CamelModel):
    email: EmailStr
    name: str
    password: str
    phone: Optional[str] = None


# admin creates a customer who never logs in
class NonLoginUserCreate(CamelModel):
    email: EmailStr
    name: str
    phone: Optional[str] = None
    category: Optional[str] = "non-login"


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: int
    email: EmailStr
    name: str
    phone: Optional[str] = None
    role: str
    category: Optional[str] = None


class UserListItem(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None


class UserIdResponse(CamelModel):
    id: int


# OAuth2 field names stay snake_case
class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
