from typing import Optional

from pydantic import BaseModel

from civiltech.schemas.common import PassThroughModel


class LoginRequest(PassThroughModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResult(BaseModel):
    id: int
    name: Optional[str] = None
    email: str
    role: Optional[str] = None
    profile_image: Optional[str] = None


class UserOut(BaseModel):
    id: int
    full_name: Optional[str] = None
    email: str
    role: Optional[str] = None
    status: Optional[str] = None
    profile_image: Optional[str] = None
