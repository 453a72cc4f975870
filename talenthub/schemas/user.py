from typing import Optional

from talenthub.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str
    password: str
    full_name: str
    email: str
    role: str = "user"
    avatar: Optional[str] = None


class User(UserCreate):
    id: int


class UserOut(CamelModel):
    id: int
    username: str
    full_name: str
    email: str
    role: str
    avatar: Optional[str] = None
