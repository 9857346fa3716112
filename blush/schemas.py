# blush/schemas.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

# Request fields are optional so that presence checks live in the
# credential/booking layer and answer with a 400 instead of a 422.


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AppointmentCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    services: Optional[List[str]] = None
    parlour: Optional[str] = None
    date: Optional[str] = None  # YYYY-MM-DD
    time: Optional[str] = None  # HH:MM


class Message(BaseModel):
    message: str


class UserPublic(BaseModel):
    name: str
    email: str


class LoginResponse(BaseModel):
    message: str
    user: UserPublic


class AppointmentPublic(BaseModel):
    id: int
    name: str
    email: str
    services: List[str]
    parlour: str
    date: str
    time: str
    created_at: datetime = Field(serialization_alias="createdAt")
