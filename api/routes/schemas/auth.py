from __future__ import annotations
from pydantic import BaseModel, Field


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6)


class SessionOut(BaseModel):
    user_id: str
    email: str
    access_token: str
    redirectTo: str
