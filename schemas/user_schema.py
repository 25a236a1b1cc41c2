from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field


class UserBase(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    email: str
    role: Literal["admin", "editor", "viewer"] = "editor"


class UserCreate(UserBase):
    password: str = Field(min_length=6)


class UserResponse(UserBase):
    id: str
    created_at: datetime | None = Field(default=None, alias="createdAt")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
