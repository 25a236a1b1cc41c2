from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field, field_validator

Category = Literal["branding", "web-design", "3d-design", "ui-ux", "motion", "illustration", "design", "mockup", "other"]
Status = Literal["draft", "published"]


class ContentBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    short_description: str | None = Field(default=None, max_length=300, alias="shortDescription")
    category: Category = "branding"
    tags: list[str] = Field(default_factory=list)
    thumbnail: str | None = None
    images: list[str] = Field(default_factory=list)
    client: str | None = None
    location: str | None = None
    timeline: str | None = None
    project_url: str | None = Field(default=None, alias="projectUrl")
    project_date: datetime | None = Field(default=None, alias="projectDate")
    featured: bool = False
    order: int = 0
    status: Status = "published"

    model_config = {"populate_by_name": True}

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value


class ContentCreate(ContentBase):
    """Admin payload for creating a project or AI sector."""
    pass


class ContentUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    short_description: str | None = Field(default=None, max_length=300, alias="shortDescription")
    category: Category | None = None
    tags: list[str] | None = None
    thumbnail: str | None = None
    images: list[str] | None = None
    client: str | None = None
    location: str | None = None
    timeline: str | None = None
    project_url: str | None = Field(default=None, alias="projectUrl")
    project_date: datetime | None = Field(default=None, alias="projectDate")
    featured: bool | None = None
    order: int | None = None
    status: Status | None = None

    model_config = {"populate_by_name": True}

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value


class ContentResponse(ContentBase):
    id: str
    slug: str
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ContentListResponse(BaseModel):
    success: bool = True
    data: list[ContentResponse]
    pagination: Pagination


class ContentEnvelope(BaseModel):
    success: bool = True
    data: ContentResponse
    message: str | None = None


class ReorderItem(BaseModel):
    id: str
    order: int


class ReorderRequest(BaseModel):
    orders: list[ReorderItem]
