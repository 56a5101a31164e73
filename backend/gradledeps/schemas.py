"""Pydantic request/response schemas used by the API.

The front-end speaks camelCase JSON, so every schema aliases its
snake_case fields (snake_case keys are accepted too). The owning user
columns are exposed as `createdById` / `addedById`.

Request schemas deliberately leave required columns optional: missing
values are rejected by the database, not here.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_record(cls, record):
        """Build the schema from a SQLModel row."""
        return cls.model_validate(record.model_dump())


class ProjectIn(_CamelModel):
    """Body of `POST /projects` and `PUT /projects/{id}`."""
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    repository_url: Optional[str] = None
    created_by: Optional[str] = Field(default=None, alias="createdById")


class ProjectOut(ProjectIn):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ComponentIn(_CamelModel):
    """Body of `POST /components` and `PUT /components/{id}`."""
    id: Optional[str] = None
    project_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    submodule_path: Optional[str] = None


class ComponentOut(ComponentIn):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DependencyIn(_CamelModel):
    """Body of `POST /dependencies` and `PUT /dependencies/{id}`."""
    id: Optional[str] = None
    component_id: Optional[str] = None
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    scope: Optional[str] = None
    description: Optional[str] = None
    added_by: Optional[str] = Field(default=None, alias="addedById")


class DependencyOut(DependencyIn):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserOut(_CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
