"""SQLModel data models.

Each class maps to one table. Records are flat: related rows are
referenced through explicit foreign-key columns and fetched through the
repositories rather than through ORM relationship attributes.

Required columns are declared `nullable=False` but default to `None` on
the Python side, so a missing value is rejected by the database at
insert time instead of by model validation.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy import Column, ForeignKey, String, Text
from sqlmodel import SQLModel, Field

DEFAULT_ROLE = "member"

# Gradle configurations offered by the front-end. Not enforced on write.
GRADLE_SCOPES = (
    "implementation",
    "api",
    "compileOnly",
    "testImplementation",
    "testCompileOnly",
    "runtimeOnly",
    "testRuntimeOnly",
)


class User(SQLModel, table=True):
    """A person that owns projects and adds dependencies.

    `role` is either `admin` or `member`.
    """
    __tablename__ = "users"

    id: Optional[str] = Field(default=None, primary_key=True)
    email: Optional[str] = Field(default=None, unique=True)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: Optional[str] = Field(default=DEFAULT_ROLE, nullable=False)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Project(SQLModel, table=True):
    """A tracked software project.

    `created_by` may be empty: projects created in demo mode have no owner.
    """
    __tablename__ = "projects"

    id: Optional[str] = Field(default=None, primary_key=True)
    name: Optional[str] = Field(default=None, nullable=False, index=True)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    repository_url: Optional[str] = Field(default=None, sa_column=Column(Text))
    created_by: Optional[str] = Field(default=None, foreign_key="users.id", index=True)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Component(SQLModel, table=True):
    """A module of a `Project`, optionally living in a git submodule."""
    __tablename__ = "components"

    id: Optional[str] = Field(default=None, primary_key=True)
    project_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True),
    )
    name: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    submodule_path: Optional[str] = Field(default=None, sa_column=Column(Text))
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Dependency(SQLModel, table=True):
    """A Gradle dependency (`group:artifact:version` in a scope) of a `Component`."""
    __tablename__ = "dependencies"

    id: Optional[str] = Field(default=None, primary_key=True)
    component_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String, ForeignKey("components.id", ondelete="CASCADE"), nullable=False, index=True),
    )
    group_id: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=False))
    artifact_id: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=False))
    version: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=False))
    scope: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    added_by: Optional[str] = Field(default=None, foreign_key="users.id", nullable=False, index=True)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
