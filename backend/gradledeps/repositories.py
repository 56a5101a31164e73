"""Repository classes encapsulating database operations.

Each repository is small and focused on a single table (users,
projects, components, dependencies). Repositories return SQLModel
objects, perform commits/refreshes, assign identifiers and stamp audit
timestamps on save. They hold no business rules.
"""

import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, col
from . import audit, models

logger = logging.getLogger("gradledeps.repositories")

# Columns `save` never copies from the incoming record on update.
_PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


class _Repository:
    """Generic CRUD operations shared by all repositories.

    Subclasses only set `model` and add their derived lookups.
    """
    model = None

    def __init__(self, session: Session):
        self.session = session

    def list(self) -> list:
        """Return every row of the table."""
        return self.session.exec(select(self.model)).all()

    def get(self, record_id: str):
        """Fetch a row by primary key or `None` if not found."""
        return self.session.get(self.model, record_id)

    def exists(self, record_id: str) -> bool:
        """Return True if a row with `record_id` exists."""
        stmt = select(self.model.id).where(self.model.id == record_id)
        return self.session.exec(stmt).first() is not None

    def save(self, record):
        """Insert `record`, or update the stored row carrying its id.

        On insert a missing id is generated and both timestamps are
        stamped. On update every field except the id and `created_at` is
        copied onto the stored row and `updated_at` is refreshed.
        Returns the managed instance.
        """
        existing = self.get(record.id) if record.id else None
        if existing is None:
            if not record.id:
                record.id = audit.new_id()
            audit.stamp_created(record)
            self.session.add(record)
            self._commit()
            self.session.refresh(record)
            return record
        if existing is not record:
            for key, value in record.model_dump(exclude=_PROTECTED_FIELDS).items():
                setattr(existing, key, value)
        audit.stamp_updated(existing)
        self.session.add(existing)
        self._commit()
        self.session.refresh(existing)
        return existing

    def delete(self, record_id: str) -> bool:
        """Delete a row by id; dependent rows go with it via ON DELETE CASCADE.

        Returns False when no such row exists.
        """
        record = self.get(record_id)
        if record is None:
            return False
        self.session.delete(record)
        self._commit()
        return True

    def _commit(self):
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("constraint violation on %s: %s", self.model.__tablename__, e.orig)
            raise ValueError(f"constraint violation: {e.orig}") from e


class UserRepository(_Repository):
    """CRUD operations for `User` objects."""
    model = models.User

    def get_by_email(self, email: str) -> Optional[models.User]:
        """Return a `User` by email or `None` if not found."""
        stmt = select(models.User).where(models.User.email == email)
        return self.session.exec(stmt).first()


class ProjectRepository(_Repository):
    """CRUD operations and lookups for `Project` records."""
    model = models.Project

    def find_by_name_containing(self, substring: str) -> List[models.Project]:
        """Return projects whose name contains `substring`, ignoring case."""
        stmt = select(models.Project).where(
            func.lower(col(models.Project.name)).contains(substring.lower(), autoescape=True)
        )
        return self.session.exec(stmt).all()

    def find_by_creator(self, user_id: str) -> List[models.Project]:
        """Return all projects created by `user_id`."""
        stmt = select(models.Project).where(models.Project.created_by == user_id)
        return self.session.exec(stmt).all()


class ComponentRepository(_Repository):
    """CRUD operations for `Component` records."""
    model = models.Component

    def list_for_project(self, project_id: str) -> List[models.Component]:
        """List the components belonging to `project_id`."""
        stmt = select(models.Component).where(models.Component.project_id == project_id)
        return self.session.exec(stmt).all()


class DependencyRepository(_Repository):
    """CRUD operations for `Dependency` records."""
    model = models.Dependency

    def list_for_component(self, component_id: str) -> List[models.Dependency]:
        """List the dependencies declared by `component_id`."""
        stmt = select(models.Dependency).where(models.Dependency.component_id == component_id)
        return self.session.exec(stmt).all()
