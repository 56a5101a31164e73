"""Business logic services used by HTTP controllers.

Services are intentionally thin: they apply request defaults (the
placeholder user) and full-record replace semantics, then persist via
repositories. Constraint violations surface as `ValueError` from the
repositories.
"""

from typing import List, Optional
from sqlmodel import Session
from . import models, repositories
from .config import settings


class UserService:
    """Lookups for users plus the placeholder user bootstrap."""
    def __init__(self, session: Session):
        self.session = session
        self.user_repo = repositories.UserRepository(session)
        self.project_repo = repositories.ProjectRepository(session)

    def get_user(self, user_id: str) -> Optional[models.User]:
        return self.user_repo.get(user_id)

    def ensure_user(self, user_id: str) -> models.User:
        """Return the user with `user_id`, creating a bare demo user if missing."""
        existing = self.user_repo.get(user_id)
        if existing:
            return existing
        user = models.User(id=user_id, first_name="Demo", last_name="User")
        return self.user_repo.save(user)

    def projects_for_user(self, user_id: str) -> Optional[List[models.Project]]:
        """Return the projects created by `user_id`, or `None` if the user is unknown."""
        if not self.user_repo.exists(user_id):
            return None
        return self.project_repo.find_by_creator(user_id)


class ProjectService:
    """Create, replace and delete projects."""
    def __init__(self, session: Session):
        self.session = session
        self.project_repo = repositories.ProjectRepository(session)
        self.component_repo = repositories.ComponentRepository(session)

    def list_projects(self) -> List[models.Project]:
        return self.project_repo.list()

    def get_project(self, project_id: str) -> Optional[models.Project]:
        return self.project_repo.get(project_id)

    def create_project(self, data: dict) -> models.Project:
        """Persist a new project.

        Projects submitted without an owner are attributed to the
        configured placeholder user until real authentication exists.
        """
        data = dict(data)
        if data.get("created_by") is None:
            data["created_by"] = settings.DEFAULT_USER_ID
        return self.project_repo.save(models.Project(**data))

    def replace_project(self, project_id: str, data: dict) -> Optional[models.Project]:
        """Overwrite an existing project with `data`.

        The stored id always wins over any id in the body. Returns `None`
        without writing anything when the project does not exist.
        """
        if not self.project_repo.exists(project_id):
            return None
        data = dict(data, id=project_id)
        return self.project_repo.save(models.Project(**data))

    def delete_project(self, project_id: str) -> bool:
        return self.project_repo.delete(project_id)

    def list_components(self, project_id: str) -> Optional[List[models.Component]]:
        """Return the components of a project, or `None` if the project is unknown."""
        if not self.project_repo.exists(project_id):
            return None
        return self.component_repo.list_for_project(project_id)


class ComponentService:
    """Create, replace and delete components of a project."""
    def __init__(self, session: Session):
        self.session = session
        self.component_repo = repositories.ComponentRepository(session)
        self.dependency_repo = repositories.DependencyRepository(session)

    def get_component(self, component_id: str) -> Optional[models.Component]:
        return self.component_repo.get(component_id)

    def create_component(self, data: dict) -> models.Component:
        return self.component_repo.save(models.Component(**data))

    def replace_component(self, component_id: str, data: dict) -> Optional[models.Component]:
        """Overwrite an existing component; `None` when it does not exist."""
        if not self.component_repo.exists(component_id):
            return None
        data = dict(data, id=component_id)
        return self.component_repo.save(models.Component(**data))

    def delete_component(self, component_id: str) -> bool:
        return self.component_repo.delete(component_id)

    def list_dependencies(self, component_id: str) -> Optional[List[models.Dependency]]:
        """Return the dependencies of a component, or `None` if the component is unknown."""
        if not self.component_repo.exists(component_id):
            return None
        return self.dependency_repo.list_for_component(component_id)


class DependencyService:
    """Create, replace and delete Gradle dependencies."""
    def __init__(self, session: Session):
        self.session = session
        self.dependency_repo = repositories.DependencyRepository(session)

    def list_dependencies(self) -> List[models.Dependency]:
        return self.dependency_repo.list()

    def get_dependency(self, dependency_id: str) -> Optional[models.Dependency]:
        return self.dependency_repo.get(dependency_id)

    def create_dependency(self, data: dict) -> models.Dependency:
        """Persist a new dependency, attributing it to the placeholder user if unset."""
        data = dict(data)
        if data.get("added_by") is None:
            data["added_by"] = settings.DEFAULT_USER_ID
        return self.dependency_repo.save(models.Dependency(**data))

    def replace_dependency(self, dependency_id: str, data: dict) -> Optional[models.Dependency]:
        """Overwrite an existing dependency; `None` when it does not exist."""
        if not self.dependency_repo.exists(dependency_id):
            return None
        data = dict(data, id=dependency_id)
        return self.dependency_repo.save(models.Dependency(**data))

    def delete_dependency(self, dependency_id: str) -> bool:
        return self.dependency_repo.delete(dependency_id)
