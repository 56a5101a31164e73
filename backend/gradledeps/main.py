"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the Gradle dependency manager
backend. Controllers are intentionally thin: they accept requests,
delegate to services, and return JSON responses. Missing records answer
with an empty 404; constraint violations reported by the database
answer with 400.

Endpoints implemented:
- GET/POST /projects, GET/PUT/DELETE /projects/{id}
- GET /projects/{id}/components
- POST /components, GET/PUT/DELETE /components/{id}
- GET /components/{id}/dependencies
- GET/POST /dependencies, GET /dependencies/scopes, GET/PUT/DELETE /dependencies/{id}
- GET /users/{id}, GET /users/{id}/projects
- GET /health
"""

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
from typing import List
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import models, services
from .schemas import (
    ComponentIn, ComponentOut, DependencyIn, DependencyOut,
    ProjectIn, ProjectOut, UserOut,
)
from .config import settings

app = FastAPI(title="Gradle Dependency Manager API")
logger = logging.getLogger("gradledeps.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

create_db_and_tables()


def _request_event(request: Request, started: float, **extra) -> str:
    """One JSON line describing a finished (or failed) request."""
    event = {
        "request_id": request.state.request_id,
        "method": request.method,
        "path": request.url.path,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
    }
    event.update(extra)
    return json.dumps(event, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Tag every request with an `X-Request-ID` and log its outcome."""
    request.state.request_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_failed %s", _request_event(request, started))
        raise
    response.headers["X-Request-ID"] = request.state.request_id
    logger.info("request_done %s", _request_event(request, started, status_code=response.status_code))
    return response


def _not_found() -> Response:
    return Response(status_code=404)


@app.get('/projects', response_model=List[ProjectOut])
def list_projects(db: Session = Depends(get_session)):
    """List every project (possibly an empty array)."""
    projects = services.ProjectService(db).list_projects()
    return [ProjectOut.from_record(p) for p in projects]


@app.get('/projects/{project_id}', response_model=ProjectOut)
def get_project(project_id: str, db: Session = Depends(get_session)):
    project = services.ProjectService(db).get_project(project_id)
    if not project:
        return _not_found()
    return ProjectOut.from_record(project)


@app.post('/projects', response_model=ProjectOut)
def create_project(payload: ProjectIn, db: Session = Depends(get_session)):
    """Create a project and return it with its generated id and timestamps.

    Answers 200 rather than 201, which the front-end relies on. When
    `createdById` is omitted the placeholder user is recorded as owner.
    """
    try:
        project = services.ProjectService(db).create_project(payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ProjectOut.from_record(project)


@app.put('/projects/{project_id}', response_model=ProjectOut)
def update_project(project_id: str, payload: ProjectIn, db: Session = Depends(get_session)):
    """Replace a project with the request body.

    Fields missing from the body are cleared; the id in the path always
    wins over an id in the body.
    """
    try:
        project = services.ProjectService(db).replace_project(project_id, payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if project is None:
        return _not_found()
    return ProjectOut.from_record(project)


@app.delete('/projects/{project_id}')
def delete_project(project_id: str, db: Session = Depends(get_session)):
    """Delete a project together with its components and their dependencies."""
    if not services.ProjectService(db).delete_project(project_id):
        return _not_found()
    return Response(status_code=200)


@app.get('/projects/{project_id}/components', response_model=List[ComponentOut])
def list_project_components(project_id: str, db: Session = Depends(get_session)):
    components = services.ProjectService(db).list_components(project_id)
    if components is None:
        return _not_found()
    return [ComponentOut.from_record(c) for c in components]


@app.post('/components', response_model=ComponentOut)
def create_component(payload: ComponentIn, db: Session = Depends(get_session)):
    """Create a component; `projectId` must name an existing project."""
    try:
        component = services.ComponentService(db).create_component(payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ComponentOut.from_record(component)


@app.get('/components/{component_id}', response_model=ComponentOut)
def get_component(component_id: str, db: Session = Depends(get_session)):
    component = services.ComponentService(db).get_component(component_id)
    if not component:
        return _not_found()
    return ComponentOut.from_record(component)


@app.put('/components/{component_id}', response_model=ComponentOut)
def update_component(component_id: str, payload: ComponentIn, db: Session = Depends(get_session)):
    try:
        component = services.ComponentService(db).replace_component(component_id, payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if component is None:
        return _not_found()
    return ComponentOut.from_record(component)


@app.delete('/components/{component_id}')
def delete_component(component_id: str, db: Session = Depends(get_session)):
    if not services.ComponentService(db).delete_component(component_id):
        return _not_found()
    return Response(status_code=200)


@app.get('/components/{component_id}/dependencies', response_model=List[DependencyOut])
def list_component_dependencies(component_id: str, db: Session = Depends(get_session)):
    dependencies = services.ComponentService(db).list_dependencies(component_id)
    if dependencies is None:
        return _not_found()
    return [DependencyOut.from_record(d) for d in dependencies]


@app.get('/dependencies', response_model=List[DependencyOut])
def list_dependencies(db: Session = Depends(get_session)):
    dependencies = services.DependencyService(db).list_dependencies()
    return [DependencyOut.from_record(d) for d in dependencies]


@app.get('/dependencies/scopes', response_model=List[str])
def list_dependency_scopes():
    """Gradle configurations suggested to clients. Other values are accepted too."""
    return list(models.GRADLE_SCOPES)


@app.post('/dependencies', response_model=DependencyOut)
def create_dependency(payload: DependencyIn, db: Session = Depends(get_session)):
    """Create a dependency, attributed to the placeholder user if `addedById` is omitted."""
    try:
        dependency = services.DependencyService(db).create_dependency(payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DependencyOut.from_record(dependency)


@app.get('/dependencies/{dependency_id}', response_model=DependencyOut)
def get_dependency(dependency_id: str, db: Session = Depends(get_session)):
    dependency = services.DependencyService(db).get_dependency(dependency_id)
    if not dependency:
        return _not_found()
    return DependencyOut.from_record(dependency)


@app.put('/dependencies/{dependency_id}', response_model=DependencyOut)
def update_dependency(dependency_id: str, payload: DependencyIn, db: Session = Depends(get_session)):
    try:
        dependency = services.DependencyService(db).replace_dependency(dependency_id, payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if dependency is None:
        return _not_found()
    return DependencyOut.from_record(dependency)


@app.delete('/dependencies/{dependency_id}')
def delete_dependency(dependency_id: str, db: Session = Depends(get_session)):
    if not services.DependencyService(db).delete_dependency(dependency_id):
        return _not_found()
    return Response(status_code=200)


@app.get('/users/{user_id}', response_model=UserOut)
def get_user(user_id: str, db: Session = Depends(get_session)):
    user = services.UserService(db).get_user(user_id)
    if not user:
        return _not_found()
    return UserOut.from_record(user)


@app.get('/users/{user_id}/projects', response_model=List[ProjectOut])
def list_user_projects(user_id: str, db: Session = Depends(get_session)):
    """List the projects created by a user."""
    projects = services.UserService(db).projects_for_user(user_id)
    if projects is None:
        return _not_found()
    return [ProjectOut.from_record(p) for p in projects]


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
