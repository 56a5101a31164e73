from fastapi.testclient import TestClient
from gradledeps.main import app
from gradledeps.config import settings
from gradledeps.models import GRADLE_SCOPES

client = TestClient(app)


def _project(name='Host'):
    r = client.post('/projects', json={'name': name})
    assert r.status_code == 200
    return r.json()


def _component(project_id, name='app', **extra):
    r = client.post('/components', json={'projectId': project_id, 'name': name, **extra})
    assert r.status_code == 200
    return r.json()


def _dependency(component_id, **extra):
    body = {
        'componentId': component_id, 'groupId': 'org.slf4j', 'artifactId': 'slf4j-api',
        'version': '2.0.9', 'scope': 'implementation',
    }
    body.update(extra)
    return client.post('/dependencies', json=body)


def test_component_crud_and_listing():
    project = _project()
    comp = _component(project['id'], submodulePath='libs/app', description='main module')
    assert comp['submodulePath'] == 'libs/app'
    assert comp['createdAt'] == comp['updatedAt']

    listed = client.get(f"/projects/{project['id']}/components").json()
    assert [c['id'] for c in listed] == [comp['id']]

    r = client.put(f"/components/{comp['id']}", json={**comp, 'name': 'app-renamed'})
    assert r.status_code == 200
    assert r.json()['name'] == 'app-renamed'
    assert r.json()['createdAt'] == comp['createdAt']

    assert client.delete(f"/components/{comp['id']}").status_code == 200
    assert client.get(f"/components/{comp['id']}").status_code == 404
    assert client.get(f"/projects/{project['id']}/components").json() == []


def test_component_requires_existing_project():
    r = client.post('/components', json={'projectId': 'missing-project', 'name': 'x'})
    assert r.status_code == 400


def test_components_of_unknown_project_is_404():
    assert client.get('/projects/nope/components').status_code == 404


def test_put_unknown_component_is_404():
    assert client.put('/components/nope', json={'name': 'x'}).status_code == 404


def test_dependency_defaults_added_by_to_placeholder_user():
    comp = _component(_project()['id'])
    r = _dependency(comp['id'])
    assert r.status_code == 200
    dep = r.json()
    assert dep['addedById'] == settings.DEFAULT_USER_ID
    assert dep['groupId'] == 'org.slf4j'

    listed = client.get(f"/components/{comp['id']}/dependencies").json()
    assert [d['id'] for d in listed] == [dep['id']]
    assert dep['id'] in [d['id'] for d in client.get('/dependencies').json()]


def test_dependency_missing_version_is_rejected():
    comp = _component(_project()['id'])
    r = _dependency(comp['id'], version=None)
    assert r.status_code == 400


def test_dependency_update_and_delete():
    comp = _component(_project()['id'])
    dep = _dependency(comp['id']).json()
    r = client.put(f"/dependencies/{dep['id']}", json={**dep, 'version': '2.0.12', 'scope': 'api'})
    assert r.status_code == 200
    assert r.json()['version'] == '2.0.12'
    assert r.json()['scope'] == 'api'
    assert client.delete(f"/dependencies/{dep['id']}").status_code == 200
    assert client.delete(f"/dependencies/{dep['id']}").status_code == 404


def test_deleting_component_removes_its_dependencies():
    comp = _component(_project()['id'])
    dep = _dependency(comp['id']).json()
    assert client.delete(f"/components/{comp['id']}").status_code == 200
    assert client.get(f"/dependencies/{dep['id']}").status_code == 404


def test_dependencies_of_unknown_component_is_404():
    assert client.get('/components/nope/dependencies').status_code == 404


def test_scopes_endpoint():
    r = client.get('/dependencies/scopes')
    assert r.status_code == 200
    assert r.json() == list(GRADLE_SCOPES)


def test_placeholder_user_and_their_projects():
    project = _project('Owned by demo')
    r = client.get(f'/users/{settings.DEFAULT_USER_ID}')
    assert r.status_code == 200
    assert r.json()['role'] == 'member'
    owned = client.get(f'/users/{settings.DEFAULT_USER_ID}/projects').json()
    assert project['id'] in [p['id'] for p in owned]


def test_unknown_user_is_404():
    assert client.get('/users/nobody').status_code == 404
    assert client.get('/users/nobody/projects').status_code == 404
