"""Run a quick smoke test against the app through FastAPI's TestClient.

Creates, fetches and deletes a throwaway project and prints each status.
"""

import sys
import os

# Ensure backend folder is on sys.path so `gradledeps` package can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from gradledeps.main import app


def run():
    client = TestClient(app)
    print('GET /health:', client.get('/health').status_code)
    created = client.post('/projects', json={'name': 'smoke-test'})
    print('POST /projects:', created.status_code, created.json())
    pid = created.json()['id']
    print(f'GET /projects/{pid}:', client.get(f'/projects/{pid}').status_code)
    print(f'DELETE /projects/{pid}:', client.delete(f'/projects/{pid}').status_code)


if __name__ == '__main__':
    run()
