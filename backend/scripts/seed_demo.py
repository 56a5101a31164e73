"""CLI script to seed the backend DB with a demo project.
Usage: python scripts/seed_demo.py [--name NAME] [--components N]
"""
import sys
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `gradledeps` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from gradledeps.database import engine, create_db_and_tables
from gradledeps import services

DEMO_DEPENDENCIES = [
    ('org.jetbrains.kotlin', 'kotlin-stdlib', '1.9.22', 'implementation'),
    ('com.squareup.okhttp3', 'okhttp', '4.12.0', 'implementation'),
    ('org.slf4j', 'slf4j-api', '2.0.9', 'api'),
    ('org.junit.jupiter', 'junit-jupiter', '5.10.1', 'testImplementation'),
]


def main(name: str = 'Demo Project', components: int = 2):
    """Create one project with `components` components and a few dependencies each.

    Everything is attributed to the placeholder user. Results are printed
    to stdout for a quick CLI feedback loop.
    """
    create_db_and_tables()
    with Session(engine) as session:
        project = services.ProjectService(session).create_project({
            'name': name,
            'description': 'Seeded by scripts/seed_demo.py',
            'repository_url': 'https://github.com/example/demo',
        })
        print(f'Created project {project.name} ({project.id})')
        comp_svc = services.ComponentService(session)
        dep_svc = services.DependencyService(session)
        for i in range(components):
            comp = comp_svc.create_component({
                'project_id': project.id,
                'name': f'module-{i + 1}',
                'submodule_path': f'modules/module-{i + 1}',
            })
            for group_id, artifact_id, version, scope in DEMO_DEPENDENCIES:
                dep_svc.create_dependency({
                    'component_id': comp.id,
                    'group_id': group_id,
                    'artifact_id': artifact_id,
                    'version': version,
                    'scope': scope,
                })
            print(f'  component {comp.name}: {len(DEMO_DEPENDENCIES)} dependencies')


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--name', default='Demo Project', help='Name of the seeded project')
    parser.add_argument('--components', type=int, default=2, help='Number of components to create')
    args = parser.parse_args()
    main(name=args.name, components=args.components)
