import os
import shutil
import tempfile
from pathlib import Path
import pytest
from sqlmodel import Session

# Point the app at a throwaway database before `gradledeps.config` is imported.
_DB_DIR = Path(tempfile.mkdtemp(prefix="gradledeps_test_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(scope="session", autouse=True)
def reset_db():
    """Remove the temporary SQLite database once the run is over."""
    yield
    shutil.rmtree(_DB_DIR, ignore_errors=True)


@pytest.fixture
def session():
    """A session on the test database with all tables in place."""
    from gradledeps.database import create_db_and_tables, engine
    create_db_and_tables()
    with Session(engine) as s:
        yield s
