import importlib.util
from pathlib import Path

from gradledeps.config import settings

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "serve.py"


def _load_serve():
    module_spec = importlib.util.spec_from_file_location("serve_script", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_serve_runs_the_api_app_with_uvicorn(monkeypatch):
    serve = _load_serve()
    calls = []
    monkeypatch.setattr(serve.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    serve.main(host="0.0.0.0", port=9000)
    assert calls == [("gradledeps.main:app", {"host": "0.0.0.0", "port": 9000, "reload": False, "log_level": settings.LOG_LEVEL.lower()})]
