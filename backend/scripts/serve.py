"""Run the API with uvicorn.
Usage: python scripts/serve.py [--host HOST] [--port PORT] [--reload]
"""
import sys
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `gradledeps` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
import uvicorn
from gradledeps.config import settings

APP_PATH = "gradledeps.main:app"


def main(host: str = "127.0.0.1", port: int = 8080, reload: bool = False):
    """Serve `gradledeps.main:app`; the front-end expects port 8080."""
    uvicorn.run(APP_PATH, host=host, port=port, reload=reload, log_level=settings.LOG_LEVEL.lower())


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--host', default='127.0.0.1')
    parser.add_argument('--port', type=int, default=8080)
    parser.add_argument('--reload', action='store_true', help='Restart on code changes (development only)')
    args = parser.parse_args()
    main(host=args.host, port=args.port, reload=args.reload)
