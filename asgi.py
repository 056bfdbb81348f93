"""ASGI entry for the visitor weather box.

The `app` package lives under `backend/`; this module puts it on the path so
the service can be served from the repository root on its fixed port:

  uvicorn asgi:app --host 0.0.0.0 --port 8080

Set OPENWEATHERMAP_API_KEY (environment or `.env`) before starting, or every
box request answers "Unable to fetch weather data".
"""
import os
import sys

# Ensure backend is on sys.path so `app` package is importable
ROOT = os.path.dirname(__file__)
BACKEND_PATH = os.path.join(ROOT, "backend")
if BACKEND_PATH not in sys.path:
    sys.path.insert(0, BACKEND_PATH)

from app.main import app  # noqa: E402,F401  (GET / box and /health)
