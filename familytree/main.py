from __future__ import annotations

import logging

from fastapi import FastAPI

try:
    from .config import load_log_level
    from .routes.layout import router as layout_router
except ImportError:  # pragma: no cover
    # Support running with CWD=familytree (e.g., `python -m uvicorn main:app`).
    from config import load_log_level
    from routes.layout import router as layout_router

# Level for the layout engine loggers (familytree.*); handlers come from the server.
logging.getLogger("familytree").setLevel(load_log_level())

app = FastAPI(title="Family Tree API", version="0.1.0")
app.include_router(layout_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"ok": "true"}
