"""FastAPI application entry point.

One DictionarySession is built in the lifespan from environment
configuration and shared by every request through ``get_session``.
"""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from dotenv import load_dotenv

# .env must be loaded before adapter modules read their settings
load_dotenv()

# main.py lives in src/api/, imports are rooted at src/
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from adapter.connectivity.http_probe import HttpConnectivityMonitor
from api.dependencies import build_key_value_store, build_session
from api.routes import dictionary, favorites, health, playback
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

SERVICE_NAME = "Pocket Dictionary API"


def _read_version() -> str:
    with open(_src_path.parent / "pyproject.toml", "rb") as f:
        return tomllib.load(f)["project"]["version"]


VERSION = _read_version()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build and start the session; release it and its backends on shutdown."""
    store = build_key_value_store()
    connectivity = HttpConnectivityMonitor()
    session = build_session(store, connectivity=connectivity)
    await session.start()
    app.state.session = session

    try:
        yield
    finally:
        await session.close()
        await connectivity.close()
        await store.close()
        logger.info("Dictionary API stopped")


app = FastAPI(
    title=SERVICE_NAME,
    description="Local API for English word lookups, favorites and pronunciation playback",
    version=VERSION,
    lifespan=lifespan,
)

for module in (health, dictionary, favorites, playback):
    app.include_router(module.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": SERVICE_NAME, "version": VERSION, "status": "running"}


if __name__ == "__main__":
    import uvicorn
    # Structured application logs replace uvicorn's access log
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", 8000)),
        access_log=False,
    )
