"""MyLocations — FastAPI backend and server-rendered UI."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils.config import BACKEND_DIR, CORS_ORIGINS, DATABASE_URL, LOG_LEVEL, PORT

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.locations import router as locations_router
from api.pages import router as pages_router
from api.routes import router
from db import SessionLocal
from models import Base

LOG = logging.getLogger(__name__)

ALEMBIC_INI = os.path.join(BACKEND_DIR, "alembic.ini")

app = FastAPI(
    title="MyLocations",
    description="Store, list, view and delete your favorite locations",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(locations_router, prefix="/api")
app.include_router(pages_router)


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations against the configured database, wherever the process was started."""
    if not os.path.isfile(ALEMBIC_INI):
        # Installed without the migration scripts: build the schema from the models.
        LOG.warning("%s not found, creating tables from the models", ALEMBIC_INI)
        Base.metadata.create_all(SessionLocal.kw["bind"])
        return
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "-c", ALEMBIC_INI, "upgrade", "head"],
        cwd=BACKEND_DIR,
        env={**os.environ, "DATABASE_URL": DATABASE_URL},
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Database schema is up to date")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)
