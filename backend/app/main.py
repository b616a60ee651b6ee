import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api import state
from app.api.router import api_router
from app.dashboard.utils import env_flag


def create_app() -> FastAPI:
    # Load .env files if present (dev convenience; files are gitignored).
    here = Path(__file__).resolve()
    backend_dir = here.parents[1]  # backend/
    repo_root = here.parents[2]  # repo root
    load_dotenv(repo_root / ".env", override=False)
    load_dotenv(backend_dir / ".env", override=False)

    logging.basicConfig(
        level=os.getenv("INCIDENT_DASHBOARD_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    state.reset(seed=env_flag(os.getenv("INCIDENT_DASHBOARD_SEED"), default=True))

    app = FastAPI(
        title="Incident Dashboard API",
        version="0.1.0",
        description="List, filter and sort safety-incident reports and submit new ones.",
        openapi_version="3.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    cors_origins = os.getenv(
        "INCIDENT_DASHBOARD_CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cors_origins if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"ok": True}

    # Dashboard page build, when shipped alongside the API
    static_dir = Path(__file__).parent.parent / "static"
    if static_dir.exists():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app


app = create_app()
