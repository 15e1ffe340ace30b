"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from riskcalc.config import settings
from riskcalc.database import create_db_and_tables
from riskcalc.utils.logging import setup_logging
from riskcalc.api import trades, system


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    setup_logging()
    create_db_and_tables()
    yield


app = FastAPI(
    title="Trade Risk Calculator",
    description="Profit/loss, risk/reward and risk level for leveraged trades, with trade history",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(trades.router)
app.include_router(system.router)


def mount_frontend(app: FastAPI, dist: Path):
    """Serve a built SPA from dist. Unknown paths fall back to index.html.

    Must be called after all API routers are included.
    """
    from fastapi.responses import FileResponse

    root = dist.resolve()
    app.mount("/assets", StaticFiles(directory=str(root / "assets")), name="static-assets")

    @app.get("/{path:path}", include_in_schema=False)
    async def serve_spa(path: str):
        file = (root / path).resolve()
        if file.is_file() and file.is_relative_to(root):
            return FileResponse(str(file))
        return FileResponse(str(root / "index.html"))


# Serve frontend static files in production.
# Skip when CORS origins include localhost dev server (i.e. Vite is running separately).
_frontend_dist = Path(__file__).resolve().parent.parent / "frontend" / "dist"
_is_dev = any("localhost" in o or "127.0.0.1" in o for o in settings.cors_origins)
if _frontend_dist.exists() and not _is_dev:
    mount_frontend(app, _frontend_dist)
