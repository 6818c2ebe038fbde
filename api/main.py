import asyncio
import logging
import os
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from core import db, errors
from core.log import configure_logging
from core.supervisor import Supervisor
from entries import router as entries_router
from places import router as places_router
from timeline import router as timeline_router

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "").strip() or DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Historical News Archive", lifespan=lifespan)

# Allow the React frontend to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(entries_router.router, tags=["entries"])
app.include_router(timeline_router.router, tags=["timeline"])
app.include_router(places_router.router, tags=["places"])


@app.exception_handler(errors.MissingParameter)
@app.exception_handler(errors.InvalidParameter)
async def bad_request(_: Request, exc: ValueError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=400)


@app.exception_handler(db.StoreError)
async def store_failure(request: Request, exc: db.StoreError) -> PlainTextResponse:
    logger.error("store_failure path=%s error=%s", request.url.path, exc, exc_info=exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def run() -> None:
    """
    Serve the API under the fail-fast supervisor and exit with its status.
    """
    configure_logging()
    config = uvicorn.Config(
        app,
        host=os.environ.get("HOST", "").strip() or "0.0.0.0",
        port=_env_int("PORT", 3050),
        log_config=None,
    )
    supervisor = Supervisor(uvicorn.Server(config))
    sys.exit(asyncio.run(supervisor.serve()))


if __name__ == "__main__":
    run()
