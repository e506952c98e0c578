"""FastAPI application entrypoint. No business logic; only wiring, access control and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from electroleed import __version__
from electroleed.api import router as api_router
from electroleed.core.config import settings
from electroleed.core.errors import AuthError
from electroleed.security.gate import enforce_access, guard_unrouted_request

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Electroleed API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    dependencies=[Depends(enforce_access)],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """Turn domain errors into {"error": message} with the error's status code."""
    if exc.status_code >= 500:
        logger.error("Request failed: %s", exc.message, extra={"path": request.url.path})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Unmatched paths still go through the gate and access rules, so a gated
    area answers 400/401/403 before revealing which of its routes exist.
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        try:
            await run_in_threadpool(guard_unrouted_request, request)
        except AuthError as err:
            return await auth_error_handler(request, err)
    return await http_exception_handler(request, exc)


app.include_router(api_router)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Electroleed API"}
