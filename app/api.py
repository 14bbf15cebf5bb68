import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import security
from app.routes import listings, pages, push
from core.database import init_db
from core.errors import NotFound, StoreFailure

# Ensure .env values are loaded even if uvicorn is launched without `dotenv run`.
# Use override=True so editing `.env` (and restarting uvicorn) reliably takes effect even if
# older values exist in the environment from a previous shell/session.
load_dotenv(override=True)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="SarkariJob Portal", lifespan=lifespan)


app.include_router(listings.router)
app.include_router(push.router)
app.include_router(pages.router)


@app.exception_handler(StoreFailure)
async def store_failure_handler(request: Request, exc: StoreFailure):
    log.error("Store failure", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse({"error": str(exc)}, status_code=500)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse({"error": str(exc)}, status_code=404)


@app.exception_handler(StarletteHTTPException)
async def unknown_path_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    if request.url.path.startswith("/api/"):
        return JSONResponse({"error": "Not found"}, status_code=404)
    return pages.render_not_found()


@app.middleware("http")
async def rate_limit_api(request: Request, call_next):
    if not request.url.path.startswith("/api/"):
        return await call_next(request)

    ip = request.client.host if request.client else "unknown"
    allowed, remaining = security.allow_request_with_remaining(
        f"api:{ip}",
        limit=security.API_RATE_LIMIT,
        window_seconds=security.API_RATE_WINDOW_SECONDS,
    )
    if not allowed:
        log.warning("Rate limit hit", extra={"ip": ip, "path": request.url.path})
        return JSONResponse({"error": "Too many requests"}, status_code=429)

    response = await call_next(request)
    response.headers["X-RateLimit-Remaining"] = str(remaining)
    return response


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
    response.headers.setdefault(
        "Content-Security-Policy",
        "default-src 'self'; img-src 'self' data: https:; style-src 'self' 'unsafe-inline'; "
        "script-src 'self' 'unsafe-inline'; font-src 'self' data:; connect-src 'self';",
    )
    return response
