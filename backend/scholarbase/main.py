import logging
from datetime import datetime, timezone

from fastapi import FastAPI, APIRouter, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from scholarbase.config import settings
from scholarbase.core.logging_config import setup_logging
from scholarbase.core.store import store
from scholarbase.dependencies import bearer_not_enforced
from scholarbase.api.v1.endpoints import (
    auth,
    courses,
    enrollments,
    users,
)

logger = logging.getLogger(__name__)

ROUTE_GROUPS = {
    "auth": "/auth",
    "courses": "/courses",
    "users": "/users",
    "enrollments": "/enrollments",
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _strip_trailing_slash(request: Request):
    """Redirect `/courses/` to `/courses` when the catch-all shadowed a real route"""
    path = request.url.path
    if path == "/" or not path.endswith("/"):
        return None

    scope = dict(request.scope, path=path.rstrip("/"))
    for route in request.app.router.routes:
        if getattr(route, "path", None) == "/{full_path:path}":
            continue
        match, _ = route.matches(scope)
        if match != Match.NONE:
            return RedirectResponse(url=str(request.url.replace(path=scope["path"])))
    return None


def get_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        docs_url=settings.DOCS_URL,
        redoc_url="/redoc",
    )

    if settings.SEED_ON_STARTUP:
        store.reset()
        logger.info(
            f"Seeded store: {store.users.count()} users, {store.courses.count()} courses, "
            f"{store.enrollments.count()} enrollments"
        )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal Server Error",
                "message": "Something went wrong" if settings.is_production else str(exc),
                "timestamp": _now(),
            },
        )

    # Register health endpoint
    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        return {
            "status": "healthy",
            "timestamp": _now(),
            "version": settings.APP_VERSION,
        }

    @app.get("/", tags=["health"])
    def api_directory() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": "REST API for Scholarbase learning platform",
            "endpoints": {
                "authentication": ROUTE_GROUPS["auth"],
                "courses": ROUTE_GROUPS["courses"],
                "users": ROUTE_GROUPS["users"],
                "enrollments": ROUTE_GROUPS["enrollments"],
                "documentation": settings.DOCS_URL,
                "health": "/health",
            },
            "documentation_url": f"http://localhost:{settings.port}{settings.DOCS_URL}",
            "status": "active",
        }

    # Legacy greeting kept for older clients
    @app.get("/hello", tags=["health"])
    def hello() -> dict:
        return {
            "message": "Hello from Scholarbase API!",
            "timestamp": _now(),
        }

    # Bearer auth is declared on every router but never enforced
    api_router = APIRouter(prefix=settings.API_PREFIX, dependencies=[Depends(bearer_not_enforced)])

    api_router.include_router(auth.router, prefix=ROUTE_GROUPS["auth"], tags=["auth"])
    api_router.include_router(courses.router, prefix=ROUTE_GROUPS["courses"], tags=["courses"])
    api_router.include_router(users.router, prefix=ROUTE_GROUPS["users"], tags=["users"])
    api_router.include_router(enrollments.router, prefix=ROUTE_GROUPS["enrollments"], tags=["enrollments"])

    app.include_router(api_router)

    # Must stay last: answers every path no route above matched
    @app.api_route(
        "/{full_path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
    async def route_not_found(request: Request, full_path: str):
        redirect = _strip_trailing_slash(request)
        if redirect is not None:
            return redirect
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Not Found",
                "message": f"Route {request.url.path} not found",
                "available_routes": {
                    **{name: f"{settings.API_PREFIX}{path}" for name, path in ROUTE_GROUPS.items()},
                    "docs": settings.DOCS_URL,
                },
            },
        )

    return app


app = get_application()
