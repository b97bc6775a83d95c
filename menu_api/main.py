from __future__ import annotations

import json
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from menu_api.api.routes import router as menu_router
from menu_api.core.config import settings
from menu_api.core.errors import MenuItemNotFoundError, MenuValidationError
from menu_api.core.logging import bind_request_id, configure_logging
from menu_api.core.sentry import capture_fault, init_sentry
from menu_api.menu.store import MenuStore

configure_logging(settings.log_level)
logger = structlog.get_logger(__name__)

# Sentry hooks into Starlette/FastAPI classes, so it starts before any app exists
SENTRY_ENABLED = init_sentry()

LANDING_PAGE = "<h1>Server is working!</h1><p>Navigate to /api/menu to see the data.</p>"

_BODY_METHODS = ("POST", "PUT")
_MAX_LOGGED_BODY = 2000


def _body_for_log(raw: bytes) -> Any:
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text[:_MAX_LOGGED_BODY]


def _default_store() -> MenuStore:
    return MenuStore.seeded() if settings.seed_menu else MenuStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "service_started",
        items=len(app.state.store),
        sentry_enabled=SENTRY_ENABLED,
    )
    try:
        yield
    finally:
        logger.info("service_stopped")


def create_app(store: MenuStore | None = None) -> FastAPI:
    # "/api/menu/" is an unknown route, not a redirect to "/api/menu"
    app = FastAPI(title=settings.app_name, lifespan=lifespan, redirect_slashes=False)
    app.state.store = store if store is not None else _default_store()
    app.include_router(menu_router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        bind_request_id(request_id)
        started = time.perf_counter()

        fields: dict[str, Any] = {"method": request.method, "path": request.url.path}
        if settings.log_request_bodies and request.method in _BODY_METHODS:
            fields["body"] = _body_for_log(await request.body())
        logger.info("request_received", **fields)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("unhandled_exception", method=request.method, path=request.url.path)
            capture_fault(exc)
            response = JSONResponse(status_code=500, content={"error": "Internal Server Error"})

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        response.headers["x-request-id"] = request_id
        return response

    @app.exception_handler(MenuValidationError)
    async def menu_validation_handler(request: Request, exc: MenuValidationError):
        logger.warning(
            "menu_validation_failed",
            path=request.url.path,
            fields=[violation.field for violation in exc.errors],
        )
        return JSONResponse(
            status_code=400,
            content={
                "status": "Validation Error",
                "errors": [violation.as_dict() for violation in exc.errors],
            },
        )

    @app.exception_handler(MenuItemNotFoundError)
    async def menu_item_not_found_handler(request: Request, exc: MenuItemNotFoundError):
        logger.info("menu_item_not_found", path=request.url.path, item_id=exc.item_id)
        return JSONResponse(status_code=404, content={"error": "Menu item not found"})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods on known paths look the same to callers
        if exc.status_code in (404, 405):
            logger.info("route_not_found", method=request.method, path=request.url.path)
            return JSONResponse(
                status_code=404,
                content={"error": "Route not found", "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return LANDING_PAGE

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
