import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.config import Settings, get_settings
from storefront.core.logs import configure_logging
from storefront.repositories.json_storage import Storage
from storefront.routers import auth as auth_router
from storefront.routers import pages as pages_router
from storefront.routers import products as products_router
from storefront.routers import users as users_router
from storefront.services.auth_service import AdminAuthService
from storefront.services.product_service import ProductService
from storefront.services.session_service import InMemorySessionStore, SessionStore
from storefront.services.user_service import UserService

logger = logging.getLogger(__name__)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def create_app(settings: Optional[Settings] = None, sessions: Optional[SessionStore] = None) -> FastAPI:
    """
    Build the storefront app. Collaborators are wired here and published on
    app.state; pass ``sessions`` to back admin sessions with another store.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Storefront API")
    storage = Storage.at(settings.data_dir)
    sessions = sessions if sessions is not None else InMemorySessionStore()

    app.state.settings = settings
    app.state.storage = storage
    app.state.sessions = sessions
    app.state.admin_auth = AdminAuthService(settings, sessions)
    app.state.product_service = ProductService(storage.products)
    app.state.user_service = UserService(settings, storage.users)

    app.add_exception_handler(StarletteHTTPException, _http_error)

    app.include_router(auth_router.router)
    app.include_router(products_router.router)
    app.include_router(users_router.router)
    app.include_router(pages_router.router)

    # Static site last so it never shadows an API route.
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.info("Static directory %s not found; serving the API only", settings.static_dir)

    logger.info("Storefront configured (data=%s, static=%s)", settings.data_dir, settings.static_dir)
    return app


app = create_app()
