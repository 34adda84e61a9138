import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nodeloom.config import Settings, configure_logging, get_settings
from nodeloom.dependencies import build_services
from nodeloom.domain.errors import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from nodeloom.remote.gateway import RemoteStoreGateway
from nodeloom.routers import auth, health, users, workspaces

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, gateway: RemoteStoreGateway | None = None) -> FastAPI:
    """Build the application with its services wired once, up front."""
    settings = settings or get_settings()
    configure_logging(settings)
    services = build_services(settings, gateway=gateway)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"NodeLoom API {settings.VERSION} starting in {settings.MODE} mode")
        yield
        services.gateway.close()

    app = FastAPI(
        title="NodeLoom API",
        description="Users and workspace graphs backed by a hosted REST store",
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allows all origins
        allow_credentials=True,
        allow_methods=["*"],  # Allows all methods
        allow_headers=["*"],  # Allows all headers
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router, prefix=settings.API_PREFIX, tags=["Health"])
    app.include_router(auth.router, prefix=settings.API_PREFIX, tags=["Auth"])
    app.include_router(users.router, prefix=settings.API_PREFIX, tags=["Users"])
    app.include_router(workspaces.router, prefix=settings.API_PREFIX, tags=["Workspaces"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to NodeLoom API. See /docs for API documentation"}

    return app


def register_exception_handlers(app: FastAPI) -> None:
    # Malformed bodies and path parameters are client errors, not 422s
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    # Domain error handlers
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=401,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error(
            f"{request.method} {request.url.path}: {exc} (upstream status {exc.status_code}, body: {exc.body})"
        )
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(TransportError)
    async def transport_error_handler(request: Request, exc: TransportError):
        logger.error(f"{request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Remote store is unreachable"})

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error(f"{request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Server is misconfigured"})
