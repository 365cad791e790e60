import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from pastebin.adapter.services.expiration_sweeper import ExpirationSweeper
        from pastebin.depends import AsyncSessionLocal, engine

        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        sweeper = ExpirationSweeper(
            AsyncSessionLocal, interval_seconds=ApplicationConfig.SWEEP_INTERVAL_SECONDS
        )
        app.state.sweeper = sweeper
        if ApplicationConfig.ENABLE_SWEEPER:
            sweeper.start()
        logger.info("Pastebin service starting up")
        try:
            yield
        finally:
            await sweeper.stop()
            await engine.dispose()
            logger.info("Pastebin service shutting down")

    app = FastAPI(title="Pastebin", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from pastebin.api.routes import admin, api_keys, auth, health_check, pastes

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(pastes.router, tags=["Pastes"])
    app.include_router(pastes.build_serve_router(ApplicationConfig.SERVE_PATH), tags=["Pastes"])
    app.include_router(api_keys.router, tags=["API Keys"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
