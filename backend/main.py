from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formbridge.api import diagnostics, webhook
from formbridge.core.config import Settings, get_settings
from formbridge.core.errors import register_error_handlers
from formbridge.core.logging import CorrelationIdMiddleware, logger, setup_logging
from formbridge.services.board_client import BoardClient


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    app = FastAPI(
        title="Forms to Board Bridge",
        description="Forwards Google Forms submissions as new items on a monday.com board",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    board_config = settings.board_config()
    if not board_config.is_complete:
        logger.warning("MONDAY_API_TOKEN or MONDAY_BOARD_ID missing; item creation will fail")
    app.state.board_client = BoardClient(board_config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)
    register_error_handlers(app)

    app.include_router(diagnostics.router, tags=["diagnostics"])
    app.include_router(webhook.router, tags=["webhook"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
