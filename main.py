import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from config.logging_config import setup_logging
from infrastructure.web.errors import register_exception_handlers
from infrastructure.web.controllers.user_controller import router as user_router
from infrastructure.web.controllers.file_controller import router as file_router
from infrastructure.web.controllers.system_controller import router as system_router


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)

    app = FastAPI(title=settings.APP_TITLE)

    # от CORS: фронтенд dev-сервер и сам API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, expose_error_type=not settings.is_production)

    @app.on_event("startup")
    def on_startup():
        Path(settings.UPLOADS_DIR).mkdir(parents=True, exist_ok=True)
        logger.info("Server running at http://%s:%s", settings.HOST, settings.PORT)

    app.include_router(system_router)
    app.include_router(user_router)
    app.include_router(file_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
