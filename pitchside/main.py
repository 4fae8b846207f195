"""Entry point for the Pitchside FastAPI application."""

from fastapi import FastAPI

import pitchside.models  # noqa: F401  register mappers on Base.metadata
from pitchside.api.v1 import router as v1_router
from pitchside.core.config import settings
from pitchside.core.database import Base, engine
from pitchside.core.error_handlers import register_exception_handlers
from pitchside.core.logging_config import configure_logging

configure_logging()

# Ensure database tables exist when the application starts (for development purposes).
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.PROJECT_NAME)

register_exception_handlers(app)

app.include_router(v1_router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok"}
