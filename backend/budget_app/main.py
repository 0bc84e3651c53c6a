from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from budget_app.core.config import settings
from budget_app.core.logging import configure_logging, logger
from budget_app.api.router import api_router
from budget_app.db.session import engine
from budget_app.db.base import Base
from budget_app.db import models  # noqa: F401  registers tables on Base.metadata
from budget_app.services.ledger.validators import ValidationError

def create_app() -> FastAPI:
    configure_logging(settings.ENV)
    app = FastAPI(title="Budget Ledger", version="0.1.0")

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        logger.warning("validation_error", path=request.url.path, field=exc.field, error=exc.message)
        return JSONResponse(status_code=422, content={"detail": exc.message, "field": exc.field})

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    # dev convenience; prod databases are provisioned separately
    if settings.ENV == "dev":
        Base.metadata.create_all(bind=engine)

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV)
    return app

app = create_app()
