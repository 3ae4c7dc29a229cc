import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.application.use_cases.entitlements.check_due import run_entitlement_check
from app.config import Settings, get_settings
from app.infrastructure import database
from app.infrastructure.scheduler import EntitlementScheduler, build_entitlement_scheduler
from app.interfaces.api.routes import register_routes
from app.utils import get_app_timezone

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configura el registro de la aplicación según ``LOG_LEVEL``."""

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_entitlement_scheduler(settings: Settings) -> EntitlementScheduler:
    """Crea el planificador que revisa incrementos, ascensos y jubilaciones."""

    return build_entitlement_scheduler(
        settings,
        lambda: run_entitlement_check(database.SessionLocal),
        timezone=get_app_timezone(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos y el planificador; los libera al cerrar."""

    settings = get_settings()
    database.initialize_database()
    scheduler: EntitlementScheduler = app.state.entitlement_scheduler
    if settings.enable_scheduler:
        scheduler.start()
    else:
        logger.info("Entitlement scheduler disabled (ENABLE_SCHEDULER=false)")
    try:
        yield
    finally:
        scheduler.stop()
        database.engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title="HR Entitlements API", lifespan=lifespan)
    app.state.entitlement_scheduler = create_entitlement_scheduler(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Refreshed-Token"],
    )

    register_routes(app)
    return app


app = create_app()
