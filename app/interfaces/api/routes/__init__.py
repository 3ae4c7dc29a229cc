from fastapi import FastAPI

from .allowance_promotions import router as allowance_promotions_router
from .appreciations import router as appreciations_router
from .auth import router as auth_router
from .catalogs import (
    educational_qualifications_router,
    job_titles_router,
    workplaces_router,
)
from .employees import router as employees_router
from .notifications import router as notifications_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(employees_router)
    app.include_router(allowance_promotions_router)
    app.include_router(appreciations_router)
    app.include_router(workplaces_router)
    app.include_router(job_titles_router)
    app.include_router(educational_qualifications_router)
    app.include_router(notifications_router)
