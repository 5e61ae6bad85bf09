import logging
from typing import Iterable, Optional

from fastapi import APIRouter, FastAPI

from scaffold import __version__
from scaffold.core.config import settings

log = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get("/health")
def health():
    return {"status": "ok"}


def create_app(routers: Iterable[APIRouter] = (), title: Optional[str] = None) -> FastAPI:
    """Build a FastAPI app serving the given generated module routers."""
    app = FastAPI(title=title or settings.app_name, version=__version__)
    app.include_router(health_router, tags=["health"])
    for router in routers:
        log.info("Mounting router", extra={"resource": router.prefix or "-"})
        app.include_router(router)
    return app
