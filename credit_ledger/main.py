from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from credit_ledger import __version__
from credit_ledger.core.container import ApplicationContainer, get_container
from credit_ledger.core.logging import configure_logging
from credit_ledger.infrastructure.database import bootstrap_schema
from credit_ledger.interfaces.http import create_api_router
from credit_ledger.interfaces.http.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    if container.settings.database.bootstrap_on_startup:
        await bootstrap_schema(container.database)
    yield
    await container.shutdown()


def create_app(container: Optional[ApplicationContainer] = None) -> FastAPI:
    container = container or get_container()
    settings = container.settings
    configure_logging(level=settings.logging.level, json_logs=settings.logging.json_logs)

    app = FastAPI(
        title=settings.project_name,
        description="Credit ledger: priced operations billed against user balances",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    return app


app = create_app()
