from fastapi import FastAPI

from deal_structure.entrypoints.http.dependencies import build_default_saver
from deal_structure.entrypoints.http.exception_handlers import register_exception_handlers
from deal_structure.entrypoints.http.routes.deal import router as deal_router
from deal_structure.entrypoints.http.routes.health import router as health_router
from deal_structure.infra.logging_setup import configure_logging
from deal_structure.ports.field_saver import FieldSaver
from deal_structure.use_cases.deal_structure_form import DealStructureForm


def build_app(saver: FieldSaver | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Deal Structure API",
        description="""
        Editable deal structure form for vehicle financing.

        ## Features
        - Live editing of sales price, down payment, warranty, CPI and GAP
        - Commit on blur with back office validation
        - Amount financed recomputed after every successful save

        ## Session
        One in-memory form per running app. Nothing is persisted.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        A rejected save is not an HTTP error: the field reports has_error.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    app.state.deal_form = DealStructureForm(saver=saver or build_default_saver())

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(deal_router, prefix="/v1")

    return app


app = build_app()
