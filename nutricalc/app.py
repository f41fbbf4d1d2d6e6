from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Local application imports
from nutricalc.application.nutrition_calculator.orchestrators.energy_plan_orchestrator import (  # noqa: E501
    EnergyPlanOrchestrator,
)
from nutricalc.application.nutrition_calculator.queries.get_micronutrient_recommendations import (  # noqa: E501
    GetMicronutrientRecommendationsQueryHandler,
)
from nutricalc.config import get_app_version, get_log_level, get_macro_target_tolerance
from nutricalc.domain.nutrition_calculator.calculation import (
    GEBService,
    GETService,
    MacroService,
    MicronutrientService,
)
from nutricalc.graphql.context import GraphQLContext
from nutricalc.graphql.schema import create_schema

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("nutricalc.app")

APP_VERSION = get_app_version()

# Stateless services, shared across requests
_geb_service = GEBService()
_get_service = GETService()
_macro_service = MacroService(target_tolerance=get_macro_target_tolerance())
_micronutrient_service = MicronutrientService()
_energy_plan_orchestrator = EnergyPlanOrchestrator(
    geb_service=_geb_service,
    get_service=_get_service,
    macro_service=_macro_service,
)
_micronutrient_handler = GetMicronutrientRecommendationsQueryHandler(_micronutrient_service)

schema = create_schema()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger.info("lifespan.ready", extra={"version": APP_VERSION})
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Nutrition Calculator",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


async def get_graphql_context(request: Request) -> GraphQLContext:
    """Build the per-request GraphQL context around the shared services."""
    return GraphQLContext(
        geb_calculator=_geb_service,
        get_calculator=_get_service,
        macro_calculator=_macro_service,
        energy_plan_orchestrator=_energy_plan_orchestrator,
        micronutrient_handler=_micronutrient_handler,
        request=request,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
