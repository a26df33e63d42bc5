# FastAPI Application Entry Point
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Configuration and Observability
from person_search_service.app.config import settings
from person_search_service.app.observability import setup_opentelemetry, logger

# Initialize OpenTelemetry
setup_opentelemetry(service_name=settings.SERVICE_NAME_API)

# Import instrumentors after OTel SDK is initialized.
# AsyncElasticsearch emits its own spans through the global tracer provider.
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

# Search index connection and mapping
from person_search_service.infrastructure.search.connection import (
    connect_to_elasticsearch, close_elasticsearch_connection, refresh_policy,
)
from person_search_service.infrastructure.search.converters import default_conversions
from person_search_service.infrastructure.search.mapping import build_person_mapping
from person_search_service.infrastructure.search.person_repository import PersonRepository
from person_search_service.app.bootstrap import seed_sample_persons
from person_search_service.app.service.exceptions import SearchIndexUnavailableError

# API Routers
from person_search_service.app.api.v1.endpoints import health as health_router
from person_search_service.app.api.v1.endpoints import persons as persons_router


async def startup_event():
    logger.info("FastAPI application startup...")
    app.state.person_mapping = build_person_mapping(default_conversions(), index_name=settings.PERSONS_INDEX_NAME)
    try:
        client = await connect_to_elasticsearch()
        logger.info("Elasticsearch connection established.")

        repository = PersonRepository(client, app.state.person_mapping, refresh=refresh_policy())
        await repository.ensure_index()

        if settings.SEED_SAMPLE_DATA:
            await seed_sample_persons(repository)
            logger.info("Sample persons seeded.")

    except Exception as e:
        logger.error(f"Failed during startup: {e}", exc_info=True)


async def shutdown_event():
    logger.info("FastAPI application shutdown...")
    await close_elasticsearch_connection()
    logger.info("Elasticsearch connection closed.")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await startup_event()
    yield
    await shutdown_event()


# --- FastAPI Application Instance ---
app = FastAPI(
    title="Person Search Service",
    description="Stores Person documents in Elasticsearch and serves lookups over them.",
    version="0.1.0",
    lifespan=lifespan,
)

FastAPIInstrumentor.instrument_app(app)
logger.info("FastAPI instrumentation complete.")


@app.exception_handler(SearchIndexUnavailableError)
async def search_index_unavailable_handler(request: Request, exc: SearchIndexUnavailableError):
    logger.error(f"Request to {request.url.path} failed, search index unavailable: {exc}")
    return JSONResponse(status_code=503, content={"detail": f"Search index unavailable: {exc}"})

# Include API Routers
app.include_router(health_router.router)
app.include_router(persons_router.router, prefix="/api/v1")

logger.info("API routers included. Application setup complete.")

# To run: uvicorn person_search_service.app.main:app --reload --port 8080
