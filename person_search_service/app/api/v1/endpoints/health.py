# API Router for Health Checks
from fastapi import APIRouter, Depends
from elasticsearch import AsyncElasticsearch
from typing import Optional
import logging

from person_search_service.infrastructure.search.connection import get_optional_es_client
from person_search_service.app.config import settings

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/health", tags=["Monitoring"])
async def health_check(client: Optional[AsyncElasticsearch] = Depends(get_optional_es_client)):
    elasticsearch_status = "connected"
    if client is None:
        elasticsearch_status = "disconnected"
    else:
        try:
            if not await client.ping():
                elasticsearch_status = "disconnected"
        except Exception as e:
            logger.error(f"Elasticsearch health check ping failed: {e}")
            elasticsearch_status = "disconnected"
    return {"status": "ok", "components": {"elasticsearch": elasticsearch_status}, "service_name": settings.SERVICE_NAME_API}
