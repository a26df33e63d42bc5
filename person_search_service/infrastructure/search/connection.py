from person_search_service.app.config import settings
from person_search_service.app.service.exceptions import ConfigurationError, SearchIndexUnavailableError
import asyncio
import logging
from elasticsearch import AsyncElasticsearch
from typing import Optional

logger = logging.getLogger(__name__)

_REFRESH_POLICIES = {"true": True, "false": False, "wait_for": "wait_for"}

# Global client, managed by connect/close functions
client: Optional[AsyncElasticsearch] = None
_connect_lock = asyncio.Lock()

def refresh_policy():
    """Maps ELASTICSEARCH_REFRESH_POLICY to the value the client expects for `refresh=`."""
    policy = settings.ELASTICSEARCH_REFRESH_POLICY.strip().lower()
    if policy not in _REFRESH_POLICIES:
        raise ConfigurationError(
            f"ELASTICSEARCH_REFRESH_POLICY must be one of {sorted(_REFRESH_POLICIES)}, got '{settings.ELASTICSEARCH_REFRESH_POLICY}'"
        )
    return _REFRESH_POLICIES[policy]

def create_client() -> AsyncElasticsearch:
    hosts = settings.elasticsearch_hosts()
    if not hosts:
        raise ConfigurationError("ELASTICSEARCH_ENDPOINTS is empty.")
    basic_auth = None
    if settings.ELASTICSEARCH_USERNAME:
        basic_auth = (settings.ELASTICSEARCH_USERNAME, settings.ELASTICSEARCH_PASSWORD or "")
    return AsyncElasticsearch(hosts, basic_auth=basic_auth)

async def connect_to_elasticsearch() -> AsyncElasticsearch:
    global client
    async with _connect_lock:
        if client is not None:
            logger.info("Elasticsearch client already initialized.")
            return client

        new_client = create_client()
        try:
            logger.info(f"Attempting to connect to Elasticsearch at {settings.ELASTICSEARCH_ENDPOINTS}...")
            info = await new_client.info()
            logger.info(
                f"Successfully connected to Elasticsearch {info['version']['number']} "
                f"(cluster '{info['cluster_name']}')."
            )
        except Exception as e:
            logger.error(f"Failed to connect to Elasticsearch: {e}", exc_info=True)
            await new_client.close()
            raise SearchIndexUnavailableError(f"Failed to connect to Elasticsearch: {e}") from e
        client = new_client
        return client

async def close_elasticsearch_connection():
    global client
    if client is not None:
        await client.close()
        client = None
        logger.info("Elasticsearch connection closed.")

async def get_es_client():
    if client is None:
        logger.warning("Elasticsearch client not initialized. Attempting to connect via get_es_client().")
        await connect_to_elasticsearch()

    yield client

async def get_optional_es_client():
    """Like get_es_client, but yields None instead of raising when the cluster is unreachable."""
    if client is None:
        try:
            await connect_to_elasticsearch()
        except SearchIndexUnavailableError as e:
            logger.warning(f"Elasticsearch client unavailable: {e}")

    yield client
