# Application Configuration using Pydantic BaseSettings
from pydantic_settings import BaseSettings
from typing import List, Optional

class AppSettings(BaseSettings):
    # Elasticsearch
    ELASTICSEARCH_ENDPOINTS: str = "localhost:9200" # host:port, comma separated for several nodes
    ELASTICSEARCH_USERNAME: Optional[str] = None
    ELASTICSEARCH_PASSWORD: Optional[str] = None
    PERSONS_INDEX_NAME: str = "persons"
    ELASTICSEARCH_REFRESH_POLICY: str = "true" # "true", "false" or "wait_for"

    # Bootstrap
    SEED_SAMPLE_DATA: bool = True

    # Observability
    LOG_LEVEL: str = "INFO"
    OTEL_EXPORTER_OTLP_TRACES_ENDPOINT: Optional[str] = None
    OTEL_EXPORTER_OTLP_METRICS_ENDPOINT: Optional[str] = None
    SERVICE_NAME_API: str = "person-search-api"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def elasticsearch_hosts(self) -> List[str]:
        """Splits ELASTICSEARCH_ENDPOINTS into client host URLs, defaulting the scheme to http."""
        hosts = []
        for endpoint in self.ELASTICSEARCH_ENDPOINTS.split(","):
            endpoint = endpoint.strip()
            if not endpoint:
                continue
            if "://" not in endpoint:
                endpoint = f"http://{endpoint}"
            hosts.append(endpoint)
        return hosts

# Instantiate settings to be imported by other modules
settings = AppSettings()

import logging
logger = logging.getLogger(__name__)
logger.info("Application settings module initialized.")
