# Integration tests start a throwaway Elasticsearch node through Testcontainers.
# Point them at an existing cluster instead with
#   ELASTICSEARCH_TEST_ENDPOINTS=localhost:9200 pytest person_search_service/tests/integration
import os

import pytest

ELASTICSEARCH_IMAGE = "docker.elastic.co/elasticsearch/elasticsearch:8.15.0"

@pytest.fixture(scope="session")
def elasticsearch_endpoints():
    configured = os.environ.get("ELASTICSEARCH_TEST_ENDPOINTS")
    if configured:
        yield configured
        return

    from testcontainers.elasticsearch import ElasticSearchContainer

    try:
        container = ElasticSearchContainer(ELASTICSEARCH_IMAGE, mem_limit="1G")
        container.start()
    except Exception as e:  # docker daemon missing or unreachable
        pytest.skip(f"Docker is not available for an Elasticsearch container: {e}")
    try:
        yield container.get_url()
    finally:
        container.stop()
