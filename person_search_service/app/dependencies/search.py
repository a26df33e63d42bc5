from fastapi import Depends, Request
from elasticsearch import AsyncElasticsearch

from person_search_service.app.service.interfaces.person_service import AbstractPersonService
from person_search_service.app.service.person_service import PersonService
from person_search_service.infrastructure.search.connection import get_es_client, refresh_policy
from person_search_service.infrastructure.search.mapping import DocumentMapping
from person_search_service.infrastructure.search.person_repository import PersonRepository

async def get_person_mapping(request: Request) -> DocumentMapping:
    """
    FastAPI dependency provider for the Person document mapping.
    Retrieves the mapping built at startup (`request.app.state.person_mapping`).
    """
    return request.app.state.person_mapping

def get_person_repository(
    client: AsyncElasticsearch = Depends(get_es_client),
    mapping: DocumentMapping = Depends(get_person_mapping),
) -> PersonRepository:
    return PersonRepository(client, mapping, refresh=refresh_policy())

def get_person_service(
    repository: PersonRepository = Depends(get_person_repository),
) -> AbstractPersonService:
    return PersonService(repository)
