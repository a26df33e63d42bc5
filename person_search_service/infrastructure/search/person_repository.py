# Async repository for Person documents in the search index
import logging
from typing import AsyncIterator, Iterable, List, Optional, Union

from elasticsearch import AsyncElasticsearch, NotFoundError
from elasticsearch.helpers import async_scan

from person_search_service.app.models.person_db import PersonDB
from person_search_service.app.observability import persons_saved_counter, search_queries_counter
from person_search_service.app.service.exceptions import MissingDocumentIdError
from .mapping import DocumentMapping
from .queries import FIRST_NAME_QUERY, QuerySpec

logger = logging.getLogger(__name__)

RefreshPolicy = Union[bool, str]


class PersonRepository:
    """
    CRUD operations plus a first-name lookup over the persons index.

    Every operation is awaited against the shared AsyncElasticsearch client.
    Client errors are not caught here; they reach the caller unchanged.
    """

    def __init__(self, client: AsyncElasticsearch, mapping: DocumentMapping, refresh: RefreshPolicy = True):
        self.client = client
        self.mapping = mapping
        self.refresh = refresh

    @property
    def index_name(self) -> str:
        return self.mapping.index_name

    async def ensure_index(self) -> bool:
        """Creates the index with its field mapping unless it already exists. Returns True if created."""
        if await self.client.indices.exists(index=self.index_name):
            logger.info(f"Index '{self.index_name}' already exists.")
            return False
        body = self.mapping.index_body()
        await self.client.indices.create(index=self.index_name, mappings=body["mappings"])
        logger.info(f"Index '{self.index_name}' created with mapping: {body['mappings']}")
        return True

    async def save(self, person: PersonDB) -> PersonDB:
        person_id = self.mapping.document_id(person)
        if not person_id:
            raise MissingDocumentIdError(self.index_name)

        await self.client.index(
            index=self.index_name,
            id=person_id,
            document=self.mapping.to_document(person),
            refresh=self.refresh,
        )
        persons_saved_counter.add(1)
        logger.info(f"Person document indexed for ID: {person_id}")
        return person

    async def save_all(self, persons: Iterable[PersonDB]) -> List[PersonDB]:
        return [await self.save(person) for person in persons]

    async def find_by_id(self, person_id: str) -> Optional[PersonDB]:
        search_queries_counter.add(1, {"query": "by_id"})
        try:
            response = await self.client.get(index=self.index_name, id=person_id)
        except NotFoundError:
            return None
        return self.mapping.from_document(response["_source"], doc_id=response["_id"])

    async def exists_by_id(self, person_id: str) -> bool:
        return bool(await self.client.exists(index=self.index_name, id=person_id))

    async def count(self) -> int:
        response = await self.client.count(index=self.index_name)
        return response["count"]

    async def find_all(self) -> AsyncIterator[PersonDB]:
        search_queries_counter.add(1, {"query": "all"})
        async for hit in async_scan(self.client, index=self.index_name, query={"query": {"match_all": {}}}):
            yield self.mapping.from_document(hit["_source"], doc_id=hit["_id"])

    async def find_by(self, spec: QuerySpec, value: str, size: int = 10) -> List[PersonDB]:
        search_queries_counter.add(1, {"query": spec.field})
        response = await self.client.search(index=self.index_name, query=spec.build(value), size=size)
        return [
            self.mapping.from_document(hit["_source"], doc_id=hit["_id"])
            for hit in response["hits"]["hits"]
        ]

    async def find_one_by(self, spec: QuerySpec, value: str) -> Optional[PersonDB]:
        matches = await self.find_by(spec, value, size=1)
        return matches[0] if matches else None

    async def find_by_first_name(self, first_name: str) -> Optional[PersonDB]:
        return await self.find_one_by(FIRST_NAME_QUERY, first_name)

    async def delete_by_id(self, person_id: str) -> None:
        try:
            await self.client.delete(index=self.index_name, id=person_id, refresh=self.refresh)
        except NotFoundError:
            logger.info(f"Person document {person_id} not found in '{self.index_name}', nothing to delete.")
            return
        logger.info(f"Person document deleted for ID: {person_id}")

    async def delete_all(self) -> None:
        response = await self.client.delete_by_query(
            index=self.index_name,
            query={"match_all": {}},
            refresh=self.refresh is not False,
            conflicts="proceed",
        )
        logger.info(f"Deleted {response.get('deleted', 0)} documents from '{self.index_name}'.")
