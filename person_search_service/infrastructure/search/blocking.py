# Synchronous facade over PersonRepository for setup and teardown code
import asyncio
import logging
from typing import List, Optional

from person_search_service.app.config import settings
from person_search_service.app.models.person_db import PersonDB
from .connection import create_client, refresh_policy
from .converters import default_conversions
from .mapping import build_person_mapping
from .person_repository import PersonRepository

logger = logging.getLogger(__name__)


class BlockingPersonRepository:
    """
    Runs PersonRepository operations to completion on a private event loop.

    For seed scripts and test fixtures only. Every call blocks the calling
    thread, and calling it from inside a running event loop raises
    RuntimeError.
    """

    def __init__(self, repository: PersonRepository):
        self.repository = repository
        self._runner = asyncio.Runner()

    @classmethod
    def from_settings(cls) -> "BlockingPersonRepository":
        mapping = build_person_mapping(default_conversions(), index_name=settings.PERSONS_INDEX_NAME)
        return cls(PersonRepository(create_client(), mapping, refresh=refresh_policy()))

    def ensure_index(self) -> bool:
        return self._runner.run(self.repository.ensure_index())

    def save(self, person: PersonDB) -> PersonDB:
        return self._runner.run(self.repository.save(person))

    def find_by_id(self, person_id: str) -> Optional[PersonDB]:
        return self._runner.run(self.repository.find_by_id(person_id))

    def find_by_first_name(self, first_name: str) -> Optional[PersonDB]:
        return self._runner.run(self.repository.find_by_first_name(first_name))

    def find_all(self) -> List[PersonDB]:
        async def collect():
            return [person async for person in self.repository.find_all()]
        return self._runner.run(collect())

    def count(self) -> int:
        return self._runner.run(self.repository.count())

    def delete_all(self) -> None:
        self._runner.run(self.repository.delete_all())

    def close(self) -> None:
        try:
            self._runner.run(self.repository.client.close())
        finally:
            self._runner.close()
            logger.info("Blocking repository closed.")

    def __enter__(self) -> "BlockingPersonRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
