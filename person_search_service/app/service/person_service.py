from typing import AsyncIterator, Optional

from person_search_service.app.models.person_db import PersonDB
from person_search_service.app.service.interfaces.person_service import AbstractPersonService
from person_search_service.infrastructure.search.person_repository import PersonRepository


class PersonService(AbstractPersonService):
    def __init__(self, repository: PersonRepository):
        self.repository = repository

    def get_all_persons(self) -> AsyncIterator[PersonDB]:
        return self.repository.find_all()

    async def get_person_by_name(self, first_name: str) -> Optional[PersonDB]:
        return await self.repository.find_by_first_name(first_name)
