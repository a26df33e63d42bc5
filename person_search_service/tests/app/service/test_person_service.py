import datetime
import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from person_search_service.app.models.person_db import PersonDB
from person_search_service.app.service.person_service import PersonService
from person_search_service.infrastructure.search.person_repository import PersonRepository

@pytest.fixture
def lara():
    return PersonDB(id=str(uuid.uuid4()), first_name="Lara", last_name="Croft",
                    birth_date=datetime.datetime(1980, 10, 1, 10, 30))

@pytest.fixture
def mock_repository():
    return AsyncMock(spec=PersonRepository)

@pytest.mark.asyncio
async def test_get_all_persons_delegates_to_find_all(mock_repository, lara):
    async def stream():
        yield lara
    mock_repository.find_all = MagicMock(side_effect=stream)
    service = PersonService(mock_repository)

    persons = [person async for person in service.get_all_persons()]

    assert persons == [lara]
    mock_repository.find_all.assert_called_once_with()

@pytest.mark.asyncio
async def test_get_person_by_name_delegates_to_find_by_first_name(mock_repository, lara):
    mock_repository.find_by_first_name.return_value = lara
    service = PersonService(mock_repository)

    result = await service.get_person_by_name("lara")

    assert result == lara
    mock_repository.find_by_first_name.assert_awaited_once_with("lara")

@pytest.mark.asyncio
async def test_get_person_by_name_miss_returns_none(mock_repository):
    mock_repository.find_by_first_name.return_value = None

    assert await PersonService(mock_repository).get_person_by_name("nobody") is None
