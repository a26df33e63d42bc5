import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from person_search_service.app import bootstrap
from person_search_service.infrastructure.search.person_repository import PersonRepository

def test_sample_persons_have_fresh_ids():
    first_batch = bootstrap.sample_persons()
    second_batch = bootstrap.sample_persons()

    assert [(p.first_name, p.last_name) for p in first_batch] == [("John", "Wick"), ("Antonio", "Banderas")]
    assert first_batch[0].birth_date == datetime.datetime(1969, 10, 1, 11, 30)
    assert first_batch[1].birth_date == datetime.datetime(1980, 10, 2, 12, 30)
    assert all(p.id for p in first_batch)
    assert {p.id for p in first_batch}.isdisjoint({p.id for p in second_batch})

@pytest.mark.asyncio
async def test_seed_sample_persons_saves_both():
    repository = AsyncMock(spec=PersonRepository)
    repository.index_name = "persons"
    repository.save_all.side_effect = lambda persons: list(persons)

    saved = await bootstrap.seed_sample_persons(repository)

    assert len(saved) == 2
    repository.save_all.assert_awaited_once()

@patch("person_search_service.infrastructure.search.blocking.BlockingPersonRepository.from_settings")
def test_main_seeds_through_blocking_repository(mock_from_settings):
    blocking = MagicMock()
    blocking.__enter__.return_value = blocking
    blocking.count.return_value = 2
    mock_from_settings.return_value = blocking

    bootstrap.main(["--reset"])

    blocking.ensure_index.assert_called_once()
    blocking.delete_all.assert_called_once()
    assert blocking.save.call_count == 2
    blocking.__exit__.assert_called_once()

@patch("person_search_service.infrastructure.search.blocking.BlockingPersonRepository.from_settings")
def test_main_without_reset_keeps_existing_documents(mock_from_settings):
    blocking = MagicMock()
    blocking.__enter__.return_value = blocking
    mock_from_settings.return_value = blocking

    bootstrap.main([])

    blocking.delete_all.assert_not_called()
