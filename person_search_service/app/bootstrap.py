# Sample data seeding, used at application startup and from the command line
import argparse
import datetime
import logging
import uuid
from typing import List

from person_search_service.app.models.person_db import PersonDB
from person_search_service.infrastructure.search.person_repository import PersonRepository

logger = logging.getLogger(__name__)

def sample_persons() -> List[PersonDB]:
    return [
        PersonDB(
            id=str(uuid.uuid4()),
            first_name="John",
            last_name="Wick",
            birth_date=datetime.datetime(1969, 10, 1, 11, 30),
        ),
        PersonDB(
            id=str(uuid.uuid4()),
            first_name="Antonio",
            last_name="Banderas",
            birth_date=datetime.datetime(1980, 10, 2, 12, 30),
        ),
    ]

async def seed_sample_persons(repository: PersonRepository) -> List[PersonDB]:
    """Saves the sample persons, each under a fresh id."""
    saved = await repository.save_all(sample_persons())
    logger.info(f"Seeded {len(saved)} sample persons into '{repository.index_name}'.")
    return saved

def main(argv=None):
    from person_search_service.infrastructure.search.blocking import BlockingPersonRepository

    parser = argparse.ArgumentParser(description="Seed the persons index with sample documents.")
    parser.add_argument("--reset", action="store_true", help="delete every existing person before seeding")
    args = parser.parse_args(argv)

    with BlockingPersonRepository.from_settings() as repository:
        repository.ensure_index()
        if args.reset:
            repository.delete_all()
        for person in sample_persons():
            repository.save(person)
        logger.info(f"Index now holds {repository.count()} persons.")

if __name__ == "__main__":
    main()
