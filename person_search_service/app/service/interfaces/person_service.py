from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from person_search_service.app.models.person_db import PersonDB


class AbstractPersonService(ABC):
    @abstractmethod
    def get_all_persons(self) -> AsyncIterator[PersonDB]:
        """
        Streams every Person currently in the index.

        Returns:
            An async iterator of PersonDB; ordering is whatever the index returns.
        """
        pass

    @abstractmethod
    async def get_person_by_name(self, first_name: str) -> Optional[PersonDB]:
        """
        Looks up one Person by first name.

        Args:
            first_name: Text matched against the analyzed firstName field.

        Returns:
            The first matching PersonDB, or None when nothing matches.
        """
        pass
