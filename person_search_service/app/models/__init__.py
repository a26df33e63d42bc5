from .person_db import PersonDB

__all__ = [
    "PersonDB",
]
