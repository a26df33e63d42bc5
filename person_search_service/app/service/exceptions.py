"""
Custom exceptions for the Person Search service.
"""

class BasePersonSearchError(Exception):
    """Base class for exceptions in this module."""
    pass

class DateTimeParseError(BasePersonSearchError, ValueError):
    """Raised when a stored value is not an ISO-8601 local date-time."""
    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Cannot parse '{value}' as an ISO-8601 local date-time "
            f"(expected YYYY-MM-DDTHH:MM[:SS[.fraction]] without offset)."
        )

class MissingDocumentIdError(BasePersonSearchError, ValueError):
    """Raised when a document is saved before its id has been assigned."""
    def __init__(self, index_name: str):
        self.index_name = index_name
        super().__init__(f"Cannot save a document into '{index_name}' without an id.")

class ConfigurationError(BasePersonSearchError):
    """Raised when a configuration issue is detected."""
    pass

class SearchIndexUnavailableError(BasePersonSearchError, ConnectionError):
    """Raised when no Elasticsearch client could be connected."""
    pass
