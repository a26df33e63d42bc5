# Value converters between in-memory types and their stored string form
import datetime
import logging
import re
from typing import Any, Dict, Optional, Type

from person_search_service.app.service.exceptions import DateTimeParseError

logger = logging.getLogger(__name__)

# YYYY-MM-DDTHH:MM[:SS[.fraction]]; no offset, no zone designator.
_LOCAL_DATE_TIME_PATTERN = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?",
    re.ASCII,
)


class LocalDateTimeConverter:
    """Converts naive datetimes to and from ISO-8601 local date-time strings."""

    python_type = datetime.datetime

    def write(self, value: datetime.datetime) -> str:
        if value.tzinfo is not None:
            raise TypeError(f"Expected a local (naive) datetime, got one with tzinfo {value.tzinfo!r}.")
        return value.isoformat()

    def read(self, text: str) -> datetime.datetime:
        match = _LOCAL_DATE_TIME_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if not match:
            raise DateTimeParseError(str(text))

        second = match.group("second") or "00"
        normalized = f"{match.group('date')}T{match.group('hour')}:{match.group('minute')}:{second}"
        fraction = match.group("fraction")
        if fraction:
            # datetime keeps microseconds; finer digits are dropped.
            normalized += "." + fraction[:6].ljust(6, "0")
        try:
            return datetime.datetime.fromisoformat(normalized)
        except ValueError as e:
            raise DateTimeParseError(text) from e


class ConversionService:
    """
    Registry of value converters keyed by Python type.

    The document mapping routes every field value through an instance of this
    class on write and read. Build one with default_conversions() and pass it
    to the mapping explicitly.
    """

    def __init__(self, converters: Optional[Dict[Type, Any]] = None):
        self._converters: Dict[Type, Any] = dict(converters or {})

    def register(self, python_type: Type, converter: Any) -> None:
        self._converters[python_type] = converter
        logger.debug(f"Registered converter {type(converter).__name__} for {python_type.__name__}")

    def converter_for(self, python_type: Type) -> Optional[Any]:
        return self._converters.get(python_type)

    def write(self, value: Any) -> Any:
        if value is None:
            return None
        converter = self.converter_for(type(value))
        return converter.write(value) if converter else value

    def read(self, value: Any, target_type: Type) -> Any:
        if value is None:
            return None
        converter = self.converter_for(target_type)
        return converter.read(value) if converter else value


def default_conversions() -> ConversionService:
    return ConversionService({datetime.datetime: LocalDateTimeConverter()})
