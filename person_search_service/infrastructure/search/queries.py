# Explicit query specifications for field lookups
import enum
from dataclasses import dataclass
from typing import Any, Dict


class MatchType(str, enum.Enum):
    MATCH = "match" # analyzed, token based; case-insensitive with the standard analyzer
    MATCH_PHRASE = "match_phrase"
    TERM = "term" # exact, not analyzed


@dataclass(frozen=True)
class QuerySpec:
    field: str
    match_type: MatchType = MatchType.MATCH

    def build(self, value: Any) -> Dict[str, Any]:
        return {self.match_type.value: {self.field: value}}


FIRST_NAME_QUERY = QuerySpec(field="firstName", match_type=MatchType.MATCH)
