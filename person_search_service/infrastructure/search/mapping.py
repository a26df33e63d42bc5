# Document mapping between pydantic models and index documents
import datetime
import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel

from person_search_service.app.models.person_db import PersonDB
from .converters import ConversionService

logger = logging.getLogger(__name__)


class FieldType(str, enum.Enum):
    TEXT = "text"
    KEYWORD = "keyword"
    DATE = "date"


@dataclass(frozen=True)
class FieldSpec:
    attribute: str # attribute on the model
    name: str # field name in the index
    field_type: FieldType
    python_type: Type = str


class DocumentMapping:
    """Describes how one model type is laid out in one index."""

    def __init__(
        self,
        index_name: str,
        model: Type[BaseModel],
        fields: List[FieldSpec],
        conversions: ConversionService,
        id_attribute: str = "id",
    ):
        self.index_name = index_name
        self.model = model
        self.fields = fields
        self.conversions = conversions
        self.id_attribute = id_attribute

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"Index '{self.index_name}' has no mapped field '{name}'")

    def index_body(self) -> Dict[str, Any]:
        properties = {spec.name: {"type": spec.field_type.value} for spec in self.fields}
        return {"mappings": {"properties": properties}}

    def document_id(self, entity: BaseModel) -> Optional[str]:
        return getattr(entity, self.id_attribute)

    def to_document(self, entity: BaseModel) -> Dict[str, Any]:
        return {
            spec.name: self.conversions.write(getattr(entity, spec.attribute))
            for spec in self.fields
        }

    def from_document(self, source: Dict[str, Any], doc_id: Optional[str] = None) -> BaseModel:
        values = {
            spec.attribute: self.conversions.read(source.get(spec.name), spec.python_type)
            for spec in self.fields
        }
        if doc_id is not None:
            values[self.id_attribute] = doc_id
        return self.model(**values)


def build_person_mapping(conversions: ConversionService, index_name: str = "persons") -> DocumentMapping:
    return DocumentMapping(
        index_name=index_name,
        model=PersonDB,
        fields=[
            FieldSpec("id", "id", FieldType.KEYWORD),
            FieldSpec("first_name", "firstName", FieldType.TEXT),
            FieldSpec("last_name", "lastName", FieldType.TEXT),
            FieldSpec("birth_date", "birthDate", FieldType.DATE, datetime.datetime),
        ],
        conversions=conversions,
    )
