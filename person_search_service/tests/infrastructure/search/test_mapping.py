import datetime
import uuid

import pytest

from person_search_service.app.models.person_db import PersonDB
from person_search_service.app.service.exceptions import DateTimeParseError
from person_search_service.infrastructure.search.converters import default_conversions
from person_search_service.infrastructure.search.mapping import FieldType, build_person_mapping

@pytest.fixture
def mapping():
    return build_person_mapping(default_conversions())

@pytest.fixture
def lara():
    return PersonDB(
        id=str(uuid.uuid4()),
        first_name="Lara",
        last_name="Croft",
        birth_date=datetime.datetime(1980, 10, 1, 10, 30),
    )

def test_person_mapping_defaults_to_persons_index(mapping):
    assert mapping.index_name == "persons"
    assert mapping.field("firstName").field_type is FieldType.TEXT
    assert mapping.field("lastName").field_type is FieldType.TEXT
    assert mapping.field("birthDate").field_type is FieldType.DATE

def test_index_body_declares_field_types(mapping):
    assert mapping.index_body() == {
        "mappings": {
            "properties": {
                "id": {"type": "keyword"},
                "firstName": {"type": "text"},
                "lastName": {"type": "text"},
                "birthDate": {"type": "date"},
            }
        }
    }

def test_unknown_field_raises_key_error(mapping):
    with pytest.raises(KeyError):
        mapping.field("middleName")

def test_to_document_uses_index_field_names_and_converts_dates(mapping, lara):
    document = mapping.to_document(lara)

    assert document == {
        "id": lara.id,
        "firstName": "Lara",
        "lastName": "Croft",
        "birthDate": "1980-10-01T10:30:00",
    }

def test_from_document_restores_all_fields(mapping, lara):
    restored = mapping.from_document(mapping.to_document(lara), doc_id=lara.id)

    assert restored == lara

def test_from_document_prefers_document_id(mapping):
    source = {"firstName": "Bruce", "lastName": "Wayne", "birthDate": "1975-11-02T10:45:00"}

    restored = mapping.from_document(source, doc_id="doc-1")

    assert restored.id == "doc-1"
    assert restored.birth_date == datetime.datetime(1975, 11, 2, 10, 45)

def test_from_document_tolerates_missing_fields(mapping):
    restored = mapping.from_document({"firstName": "Bruce"}, doc_id="doc-2")

    assert restored.first_name == "Bruce"
    assert restored.last_name is None
    assert restored.birth_date is None

def test_from_document_propagates_date_parse_error(mapping):
    with pytest.raises(DateTimeParseError):
        mapping.from_document({"firstName": "Lara", "birthDate": "1980-10-01T10:30:00Z"}, doc_id="x")

def test_custom_index_name(lara):
    mapping = build_person_mapping(default_conversions(), index_name="persons_test")

    assert mapping.index_name == "persons_test"
    assert mapping.document_id(lara) == lara.id
