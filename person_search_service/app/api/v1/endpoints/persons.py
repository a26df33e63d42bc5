# API Router for Persons
from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import StreamingResponse
from typing import List
import elasticsearch
import logging

from person_search_service.app.service.exceptions import SearchIndexUnavailableError
from person_search_service.app.models.person_db import PersonDB
from person_search_service.app.dependencies.search import get_person_service
from person_search_service.app.service.interfaces.person_service import AbstractPersonService

logger = logging.getLogger(__name__)
router = APIRouter()

def _status_for(error: Exception) -> int:
    return 503 if isinstance(error, (elasticsearch.ConnectionError, SearchIndexUnavailableError)) else 500

@router.get("/allpersons", response_model=List[PersonDB], tags=["Persons"])
async def get_all_persons_api(person_service: AbstractPersonService = Depends(get_person_service)):
    persons = person_service.get_all_persons()
    # Pull the first document eagerly so index failures still map to an error status.
    try:
        first = await anext(persons, None)
    except Exception as e:
        logger.error(f"Error listing persons: {e}", exc_info=True)
        raise HTTPException(status_code=_status_for(e), detail=f"Failed to list persons: {e}")

    async def json_array():
        if first is None:
            yield "[]"
            return
        yield "[" + first.model_dump_json(by_alias=True)
        async for person in persons:
            yield "," + person.model_dump_json(by_alias=True)
        yield "]"

    return StreamingResponse(json_array(), media_type="application/json")

@router.get("/person/{firstName}", response_model=PersonDB, tags=["Persons"])
async def get_person_by_name_api(firstName: str, person_service: AbstractPersonService = Depends(get_person_service)):
    try:
        person = await person_service.get_person_by_name(firstName)
    except Exception as e:
        logger.error(f"Error looking up person '{firstName}': {e}", exc_info=True)
        raise HTTPException(status_code=_status_for(e), detail=f"Failed to look up person {firstName}: {e}")
    if person is None:
        logger.info(f"No person matched first name '{firstName}'.")
        return Response(status_code=200, media_type="application/json")
    return person
