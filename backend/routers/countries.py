import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from config import settings
from models.country import Country, CountrySummary
from models.note import Note, NoteCreate, NoteUpdate
from services import country_service
from services.country_service import CountryNotFoundError, NoteNotFoundError
from services.document_store import JsonDocumentStore
from utils.dependencies import get_store
from utils.rate_limit import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[CountrySummary], response_model_exclude_unset=True)
async def list_countries(store: JsonDocumentStore = Depends(get_store)):
    return list(country_service.list_countries(store))


@router.get("/{country_id}", response_model=Country, response_model_exclude_unset=True)
async def get_country(country_id: str, store: JsonDocumentStore = Depends(get_store)):
    try:
        return country_service.get_country(store, country_id)
    except CountryNotFoundError:
        raise HTTPException(status_code=404, detail="Country not found")


@router.post(
    "/{country_id}/notes",
    response_model=Note,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.note_write_rate_limit)
async def add_note(
    request: Request,
    country_id: str,
    req: NoteCreate | None = None,
    store: JsonDocumentStore = Depends(get_store),
):
    req = req or NoteCreate()
    if not req.title or not req.content:
        raise HTTPException(status_code=400, detail="title and content required")
    try:
        note = country_service.add_note(
            store, country_id, req.title, req.content, author=req.author,
        )
    except CountryNotFoundError:
        raise HTTPException(status_code=404, detail="Country not found")
    logger.info("Added note %s to country %s", note.id, country_id)
    return note


@router.put(
    "/{country_id}/notes/{note_id}",
    response_model=Note,
    response_model_exclude_unset=True,
)
@limiter.limit(settings.note_write_rate_limit)
async def update_note(
    request: Request,
    country_id: str,
    note_id: str,
    req: NoteUpdate | None = None,
    store: JsonDocumentStore = Depends(get_store),
):
    req = req or NoteUpdate()
    try:
        note = country_service.update_note(
            store, country_id, note_id, title=req.title, content=req.content,
        )
    except CountryNotFoundError:
        raise HTTPException(status_code=404, detail="Country not found")
    except NoteNotFoundError:
        raise HTTPException(status_code=404, detail="Note not found")
    logger.info("Updated note %s on country %s", note_id, country_id)
    return note


@router.delete(
    "/{country_id}/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@limiter.limit(settings.note_write_rate_limit)
async def delete_note(
    request: Request,
    country_id: str,
    note_id: str,
    store: JsonDocumentStore = Depends(get_store),
):
    try:
        country_service.delete_note(store, country_id, note_id)
    except CountryNotFoundError:
        raise HTTPException(status_code=404, detail="Country not found")
    except NoteNotFoundError:
        raise HTTPException(status_code=404, detail="Note not found")
    logger.info("Deleted note %s from country %s", note_id, country_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
