from collections.abc import Iterator

from models.country import Country, CountrySummary
from models.note import Note, new_note_id, utc_timestamp
from services.document_store import JsonDocumentStore


class CountryNotFoundError(LookupError):
    pass


class NoteNotFoundError(LookupError):
    pass


def _require_country(document, country_id: str) -> Country:
    country = document.find_country(country_id)
    if country is None:
        raise CountryNotFoundError(country_id)
    return country


def list_countries(store: JsonDocumentStore) -> Iterator[CountrySummary]:
    document = store.load()
    return (c.summary for c in document.countries)


def get_country(store: JsonDocumentStore, country_id: str) -> Country:
    return _require_country(store.load(), country_id)


def add_note(
    store: JsonDocumentStore,
    country_id: str,
    title: str,
    content: str,
    author: str | None = None,
) -> Note:
    document = store.load()
    country = _require_country(document, country_id)
    note = Note(
        id=new_note_id(),
        title=title,
        content=content,
        author=author or "Anonymous",
        created_at=utc_timestamp(),
    )
    # Newest first
    country.notes.insert(0, note)
    store.save(document)
    return note


def update_note(
    store: JsonDocumentStore,
    country_id: str,
    note_id: str,
    title: str | None = None,
    content: str | None = None,
) -> Note:
    """Apply a partial update to a note.

    Only non-empty values are applied: ``None`` and ``""`` both leave the field
    as it was. ``updatedAt`` is refreshed either way.
    """
    document = store.load()
    country = _require_country(document, country_id)
    note = country.find_note(note_id)
    if note is None:
        raise NoteNotFoundError(note_id)
    if title:
        note.title = title
    if content:
        note.content = content
    note.updated_at = utc_timestamp()
    store.save(document)
    return note


def delete_note(store: JsonDocumentStore, country_id: str, note_id: str) -> None:
    document = store.load()
    country = _require_country(document, country_id)
    remaining = [n for n in country.notes if n.id != note_id]
    if len(remaining) == len(country.notes):
        raise NoteNotFoundError(note_id)
    country.notes = remaining
    store.save(document)
