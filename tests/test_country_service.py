import pytest

from models.country import CountrySummary
from services import country_service
from services.country_service import CountryNotFoundError, NoteNotFoundError


def test_list_countries_projects_summaries(store):
    countries = list(country_service.list_countries(store))

    assert [c.id for c in countries] == ["us", "fr"]
    assert all(type(c) is CountrySummary for c in countries)
    assert countries[1].capital == "Paris"


def test_get_country_unknown(store):
    with pytest.raises(CountryNotFoundError):
        country_service.get_country(store, "zz")


def test_add_note_defaults_and_order(store):
    first = country_service.add_note(store, "fr", "Metro", "Buy a carnet")
    second = country_service.add_note(store, "fr", "Museums", "Free first Sunday", author="Li")

    assert first.author == "Anonymous"
    assert second.author == "Li"
    assert first.id != second.id
    assert first.updated_at is None
    assert first.created_at.endswith("Z")

    notes = country_service.get_country(store, "fr").notes
    assert [n.id for n in notes] == [second.id, first.id, "n1"]


def test_add_note_empty_author_is_anonymous(store):
    note = country_service.add_note(store, "us", "T", "C", author="")
    assert note.author == "Anonymous"


def test_add_note_unknown_country_does_not_write(store, read_db):
    before = read_db()
    with pytest.raises(CountryNotFoundError):
        country_service.add_note(store, "zz", "T", "C")
    assert read_db() == before


def test_update_note_partial(store):
    note = country_service.update_note(store, "fr", "n1", title="Croissants")

    assert note.title == "Croissants"
    assert note.content == "Go early."
    assert note.updated_at is not None


def test_update_note_ignores_empty_strings(store):
    note = country_service.update_note(store, "fr", "n1", title="", content="")

    assert note.title == "Bakeries"
    assert note.content == "Go early."
    # Still counts as an edit
    assert note.updated_at is not None


def test_update_note_unknown_note(store):
    with pytest.raises(NoteNotFoundError):
        country_service.update_note(store, "fr", "missing", title="x")


def test_update_note_unknown_country(store):
    with pytest.raises(CountryNotFoundError):
        country_service.update_note(store, "zz", "n1", title="x")


def test_delete_note(store):
    country_service.delete_note(store, "fr", "n1")
    assert country_service.get_country(store, "fr").notes == []


def test_delete_unknown_note_keeps_notes(store):
    with pytest.raises(NoteNotFoundError):
        country_service.delete_note(store, "fr", "missing")
    assert len(country_service.get_country(store, "fr").notes) == 1
