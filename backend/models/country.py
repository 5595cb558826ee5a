from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from models.note import Note


class CountrySummary(BaseModel):
    id: Any = None
    name: Any = None
    capital: Any = None
    region: Any = None
    population: Any = None


class Country(CountrySummary):
    # Seed records may carry fields this API doesn't know about; keep them.
    model_config = ConfigDict(extra="allow")

    notes: list[Note] = []

    @model_validator(mode="after")
    def _default_notes(self):
        if "notes" not in self.model_fields_set:
            self.notes = []
        return self

    @property
    def summary(self) -> CountrySummary:
        fields = set(CountrySummary.model_fields)
        return CountrySummary.model_validate(self.model_dump(include=fields, exclude_unset=True))

    def find_note(self, note_id: str) -> Note | None:
        return next((n for n in self.notes if n.id == note_id), None)


class Document(BaseModel):
    model_config = ConfigDict(extra="allow")

    countries: list[Country] = []

    @model_validator(mode="after")
    def _default_countries(self):
        if "countries" not in self.model_fields_set:
            self.countries = []
        return self

    def find_country(self, country_id: str) -> Country | None:
        return next((c for c in self.countries if c.id == country_id), None)
