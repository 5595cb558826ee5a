import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_note_id() -> str:
    return uuid.uuid4().hex


class Note(BaseModel):
    """A note as stored in the document.

    Stored records are taken as they are: nothing is generated or coerced here,
    and fields absent from the file stay absent when it is written back
    (dump with ``exclude_unset``). ``country_service.add_note`` fills in the
    values a new note needs.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = None
    title: Any = None
    content: Any = None
    author: Any = None
    created_at: Any = Field(default=None, alias="createdAt")
    updated_at: Any = Field(default=None, alias="updatedAt")


class NoteCreate(BaseModel):
    title: str | None = None
    content: str | None = None
    author: str | None = None


class NoteUpdate(BaseModel):
    title: str | None = None
    content: str | None = None
