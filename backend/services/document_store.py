"""File-backed document store.

The whole Document lives in one JSON file. Every ``load`` re-reads the file and
every ``save`` overwrites it completely. There is no locking: two requests that
mutate concurrently race and the later ``save`` wins (lost update).
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from models.country import Document

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The persisted document could not be read or written."""


class JsonDocumentStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def open(self) -> Document:
        """Prepare the backing file and return the current document."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create {self.path.parent}: {e}") from e
        document = self.load()
        logger.info(
            "Document store opened at %s (%d countries)",
            self.path, len(document.countries),
        )
        return document

    def close(self) -> None:
        # Each save() writes through, so nothing is pending here.
        logger.info("Document store at %s closed", self.path)

    def load(self) -> Document:
        raw = self._read()
        if raw is None:
            document = Document(countries=[])
            logger.info("No document at %s, initializing an empty one", self.path)
            self.save(document)
            return document
        if not isinstance(raw, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        try:
            return Document.model_validate(raw)
        except ValidationError as e:
            raise StorageError(f"{self.path} holds an invalid document: {e}") from e

    def save(self, document: Document) -> None:
        payload = document.model_dump(mode="json", by_alias=True, exclude_unset=True)
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug("Saved document to %s", self.path)

    def _read(self):
        """Parsed file contents, or None when the file is missing or blank."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e
