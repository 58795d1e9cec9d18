"""Single-document JSON store.

Every operation is one full cycle under a single lock: load (creating or
migrating the file as needed), run the caller's function, and for writes
persist the whole document atomically before the lock is released.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Callable, TypeVar

from ..core.constants import TEMP_FILE_PREFIX
from ..core.exceptions import MigrationError, StorageError, ValidationError
from .document import DECODE_ERRORS, Document
from .migrations import run_migrations

logger = logging.getLogger(__name__)

R = TypeVar("R")


def decode_document(text: str) -> tuple[Document, bool]:
    """Decode JSON text, migrating older shapes.

    Returns the document and whether migration was needed. Raises
    json.JSONDecodeError for text that is not JSON at all, MigrationError when
    even the migrated tree does not decode.
    """

    tree = json.loads(text)
    try:
        return Document.from_dict(tree), False
    except DECODE_ERRORS as strict_error:
        logger.info("Document does not match current shape (%s); migrating", strict_error)

    migrated = run_migrations(tree)
    try:
        return Document.from_dict(migrated), True
    except DECODE_ERRORS as exc:
        raise MigrationError(f"Failed to migrate data: {exc}") from exc


class DocumentStore:
    """Owns the data file and the lock that serializes all access to it."""

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def read(self, reader: Callable[[Document], R]) -> R:
        with self._lock:
            return reader(self._load())

    def write(self, mutator: Callable[[Document], R]) -> R:
        """Run `mutator` on a fresh copy and persist it.

        If the mutator raises, nothing is written.
        """

        with self._lock:
            document = self._load()
            result = mutator(document)
            self._persist(document)
            return result

    def export_json(self) -> str:
        return self.read(lambda document: document.to_json())

    def import_json(self, text: str) -> Document:
        """Replace the whole document with `text`, which must decode (or migrate)."""

        try:
            imported, _ = decode_document(text)
            imported.to_json().encode("utf-8")
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Failed to parse import data: {exc}") from exc
        except UnicodeEncodeError as exc:
            raise ValidationError(f"Import data contains text that cannot be stored: {exc}") from exc
        except MigrationError as exc:
            raise ValidationError(f"Failed to parse import data: {exc}") from exc

        with self._lock:
            self._persist(imported)
        logger.info("Imported document into %s", self._path)
        return imported

    def _load(self) -> Document:
        if not self._path.exists():
            logger.info("No data file at %s; creating default document", self._path)
            return self._initialize()

        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise MigrationError(f"Data file is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read data file: {exc}") from exc

        if not text.strip():
            logger.info("Data file %s is blank; creating default document", self._path)
            return self._initialize()

        try:
            document, migrated = decode_document(text)
        except json.JSONDecodeError as exc:
            raise MigrationError(f"Failed to parse data file: {exc}") from exc

        if migrated:
            self._persist(document)
            logger.info("Migrated data file %s to the current format", self._path)
        return document

    def _initialize(self) -> Document:
        document = Document()
        self._persist(document)
        return document

    def _persist(self, document: Document) -> None:
        document.refresh_projections()
        try:
            payload = document.to_json().encode("utf-8")
        except UnicodeEncodeError as exc:
            raise StorageError(f"Document text cannot be stored as UTF-8: {exc}") from exc

        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            handle = tempfile.NamedTemporaryFile(
                "wb",
                dir=directory,
                prefix=TEMP_FILE_PREFIX,
                suffix=".json",
                delete=False,
            )
        except OSError as exc:
            raise StorageError(f"Failed to create temp data file: {exc}") from exc

        try:
            with handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            # Atomic on POSIX and Windows; readers see the old or the new file.
            os.replace(handle.name, self._path)
        except OSError as exc:
            _discard(handle.name)
            logger.error("Failed to persist %s: %s", self._path, exc)
            raise StorageError(f"Failed to persist data file: {exc}") from exc
        except BaseException:
            _discard(handle.name)
            raise


def _discard(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
