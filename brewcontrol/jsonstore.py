"""Saving and loading JSON documents to files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Union

from brewcontrol.applog import log


class JsonStoreError(Exception):
    """A JSON document could not be saved or loaded."""


class JsonFileStore:
    """A JSON document kept in a single file."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)

    def save(self, doc: Any) -> None:
        """Write ``doc`` to the file as JSON."""
        try:
            text = json.dumps(doc)
        except (TypeError, ValueError) as exc:
            log.error("Failed to write to file\n")
            raise JsonStoreError(f"cannot serialise document: {exc}") from exc
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            log.error("JSFS: Failed to open file %s for save.\n", str(self.path))
            raise JsonStoreError(f"cannot write {self.path}: {exc}") from exc
        log.notice("CFG : Data saved to file.\n")

    def load(self) -> Any:
        """Read and return the JSON document stored in the file."""
        name = str(self.path)
        log.verbose("CFG : Loading data from file %s.\n", name)
        if not self.path.exists():
            log.error("CFG : Configuration file %s does not exist.\n", name)
            raise JsonStoreError(f"file {name} does not exist")
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            log.error("CFG : Failed to open %s.\n", name)
            raise JsonStoreError(f"cannot open {name}: {exc}") from exc
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as exc:
            log.error("CFG : Failed to parse file, Err: %s.\n", str(exc))
            raise JsonStoreError(f"cannot parse {name}: {exc}") from exc
        log.notice("CFG : Json file %s loaded.\n", name)
        return doc