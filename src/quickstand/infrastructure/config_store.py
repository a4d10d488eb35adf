"""ConfigStore — JSON persistence for the configuration document.

Every service operation follows a load-mutate-save cycle through
:meth:`ConfigStore.transaction`. Nothing is cached between calls: the file
is authoritative and is fully rewritten on every save.

Recovery policy:

- Missing file: a fresh empty document is written and returned.
- Corrupt file (bad JSON, undecodable bytes, wrong shape): a warning is
  logged, the file is overwritten with a fresh empty document, and that
  document is returned. The previous content is discarded.

Any other filesystem failure raises :class:`ConfigStoreError`.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from quickstand.domain.models import ConfigDocument

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


class ConfigStoreError(RuntimeError):
    """Filesystem failure while creating, reading, or writing the config file."""


@dataclass
class ConfigTransaction:
    """A loaded document plus a dirty flag.

    Call :meth:`mark_changed` after mutating ``doc``; the store only writes
    the document back when the flag is set.
    """

    doc: ConfigDocument
    changed: bool = False

    def mark_changed(self) -> None:
        self.changed = True


class ConfigStore:
    """Load and save the quickstand configuration document.

    Args:
        config_dir: Directory holding ``config.json``. Created on demand.
    """

    def __init__(self, config_dir: Path) -> None:
        self._dir = Path(config_dir)

    @property
    def config_dir(self) -> Path:
        return self._dir

    @property
    def path(self) -> Path:
        """Absolute location of the JSON document."""
        return self._dir / CONFIG_FILENAME

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self) -> ConfigDocument:
        """Read the document, recovering from a missing or corrupt file."""
        self._ensure_dir()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            doc = ConfigDocument()
            self.save(doc)
            return doc
        except UnicodeDecodeError:
            return self._recover_corrupt()
        except OSError as exc:
            msg = f"Failed to load config: {exc}"
            raise ConfigStoreError(msg) from exc

        try:
            return ConfigDocument.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError):
            return self._recover_corrupt()

    def save(self, doc: ConfigDocument) -> None:
        """Serialize *doc* and atomically replace the file on disk."""
        self._ensure_dir()
        content = json.dumps(doc.to_json_dict(), indent=2, ensure_ascii=False)
        try:
            self._atomic_write(content)
        except OSError as exc:
            msg = f"Failed to save config: {exc}"
            raise ConfigStoreError(msg) from exc

    @contextmanager
    def transaction(self) -> Iterator[ConfigTransaction]:
        """Load the document, yield it, and save it if it was marked changed.

        An exception inside the block skips the save.
        """
        txn = ConfigTransaction(doc=self.load())
        yield txn
        if txn.changed:
            self.save(txn.doc)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_dir(self) -> None:
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Failed to create config directory: {exc}"
            raise ConfigStoreError(msg) from exc

    def _recover_corrupt(self) -> ConfigDocument:
        logger.warning("Config file is corrupted, creating a new one: %s", self.path)
        doc = ConfigDocument()
        self.save(doc)
        return doc

    def _atomic_write(self, content: str) -> None:
        """Write to a temp file in the same directory, then rename over the target."""
        fd, tmp_name = tempfile.mkstemp(prefix=".config.", suffix=".tmp", dir=self._dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
