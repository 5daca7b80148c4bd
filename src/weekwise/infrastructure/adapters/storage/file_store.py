"""
File Key-Value Store — Infrastructure adapter for local persistence.

Implements KeyValueStore with one `<key>.json` file per key under a data directory.
"""

import logging
import os
import re
import tempfile
from pathlib import Path

from weekwise.domain.schedule.ports import KeyValueStore

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileKeyValueStore(KeyValueStore):
    """
    Stores each key as a UTF-8 file in `root`.

    Writes land in a temporary file first and are moved into place with
    os.replace, so a crash mid-write leaves the previous value intact.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key) or key.startswith("."):
            raise ValueError(f"Unsupported storage key: {key!r}")
        return self.root / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None

    def write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        self.root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote {len(value)} chars to {path}")

    def remove(self, key: str) -> None:
        path = self._path_for(key)
        path.unlink(missing_ok=True)
        logger.debug(f"Removed {path}")
