"""
Pipe-delimited text store.

Each store is one file with one record per line and fields separated by '|'.
Reads are forgiving: a missing or unreadable file is an empty store.
Writes replace the whole file atomically and raise StorageError on failure.
"""
import logging
import os
import tempfile
from typing import List

from splitbook.utils.validation import StorageError

logger = logging.getLogger(__name__)

DELIMITER = "|"


class TextStore:
    """One pipe-delimited file."""

    def __init__(self, path: str):
        self.path = path

    def read_rows(self) -> List[List[str]]:
        """Return every non-blank line split into fields."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s, starting empty: %s", self.path, exc)
            return []

        return [line.split(DELIMITER) for line in lines if line.strip()]

    def write_rows(self, rows: List[List[str]]) -> None:
        """Rewrite the file with the given rows."""
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".txt")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                    for row in rows:
                        f.write(DELIMITER.join(row) + "\n")
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc
