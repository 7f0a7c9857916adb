"""In-memory reader and writer implementations.

Interchangeable with the file-system backed ones; useful for
development and testing without touching the disk.
"""
import logging
from typing import Dict, Optional

from solid_exercises.domain.interfaces.reader import IReader
from solid_exercises.domain.interfaces.writer import IWriter


class InMemoryReader(IReader):
    """Reads content from a shared in-memory store."""

    def __init__(self, store: Optional[Dict[str, str]] = None):
        """
        Initialize the reader.

        Args:
            store: Mapping of path to content (Dependency Injection)
        """
        self.store = store if store is not None else {}
        self._logger = logging.getLogger(__name__)

    def read_file(self, file_path: str) -> str:
        if file_path not in self.store:
            self._logger.error(f"No content stored at: {file_path}")
            raise FileNotFoundError(f"No content stored at: {file_path}")
        return self.store[file_path]


class InMemoryWriter(IWriter):
    """Writes content to a shared in-memory store."""

    def __init__(self, store: Optional[Dict[str, str]] = None):
        self.store = store if store is not None else {}
        self._logger = logging.getLogger(__name__)

    def write_file(self, file_path: str, content: str) -> None:
        self.store[file_path] = content
        self._logger.debug(f"Stored {len(content)} characters at {file_path}")
