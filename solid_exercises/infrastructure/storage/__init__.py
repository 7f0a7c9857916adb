"""Storage backends implementing IReader and IWriter."""

from solid_exercises.infrastructure.storage.file_storage import FileReader, FileWriter
from solid_exercises.infrastructure.storage.memory_storage import InMemoryReader, InMemoryWriter

__all__ = [
    "FileReader",
    "FileWriter",
    "InMemoryReader",
    "InMemoryWriter",
]
