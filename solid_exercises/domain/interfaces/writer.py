"""Interface for content writers (Dependency Inversion)."""
from abc import ABC, abstractmethod


class IWriter(ABC):
    """Interface for writing content by path."""

    @abstractmethod
    def write_file(self, file_path: str, content: str) -> None:
        """
        Write content to a path, replacing anything already there.

        Args:
            file_path: Path to write to
            content: Content to store
        """
        pass
