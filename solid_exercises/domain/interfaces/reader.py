"""Interface for content readers (Dependency Inversion).

Consumers depend on this abstraction instead of a concrete
file-system reader, so storage backends can be swapped freely.
"""
from abc import ABC, abstractmethod


class IReader(ABC):
    """Interface for reading content by path."""

    @abstractmethod
    def read_file(self, file_path: str) -> str:
        """
        Read the content stored at a path.

        Args:
            file_path: Path to read from

        Returns:
            Content stored at the path

        Raises:
            FileNotFoundError: If nothing exists at the path
        """
        pass
