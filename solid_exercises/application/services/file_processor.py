"""File processing service (Dependency Inversion).

FileProcessor depends only on the IReader and IWriter abstractions,
so the storage backend can change without modifying this class.
"""
import logging

from solid_exercises.domain.interfaces.reader import IReader
from solid_exercises.domain.interfaces.writer import IWriter


logger = logging.getLogger(__name__)


class FileProcessor:
    """Reads content from one path and writes it to another."""

    def __init__(self, reader: IReader, writer: IWriter):
        """
        Initialize processor with dependencies (Dependency Injection).

        Args:
            reader: Reader used for input paths
            writer: Writer used for output paths
        """
        self._reader = reader
        self._writer = writer

    def process_file(self, input_file_path: str, output_file_path: str) -> None:
        """
        Read the input, process it and write the result to the output.

        Processing is the identity transformation.

        Args:
            input_file_path: Path to read from
            output_file_path: Path to write to

        Raises:
            FileNotFoundError: If the input does not exist (nothing is written)
        """
        content = self._reader.read_file(input_file_path)
        # Process the file content
        self._writer.write_file(output_file_path, content)
        logger.info(f"Processed {input_file_path} -> {output_file_path}")
