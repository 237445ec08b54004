"""Small text file store rooted at the current season's directory."""

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileManager:
    """Read and write short text blobs inside a season directory.

    Files are addressed relative to the season directory. The directory is
    created on the first write.
    """

    def __init__(self, season_directory: PathLike):
        self._season_directory = Path(season_directory)

    @property
    def season_directory(self) -> Path:
        """Directory holding this season's storage files."""
        return self._season_directory

    def write_file(self, file_name: PathLike, text: str) -> Path:
        """Write a string to a text file, creating the file if needed.

        Args:
            file_name: File name relative to the season directory
            text: Contents to write; a trailing newline is appended

        Returns:
            Path of the written file

        Raises:
            OSError: If the directory or file cannot be created or written
        """
        write_path = self._season_directory / file_name
        try:
            write_path.parent.mkdir(parents=True, exist_ok=True)
            write_path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write '%s': %s", write_path, e)
            raise

        logger.debug("Wrote %d characters to '%s'", len(text), write_path)
        return write_path

    def read_file(self, file_name: PathLike) -> Optional[str]:
        """Read a text file from the season directory.

        Args:
            file_name: File name relative to the season directory

        Returns:
            The file's lines joined with newlines, or None if it does not exist

        Raises:
            OSError: If the file exists but cannot be read
        """
        read_path = self._season_directory / file_name
        if not read_path.exists():
            logger.info("File '%s' not found", read_path)
            return None

        try:
            lines = read_path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            logger.error("Failed to read '%s': %s", read_path, e)
            raise

        return "\n".join(lines)
