"""Filesystem access for partial sources."""

import os
from pathlib import Path

from htmlpartial.config import PartialConfig


class SourceLoader:
    """Locates and reads partial files.

    Every ``src`` is resolved as the literal string ``base_path + src``;
    there is no lookup relative to the including file.
    """

    def __init__(self, config: PartialConfig):
        self.config = config

    def candidate_path(self, src: str) -> str:
        """Path a ``src`` value refers to."""
        return self.config.base_path + src

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def identity(self, path: str) -> str:
        """Canonical path, used to recognise the same file reached two ways."""
        return os.path.realpath(path)

    def read(self, path: str) -> str:
        """Read a partial file.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If it is not valid in the configured encoding
        """
        with open(path, 'r', encoding=self.config.encoding, newline='') as f:
            return f.read()
