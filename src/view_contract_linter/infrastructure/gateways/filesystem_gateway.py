"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import shutil
from pathlib import Path

from view_contract_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def glob_python_files(self, path: str) -> list[str]:
        """Get all Python files in path (recursive if directory), sorted."""
        path_obj = Path(path).resolve()
        if path_obj.is_dir():
            return sorted(str(p) for p in path_obj.glob("**/*.py"))
        return [str(path_obj)] if path_obj.suffix == ".py" else []

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)

    def copy_file(self, source: str, destination: str) -> None:
        """Copy a file, keeping its metadata (used for .bak backups)."""
        shutil.copy2(source, destination)
