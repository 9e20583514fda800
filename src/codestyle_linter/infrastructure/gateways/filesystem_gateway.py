"""Additional text resources read from disk. Infrastructure I/O only."""

import logging
from collections.abc import Iterable
from pathlib import Path

_logger = logging.getLogger(__name__)


class AdditionalTextFile:
    """An additional file; read lazily, read errors propagate to the caller."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return str(self._path)

    def get_text(self) -> str:
        return self._path.read_text(encoding="utf-8")

    def __repr__(self) -> str:
        return f"AdditionalTextFile({self.path!r})"


class FileSystemGateway:
    """Resolves configured additional file paths against a base directory."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir

    def additional_files(self, paths: Iterable[str]) -> list[AdditionalTextFile]:
        """Only paths naming an existing regular file are supplied."""
        base = self._base_dir or Path.cwd()
        files: list[AdditionalTextFile] = []
        for raw in paths:
            candidate = Path(raw)
            if not candidate.is_absolute():
                candidate = base / candidate
            if not candidate.is_file():
                _logger.debug("Additional file %s not found; skipped", candidate)
                continue
            files.append(AdditionalTextFile(candidate))
        return files
