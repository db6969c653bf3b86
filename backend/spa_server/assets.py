"""In-memory asset table built from the front-end build output.

The table is filled once when the application is created and never written
to afterwards, so request handlers read it without any locking.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

# Web types that the platform mimetypes registry does not always know about
_WEB_MIME_TYPES = {
    ".mjs": "text/javascript",
    ".map": "application/json",
    ".wasm": "application/wasm",
    ".webmanifest": "application/manifest+json",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
}


def guess_mime_type(path: str) -> str:
    """Return the MIME type for a file name, or application/octet-stream."""
    suffix = Path(path).suffix.lower()
    if suffix in _WEB_MIME_TYPES:
        return _WEB_MIME_TYPES[suffix]
    mime, _ = mimetypes.guess_type(path, strict=False)
    return mime or DEFAULT_MIME_TYPE


@dataclass(frozen=True)
class AssetEntry:
    path: str
    data: bytes
    mime_type: str

    @property
    def content_length(self) -> int:
        return len(self.data)


class AssetTable:
    """Read-only mapping of relative path -> AssetEntry."""

    def __init__(self, entries: Optional[Mapping[str, AssetEntry]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_files(cls, files: Mapping[str, bytes]) -> "AssetTable":
        """Build a table from ``{relative_path: content}``."""
        return cls({
            path: AssetEntry(path=path, data=bytes(data), mime_type=guess_mime_type(path))
            for path, data in files.items()
        })

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "AssetTable":
        """
        Read every regular file under ``directory`` into memory.

        Keys are POSIX paths relative to ``directory`` (``assets/app.js``).
        A missing directory means the front-end build was not run; the
        result is an empty table rather than an error. Read errors on
        existing files propagate.
        """
        root = Path(directory)
        if not root.is_dir():
            logger.warning(f"Asset directory {root} not found, serving an empty bundle")
            return cls()

        files: Dict[str, bytes] = {}
        for file_path in sorted(root.rglob("*")):
            if not file_path.is_file():
                continue
            files[file_path.relative_to(root).as_posix()] = file_path.read_bytes()

        table = cls.from_files(files)
        total_bytes = sum(entry.content_length for entry in table._entries.values())
        logger.info(f"Loaded {len(table)} assets ({total_bytes} bytes) from {root}")
        return table

    def get(self, path: str) -> Optional[AssetEntry]:
        return self._entries.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"AssetTable({len(self)} entries)"
